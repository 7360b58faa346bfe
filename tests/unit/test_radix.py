"""
Тесты для RadixSource (ConstantRadix, PositionFunctionRadix) и NumeralSystem

Проверяемые инварианты:
1. base_at всегда положителен
2. ZeroBase при нулевом постоянном основании
3. Отрицательное основание хранится как модуль + флаг
4. Мемоизация: функция вызывается один раз на позицию
5. InvalidBase при сбое функции, нецелом или неположительном результате
"""

import pytest

from radixconv.core.domain.alphabet import Alphabet
from radixconv.core.domain.numeral_system import NumeralSystem
from radixconv.core.domain.radix import ConstantRadix, PositionFunctionRadix
from radixconv.core.errors import AlphabetLengthMismatch, InvalidBase, ZeroBase


class CountingFunction:
    """Функция основания n + 2 со счётчиком вызовов."""

    def __init__(self):
        self.calls = []

    def __call__(self, position: int) -> int:
        self.calls.append(position)
        return position + 2


# =============================================================================
# ТЕСТЫ: ConstantRadix
# =============================================================================


class TestConstantRadix:
    """Тесты постоянного основания"""

    def test_same_base_everywhere(self) -> None:
        radix = ConstantRadix(16)
        assert [radix.base_at(p) for p in (0, 1, 100, 10**9)] == [16, 16, 16, 16]

    def test_zero_base(self) -> None:
        """Нулевое основание -> ZeroBase"""
        with pytest.raises(ZeroBase):
            ConstantRadix(0)

    def test_negative_base(self) -> None:
        """Отрицательное основание: base_at положителен, флаг negative"""
        radix = ConstantRadix(-2)
        assert radix.base_at(0) == 2
        assert radix.is_negative
        assert radix.signed_base == -2

    def test_positive_base_not_negative(self) -> None:
        assert not ConstantRadix(10).is_negative
        assert ConstantRadix(10).is_constant

    def test_huge_base(self) -> None:
        assert ConstantRadix(10**100).base_at(3) == 10**100

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError):
            ConstantRadix(True)

    def test_equality(self) -> None:
        assert ConstantRadix(-2) == ConstantRadix(-2)
        assert ConstantRadix(2) != ConstantRadix(-2)


# =============================================================================
# ТЕСТЫ: PositionFunctionRadix
# =============================================================================


class TestPositionFunctionRadix:
    """Тесты основания, зависящего от позиции"""

    def test_evaluates_function(self) -> None:
        radix = PositionFunctionRadix(lambda n: n + 2)
        assert [radix.base_at(p) for p in range(5)] == [2, 3, 4, 5, 6]

    def test_memoization(self) -> None:
        """Повторный запрос позиции не вызывает функцию"""
        function = CountingFunction()
        radix = PositionFunctionRadix(function)

        for _ in range(3):
            assert radix.base_at(4) == 6
        radix.base_at(0)

        assert function.calls == [4, 0]
        assert radix.cached_positions == 2

    def test_not_constant_not_negative(self) -> None:
        radix = PositionFunctionRadix(lambda n: 2)
        assert not radix.is_constant
        assert not radix.is_negative

    def test_function_failure(self) -> None:
        """Исключение в функции -> InvalidBase с позицией"""
        radix = PositionFunctionRadix(lambda n: 1 // (n - 3))
        with pytest.raises(InvalidBase) as exc_info:
            radix.base_at(3)
        assert exc_info.value.position == 3
        assert isinstance(exc_info.value.__cause__, ZeroDivisionError)

    def test_zero_result(self) -> None:
        with pytest.raises(InvalidBase, match="non-positive"):
            PositionFunctionRadix(lambda n: 0).base_at(0)

    def test_negative_result(self) -> None:
        with pytest.raises(InvalidBase, match="non-positive"):
            PositionFunctionRadix(lambda n: -5).base_at(2)

    def test_non_integer_result(self) -> None:
        with pytest.raises(InvalidBase, match="float"):
            PositionFunctionRadix(lambda n: 2.5).base_at(0)

    def test_bool_result(self) -> None:
        with pytest.raises(InvalidBase, match="bool"):
            PositionFunctionRadix(lambda n: True).base_at(0)

    def test_failure_not_cached(self) -> None:
        """Неудачный результат не попадает в мемо-таблицу"""
        radix = PositionFunctionRadix(lambda n: 0)
        with pytest.raises(InvalidBase):
            radix.base_at(0)
        assert radix.cached_positions == 0

    def test_max_position(self) -> None:
        """Позиция за пределом max_position -> InvalidBase"""
        radix = PositionFunctionRadix(lambda n: 2, max_position=3)
        assert radix.base_at(3) == 2
        with pytest.raises(InvalidBase, match="max_position"):
            radix.base_at(4)

    def test_negative_position(self) -> None:
        with pytest.raises(InvalidBase):
            PositionFunctionRadix(lambda n: 2).base_at(-1)

    def test_invalid_max_position(self) -> None:
        with pytest.raises(ValueError):
            PositionFunctionRadix(lambda n: 2, max_position=-1)

    def test_not_callable(self) -> None:
        with pytest.raises(TypeError):
            PositionFunctionRadix(42)  # type: ignore[arg-type]


# =============================================================================
# ТЕСТЫ: NumeralSystem
# =============================================================================


class TestNumeralSystem:
    """Тесты композиции алфавита и основания"""

    def test_constant_default_alphabet(self) -> None:
        system = NumeralSystem.constant(16)
        assert system.alphabet.base == 16
        assert system.declared_base == 16
        system.validate()

    def test_constant_negative_default_alphabet(self) -> None:
        """Для основания -b берётся алфавит из |b| символов"""
        system = NumeralSystem.constant(-10)
        assert system.alphabet.base == 10
        assert system.is_negative_base
        system.validate()

    def test_constant_mismatched_alphabet(self) -> None:
        system = NumeralSystem.constant(4, "abc")
        with pytest.raises(AlphabetLengthMismatch):
            system.validate()

    def test_constant_zero_base(self) -> None:
        with pytest.raises(ZeroBase):
            NumeralSystem.constant(0)

    def test_constant_accepts_alphabet_instance(self) -> None:
        alphabet = Alphabet.from_symbols("ab")
        assert NumeralSystem.constant(2, alphabet).alphabet is alphabet

    def test_computed_defaults_to_master_table(self) -> None:
        system = NumeralSystem.computed(lambda n: n + 2)
        assert system.alphabet.base == 174
        assert system.declared_base is None
        system.validate()

    def test_computed_with_alphabet(self) -> None:
        system = NumeralSystem.computed(lambda n: n + 2, "0123", max_position=10)
        assert system.alphabet.base == 4
        assert system.radix.max_position == 10
