"""
Тесты для функций основания из выражений

Проверяет:
1. Пресеты factorial / primorial / fibonacci
2. Вспомогательные nth_prime и fibonacci
3. Белый список синтаксиса: имена, вызовы, атрибуты, нецелые константы
4. Ограничение показателя степени
"""

import pytest

from radixconv.core.errors import ConfigurationError
from radixconv.core.math.expression import (
    BASE_FUNCTION_PRESETS,
    MAX_EXPONENT,
    ExpressionBaseFunction,
    fibonacci,
    nth_prime,
    resolve_base_function,
)


# =============================================================================
# ТЕСТЫ: Вспомогательные функции
# =============================================================================


class TestHelpers:
    """nth_prime и fibonacci"""

    def test_first_primes(self) -> None:
        assert [nth_prime(i) for i in range(10)] == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

    def test_larger_primes(self) -> None:
        """Ветка с решетом"""
        assert nth_prime(24) == 97
        assert nth_prime(99) == 541
        assert nth_prime(999) == 7919

    def test_negative_prime_index(self) -> None:
        with pytest.raises(ValueError):
            nth_prime(-1)

    def test_fibonacci(self) -> None:
        assert [fibonacci(i) for i in range(10)] == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

    def test_negative_fibonacci_index(self) -> None:
        with pytest.raises(ValueError):
            fibonacci(-2)


# =============================================================================
# ТЕСТЫ: Пресеты
# =============================================================================


class TestPresets:
    """Именованные функции основания"""

    def test_preset_names(self) -> None:
        assert set(BASE_FUNCTION_PRESETS) == {"factorial", "primorial", "fibonacci"}

    def test_factorial(self) -> None:
        function = resolve_base_function("factorial")
        assert [function(n) for n in range(5)] == [2, 3, 4, 5, 6]

    def test_primorial(self) -> None:
        function = resolve_base_function("primorial")
        assert [function(n) for n in range(5)] == [2, 3, 5, 7, 11]

    def test_fibonacci(self) -> None:
        function = resolve_base_function("fibonacci")
        assert [function(n) for n in range(5)] == [2, 3, 5, 8, 13]

    def test_preset_name_stripped(self) -> None:
        assert resolve_base_function(" factorial ").source == "n + 2"

    def test_expression_passthrough(self) -> None:
        function = resolve_base_function("2 * n + 3")
        assert function(4) == 11


# =============================================================================
# ТЕСТЫ: Выражения
# =============================================================================


class TestExpressionBaseFunction:
    """Вычисление и проверка выражений"""

    def test_conditional(self) -> None:
        function = ExpressionBaseFunction("10 if n % 2 == 0 else 6")
        assert [function(n) for n in range(4)] == [10, 6, 10, 6]

    def test_floor_division(self) -> None:
        assert ExpressionBaseFunction("n // 2 + 2")(7) == 5

    def test_allowed_calls(self) -> None:
        assert ExpressionBaseFunction("max(2, factorial(n))")(4) == 24

    def test_power(self) -> None:
        assert ExpressionBaseFunction("2 ** n")(10) == 1024

    def test_power_limit(self) -> None:
        function = ExpressionBaseFunction("2 ** n")
        with pytest.raises(ValueError, match="exceeds limit"):
            function(MAX_EXPONENT + 1)

    def test_negative_exponent(self) -> None:
        with pytest.raises(ValueError, match="negative exponents"):
            ExpressionBaseFunction("2 ** (n - 5)")(0)

    def test_repr(self) -> None:
        assert repr(ExpressionBaseFunction("n + 2")) == "ExpressionBaseFunction('n + 2')"

    @pytest.mark.parametrize(
        "source",
        [
            "__import__('os')",
            "open('x')",
            "n.bit_length()",
            "[n]",
            "lambda: n",
            "x + 1",
            "n / 2",
            "n + 2.5",
            "n + True",
            "'a'",
            "max(n, key=abs)",
        ],
    )
    def test_rejected(self, source: str) -> None:
        with pytest.raises(ConfigurationError):
            ExpressionBaseFunction(source)

    def test_syntax_error(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid base function"):
            ExpressionBaseFunction("n +")

    def test_empty(self) -> None:
        with pytest.raises(ConfigurationError, match="empty"):
            ExpressionBaseFunction("   ")
