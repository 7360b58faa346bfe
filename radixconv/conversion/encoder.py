"""
Encoder — SignedValue -> символы целевой системы

Алгоритм: последовательное деление на основание возрастающей позиции.

    position = 0
    while remaining != 0:
        remaining, digit = divmod(remaining, base_at(position))
        position += 1

Позиции запрашиваются лениво, по одной, строго по возрастанию: кодировщик
заранее не знает, сколько цифр понадобится.

Отрицательное постоянное основание -b: деление на -b с нормализацией
остатка в [0, b).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль кодируется одной цифрой 0 без минуса (нет отрицательного нуля)
2. Каждый остаток лежит в [0, base_at(p)) и обязан быть в алфавите
3. Отрицательное значение + отрицательное основание -> ConflictingNegativity
4. Исходный Magnitude не изменяется
"""

from typing import Final, List

from radixconv.core.domain.encoded_number import EncodedNumber
from radixconv.core.domain.numeral_system import NumeralSystem
from radixconv.core.domain.radix import ConstantRadix
from radixconv.core.domain.signed_value import SignedValue
from radixconv.core.errors import ConflictingNegativity, InvalidBase
from radixconv.core.math.magnitude import Magnitude

TARGET_SIDE: Final[str] = "target"


def _extract_digits(magnitude: Magnitude, system: NumeralSystem) -> List[int]:
    """Цифры младшая первой."""
    radix = system.radix
    digits: List[int] = []
    remaining = magnitude
    position = 0
    while not remaining.is_zero():
        base = radix.base_at(position)
        if base == 1 and radix.is_constant:
            raise InvalidBase(position, "constant base 1 cannot represent non-zero values")
        remaining, remainder = remaining.divmod(base)
        digits.append(remainder)
        position += 1
    return digits


def _extract_negabase_digits(value: int, system: NumeralSystem) -> List[int]:
    """Цифры младшая первой для основания -b."""
    radix = system.radix
    assert isinstance(radix, ConstantRadix)
    base = radix.base_at(0)
    if base == 1:
        raise InvalidBase(0, "base -1 cannot represent arbitrary values")
    digits: List[int] = []
    remaining = value
    while remaining != 0:
        remaining, remainder = divmod(remaining, -base)
        # divmod с отрицательным делителем даёт остаток в (-b, 0]
        if remainder < 0:
            remainder += base
            remaining += 1
        digits.append(remainder)
    return digits


def encode(value: SignedValue, system: NumeralSystem) -> EncodedNumber:
    """
    Кодирование SignedValue в запись целевой системы.

    Args:
        value: Число со знаком
        system: Целевая система счисления

    Returns:
        EncodedNumber (старшая цифра первой, флаг минуса)

    Raises:
        ValueOutOfRange: Остаток не покрывается алфавитом (ошибка конфигурации)
        InvalidBase: Функция основания не смогла дать основание
        ConflictingNegativity: Отрицательное значение при отрицательном основании

    Examples:
        >>> encode(SignedValue.positive(10), NumeralSystem.constant(2)).render()
        '1010'
    """
    alphabet = system.alphabet

    if system.is_negative_base and value.is_negative:
        raise ConflictingNegativity(TARGET_SIDE)

    if value.magnitude.is_zero():
        return EncodedNumber((alphabet.symbol_of(0),), negative=False)

    if system.is_negative_base:
        digits = _extract_negabase_digits(int(value.magnitude), system)
    else:
        digits = _extract_digits(value.magnitude, system)

    symbols = tuple(alphabet.symbol_of(digit) for digit in reversed(digits))
    return EncodedNumber(symbols, negative=value.is_negative)
