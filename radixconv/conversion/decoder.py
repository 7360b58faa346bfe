"""
Decoder — символы исходной системы -> SignedValue

Алгоритм: схема Горнера по переменному основанию.

    value = 0
    for position in n-1 .. 0:
        value = value * base_at(position) + digit(position)

Схема корректна и для постоянного, и для смешанного основания: вес позиции p
равен произведению base_at(0) .. base_at(p-1), и схема Горнера накапливает
это произведение по шагам.

Отрицательное постоянное основание: стандартная арифметика с основанием -b,
цифры в [0, b), значение = sum(d_i * (-b)^i). Результат может оказаться
отрицательным без явного минуса.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый символ обязан быть в алфавите (UnknownSymbol)
2. Цифра в позиции p обязана быть < base_at(p) (ValueOutOfRange)
3. Явный минус + отрицательное основание -> ConflictingNegativity
4. base_at запрашивается строго по убыванию позиций
"""

from typing import Final, List, Sequence

from radixconv.core.domain.numeral_system import NumeralSystem
from radixconv.core.domain.radix import ConstantRadix
from radixconv.core.domain.signed_value import Sign, SignedValue
from radixconv.core.errors import ConflictingNegativity, UnknownSymbol, ValueOutOfRange
from radixconv.core.math.magnitude import Magnitude

SOURCE_SIDE: Final[str] = "source"


def digit_values(digits: Sequence[str], system: NumeralSystem) -> List[int]:
    """
    Значения цифр в порядке записи (старшая первой).

    Raises:
        UnknownSymbol: Если символа нет в алфавите или последовательность пуста
    """
    if not digits:
        raise UnknownSymbol("", "empty digit sequence")
    return [system.alphabet.value_of(symbol) for symbol in digits]


def _checked_base(system: NumeralSystem, position: int, digit: int) -> int:
    base = system.radix.base_at(position)
    if digit >= base:
        raise ValueOutOfRange(digit, base, f"digit at position {position}")
    return base


def _horner_magnitude(values: Sequence[int], system: NumeralSystem) -> Magnitude:
    magnitude = Magnitude.zero()
    top = len(values) - 1
    for offset, digit in enumerate(values):
        position = top - offset
        base = _checked_base(system, position, digit)
        magnitude = magnitude.mul_add(base, digit)
    return magnitude


def _horner_negabase(values: Sequence[int], system: NumeralSystem) -> int:
    radix = system.radix
    assert isinstance(radix, ConstantRadix)
    signed_base = radix.signed_base
    value = 0
    top = len(values) - 1
    for offset, digit in enumerate(values):
        _checked_base(system, top - offset, digit)
        value = value * signed_base + digit
    return value


def decode(digits: Sequence[str], negative: bool, system: NumeralSystem) -> SignedValue:
    """
    Декодирование записи числа в SignedValue.

    Args:
        digits: Символы, старшая цифра первой
        negative: Начинался ли литерал с явного минуса (извлекает вызывающий)
        system: Исходная система счисления

    Returns:
        SignedValue

    Raises:
        UnknownSymbol: Символ вне алфавита
        ValueOutOfRange: Цифра >= основания своей позиции
        InvalidBase: Функция основания не смогла дать основание
        ConflictingNegativity: Явный минус при отрицательном основании

    Examples:
        >>> decode(tuple("1010"), False, NumeralSystem.constant(2)).to_int()
        10
    """
    values = digit_values(digits, system)

    if system.is_negative_base:
        if negative:
            raise ConflictingNegativity(SOURCE_SIDE)
        return SignedValue.from_int(_horner_negabase(values, system))

    magnitude = _horner_magnitude(values, system)
    sign = Sign.NEGATIVE if negative else Sign.POSITIVE
    return SignedValue(sign, magnitude)
