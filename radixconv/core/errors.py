"""
Errors — таксономия ошибок конвертации

Все ошибки ядра наследуются от RadixConversionError (подкласс ValueError),
поэтому вызывающий код может ловить либо конкретный вид, либо общий базовый.

Ядро не выполняет восстановление: любая ошибка терминальна для конверсии,
частичные результаты не возвращаются.

Группы:
- Конфигурация алфавита: DuplicateSymbol, AlphabetTooSmall, AlphabetLengthMismatch
- Входные цифры: ValueOutOfRange, UnknownSymbol
- Основание: InvalidBase, ZeroBase
- Знак: ConflictingNegativity
- Загрузка описаний систем: ConfigurationError
"""

from typing import Optional


class RadixConversionError(ValueError):
    """Базовая ошибка конвертации между системами счисления."""

    pass


# =============================================================================
# ALPHABET
# =============================================================================


class DuplicateSymbol(RadixConversionError):
    """Символ встречается в алфавите более одного раза."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Duplicate symbol in alphabet: {symbol!r}")


class AlphabetTooSmall(RadixConversionError):
    """Запрошенное основание превышает длину мастер-таблицы символов."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Master table has {available} symbols, cannot build alphabet for base {requested}"
        )


class AlphabetLengthMismatch(RadixConversionError):
    """Длина алфавита не совпадает с заявленным основанием."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Alphabet has {actual} symbols, declared base is {expected}")


# =============================================================================
# DIGITS
# =============================================================================


class ValueOutOfRange(RadixConversionError):
    """Значение цифры вне диапазона [0, base)."""

    def __init__(self, value: int, base: int, detail: Optional[str] = None):
        self.value = value
        self.base = base
        message = f"Digit value {value} out of range [0, {base})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnknownSymbol(RadixConversionError):
    """Символ отсутствует в алфавите."""

    def __init__(self, symbol: str, detail: Optional[str] = None):
        self.symbol = symbol
        message = f"Unknown symbol: {symbol!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


# =============================================================================
# BASE
# =============================================================================


class InvalidBase(RadixConversionError):
    """
    Основание в позиции непригодно для вычислений.

    Возникает, если функция основания упала, вернула не целое число
    или значение <= 0, либо позиция превысила заданный лимит.
    """

    def __init__(self, position: int, detail: Optional[str] = None):
        self.position = position
        message = f"Invalid base at position {position}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ZeroBase(RadixConversionError):
    """Постоянное основание равно нулю."""

    def __init__(self):
        super().__init__("Constant base cannot be zero")


# =============================================================================
# SIGN
# =============================================================================


class ConflictingNegativity(RadixConversionError):
    """
    Явный минус в сочетании с отрицательным основанием на одной стороне.

    Отрицательное основание уже кодирует знак структурно, поэтому явный
    минус отвергается, а не разрешается молча.
    """

    def __init__(self, side: str):
        self.side = side
        super().__init__(
            f"Negative base and negative number cannot be combined on the {side} side"
        )


# =============================================================================
# CONFIGURATION
# =============================================================================


class ConfigurationError(RadixConversionError):
    """Некорректное описание системы счисления (JSON, схема, функция основания)."""

    pass
