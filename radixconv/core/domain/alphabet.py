"""
Alphabet — двунаправленное отображение цифра <-> символ

Алфавит одной системы счисления: упорядоченный набор символов, где символ
с индексом i обозначает цифру со значением i.

Построение:
- from_symbols: явный список символов
- sequential:   префикс мастер-таблицы символов
- from_pairs:   пары (value, symbol) из JSON-описания системы

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значения образуют непрерывный диапазон [0, base) без повторов
2. Символы попарно различны и непусты
3. base = число символов >= 1
4. Алфавит неизменяем после построения

Мастер-таблица объединяет все исторические варианты (hex, decimal+Latin+
Cyrillic, decimal+Latin+Cyrillic+Greek) в одну упорядоченную таблицу:
потребители запрашивают префикс, а не копию литерала.
"""

from dataclasses import dataclass, field
from typing import Dict, Final, Iterable, Tuple

from radixconv.core.errors import (
    AlphabetLengthMismatch,
    AlphabetTooSmall,
    DuplicateSymbol,
    UnknownSymbol,
    ValueOutOfRange,
)


# =============================================================================
# MASTER TABLE
# =============================================================================


def _char_range(first: str, last: str, skip: str = "") -> str:
    return "".join(chr(c) for c in range(ord(first), ord(last) + 1) if chr(c) not in skip)


DIGITS: Final[str] = "0123456789"
LATIN_UPPER: Final[str] = _char_range("A", "Z")
LATIN_LOWER: Final[str] = _char_range("a", "z")
CYRILLIC_UPPER: Final[str] = _char_range("А", "Я")
CYRILLIC_LOWER: Final[str] = _char_range("а", "я")
# U+03A2 не назначен; финальная сигма дублирует σ
GREEK_UPPER: Final[str] = _char_range("\u0391", "\u03a9", skip="\u03a2")
GREEK_LOWER: Final[str] = _char_range("\u03b1", "\u03c9", skip="\u03c2")


@dataclass(frozen=True)
class MasterTable:
    """
    Упорядоченная таблица символов, собранная из именованных сегментов.

    Порядок сегментов фиксирован: от него зависят значения цифр во всех
    алфавитах, построенных через Alphabet.sequential.
    """

    segments: Tuple[Tuple[str, str], ...]
    symbols: Tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        symbols = tuple(ch for _, chars in self.segments for ch in chars)
        seen = set()
        for symbol in symbols:
            if symbol in seen:
                raise DuplicateSymbol(symbol)
            seen.add(symbol)
        object.__setattr__(self, "symbols", symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def prefix(self, count: int) -> Tuple[str, ...]:
        """Первые count символов таблицы."""
        if count > len(self.symbols):
            raise AlphabetTooSmall(count, len(self.symbols))
        return self.symbols[:count]

    def segment_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.segments)


DEFAULT_MASTER_TABLE: Final[MasterTable] = MasterTable(
    segments=(
        ("digits", DIGITS),
        ("latin_upper", LATIN_UPPER),
        ("latin_lower", LATIN_LOWER),
        ("cyrillic_upper", CYRILLIC_UPPER),
        ("cyrillic_lower", CYRILLIC_LOWER),
        ("greek_upper", GREEK_UPPER),
        ("greek_lower", GREEK_LOWER),
    )
)


# =============================================================================
# ALPHABET
# =============================================================================


@dataclass(frozen=True)
class Alphabet:
    """
    Алфавит системы счисления.

    Examples:
        >>> hexa = Alphabet.sequential(16)
        >>> hexa.symbol_of(15)
        'F'
        >>> hexa.value_of("A")
        10
    """

    symbols: Tuple[str, ...]
    _index: Dict[str, int] = field(init=False, repr=False, compare=False)
    _max_symbol_len: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        symbols = tuple(self.symbols)
        if not symbols:
            raise ValueError("Alphabet must contain at least one symbol")

        index: Dict[str, int] = {}
        for value, symbol in enumerate(symbols):
            if not isinstance(symbol, str) or not symbol:
                raise ValueError(f"Symbol for value {value} must be a non-empty string")
            if symbol in index:
                raise DuplicateSymbol(symbol)
            index[symbol] = value

        object.__setattr__(self, "symbols", symbols)
        object.__setattr__(self, "_index", index)
        object.__setattr__(self, "_max_symbol_len", max(len(s) for s in symbols))

    # -------------------------------------------------------------------------
    # Построение
    # -------------------------------------------------------------------------

    @classmethod
    def from_symbols(cls, symbols: Iterable[str]) -> "Alphabet":
        """
        Алфавит из явного списка символов: i-й символ получает значение i.

        Строка трактуется как последовательность односимвольных цифр.

        Raises:
            DuplicateSymbol: Если символ повторяется
        """
        return cls(tuple(symbols))

    @classmethod
    def sequential(
        cls, base: int, master_table: MasterTable = DEFAULT_MASTER_TABLE
    ) -> "Alphabet":
        """
        Первые base символов мастер-таблицы.

        Raises:
            AlphabetTooSmall: Если base больше длины таблицы
            ValueError: Если base < 1
        """
        if base < 1:
            raise ValueError(f"base must be >= 1, got {base}")
        return cls(master_table.prefix(base))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, str]]) -> "Alphabet":
        """
        Алфавит из пар (value, symbol) в произвольном порядке.

        Значения обязаны покрывать [0, n) ровно по одному разу.

        Raises:
            ValueOutOfRange: Если значение вне [0, n) или повторяется
            DuplicateSymbol: Если символ повторяется
        """
        items = list(pairs)
        count = len(items)
        slots: list = [None] * count
        for value, symbol in items:
            if not 0 <= value < count:
                raise ValueOutOfRange(value, count, "alphabet values must be contiguous")
            if slots[value] is not None:
                raise ValueOutOfRange(value, count, "digit value assigned twice")
            slots[value] = symbol
        return cls(tuple(slots))

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    @property
    def base(self) -> int:
        return len(self.symbols)

    def symbol_of(self, value: int) -> str:
        """
        Символ для значения цифры.

        Raises:
            ValueOutOfRange: Если value вне [0, base)
        """
        if not 0 <= value < len(self.symbols):
            raise ValueOutOfRange(value, len(self.symbols))
        return self.symbols[value]

    def value_of(self, symbol: str) -> int:
        """
        Значение цифры для символа.

        Raises:
            UnknownSymbol: Если символа нет в алфавите
        """
        try:
            return self._index[symbol]
        except KeyError:
            raise UnknownSymbol(symbol) from None

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._index

    def __len__(self) -> int:
        return len(self.symbols)

    def pairs(self) -> Tuple[Tuple[int, str], ...]:
        return tuple(enumerate(self.symbols))

    # -------------------------------------------------------------------------
    # Валидация и разбор
    # -------------------------------------------------------------------------

    def validate_length(self, expected_base: int) -> None:
        """
        Проверка согласованности алфавита с независимо заданным основанием.

        Raises:
            AlphabetLengthMismatch: Если base != expected_base
        """
        if self.base != expected_base:
            raise AlphabetLengthMismatch(expected_base, self.base)

    def tokenize(self, text: str) -> Tuple[str, ...]:
        """
        Разбор литерала на символы алфавита (жадно, самое длинное совпадение).

        Поддерживает многосимвольные цифры, например ("10", "11") в алфавите
        с основанием 12.

        Raises:
            UnknownSymbol: Если в какой-то позиции ни один символ не подходит
        """
        if self._max_symbol_len == 1:
            for ch in text:
                if ch not in self._index:
                    raise UnknownSymbol(ch)
            return tuple(text)

        tokens = []
        offset = 0
        while offset < len(text):
            for width in range(min(self._max_symbol_len, len(text) - offset), 0, -1):
                candidate = text[offset:offset + width]
                if candidate in self._index:
                    tokens.append(candidate)
                    offset += width
                    break
            else:
                raise UnknownSymbol(text[offset], f"at offset {offset}")
        return tuple(tokens)
