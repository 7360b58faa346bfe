"""
NumeralSystem — алфавит + источник основания

Одна сторона конверсии (исходная или целевая). Две независимые системы
на конверсию; общего владения между ними не требуется.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from radixconv.core.domain.alphabet import DEFAULT_MASTER_TABLE, Alphabet, MasterTable
from radixconv.core.domain.radix import (
    BaseFunction,
    ConstantRadix,
    PositionFunctionRadix,
    RadixSource,
)


@dataclass(frozen=True)
class NumeralSystem:
    """
    Система счисления.

    declared_base — основание, заданное независимо от алфавита (например,
    отдельным полем конфигурации). Если задано, validate() сверяет с ним
    длину алфавита до начала любой арифметики.
    """

    alphabet: Alphabet
    radix: RadixSource
    declared_base: Optional[int] = None

    @classmethod
    def constant(
        cls,
        base: int,
        alphabet: Optional[Iterable[str]] = None,
        master_table: MasterTable = DEFAULT_MASTER_TABLE,
    ) -> "NumeralSystem":
        """
        Система с постоянным основанием.

        Без алфавита берётся префикс мастер-таблицы длиной |base|.

        Examples:
            >>> NumeralSystem.constant(2).alphabet.symbols
            ('0', '1')
        """
        radix = ConstantRadix(base)
        if alphabet is None:
            resolved = Alphabet.sequential(radix.base_at(0), master_table)
        elif isinstance(alphabet, Alphabet):
            resolved = alphabet
        else:
            resolved = Alphabet.from_symbols(alphabet)
        return cls(alphabet=resolved, radix=radix, declared_base=radix.base_at(0))

    @classmethod
    def computed(
        cls,
        function: BaseFunction,
        alphabet: Optional[Iterable[str]] = None,
        max_position: Optional[int] = None,
        master_table: MasterTable = DEFAULT_MASTER_TABLE,
    ) -> "NumeralSystem":
        """
        Система со смешанным основанием.

        Без алфавита используется вся мастер-таблица: цифра в позиции p
        должна быть < base_at(p) и < длины алфавита.
        """
        if alphabet is None:
            resolved = Alphabet.sequential(len(master_table), master_table)
        elif isinstance(alphabet, Alphabet):
            resolved = alphabet
        else:
            resolved = Alphabet.from_symbols(alphabet)
        return cls(alphabet=resolved, radix=PositionFunctionRadix(function, max_position))

    @property
    def is_negative_base(self) -> bool:
        return self.radix.is_negative

    def validate(self) -> None:
        """
        Проверка согласованности алфавита и заявленного основания.

        Raises:
            AlphabetLengthMismatch: Если длина алфавита != declared_base
        """
        if self.declared_base is not None:
            self.alphabet.validate_length(self.declared_base)
