"""
EncodedNumber — последовательность символов + флаг ведущего минуса

Внешняя форма числа: вход Decoder и выход Encoder. Символы идут от старшей
цифры к младшей, как число обычно записывается.
"""

from typing import Final, NamedTuple, Tuple

MINUS: Final[str] = "-"


class EncodedNumber(NamedTuple):
    """Число в записи конкретной системы счисления."""

    digits: Tuple[str, ...]
    negative: bool = False

    def render(self) -> str:
        """
        Текстовая запись числа.

        Examples:
            >>> EncodedNumber(("1", "0"), negative=True).render()
            '-10'
        """
        body = "".join(self.digits)
        return f"{MINUS}{body}" if self.negative else body

    @property
    def digit_count(self) -> int:
        return len(self.digits)
