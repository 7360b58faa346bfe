"""
SignedValue — знак + Magnitude

Результат декодирования и вход кодировщика. Отрицательный ноль
нормализуется в положительный при построении.
"""

from dataclasses import dataclass
from enum import Enum

from radixconv.core.math.magnitude import Magnitude


class Sign(str, Enum):
    """Знак числа"""

    POSITIVE = "positive"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class SignedValue:
    """
    Число со знаком.

    Examples:
        >>> SignedValue(Sign.NEGATIVE, Magnitude(0)).sign
        <Sign.POSITIVE: 'positive'>
        >>> SignedValue.from_int(-5).to_int()
        -5
    """

    sign: Sign
    magnitude: Magnitude

    def __post_init__(self) -> None:
        if self.sign is Sign.NEGATIVE and self.magnitude.is_zero():
            object.__setattr__(self, "sign", Sign.POSITIVE)

    @classmethod
    def from_int(cls, value: int) -> "SignedValue":
        sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
        return cls(sign, Magnitude.from_int(value))

    @classmethod
    def positive(cls, value: int) -> "SignedValue":
        return cls(Sign.POSITIVE, Magnitude(value))

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    def to_int(self) -> int:
        value = int(self.magnitude)
        return -value if self.is_negative else value
