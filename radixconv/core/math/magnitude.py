"""
Magnitude — неотрицательное целое произвольной точности

Каноническое промежуточное представление между системами счисления.
Хранит Python int (bignum), наружу виден только сам номинал: два Magnitude
равны тогда и только тогда, когда обозначают одно и то же число.

Примитивы:
- mul_add:  self * multiplier + addend   (шаг схемы Горнера)
- divmod:   (quotient, remainder)        (шаг извлечения цифры)
- is_zero
- сравнение и упорядочивание

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение всегда >= 0
2. Экземпляр неизменяем; все операции возвращают новые объекты
3. Арифметика точная, без округлений
"""

from dataclasses import dataclass
from typing import Final


ZERO_VALUE: Final[int] = 0


def _require_int(name: str, value: int) -> int:
    # bool является подклассом int, но как число его не принимаем
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


@dataclass(frozen=True, order=True)
class Magnitude:
    """
    Неотрицательное целое число произвольной точности.

    Examples:
        >>> Magnitude(10).mul_add(2, 1)
        Magnitude(value=21)
        >>> Magnitude(21).divmod(2)
        (Magnitude(value=10), 1)
    """

    value: int = ZERO_VALUE

    def __post_init__(self) -> None:
        _require_int("value", self.value)
        if self.value < 0:
            raise ValueError(f"Magnitude cannot be negative, got {self.value}")

    @classmethod
    def zero(cls) -> "Magnitude":
        return cls(ZERO_VALUE)

    @classmethod
    def from_int(cls, value: int) -> "Magnitude":
        """Magnitude из абсолютного значения целого (знак отбрасывается)."""
        return cls(abs(_require_int("value", value)))

    def is_zero(self) -> bool:
        return self.value == ZERO_VALUE

    def mul_add(self, multiplier: int, addend: int) -> "Magnitude":
        """
        Один шаг схемы Горнера: self * multiplier + addend.

        Args:
            multiplier: Основание позиции (> 0)
            addend: Значение цифры (>= 0)

        Returns:
            Новый Magnitude

        Raises:
            ValueError: Если multiplier <= 0 или addend < 0
        """
        _require_int("multiplier", multiplier)
        _require_int("addend", addend)
        if multiplier <= 0:
            raise ValueError(f"multiplier must be positive, got {multiplier}")
        if addend < 0:
            raise ValueError(f"addend must be non-negative, got {addend}")
        return Magnitude(self.value * multiplier + addend)

    def divmod(self, divisor: int) -> tuple["Magnitude", int]:
        """
        Деление с остатком на положительный делитель.

        Args:
            divisor: Основание позиции (> 0)

        Returns:
            (quotient, remainder), где 0 <= remainder < divisor

        Raises:
            ValueError: Если divisor <= 0
        """
        _require_int("divisor", divisor)
        if divisor <= 0:
            raise ValueError(f"divisor must be positive, got {divisor}")
        quotient, remainder = divmod(self.value, divisor)
        return Magnitude(quotient), remainder

    def bit_length(self) -> int:
        return self.value.bit_length()

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        return str(self.value)
