"""
RadixSource — основание системы счисления по позиции цифры

Два варианта:
- ConstantRadix:         одно основание для всех позиций (в т.ч. отрицательное)
- PositionFunctionRadix: основание вычисляется внешней функцией позиции
                         и мемоизируется

Нумерация позиций: 0 — младшая цифра, далее в сторону старших.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. base_at всегда возвращает положительное целое
2. Постоянное основание никогда не равно нулю (ZeroBase)
3. Отрицательное основание хранится как модуль + флаг negative
4. Мемо-таблица заполняется лениво и не инвалидируется: функция основания
   считается чистой и детерминированной

Экземпляры PositionFunctionRadix не рассчитаны на конкурентное изменение
мемо-таблицы: каждой параллельной конверсии нужен свой экземпляр.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional

from radixconv.core.errors import InvalidBase, ZeroBase

logger = logging.getLogger(__name__)


# Функция основания: позиция -> положительное целое
BaseFunction = Callable[[int], int]


class RadixSource(ABC):
    """Источник основания для каждой позиции цифры."""

    @abstractmethod
    def base_at(self, position: int) -> int:
        """
        Основание в позиции position (0 — младшая цифра).

        Returns:
            Положительное целое произвольной точности

        Raises:
            InvalidBase: Если основание в позиции не может быть получено
        """

    @property
    def is_negative(self) -> bool:
        """True только для отрицательного постоянного основания."""
        return False

    @property
    def is_constant(self) -> bool:
        return False


class ConstantRadix(RadixSource):
    """
    Постоянное основание.

    Examples:
        >>> ConstantRadix(16).base_at(7)
        16
        >>> r = ConstantRadix(-2)
        >>> r.base_at(0), r.is_negative, r.signed_base
        (2, True, -2)
    """

    def __init__(self, base: int):
        if isinstance(base, bool) or not isinstance(base, int):
            raise TypeError(f"base must be int, got {type(base).__name__}")
        if base == 0:
            raise ZeroBase()
        self._base = abs(base)
        self._negative = base < 0

    def base_at(self, position: int) -> int:
        return self._base

    @property
    def is_negative(self) -> bool:
        return self._negative

    @property
    def is_constant(self) -> bool:
        return True

    @property
    def signed_base(self) -> int:
        """Основание со знаком (например -2 для негабинарной системы)."""
        return -self._base if self._negative else self._base

    def __repr__(self) -> str:
        return f"ConstantRadix({self.signed_base})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstantRadix):
            return NotImplemented
        return self.signed_base == other.signed_base

    def __hash__(self) -> int:
        return hash(("ConstantRadix", self.signed_base))


class PositionFunctionRadix(RadixSource):
    """
    Основание, зависящее от позиции (смешанная система счисления).

    Делегирует вычисление внешней функции и кэширует результат по позиции:
    повторный запрос той же позиции не вызывает функцию снова.

    Examples:
        >>> factorial_base = PositionFunctionRadix(lambda n: n + 2)
        >>> [factorial_base.base_at(p) for p in range(4)]
        [2, 3, 4, 5]
    """

    def __init__(self, function: BaseFunction, max_position: Optional[int] = None):
        """
        Args:
            function: Чистая функция позиция -> основание
            max_position: Наибольшая допустимая позиция (None — без ограничения)
        """
        if not callable(function):
            raise TypeError("function must be callable")
        if max_position is not None and max_position < 0:
            raise ValueError(f"max_position must be non-negative, got {max_position}")
        self._function = function
        self._max_position = max_position
        self._memo: Dict[int, int] = {}

    def base_at(self, position: int) -> int:
        cached = self._memo.get(position)
        if cached is not None:
            return cached

        if position < 0:
            raise InvalidBase(position, "position must be non-negative")
        if self._max_position is not None and position > self._max_position:
            raise InvalidBase(position, f"exceeds max_position={self._max_position}")

        try:
            base = self._function(position)
        except Exception as exc:
            raise InvalidBase(position, f"base function failed: {exc}") from exc

        if isinstance(base, bool) or not isinstance(base, int):
            raise InvalidBase(position, f"base function returned {type(base).__name__}, expected int")
        if base <= 0:
            raise InvalidBase(position, f"base function returned non-positive value {base}")

        logger.debug("base_at(%d) = %d", position, base)
        self._memo[position] = base
        return base

    @property
    def max_position(self) -> Optional[int]:
        return self._max_position

    @property
    def cached_positions(self) -> int:
        """Количество позиций в мемо-таблице."""
        return len(self._memo)

    def __repr__(self) -> str:
        return f"PositionFunctionRadix({self._function!r}, max_position={self._max_position})"
