"""
Converter — Decoder -> Magnitude -> Encoder

Композиция конверсии между двумя системами счисления:
1. Проверка алфавитов обеих систем против заявленных оснований
2. Декодирование исходной записи в SignedValue
3. Кодирование SignedValue в целевую систему

Magnitude из шага 2 — единственная связь между исходным и целевым
представлениями. Конверсия либо полностью успешна, либо завершается ровно
одной ошибкой из таксономии radixconv.core.errors.

Состояние между вызовами не хранится, кроме мемо-таблиц PositionFunctionRadix,
которые принадлежат экземплярам NumeralSystem и переиспользуются между
конверсиями с теми же системами.
"""

import logging
from typing import Sequence

from radixconv.conversion.decoder import decode
from radixconv.conversion.encoder import encode
from radixconv.core.domain.encoded_number import MINUS, EncodedNumber
from radixconv.core.domain.numeral_system import NumeralSystem

logger = logging.getLogger(__name__)


def convert(
    digits: Sequence[str],
    negative: bool,
    source: NumeralSystem,
    target: NumeralSystem,
) -> EncodedNumber:
    """
    Конверсия записи числа из source в target.

    Args:
        digits: Символы исходной системы, старшая цифра первой
        negative: Флаг явного минуса во входном литерале
        source: Исходная система
        target: Целевая система

    Returns:
        EncodedNumber в целевой системе

    Examples:
        >>> convert(tuple("FF"), False, NumeralSystem.constant(16), NumeralSystem.constant(2)).render()
        '11111111'
    """
    source.validate()
    target.validate()

    decoded = decode(digits, negative, source)
    logger.debug(
        "decoded %d digit(s) -> sign=%s bits=%d",
        len(digits),
        decoded.sign.value,
        decoded.magnitude.bit_length(),
    )
    return encode(decoded, target)


def split_sign(text: str) -> tuple:
    """
    Отделение ведущего минуса от литерала.

    Минус считается знаком, только если за ним следуют цифры: литерал "-"
    из одного символа остаётся цифрой (для алфавитов, содержащих "-").

    Returns:
        (body, negative)
    """
    if len(text) > 1 and text.startswith(MINUS):
        return text[1:], True
    return text, False


def convert_literal(text: str, source: NumeralSystem, target: NumeralSystem) -> str:
    """
    Конверсия текстового литерала.

    Examples:
        >>> convert_literal("1010", NumeralSystem.constant(2), NumeralSystem.constant(10))
        '10'
    """
    body, negative = split_sign(text.strip())
    digits = source.alphabet.tokenize(body)
    return convert(digits, negative, source, target).render()


class Converter:
    """
    Пара систем для многократных конверсий.

    Мемо-таблицы функций основания обеих систем живут столько же, сколько
    Converter. Не предназначен для использования из нескольких потоков.
    """

    def __init__(self, source: NumeralSystem, target: NumeralSystem):
        self.source = source
        self.target = target

    def validate(self) -> None:
        """Проверка обеих систем без конверсии."""
        self.source.validate()
        self.target.validate()

    def convert(self, digits: Sequence[str], negative: bool = False) -> EncodedNumber:
        return convert(digits, negative, self.source, self.target)

    def convert_literal(self, text: str) -> str:
        return convert_literal(text, self.source, self.target)

    def reverse(self) -> "Converter":
        """Converter в обратную сторону с теми же экземплярами систем."""
        return Converter(self.target, self.source)
