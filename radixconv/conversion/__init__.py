"""Конверсия между системами счисления: Decoder -> Magnitude -> Encoder."""

from .converter import Converter, convert, convert_literal, split_sign
from .decoder import decode
from .encoder import encode

__all__ = [
    "Converter",
    "convert",
    "convert_literal",
    "split_sign",
    "decode",
    "encode",
]
