"""
radixconv — конверсия чисел между позиционными системами счисления

Поддерживаются постоянные основания (включая отрицательные) и смешанные
основания, заданные функцией позиции. Вся арифметика точная.
"""

from radixconv.conversion import Converter, convert, convert_literal, decode, encode
from radixconv.core.domain import (
    Alphabet,
    ConstantRadix,
    EncodedNumber,
    NumeralSystem,
    PositionFunctionRadix,
    Sign,
    SignedValue,
)
from radixconv.core.errors import (
    AlphabetLengthMismatch,
    AlphabetTooSmall,
    ConfigurationError,
    ConflictingNegativity,
    DuplicateSymbol,
    InvalidBase,
    RadixConversionError,
    UnknownSymbol,
    ValueOutOfRange,
    ZeroBase,
)
from radixconv.core.math import Magnitude

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Conversion
    "Converter",
    "convert",
    "convert_literal",
    "decode",
    "encode",
    # Domain
    "Alphabet",
    "ConstantRadix",
    "PositionFunctionRadix",
    "NumeralSystem",
    "Sign",
    "SignedValue",
    "EncodedNumber",
    "Magnitude",
    # Errors
    "RadixConversionError",
    "DuplicateSymbol",
    "AlphabetTooSmall",
    "AlphabetLengthMismatch",
    "ValueOutOfRange",
    "UnknownSymbol",
    "InvalidBase",
    "ConflictingNegativity",
    "ZeroBase",
    "ConfigurationError",
]
