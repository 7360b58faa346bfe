"""
Domain models and value objects.

Contains numeral system building blocks: Alphabet, RadixSource, NumeralSystem,
SignedValue, EncodedNumber and configuration descriptions.
"""

from radixconv.core.domain.alphabet import (
    DEFAULT_MASTER_TABLE,
    Alphabet,
    MasterTable,
)
from radixconv.core.domain.encoded_number import EncodedNumber
from radixconv.core.domain.numeral_system import NumeralSystem
from radixconv.core.domain.radix import (
    BaseFunction,
    ConstantRadix,
    PositionFunctionRadix,
    RadixSource,
)
from radixconv.core.domain.signed_value import Sign, SignedValue
from radixconv.core.domain.system_description import (
    ConversionDescription,
    RadixKind,
    SystemDescription,
)

__all__ = [
    # Alphabet
    "Alphabet",
    "MasterTable",
    "DEFAULT_MASTER_TABLE",
    # Radix
    "RadixSource",
    "ConstantRadix",
    "PositionFunctionRadix",
    "BaseFunction",
    # Systems and values
    "NumeralSystem",
    "Sign",
    "SignedValue",
    "EncodedNumber",
    # Descriptions
    "RadixKind",
    "SystemDescription",
    "ConversionDescription",
]
