"""
Contract Validation Module

Модуль для валидации JSON-описаний систем счисления.
"""

from .validators import (
    ContractValidator,
    ConversionConfigValidator,
    NumeralSystemValidator,
    SchemaLoader,
    ValidationError,
    validate_conversion_config,
    validate_numeral_system,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionConfigValidator",
    "NumeralSystemValidator",
    "ValidationError",
    # Functions
    "validate_conversion_config",
    "validate_numeral_system",
]
