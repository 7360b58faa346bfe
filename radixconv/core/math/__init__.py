"""
Core math modules для radixconv

Арифметика произвольной точности и функции основания смешанных систем.
"""

# Magnitude
from radixconv.core.math.magnitude import Magnitude

# Base Functions
from radixconv.core.math.expression import (
    BASE_FUNCTION_PRESETS,
    MAX_EXPONENT,
    ExpressionBaseFunction,
    fibonacci,
    nth_prime,
    resolve_base_function,
)

__all__ = [
    # Magnitude
    "Magnitude",
    # Base Functions: Constants
    "BASE_FUNCTION_PRESETS",
    "MAX_EXPONENT",
    # Base Functions: Types
    "ExpressionBaseFunction",
    # Base Functions: Functions
    "fibonacci",
    "nth_prime",
    "resolve_base_function",
]
