"""
Core math modules для arithmos

Примитивы представления чисел и generic свёртки.
"""

# Fixed-width integers
from arithmos.core.math.fixed_width import (
    SUPPORTED_BITS,
    WORD_BITS,
    IntegerLayout,
    truncating_divide,
    truncating_remainder,
)

# IEEE floating point
from arithmos.core.math.floating_point import (
    DBL_MAX,
    FLT_MAX,
    ieee_divide,
    ieee_remainder,
    round_to_binary32,
)

# Reductions
from arithmos.core.math.reductions import (
    TypedSequence,
    product_of,
    product_values,
    sum_of,
    sum_values,
)

__all__ = [
    # Fixed-width — Constants
    "WORD_BITS",
    "SUPPORTED_BITS",
    # Fixed-width — Types
    "IntegerLayout",
    # Fixed-width — Functions
    "truncating_divide",
    "truncating_remainder",
    # Floating point — Constants
    "FLT_MAX",
    "DBL_MAX",
    # Floating point — Functions
    "round_to_binary32",
    "ieee_divide",
    "ieee_remainder",
    # Reductions
    "TypedSequence",
    "sum_of",
    "sum_values",
    "product_of",
    "product_values",
]
