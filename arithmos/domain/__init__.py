"""
Domain value types.

Конкретные числовые и примитивные типы, привязанные к capabilities
через @conforms.
"""

from arithmos.domain.boolean import Bool
from arithmos.domain.containers import Array, String
from arithmos.domain.floats import Double, Float, FloatingPoint
from arithmos.domain.integers import (
    SIGNED_INTEGER_TYPES,
    UNSIGNED_INTEGER_TYPES,
    FixedWidthInteger,
    Int,
    Int8,
    Int16,
    Int32,
    Int64,
    SignedInteger,
    UInt,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    UnsignedInteger,
)

__all__ = [
    # Integers
    "FixedWidthInteger",
    "SignedInteger",
    "UnsignedInteger",
    "Int",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "SIGNED_INTEGER_TYPES",
    "UNSIGNED_INTEGER_TYPES",
    # Floating point
    "FloatingPoint",
    "Float",
    "Double",
    # Boolean
    "Bool",
    # Collections
    "String",
    "Array",
]
