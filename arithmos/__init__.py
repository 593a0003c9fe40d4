"""
arithmos — generic numeric abstraction layer

Иерархия capabilities (Addable, Multiplicative, ArithmeticType, ...),
объявления conformance для конкретных value types и generic свёртки
sum / product, выбирающие нейтральный элемент по capabilities типа.
"""

from arithmos.core.capabilities import (
    Addable,
    AddableWithOverflow,
    Additive,
    AdditiveWithOverflow,
    ArithmeticType,
    BoundedTotalOrder,
    Dividable,
    Modulable,
    Multiplicable,
    MultiplicableWithOverflow,
    Multiplicative,
    Negatable,
    OneConstructible,
    OverflowOperable,
    Subtractable,
    SubtractableWithOverflow,
    UnsignedArithmeticType,
    ZeroConstructible,
    accumulate,
    deplete,
    is_identity,
)
from arithmos.core.conformance import conforms, require, satisfies
from arithmos.core.errors import (
    ArithmeticOverflowError,
    ArithmosError,
    ConformanceError,
    DivisionByZeroError,
)
from arithmos.core.math import (
    TypedSequence,
    product_of,
    product_values,
    sum_of,
    sum_values,
)
from arithmos.domain import (
    Array,
    Bool,
    Double,
    Float,
    Int,
    Int8,
    Int16,
    Int32,
    Int64,
    String,
    UInt,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)

__version__ = "0.1.0"

__all__ = [
    # Capabilities
    "Addable",
    "Subtractable",
    "Negatable",
    "Multiplicable",
    "Dividable",
    "Modulable",
    "AddableWithOverflow",
    "SubtractableWithOverflow",
    "MultiplicableWithOverflow",
    "ZeroConstructible",
    "OneConstructible",
    "BoundedTotalOrder",
    "Additive",
    "Multiplicative",
    "AdditiveWithOverflow",
    "OverflowOperable",
    "UnsignedArithmeticType",
    "ArithmeticType",
    # Derived
    "accumulate",
    "deplete",
    "is_identity",
    # Conformance
    "conforms",
    "satisfies",
    "require",
    # Errors
    "ArithmosError",
    "ArithmeticOverflowError",
    "DivisionByZeroError",
    "ConformanceError",
    # Reductions
    "TypedSequence",
    "sum_of",
    "sum_values",
    "product_of",
    "product_values",
    # Value types
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
    "Float",
    "Double",
    "Bool",
    "String",
    "Array",
]
