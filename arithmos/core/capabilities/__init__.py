"""
Capabilities — иерархия дескрипторов арифметических возможностей.

Атомарные capabilities, их композиции и операции, выводимые из них.
"""

from arithmos.core.capabilities.atomic import (
    ATOMIC_CAPABILITIES,
    Addable,
    AddableWithOverflow,
    BoundedTotalOrder,
    Dividable,
    Modulable,
    Multiplicable,
    MultiplicableWithOverflow,
    Negatable,
    OneConstructible,
    Subtractable,
    SubtractableWithOverflow,
    ZeroConstructible,
)
from arithmos.core.capabilities.composite import (
    COMPOSITE_CAPABILITIES,
    Additive,
    AdditiveWithOverflow,
    ArithmeticType,
    Multiplicative,
    OverflowOperable,
    UnsignedArithmeticType,
)
from arithmos.core.capabilities.derived import (
    DERIVED_IN_PLACE,
    accumulate,
    deplete,
    is_identity,
)

__all__ = [
    # Atomic
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
    "ATOMIC_CAPABILITIES",
    # Composite
    "Additive",
    "Multiplicative",
    "AdditiveWithOverflow",
    "OverflowOperable",
    "UnsignedArithmeticType",
    "ArithmeticType",
    "COMPOSITE_CAPABILITIES",
    # Derived
    "DERIVED_IN_PLACE",
    "accumulate",
    "deplete",
    "is_identity",
]
