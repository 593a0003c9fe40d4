"""
Composite Capabilities — Именованные объединения атомарных capabilities

Composite не объявляет собственных операций: это чистое структурное
объединение требований его членов. Тип удовлетворяет composite тогда и
только тогда, когда удовлетворяет каждому члену.
"""

from typing import Protocol, runtime_checkable

from arithmos.core.capabilities.atomic import (
    Addable,
    AddableWithOverflow,
    BoundedTotalOrder,
    Dividable,
    Modulable,
    Multiplicable,
    MultiplicableWithOverflow,
    Negatable,
    Subtractable,
    SubtractableWithOverflow,
    ZeroConstructible,
)


@runtime_checkable
class Additive(Addable, Subtractable, Protocol):
    """Addable ∧ Subtractable"""


@runtime_checkable
class Multiplicative(Multiplicable, Dividable, Modulable, Protocol):
    """Multiplicable ∧ Dividable ∧ Modulable"""


@runtime_checkable
class AdditiveWithOverflow(
    Additive, AddableWithOverflow, SubtractableWithOverflow, Protocol
):
    """Additive ∧ AddableWithOverflow ∧ SubtractableWithOverflow"""


@runtime_checkable
class OverflowOperable(
    AddableWithOverflow, SubtractableWithOverflow, MultiplicableWithOverflow, Protocol
):
    """AddableWithOverflow ∧ SubtractableWithOverflow ∧ MultiplicableWithOverflow"""


@runtime_checkable
class UnsignedArithmeticType(
    ZeroConstructible, Additive, Multiplicative, BoundedTotalOrder, Protocol
):
    """ZeroConstructible ∧ Additive ∧ Multiplicative ∧ BoundedTotalOrder"""


@runtime_checkable
class ArithmeticType(UnsignedArithmeticType, Negatable, Protocol):
    """UnsignedArithmeticType ∧ Negatable"""


COMPOSITE_CAPABILITIES: tuple[type, ...] = (
    Additive,
    Multiplicative,
    AdditiveWithOverflow,
    OverflowOperable,
    UnsignedArithmeticType,
    ArithmeticType,
)
