"""
Derived Operations — операции, выводимые один раз для всех типов

In-place формы (+=, -=) синтезируются здесь generic-функциями поверх
базового оператора и никогда не объявляются per-type. Python сам
выполняет `x += y` как `x = x + y`, если тип не определяет __iadd__;
value types arithmos этого не делают, и @conforms отклоняет тип,
который пытается переопределить in-place форму.
"""

from typing import Final, TypeVar

from arithmos.core.capabilities.atomic import Addable, Subtractable, ZeroConstructible

A = TypeVar("A", bound=Addable)
S = TypeVar("S", bound=Subtractable)
Z = TypeVar("Z", bound=ZeroConstructible)

# Операторы, которые должны выводиться, а не объявляться
DERIVED_IN_PLACE: Final[tuple[tuple[str, str], ...]] = (
    ("__add__", "__iadd__"),
    ("__sub__", "__isub__"),
)


def accumulate(lhs: A, rhs: A) -> A:
    """
    In-place сложение: эквивалент `lhs = lhs + rhs`.

    Returns:
        Новое значение lhs (value types неизменяемы)
    """
    return lhs + rhs


def deplete(lhs: S, rhs: S) -> S:
    """
    In-place вычитание: эквивалент `lhs = lhs - rhs`.

    Returns:
        Новое значение lhs
    """
    return lhs - rhs


def is_identity(value: Z) -> bool:
    """
    Является ли значение нейтральным элементом своего типа.

    Доступно для любого ZeroConstructible типа с равенством:
    is_identity(x) тогда и только тогда, когда x == x.zero().

    Examples:
        >>> is_identity(Int8(0))
        True
        >>> is_identity(String("a"))
        False
    """
    return value == value.zero()
