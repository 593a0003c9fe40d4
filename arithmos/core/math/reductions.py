"""
Reductions — Generic свёртки последовательностей (sum / product)

Алгоритмы построены только на capabilities элементов:
- sum_of(values, seed)     — Addable
- sum_of(values)           — Addable ∧ ZeroConstructible (seed = zero())
- sum_values(*values)      — variadic форма seedless sum_of
- product_of(values, seed) — Multiplicable
- product_of(values)       — Multiplicable ∧ OneConstructible (seed = one())
- product_values(*values)  — variadic форма seedless product_of

Seedless формы должны знать тип элемента даже для пустой
последовательности: он передаётся явно (element_type=) либо берётся
из TypedSequence. Тип значений не угадывается по содержимому.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Свёртка строго слева направо, однопроходная
2. Пустая последовательность с seed → seed без изменений
3. Пустая последовательность без seed → нейтральный элемент
   (zero для суммы, one для произведения); пустота никогда не ошибка
4. Ошибки операций (overflow, деление) пробрасываются без перехвата
5. Никакого кэширования и разделяемого состояния
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import reduce
from operator import add, mul
from typing import Any, Generic, TypeVar, overload

from arithmos.core.capabilities.atomic import (
    Addable,
    Multiplicable,
    OneConstructible,
    ZeroConstructible,
)
from arithmos.core.conformance.declarations import require
from arithmos.core.errors import ConformanceError

T = TypeVar("T")
A = TypeVar("A", bound=Addable)
M = TypeVar("M", bound=Multiplicable)

# Маркер отсутствующего seed (None может быть допустимым значением)
_NO_SEED: Any = object()


# =============================================================================
# TYPED SEQUENCE
# =============================================================================


@dataclass(frozen=True)
class TypedSequence(Generic[T]):
    """
    Последовательность, знающая тип своих элементов.

    Обход делегируется source: TypedSequence перезапускаема тогда и
    только тогда, когда перезапускаем source (list, tuple, range — да,
    генератор — нет). Дополнительных ограничений не накладывается.

    Attributes:
        element_type: Тип элементов (определяет нейтральные элементы)
        source: Исходная коллекция или итератор
    """

    element_type: type[T]
    source: Iterable[T]

    def __iter__(self) -> Iterator[T]:
        return iter(self.source)

    @property
    def sum(self) -> T:
        """Seedless сумма: эквивалент sum_of(self)."""
        return sum_of(self)  # type: ignore[type-var]

    @property
    def product(self) -> T:
        """Seedless произведение: эквивалент product_of(self)."""
        return product_of(self)  # type: ignore[type-var]


def _resolve_element_type(values: Iterable[Any], element_type: type | None, algorithm: str) -> type:
    if element_type is not None:
        return element_type
    if isinstance(values, TypedSequence):
        return values.element_type
    raise ConformanceError(
        type(values).__name__,
        algorithm,
        reason="seedless reduction requires element_type or a TypedSequence",
    )


# =============================================================================
# SUM
# =============================================================================


@overload
def sum_of(values: Iterable[A], seed: A) -> A: ...


@overload
def sum_of(values: Iterable[A], *, element_type: type[A] | None = None) -> A: ...


def sum_of(values, seed=_NO_SEED, *, element_type=None):
    """
    Сумма последовательности: левая свёртка оператором +.

    Args:
        values: Конечная последовательность элементов одного типа
        seed: Начальное значение (если задано, требуется только Addable)
        element_type: Тип элементов для seedless формы
            (не нужен, если values — TypedSequence)

    Returns:
        seed + v1 + v2 + ... (seed = element_type.zero() в seedless форме)

    Raises:
        ConformanceError: Seedless форма без известного типа элемента
            или тип не Addable ∧ ZeroConstructible
        ArithmeticOverflowError: Переполнение при сложении

    Examples:
        >>> sum_of([Int(1), Int(2), Int(3)], element_type=Int)
        Int(6)
        >>> sum_of([], Int(5))
        Int(5)
        >>> sum_of(TypedSequence(Int, []))
        Int(0)
    """
    if seed is _NO_SEED:
        resolved = _resolve_element_type(values, element_type, "sum_of")
        require(resolved, Addable, ZeroConstructible)
        seed = resolved.zero()
    return reduce(add, values, seed)


def sum_values(*values: A, element_type: type[A]) -> A:
    """
    Variadic форма: sum_values(a, b, c, element_type=T).

    Собирает аргументы в TypedSequence и делегирует seedless sum_of.

    Examples:
        >>> sum_values(Int(1), Int(2), Int(3), element_type=Int)
        Int(6)
    """
    return sum_of(TypedSequence(element_type, values))


# =============================================================================
# PRODUCT
# =============================================================================


@overload
def product_of(values: Iterable[M], seed: M) -> M: ...


@overload
def product_of(values: Iterable[M], *, element_type: type[M] | None = None) -> M: ...


def product_of(values, seed=_NO_SEED, *, element_type=None):
    """
    Произведение последовательности: левая свёртка оператором *.

    Seedless форма использует one(), а не zero(): ноль не является
    нейтральным элементом умножения.

    Args:
        values: Конечная последовательность элементов одного типа
        seed: Начальное значение (если задано, требуется только Multiplicable)
        element_type: Тип элементов для seedless формы

    Returns:
        seed * v1 * v2 * ... (seed = element_type.one() в seedless форме)

    Raises:
        ConformanceError: Seedless форма без известного типа элемента
            или тип не Multiplicable ∧ OneConstructible
        ArithmeticOverflowError: Переполнение при умножении

    Examples:
        >>> product_of([Int(1), Int(2), Int(3), Int(4)], element_type=Int)
        Int(24)
        >>> product_of(TypedSequence(Int, []))
        Int(1)
    """
    if seed is _NO_SEED:
        resolved = _resolve_element_type(values, element_type, "product_of")
        require(resolved, Multiplicable, OneConstructible)
        seed = resolved.one()
    return reduce(mul, values, seed)


def product_values(*values: M, element_type: type[M]) -> M:
    """Variadic форма seedless product_of."""
    return product_of(TypedSequence(element_type, values))
