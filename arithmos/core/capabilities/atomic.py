"""
Atomic Capabilities — Атомарные дескрипторы операций

Каждая capability — typing.Protocol, объявляющий ровно свою операцию(и).
Обязательные операции помечены @abstractmethod: это позволяет
@conforms проверять полноту conformance при объявлении класса, а
статическим анализаторам (mypy/pyright) — при проверке типов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая операция замкнута над типом: T op T -> T
2. Гетерогенные операнды запрещены
3. Overflow-варианты (wrapping_*) — отдельные capabilities:
   не следуют из non-wrapping и не влекут их
4. In-place формы (+=, -=) не объявляются здесь: они выводятся
   один раз (см. derived.py)
"""

from abc import abstractmethod
from typing import Protocol, Self, runtime_checkable


# =============================================================================
# АДДИТИВНЫЕ ОПЕРАЦИИ
# =============================================================================


@runtime_checkable
class Addable(Protocol):
    """Замкнутое сложение: a + b."""

    @abstractmethod
    def __add__(self, other: Self, /) -> Self: ...


@runtime_checkable
class Subtractable(Protocol):
    """Замкнутое вычитание: a - b."""

    @abstractmethod
    def __sub__(self, other: Self, /) -> Self: ...


@runtime_checkable
class Negatable(Protocol):
    """Унарное отрицание: -a."""

    @abstractmethod
    def __neg__(self) -> Self: ...


# =============================================================================
# МУЛЬТИПЛИКАТИВНЫЕ ОПЕРАЦИИ
# =============================================================================


@runtime_checkable
class Multiplicable(Protocol):
    """Замкнутое умножение: a * b."""

    @abstractmethod
    def __mul__(self, other: Self, /) -> Self: ...


@runtime_checkable
class Dividable(Protocol):
    """
    Замкнутое деление: a / b.

    Для целочисленных типов — деление с усечением к нулю,
    деление на ноль → DivisionByZeroError.
    Для float-типов — IEEE результат (inf / nan), без ошибки.
    """

    @abstractmethod
    def __truediv__(self, other: Self, /) -> Self: ...


@runtime_checkable
class Modulable(Protocol):
    """
    Замкнутый остаток: a % b.

    Остаток усечённого деления (знак делимого). Политика ошибок
    совпадает с Dividable.
    """

    @abstractmethod
    def __mod__(self, other: Self, /) -> Self: ...


# =============================================================================
# WRAPPING (OVERFLOW-AWARE) ОПЕРАЦИИ
# =============================================================================


@runtime_checkable
class AddableWithOverflow(Protocol):
    """Сложение с переносом по модулю 2^bits. Никогда не падает."""

    @abstractmethod
    def wrapping_add(self, other: Self, /) -> Self: ...


@runtime_checkable
class SubtractableWithOverflow(Protocol):
    """Вычитание с переносом по модулю 2^bits. Никогда не падает."""

    @abstractmethod
    def wrapping_sub(self, other: Self, /) -> Self: ...


@runtime_checkable
class MultiplicableWithOverflow(Protocol):
    """Умножение с переносом по модулю 2^bits. Никогда не падает."""

    @abstractmethod
    def wrapping_mul(self, other: Self, /) -> Self: ...


# =============================================================================
# IDENTITY CONSTRUCTION
# =============================================================================


@runtime_checkable
class ZeroConstructible(Protocol):
    """
    Канонический нейтральный элемент сложения.

    Если тип также поддерживает ==, запрос is_identity доступен
    без дополнительного объявления (derived.is_identity).
    """

    @classmethod
    @abstractmethod
    def zero(cls) -> Self: ...


@runtime_checkable
class OneConstructible(Protocol):
    """
    Канонический нейтральный элемент умножения.

    Отдельная capability: zero не является seed для произведения.
    """

    @classmethod
    @abstractmethod
    def one(cls) -> Self: ...


# =============================================================================
# BOUNDED TOTAL ORDER
# =============================================================================


@runtime_checkable
class BoundedTotalOrder(Protocol):
    """
    Полный порядок с представимыми границами.

    Инвариант: minimum_value() <= x <= maximum_value() для всех x типа.
    Границы — константы класса, а не вычисляемые per-instance значения.
    """

    @abstractmethod
    def __lt__(self, other: Self, /) -> bool: ...

    @abstractmethod
    def __le__(self, other: Self, /) -> bool: ...

    @abstractmethod
    def __gt__(self, other: Self, /) -> bool: ...

    @abstractmethod
    def __ge__(self, other: Self, /) -> bool: ...

    @classmethod
    @abstractmethod
    def minimum_value(cls) -> Self: ...

    @classmethod
    @abstractmethod
    def maximum_value(cls) -> Self: ...


ATOMIC_CAPABILITIES: tuple[type, ...] = (
    Addable,
    Subtractable,
    Negatable,
    Multiplicable,
    Dividable,
    Modulable,
    AddableWithOverflow,
    SubtractableWithOverflow,
    MultiplicableWithOverflow,
    ZeroConstructible,
    OneConstructible,
    BoundedTotalOrder,
)
