"""
Fixed-Width Integers — Int, Int8..Int64, UInt, UInt8..UInt64

Immutable Pydantic value types поверх IntegerLayout.

Семантика операций:
- +, -, *, /, унарный - : trap при выходе за диапазон (ArithmeticOverflowError)
- /, % : усечение к нулю, деление на ноль → DivisionByZeroError
- wrapping_add / wrapping_sub / wrapping_mul : перенос по модулю 2^bits, без ошибок
- Гетерогенные операнды (Int8 + Int16, Int8 + 1) → TypeError

Конструирование значения вне диапазона отклоняется валидацией
(pydantic.ValidationError, подкласс ValueError).
"""

from typing import ClassVar, Self

from pydantic import ConfigDict, RootModel, model_validator

from arithmos.core.capabilities import (
    ArithmeticType,
    OneConstructible,
    OverflowOperable,
    UnsignedArithmeticType,
)
from arithmos.core.conformance import conforms
from arithmos.core.errors import ArithmeticOverflowError, DivisionByZeroError
from arithmos.core.math.fixed_width import (
    WORD_BITS,
    IntegerLayout,
    truncating_divide,
    truncating_remainder,
)
from arithmos.domain.base import ValueType


# =============================================================================
# BASE
# =============================================================================


class FixedWidthInteger(ValueType, RootModel[int]):
    """
    Целое фиксированной разрядности.

    Конкретные типы задают LAYOUT; сам базовый класс не инстанцируется.
    """

    LAYOUT: ClassVar[IntegerLayout]

    model_config = ConfigDict(frozen=True, strict=True)

    @model_validator(mode="after")
    def validate_range(self) -> Self:
        """Значение должно быть представимо в LAYOUT."""
        layout = type(self).LAYOUT
        if not layout.contains(self.root):
            raise ValueError(
                f"{self.root} is out of range for {type(self).__name__} "
                f"[{layout.minimum}, {layout.maximum}]"
            )
        return self

    # -------------------------------------------------------------------------
    # Identity и границы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> Self:
        return cls(0)

    @classmethod
    def one(cls) -> Self:
        return cls(1)

    @classmethod
    def minimum_value(cls) -> Self:
        return cls(cls.LAYOUT.minimum)

    @classmethod
    def maximum_value(cls) -> Self:
        return cls(cls.LAYOUT.maximum)

    # -------------------------------------------------------------------------
    # Checked арифметика
    # -------------------------------------------------------------------------

    def _checked(self, operation: str, result: int, *operands: Self) -> Self:
        if not self.LAYOUT.contains(result):
            raise ArithmeticOverflowError(
                operation, (self, *operands), type(self).__name__
            )
        return type(self)(result)

    def __add__(self, other: Self) -> Self:
        if not self._same_type(other):
            return NotImplemented
        return self._checked("add", self.root + other.root, other)

    def __sub__(self, other: Self) -> Self:
        if not self._same_type(other):
            return NotImplemented
        return self._checked("subtract", self.root - other.root, other)

    def __mul__(self, other: Self) -> Self:
        if not self._same_type(other):
            return NotImplemented
        return self._checked("multiply", self.root * other.root, other)

    def __truediv__(self, other: Self) -> Self:
        if not self._same_type(other):
            return NotImplemented
        if other.root == 0:
            raise DivisionByZeroError("divide", type(self).__name__)
        # minimum / -1 не представим в signed раскладке
        return self._checked("divide", truncating_divide(self.root, other.root), other)

    def __mod__(self, other: Self) -> Self:
        if not self._same_type(other):
            return NotImplemented
        if other.root == 0:
            raise DivisionByZeroError("remainder", type(self).__name__)
        return type(self)(truncating_remainder(self.root, other.root))

    # -------------------------------------------------------------------------
    # Wrapping арифметика
    # -------------------------------------------------------------------------

    def wrapping_add(self, other: Self) -> Self:
        """Сложение по модулю 2^bits: UInt8(255).wrapping_add(UInt8(1)) == UInt8(0)."""
        self._require_same_type(other, "wrapping_add")
        return type(self)(self.LAYOUT.wrap(self.root + other.root))

    def wrapping_sub(self, other: Self) -> Self:
        self._require_same_type(other, "wrapping_sub")
        return type(self)(self.LAYOUT.wrap(self.root - other.root))

    def wrapping_mul(self, other: Self) -> Self:
        self._require_same_type(other, "wrapping_mul")
        return type(self)(self.LAYOUT.wrap(self.root * other.root))

    # -------------------------------------------------------------------------
    # Порядок
    # -------------------------------------------------------------------------

    def __lt__(self, other: Self) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.root < other.root

    def __le__(self, other: Self) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.root <= other.root

    def __gt__(self, other: Self) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.root > other.root

    def __ge__(self, other: Self) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.root >= other.root

    def __int__(self) -> int:
        return self.root


class SignedInteger(FixedWidthInteger):
    """Знаковое целое (two's complement): добавляет унарный минус."""

    def __neg__(self) -> Self:
        # -minimum не представим
        return self._checked("negate", -self.root)


class UnsignedInteger(FixedWidthInteger):
    """Беззнаковое целое: не Negatable."""


# =============================================================================
# SIGNED
# =============================================================================


@conforms(ArithmeticType, OverflowOperable, OneConstructible)
class Int(SignedInteger):
    """Знаковое целое разрядности машинного слова."""

    LAYOUT: ClassVar[IntegerLayout] = IntegerLayout(bits=WORD_BITS, signed=True)


@conforms(ArithmeticType, OverflowOperable, OneConstructible)
class Int8(SignedInteger):
    LAYOUT: ClassVar[IntegerLayout] = IntegerLayout(bits=8, signed=True)


@conforms(ArithmeticType, OverflowOperable, OneConstructible)
class Int16(SignedInteger):
    LAYOUT: ClassVar[IntegerLayout] = IntegerLayout(bits=16, signed=True)


@conforms(ArithmeticType, OverflowOperable, OneConstructible)
class Int32(SignedInteger):
    LAYOUT: ClassVar[IntegerLayout] = IntegerLayout(bits=32, signed=True)


@conforms(ArithmeticType, OverflowOperable, OneConstructible)
class Int64(SignedInteger):
    LAYOUT: ClassVar[IntegerLayout] = IntegerLayout(bits=64, signed=True)


# =============================================================================
# UNSIGNED
# =============================================================================


@conforms(UnsignedArithmeticType, OverflowOperable, OneConstructible)
class UInt(UnsignedInteger):
    """Беззнаковое целое разрядности машинного слова."""

    LAYOUT: ClassVar[IntegerLayout] = IntegerLayout(bits=WORD_BITS, signed=False)


@conforms(UnsignedArithmeticType, OverflowOperable, OneConstructible)
class UInt8(UnsignedInteger):
    LAYOUT: ClassVar[IntegerLayout] = IntegerLayout(bits=8, signed=False)


@conforms(UnsignedArithmeticType, OverflowOperable, OneConstructible)
class UInt16(UnsignedInteger):
    LAYOUT: ClassVar[IntegerLayout] = IntegerLayout(bits=16, signed=False)


@conforms(UnsignedArithmeticType, OverflowOperable, OneConstructible)
class UInt32(UnsignedInteger):
    LAYOUT: ClassVar[IntegerLayout] = IntegerLayout(bits=32, signed=False)


@conforms(UnsignedArithmeticType, OverflowOperable, OneConstructible)
class UInt64(UnsignedInteger):
    LAYOUT: ClassVar[IntegerLayout] = IntegerLayout(bits=64, signed=False)


SIGNED_INTEGER_TYPES: tuple[type[SignedInteger], ...] = (Int, Int8, Int16, Int32, Int64)
UNSIGNED_INTEGER_TYPES: tuple[type[UnsignedInteger], ...] = (
    UInt,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)
