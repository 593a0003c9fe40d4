"""
Floating Point Types — Float (binary32) и Double (binary64)

Immutable Pydantic value types с IEEE 754 семантикой:
- Деление и остаток на ноль не бросают исключений (±inf / nan)
- Переполнение даёт ±inf, а не ошибку
- Float округляет каждое значение до binary32

Границы порядка — конечный диапазон [-MAX, MAX]. Инвариант
minimum_value() <= x <= maximum_value() выполняется для всех конечных x;
±inf лежат за границами, nan не упорядочен.
"""

from typing import ClassVar, Self

from pydantic import ConfigDict, RootModel, field_validator

from arithmos.core.capabilities import ArithmeticType, OneConstructible
from arithmos.core.conformance import conforms
from arithmos.core.math.floating_point import (
    DBL_MAX,
    FLT_MAX,
    ieee_divide,
    ieee_remainder,
    round_to_binary32,
)
from arithmos.domain.base import ValueType


class FloatingPoint(ValueType, RootModel[float]):
    """
    IEEE 754 число с плавающей точкой.

    Равенство следует IEEE: nan != nan, 0.0 == -0.0.
    """

    MAX_FINITE: ClassVar[float]

    model_config = ConfigDict(frozen=True, strict=True)

    @classmethod
    def zero(cls) -> Self:
        return cls(0.0)

    @classmethod
    def one(cls) -> Self:
        return cls(1.0)

    @classmethod
    def minimum_value(cls) -> Self:
        return cls(-cls.MAX_FINITE)

    @classmethod
    def maximum_value(cls) -> Self:
        return cls(cls.MAX_FINITE)

    def __add__(self, other: Self) -> Self:
        if not self._same_type(other):
            return NotImplemented
        return type(self)(self.root + other.root)

    def __sub__(self, other: Self) -> Self:
        if not self._same_type(other):
            return NotImplemented
        return type(self)(self.root - other.root)

    def __mul__(self, other: Self) -> Self:
        if not self._same_type(other):
            return NotImplemented
        return type(self)(self.root * other.root)

    def __truediv__(self, other: Self) -> Self:
        if not self._same_type(other):
            return NotImplemented
        return type(self)(ieee_divide(self.root, other.root))

    def __mod__(self, other: Self) -> Self:
        if not self._same_type(other):
            return NotImplemented
        return type(self)(ieee_remainder(self.root, other.root))

    def __neg__(self) -> Self:
        return type(self)(-self.root)

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

    def __float__(self) -> float:
        return self.root


@conforms(ArithmeticType, OneConstructible)
class Float(FloatingPoint):
    """binary32: каждое значение округляется до ближайшего представимого."""

    MAX_FINITE: ClassVar[float] = FLT_MAX

    @field_validator("root")
    @classmethod
    def round_to_single_precision(cls, value: float) -> float:
        return round_to_binary32(value)


@conforms(ArithmeticType, OneConstructible)
class Double(FloatingPoint):
    """binary64: нативный Python float."""

    MAX_FINITE: ClassVar[float] = DBL_MAX
