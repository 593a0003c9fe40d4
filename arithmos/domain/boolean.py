"""
Bool — логическое значение как ZeroConstructible ∧ BoundedTotalOrder

Порядок объявлен явно, а не унаследован от int: равные значения
никогда не упорядочены, иначе true считается большим.
"""

from typing import Self

from pydantic import ConfigDict, RootModel

from arithmos.core.capabilities import BoundedTotalOrder, ZeroConstructible
from arithmos.core.conformance import conforms
from arithmos.domain.base import ValueType


@conforms(ZeroConstructible, BoundedTotalOrder)
class Bool(ValueType, RootModel[bool]):
    """
    Логическое значение.

    zero() == minimum_value() == Bool(False), maximum_value() == Bool(True).
    """

    model_config = ConfigDict(frozen=True, strict=True)

    @classmethod
    def zero(cls) -> Self:
        return cls(False)

    @classmethod
    def minimum_value(cls) -> Self:
        return cls(False)

    @classmethod
    def maximum_value(cls) -> Self:
        return cls(True)

    def __lt__(self, other: Self) -> bool:
        if not self._same_type(other):
            return NotImplemented
        if self.root == other.root:
            return False
        return other.root

    def __gt__(self, other: Self) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return other < self

    def __le__(self, other: Self) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self == other or self < other

    def __ge__(self, other: Self) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self == other or other < self

    def __bool__(self) -> bool:
        return self.root
