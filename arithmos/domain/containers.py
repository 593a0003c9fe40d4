"""
Containers — String и Array как ZeroConstructible ∧ Addable

Сложение — конкатенация, нейтральный элемент — пустое значение.
Оба типа неизменяемы; Array хранит элементы в tuple.
"""

from collections.abc import Iterator
from typing import Any, Self

from pydantic import ConfigDict, RootModel

from arithmos.core.capabilities import Addable, ZeroConstructible
from arithmos.core.conformance import conforms
from arithmos.domain.base import ValueType


@conforms(ZeroConstructible, Addable)
class String(ValueType, RootModel[str]):
    """Строка: String("ab") + String("c") == String("abc")."""

    model_config = ConfigDict(frozen=True, strict=True)

    @classmethod
    def zero(cls) -> Self:
        return cls("")

    def __add__(self, other: Self) -> Self:
        if not self._same_type(other):
            return NotImplemented
        return type(self)(self.root + other.root)

    def __len__(self) -> int:
        return len(self.root)


@conforms(ZeroConstructible, Addable)
class Array(ValueType, RootModel[tuple[Any, ...]]):
    """
    Неизменяемый массив произвольных элементов.

    Принимает любую последовательность (list приводится к tuple).
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def zero(cls) -> Self:
        return cls(())

    def __add__(self, other: Self) -> Self:
        if not self._same_type(other):
            return NotImplemented
        return type(self)(self.root + other.root)

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Any:
        return self.root[index]
