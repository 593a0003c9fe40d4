"""
Тесты для String и Array (ZeroConstructible ∧ Addable)
"""

import pytest

from arithmos.core.capabilities import Subtractable, is_identity
from arithmos.core.conformance import satisfies
from arithmos.domain import Array, String


class TestString:
    """Конкатенация и пустая строка как zero."""

    def test_concatenation(self) -> None:
        assert String("ab") + String("c") == String("abc")

    def test_zero_is_empty(self) -> None:
        assert String.zero() == String("")
        assert is_identity(String(""))
        assert String("x") + String.zero() == String("x")

    def test_len(self) -> None:
        assert len(String("abc")) == 3

    def test_not_subtractable(self) -> None:
        assert not satisfies(String, Subtractable)
        with pytest.raises(TypeError):
            String("a") - String("a")  # type: ignore[operator]

    def test_native_str_rejected(self) -> None:
        with pytest.raises(TypeError):
            String("a") + "b"  # type: ignore[operator]


class TestArray:
    """Неизменяемый массив с конкатенацией."""

    def test_list_input_becomes_tuple(self) -> None:
        assert Array([1, 2]).root == (1, 2)

    def test_concatenation(self) -> None:
        assert Array([1, 2]) + Array([3]) == Array((1, 2, 3))

    def test_zero_is_empty(self) -> None:
        assert Array.zero() == Array(())
        assert is_identity(Array([]))
        assert len(Array.zero()) == 0

    def test_iteration_and_indexing(self) -> None:
        array = Array(["a", "b"])
        assert list(array) == ["a", "b"]
        assert array[1] == "b"

    def test_hashable(self) -> None:
        assert hash(Array([1, 2])) == hash(Array((1, 2)))
