"""
Тесты для Bool

Проверяет явно объявленный порядок: равные значения не упорядочены,
иначе true больше.
"""

import pytest

from arithmos.core.capabilities import is_identity
from arithmos.domain import Bool


class TestBoolOrder:
    """Порядок false < true."""

    def test_false_less_than_true(self) -> None:
        assert Bool(False) < Bool(True)
        assert not Bool(True) < Bool(False)

    def test_equal_values_never_ordered(self) -> None:
        assert not Bool(True) < Bool(True)
        assert not Bool(False) < Bool(False)
        assert not Bool(True) > Bool(True)

    def test_non_strict_comparisons(self) -> None:
        assert Bool(True) <= Bool(True)
        assert Bool(False) <= Bool(True)
        assert Bool(True) >= Bool(False)
        assert not Bool(False) >= Bool(True)

    def test_bounds(self) -> None:
        assert Bool.minimum_value() == Bool(False)
        assert Bool.maximum_value() == Bool(True)
        for value in (Bool(False), Bool(True)):
            assert Bool.minimum_value() <= value <= Bool.maximum_value()

    def test_sorting(self) -> None:
        assert sorted([Bool(True), Bool(False), Bool(True)]) == [
            Bool(False),
            Bool(True),
            Bool(True),
        ]


class TestBoolValue:
    """Identity и value semantics."""

    def test_zero_is_false(self) -> None:
        assert Bool.zero() == Bool(False)
        assert is_identity(Bool(False))
        assert not is_identity(Bool(True))

    def test_truthiness(self) -> None:
        assert Bool(True)
        assert not Bool(False)

    def test_integer_input_rejected(self) -> None:
        with pytest.raises(ValueError):
            Bool(1)  # type: ignore[arg-type]

    def test_no_arithmetic(self) -> None:
        with pytest.raises(TypeError):
            Bool(True) + Bool(True)  # type: ignore[operator]
