"""
Тесты для иерархии capabilities

Проверяет:
1. Состав атомарных и composite capabilities
2. Composite не добавляют собственных операций
3. Overflow-варианты не следуют из non-wrapping и наоборот
4. Derived операции (accumulate / deplete / is_identity)
"""

from hypothesis import given
from hypothesis import strategies as st

from arithmos.core.capabilities import (
    ATOMIC_CAPABILITIES,
    COMPOSITE_CAPABILITIES,
    Addable,
    AddableWithOverflow,
    Additive,
    AdditiveWithOverflow,
    ArithmeticType,
    BoundedTotalOrder,
    Dividable,
    Modulable,
    Multiplicable,
    MultiplicableWithOverflow,
    Multiplicative,
    Negatable,
    OneConstructible,
    OverflowOperable,
    Subtractable,
    SubtractableWithOverflow,
    UnsignedArithmeticType,
    ZeroConstructible,
    accumulate,
    deplete,
    is_identity,
)
from arithmos.core.conformance import capability_members, required_operations
from arithmos.domain import Int8, String, UInt8

int8_values = st.integers(min_value=-128, max_value=127).map(Int8)
small_int8_values = st.integers(min_value=-60, max_value=60).map(Int8)


# =============================================================================
# ТЕСТЫ: Состав capabilities
# =============================================================================


class TestAtomicCapabilities:
    """Каждая атомарная capability объявляет ровно свои операции."""

    def test_binary_operations(self) -> None:
        assert required_operations(Addable) == {"__add__"}
        assert required_operations(Subtractable) == {"__sub__"}
        assert required_operations(Multiplicable) == {"__mul__"}
        assert required_operations(Dividable) == {"__truediv__"}
        assert required_operations(Modulable) == {"__mod__"}

    def test_unary_negation(self) -> None:
        assert required_operations(Negatable) == {"__neg__"}

    def test_wrapping_operations(self) -> None:
        assert required_operations(AddableWithOverflow) == {"wrapping_add"}
        assert required_operations(SubtractableWithOverflow) == {"wrapping_sub"}
        assert required_operations(MultiplicableWithOverflow) == {"wrapping_mul"}

    def test_identity_constructors(self) -> None:
        assert required_operations(ZeroConstructible) == {"zero"}
        assert required_operations(OneConstructible) == {"one"}

    def test_bounded_total_order(self) -> None:
        assert required_operations(BoundedTotalOrder) == {
            "__lt__",
            "__le__",
            "__gt__",
            "__ge__",
            "minimum_value",
            "maximum_value",
        }

    def test_atomic_capability_is_its_own_member(self) -> None:
        for capability in ATOMIC_CAPABILITIES:
            assert capability_members(capability) == (capability,)


class TestCompositeCapabilities:
    """Composite — чистое объединение членов."""

    def test_additive_members(self) -> None:
        assert set(capability_members(Additive)) == {Addable, Subtractable}

    def test_multiplicative_members(self) -> None:
        assert set(capability_members(Multiplicative)) == {
            Multiplicable,
            Dividable,
            Modulable,
        }

    def test_additive_with_overflow_members(self) -> None:
        assert set(capability_members(AdditiveWithOverflow)) == {
            Addable,
            Subtractable,
            AddableWithOverflow,
            SubtractableWithOverflow,
        }

    def test_overflow_operable_members(self) -> None:
        assert set(capability_members(OverflowOperable)) == {
            AddableWithOverflow,
            SubtractableWithOverflow,
            MultiplicableWithOverflow,
        }

    def test_unsigned_arithmetic_members(self) -> None:
        assert set(capability_members(UnsignedArithmeticType)) == {
            ZeroConstructible,
            Addable,
            Subtractable,
            Multiplicable,
            Dividable,
            Modulable,
            BoundedTotalOrder,
        }

    def test_arithmetic_type_adds_only_negation(self) -> None:
        assert set(capability_members(ArithmeticType)) == set(
            capability_members(UnsignedArithmeticType)
        ) | {Negatable}

    def test_composites_declare_no_operations_of_their_own(self) -> None:
        for composite in COMPOSITE_CAPABILITIES:
            union = frozenset().union(
                *(required_operations(member) for member in capability_members(composite))
            )
            assert required_operations(composite) == union

    def test_product_identity_is_not_part_of_arithmetic_type(self) -> None:
        """OneConstructible — отдельная capability."""
        assert OneConstructible not in capability_members(ArithmeticType)

    def test_overflow_variants_are_independent(self) -> None:
        """Wrapping не следует из non-wrapping и не влечёт его."""
        assert AddableWithOverflow not in capability_members(Additive)
        assert Addable not in capability_members(OverflowOperable)
        assert Subtractable not in capability_members(OverflowOperable)


class TestRuntimeProtocolChecks:
    """Capabilities — runtime_checkable протоколы."""

    def test_signed_integer_is_negatable(self) -> None:
        assert isinstance(Int8(1), Negatable)
        assert isinstance(Int8(1), ArithmeticType)

    def test_unsigned_integer_is_not_negatable(self) -> None:
        assert not isinstance(UInt8(1), Negatable)
        assert not isinstance(UInt8(1), ArithmeticType)
        assert isinstance(UInt8(1), UnsignedArithmeticType)

    def test_string_is_only_addable(self) -> None:
        assert isinstance(String("a"), Addable)
        assert not isinstance(String("a"), Subtractable)


# =============================================================================
# ТЕСТЫ: Derived операции
# =============================================================================


class TestDerivedOperations:
    """In-place формы выводятся из базового оператора."""

    @given(small_int8_values, small_int8_values)
    def test_accumulate_matches_combine(self, a: Int8, b: Int8) -> None:
        assert accumulate(a, b) == a + b

    @given(small_int8_values, small_int8_values)
    def test_deplete_matches_combine(self, a: Int8, b: Int8) -> None:
        assert deplete(a, b) == a - b

    @given(small_int8_values, small_int8_values)
    def test_augmented_assignment_matches_combine(self, a: Int8, b: Int8) -> None:
        """Python `+=` без __iadd__ совпадает с `a = a + b`."""
        target = a
        target += b
        assert target == a + b
        target -= b
        assert target == a

    def test_augmented_assignment_does_not_alias(self) -> None:
        original = String("ab")
        target = original
        target += String("c")
        assert target == String("abc")
        assert original == String("ab")

    def test_accumulate_string(self) -> None:
        assert accumulate(String("foo"), String("bar")) == String("foobar")


class TestIsIdentity:
    """is_identity(x) ⇔ x == zero()."""

    @given(int8_values)
    def test_is_identity_iff_equals_zero(self, value: Int8) -> None:
        assert is_identity(value) == (value == Int8.zero())

    @given(int8_values)
    def test_zero_is_additive_identity(self, value: Int8) -> None:
        assert value + Int8.zero() == value

    def test_identity_values(self) -> None:
        assert is_identity(Int8(0))
        assert is_identity(String(""))
        assert not is_identity(Int8(1))
        assert not is_identity(String("x"))
