"""
Тесты для примитивов целых фиксированной разрядности

Проверяет:
1. Границы IntegerLayout для signed/unsigned
2. Wrapping по модулю 2^bits
3. Деление с усечением к нулю и остаток со знаком делимого
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arithmos.core.math.fixed_width import (
    WORD_BITS,
    IntegerLayout,
    truncating_divide,
    truncating_remainder,
)


class TestIntegerLayout:
    """Тесты IntegerLayout"""

    def test_signed_bounds(self) -> None:
        layout = IntegerLayout(bits=8, signed=True)
        assert layout.minimum == -128
        assert layout.maximum == 127
        assert layout.modulus == 256

    def test_unsigned_bounds(self) -> None:
        layout = IntegerLayout(bits=16, signed=False)
        assert layout.minimum == 0
        assert layout.maximum == 65535

    def test_word_size(self) -> None:
        layout = IntegerLayout(bits=WORD_BITS, signed=True)
        assert layout.maximum == 2**63 - 1

    def test_unsupported_bits_rejected(self) -> None:
        with pytest.raises(ValueError, match="bits must be one of"):
            IntegerLayout(bits=12, signed=True)

    def test_contains(self) -> None:
        layout = IntegerLayout(bits=8, signed=False)
        assert layout.contains(0)
        assert layout.contains(255)
        assert not layout.contains(256)
        assert not layout.contains(-1)

    def test_wrap_unsigned(self) -> None:
        layout = IntegerLayout(bits=8, signed=False)
        assert layout.wrap(256) == 0
        assert layout.wrap(-1) == 255

    def test_wrap_signed_twos_complement(self) -> None:
        layout = IntegerLayout(bits=8, signed=True)
        assert layout.wrap(128) == -128
        assert layout.wrap(-129) == 127
        assert layout.wrap(255) == -1

    def test_describe(self) -> None:
        assert IntegerLayout(bits=8, signed=True).describe() == "Int8[-128, 127]"

    @given(st.integers(), st.sampled_from([8, 16, 32, 64]), st.booleans())
    def test_wrap_always_in_range(self, value: int, bits: int, signed: bool) -> None:
        layout = IntegerLayout(bits=bits, signed=signed)
        wrapped = layout.wrap(value)
        assert layout.contains(wrapped)
        assert (wrapped - value) % layout.modulus == 0

    @given(st.integers(min_value=-128, max_value=127))
    def test_wrap_is_identity_for_representable(self, value: int) -> None:
        assert IntegerLayout(bits=8, signed=True).wrap(value) == value


class TestTruncatingDivision:
    """Тесты деления с усечением к нулю"""

    @pytest.mark.parametrize(
        "numerator,denominator,quotient,remainder",
        [
            (7, 2, 3, 1),
            (-7, 2, -3, -1),
            (7, -2, -3, 1),
            (-7, -2, 3, -1),
            (6, 3, 2, 0),
            (0, 5, 0, 0),
        ],
    )
    def test_quotient_and_remainder(
        self, numerator: int, denominator: int, quotient: int, remainder: int
    ) -> None:
        assert truncating_divide(numerator, denominator) == quotient
        assert truncating_remainder(numerator, denominator) == remainder

    def test_zero_denominator_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            truncating_divide(1, 0)

    @given(st.integers(), st.integers().filter(lambda d: d != 0))
    def test_division_identity(self, numerator: int, denominator: int) -> None:
        quotient = truncating_divide(numerator, denominator)
        remainder = truncating_remainder(numerator, denominator)
        assert quotient * denominator + remainder == numerator
        assert abs(remainder) < abs(denominator)
        assert remainder == 0 or (remainder < 0) == (numerator < 0)
