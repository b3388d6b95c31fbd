"""
Tests for raw scaled-integer primitives

Checks:
1. Width bounds and fit checks
2. Wrap / saturate reduction
3. Half-even shifts and truncating division
4. Float validity
"""

import math

import pytest

from velentr.core.math.scaled_integers import (
    RAW_BITS_32,
    RAW_BITS_64,
    fits_signed,
    is_valid_float,
    raw_bounds,
    saturate_signed,
    shift_round_half_even,
    truncating_divide,
    truncating_remainder,
    wrap_signed,
)


class TestRawBounds:
    """Signed ranges"""

    def test_bounds(self) -> None:
        assert raw_bounds(RAW_BITS_32) == (-(2**31), 2**31 - 1)
        assert raw_bounds(RAW_BITS_64) == (-(2**63), 2**63 - 1)
        assert raw_bounds(8) == (-128, 127)

    def test_invalid_width(self) -> None:
        with pytest.raises(ValueError):
            raw_bounds(0)

    def test_fits_signed(self) -> None:
        assert fits_signed(127, 8)
        assert fits_signed(-128, 8)
        assert not fits_signed(128, 8)
        assert not fits_signed(-129, 8)


class TestWrapSigned:
    """Two's-complement wrap"""

    @pytest.mark.parametrize(
        "value,expected",
        [(0, 0), (127, 127), (128, -128), (255, -1), (256, 0), (-129, 127), (-1, -1), (1000, -24)],
    )
    def test_wrap_8_bit(self, value: int, expected: int) -> None:
        assert wrap_signed(value, 8) == expected

    def test_congruent(self) -> None:
        for value in (2**70 + 5, -(2**70) - 5, 12345678901234567890):
            wrapped = wrap_signed(value, RAW_BITS_64)
            assert (wrapped - value) % 2**64 == 0
            assert fits_signed(wrapped, RAW_BITS_64)


class TestSaturateSigned:
    """Clamp to range"""

    def test_saturate(self) -> None:
        assert saturate_signed(1000, 8) == 127
        assert saturate_signed(-1000, 8) == -128
        assert saturate_signed(42, 8) == 42


class TestShiftRoundHalfEven:
    """Rounded right shift"""

    @pytest.mark.parametrize(
        "value,shift,expected",
        [
            (5, 1, 2),  # 2.5 -> 2
            (7, 1, 4),  # 3.5 -> 4
            (-5, 1, -2),  # -2.5 -> -2
            (-7, 1, -4),  # -3.5 -> -4
            (9, 2, 2),  # 2.25 -> 2
            (11, 2, 3),  # 2.75 -> 3
            (-11, 2, -3),  # -2.75 -> -3
            (12, 0, 12),
        ],
    )
    def test_values(self, value: int, shift: int, expected: int) -> None:
        assert shift_round_half_even(value, shift) == expected

    def test_negative_shift(self) -> None:
        with pytest.raises(ValueError):
            shift_round_half_even(1, -1)

    def test_exact_product(self) -> None:
        """Products beyond 64 bits stay exact"""
        assert shift_round_half_even((2**62) * (2**27), 27) == 2**62


class TestTruncatingDivision:
    """Quotient toward zero, remainder with the dividend's sign"""

    @pytest.mark.parametrize(
        "a,b,quotient,remainder",
        [(7, 2, 3, 1), (-7, 2, -3, -1), (7, -2, -3, 1), (-7, -2, 3, -1), (6, 3, 2, 0)],
    )
    def test_values(self, a: int, b: int, quotient: int, remainder: int) -> None:
        assert truncating_divide(a, b) == quotient
        assert truncating_remainder(a, b) == remainder
        assert truncating_divide(a, b) * b + truncating_remainder(a, b) == a

    def test_zero_divisor(self) -> None:
        with pytest.raises(ZeroDivisionError):
            truncating_divide(1, 0)
        with pytest.raises(ZeroDivisionError):
            truncating_remainder(1, 0)


class TestIsValidFloat:
    def test_values(self) -> None:
        assert is_valid_float(1.5)
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)
