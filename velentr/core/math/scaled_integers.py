"""
Scaled Integers — Raw Arithmetic Primitives for Fixed-Point Types

Helpers for raw signed integers of a fixed bit width:
- Width bounds and fit checks (two's-complement ranges)
- Overflow reduction (wrap / saturate)
- Rounded and truncated shifts/divisions on exact Python integers

Python integers are unbounded, so every intermediate product here is exact
(the equivalent of 128-bit widening). Narrowing to the raw width only ever
happens through wrap_signed / saturate_signed.

CRITICAL INVARIANTS:
1. wrap_signed(x, bits) is congruent to x modulo 2**bits
2. shift_round_half_even never drifts: ties go to the even result
3. truncating_divide / truncating_remainder follow integer-division
   semantics (quotient rounded toward zero, remainder takes the dividend sign)
"""

import math
from typing import Final

# =============================================================================
# RAW WIDTHS
# =============================================================================

RAW_BITS_64: Final[int] = 64
RAW_BITS_32: Final[int] = 32


# =============================================================================
# BOUNDS
# =============================================================================


def raw_bounds(bits: int) -> tuple[int, int]:
    """
    Signed range of a raw integer with the given width.

    Args:
        bits: Raw width in bits (e.g. 64)

    Returns:
        (min_raw, max_raw)

    Examples:
        >>> raw_bounds(32)
        (-2147483648, 2147483647)
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")

    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def fits_signed(value: int, bits: int) -> bool:
    """True if value is representable as a signed integer of `bits` width."""
    min_raw, max_raw = raw_bounds(bits)
    return min_raw <= value <= max_raw


# =============================================================================
# OVERFLOW REDUCTION
# =============================================================================


def wrap_signed(value: int, bits: int) -> int:
    """
    Two's-complement wrap of an arbitrary integer into `bits` width.

    Args:
        value: Exact integer (any magnitude)
        bits: Raw width in bits

    Returns:
        The unique integer in the signed range congruent to value mod 2**bits

    Examples:
        >>> wrap_signed(2**63, 64)
        -9223372036854775808
        >>> wrap_signed(-1, 64)
        -1
    """
    modulus = 1 << bits
    wrapped = value & (modulus - 1)
    if wrapped >= modulus >> 1:
        wrapped -= modulus
    return wrapped


def saturate_signed(value: int, bits: int) -> int:
    """
    Clamp an arbitrary integer into the signed range of `bits` width.

    Examples:
        >>> saturate_signed(2**40, 32)
        2147483647
    """
    min_raw, max_raw = raw_bounds(bits)
    return max(min_raw, min(value, max_raw))


# =============================================================================
# ROUNDED / TRUNCATED DIVISION
# =============================================================================


def shift_round_half_even(value: int, shift: int) -> int:
    """
    Divide by 2**shift and round to nearest, ties to even.

    Same rule as round() on a float, applied to an exact integer quotient.

    Args:
        value: Exact integer numerator
        shift: Non-negative power of two to divide by

    Returns:
        round_half_even(value / 2**shift)

    Examples:
        >>> shift_round_half_even(5, 1)   # 2.5
        2
        >>> shift_round_half_even(7, 1)   # 3.5
        4
        >>> shift_round_half_even(-5, 1)  # -2.5
        -2
    """
    if shift < 0:
        raise ValueError(f"shift must be non-negative, got {shift}")
    if shift == 0:
        return value

    # Floor quotient and non-negative remainder
    quotient = value >> shift
    remainder = value - (quotient << shift)
    half = 1 << (shift - 1)

    if remainder > half or (remainder == half and quotient & 1):
        quotient += 1
    return quotient


def truncating_divide(numerator: int, denominator: int) -> int:
    """
    Integer division rounded toward zero.

    Raises:
        ZeroDivisionError: If denominator == 0

    Examples:
        >>> truncating_divide(-7, 2)
        -3
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def truncating_remainder(numerator: int, denominator: int) -> int:
    """
    Remainder carrying the sign of the numerator.

    Raises:
        ZeroDivisionError: If denominator == 0

    Examples:
        >>> truncating_remainder(-7, 2)
        -1
    """
    remainder = abs(numerator) % abs(denominator)
    return -remainder if numerator < 0 else remainder


# =============================================================================
# FLOAT CHECKS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True if value is neither NaN nor infinite."""
    return math.isfinite(value)
