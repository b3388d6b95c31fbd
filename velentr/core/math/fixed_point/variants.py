"""
Concrete fixed-point variants.

    Variant   PRECISION   SHIFT   BASE_ONE    RAW_BITS
    FP2       2           7       128         64
    FP2I      2           7       128         32
    FP4       4           14      16384       64
    FP6       6           20      1048576     64
    FP8       8           27      134217728   64

PRECISION is the number of fractional digits rendered by to_string; SHIFT
fixes the binary scale. FixedPointPrecisionN names are aliases of FPN.
"""

from typing import Final

from velentr.core.math.fixed_point.base import FixedPoint
from velentr.core.math.scaled_integers import RAW_BITS_32, RAW_BITS_64


class FP2(FixedPoint):
    """Two rendered digits, 64-bit raw."""

    __slots__ = ()

    PRECISION = 2
    SHIFT = 7
    RAW_BITS = RAW_BITS_64


class FP2I(FixedPoint):
    """
    Two rendered digits, 32-bit raw.

    Same scale as FP2 in half the storage; range is about ±16.7 million.
    """

    __slots__ = ()

    PRECISION = 2
    SHIFT = 7
    RAW_BITS = RAW_BITS_32


class FP4(FixedPoint):
    """Four rendered digits, 64-bit raw."""

    __slots__ = ()

    PRECISION = 4
    SHIFT = 14
    RAW_BITS = RAW_BITS_64


class FP6(FixedPoint):
    """Six rendered digits, 64-bit raw."""

    __slots__ = ()

    PRECISION = 6
    SHIFT = 20
    RAW_BITS = RAW_BITS_64


class FP8(FixedPoint):
    """Eight rendered digits, 64-bit raw."""

    __slots__ = ()

    PRECISION = 8
    SHIFT = 27
    RAW_BITS = RAW_BITS_64


FixedPointPrecision2 = FP2
FixedPointPrecision2I = FP2I
FixedPointPrecision4 = FP4
FixedPointPrecision6 = FP6
FixedPointPrecision8 = FP8

VARIANTS: Final[tuple[type[FixedPoint], ...]] = (FP2, FP2I, FP4, FP6, FP8)
