"""
Mathematical constants pre-quantized for each fixed-point variant.

Each constant is the variant's from_double of the double-precision value, so
FP2_CONSTANTS.pi renders as "3.14" and FP8_CONSTANTS.pi as "3.14159265".
"""

import math
from functools import lru_cache
from typing import NamedTuple

from velentr.core.math.fixed_point.base import FixedPoint
from velentr.core.math.fixed_point.variants import FP2, FP2I, FP4, FP6, FP8

GOLDEN_RATIO = (1.0 + math.sqrt(5.0)) / 2.0


class FixedPointConstantSet(NamedTuple):
    """Constants of one variant. Angles are in radians."""

    pi: FixedPoint
    e: FixedPoint
    sqrt2: FixedPoint
    sqrt3: FixedPoint
    ln2: FixedPoint
    ln3: FixedPoint
    ln5: FixedPoint
    ln7: FixedPoint
    ln10: FixedPoint
    golden_ratio: FixedPoint
    radians_30: FixedPoint
    radians_45: FixedPoint
    radians_60: FixedPoint
    radians_90: FixedPoint
    radians_180: FixedPoint
    radians_270: FixedPoint
    radians_360: FixedPoint


@lru_cache(maxsize=None)
def constants_for(kind: type[FixedPoint]) -> FixedPointConstantSet:
    """
    Build (once) the constant set of a variant.

    Args:
        kind: Concrete variant class

    Returns:
        FixedPointConstantSet whose members are instances of kind
    """
    q = kind.from_double
    return FixedPointConstantSet(
        pi=q(math.pi),
        e=q(math.e),
        sqrt2=q(math.sqrt(2.0)),
        sqrt3=q(math.sqrt(3.0)),
        ln2=q(math.log(2.0)),
        ln3=q(math.log(3.0)),
        ln5=q(math.log(5.0)),
        ln7=q(math.log(7.0)),
        ln10=q(math.log(10.0)),
        golden_ratio=q(GOLDEN_RATIO),
        radians_30=q(math.radians(30.0)),
        radians_45=q(math.radians(45.0)),
        radians_60=q(math.radians(60.0)),
        radians_90=q(math.radians(90.0)),
        radians_180=q(math.radians(180.0)),
        radians_270=q(math.radians(270.0)),
        radians_360=q(math.radians(360.0)),
    )


FP2_CONSTANTS = constants_for(FP2)
FP2I_CONSTANTS = constants_for(FP2I)
FP4_CONSTANTS = constants_for(FP4)
FP6_CONSTANTS = constants_for(FP6)
FP8_CONSTANTS = constants_for(FP8)
