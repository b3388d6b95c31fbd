"""
Fixed-point numbers for velentr-core

Deterministic scaled-integer arithmetic at five precisions (FP2, FP2I, FP4,
FP6, FP8) with culture-aware text, configurable overflow and a math facade.
"""

# Errors
from velentr.core.math.fixed_point.errors import (
    FixedPointDivisionByZeroError,
    FixedPointError,
    FixedPointFormatError,
    FixedPointNotFiniteError,
    FixedPointOverflowError,
)

# Configuration
from velentr.core.math.fixed_point.formatting import (
    INVARIANT_CULTURE,
    Culture,
    register_culture,
)
from velentr.core.math.fixed_point.settings import (
    DEFAULT_SETTINGS,
    FixedPointSettings,
    OverflowMode,
    get_settings,
    override_settings,
)

# Types
from velentr.core.math.fixed_point.base import FixedPoint, variant, variants
from velentr.core.math.fixed_point.protocols import SupportsFixedPoint
from velentr.core.math.fixed_point.variants import (
    FP2,
    FP2I,
    FP4,
    FP6,
    FP8,
    VARIANTS,
    FixedPointPrecision2,
    FixedPointPrecision2I,
    FixedPointPrecision4,
    FixedPointPrecision6,
    FixedPointPrecision8,
)

# Conversions / math / constants
from velentr.core.math.fixed_point.conversions import convert, rescale_raw
from velentr.core.math.fixed_point.fixed_point_math import FixedPointMath
from velentr.core.math.fixed_point.constants import (
    FP2_CONSTANTS,
    FP2I_CONSTANTS,
    FP4_CONSTANTS,
    FP6_CONSTANTS,
    FP8_CONSTANTS,
    FixedPointConstantSet,
    constants_for,
)

__all__ = [
    # Errors
    "FixedPointError",
    "FixedPointFormatError",
    "FixedPointOverflowError",
    "FixedPointNotFiniteError",
    "FixedPointDivisionByZeroError",
    # Configuration
    "Culture",
    "INVARIANT_CULTURE",
    "register_culture",
    "OverflowMode",
    "FixedPointSettings",
    "DEFAULT_SETTINGS",
    "get_settings",
    "override_settings",
    # Types
    "FixedPoint",
    "SupportsFixedPoint",
    "FP2",
    "FP2I",
    "FP4",
    "FP6",
    "FP8",
    "FixedPointPrecision2",
    "FixedPointPrecision2I",
    "FixedPointPrecision4",
    "FixedPointPrecision6",
    "FixedPointPrecision8",
    "VARIANTS",
    "variant",
    "variants",
    # Conversions
    "convert",
    "rescale_raw",
    # Math
    "FixedPointMath",
    # Constants
    "FixedPointConstantSet",
    "constants_for",
    "FP2_CONSTANTS",
    "FP2I_CONSTANTS",
    "FP4_CONSTANTS",
    "FP6_CONSTANTS",
    "FP8_CONSTANTS",
]
