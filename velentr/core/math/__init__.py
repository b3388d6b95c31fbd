"""
Core math modules for velentr-core

Scaled-integer primitives, fixed-point numbers and bounded values.
"""

# Scaled integers
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

# Bounds
from velentr.core.math.bounds import (
    BYTE_BOUNDS,
    DEGREE_BOUNDS,
    NEURAL_NETWORK_BOUNDS,
    PERCENTAGE_BOUNDS,
    BoundedNumber,
    Bounds,
    CircularBoundedNumber,
    circular_clamp,
    clamp,
    delta_clamp,
    maximum,
    min_max_delta,
    minimum,
)

__all__ = [
    # Scaled integers — Constants
    "RAW_BITS_32",
    "RAW_BITS_64",
    # Scaled integers — Functions
    "raw_bounds",
    "fits_signed",
    "wrap_signed",
    "saturate_signed",
    "shift_round_half_even",
    "truncating_divide",
    "truncating_remainder",
    "is_valid_float",
    # Bounds — Functions
    "clamp",
    "circular_clamp",
    "delta_clamp",
    "maximum",
    "minimum",
    "min_max_delta",
    # Bounds — Types
    "Bounds",
    "BoundedNumber",
    "CircularBoundedNumber",
    # Bounds — Presets
    "DEGREE_BOUNDS",
    "PERCENTAGE_BOUNDS",
    "NEURAL_NETWORK_BOUNDS",
    "BYTE_BOUNDS",
]
