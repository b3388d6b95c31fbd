"""
Cross-precision conversions.

Rescaling works on the exact raw integer: widening shifts left, narrowing
shifts right with round-half-even (the rule from_double applies), so
`convert(x, T)` equals `T.from_double(x.to_double())` whenever the raw value
is exactly representable as a double. Narrowing is lossy by design.
"""

from typing import TYPE_CHECKING, TypeVar

from velentr.core.math.scaled_integers import shift_round_half_even

if TYPE_CHECKING:
    from velentr.core.math.fixed_point.base import FixedPoint

TTarget = TypeVar("TTarget", bound="FixedPoint")


def rescale_raw(raw: int, from_shift: int, to_shift: int) -> int:
    """
    Move a raw value from one binary scale to another.

    Args:
        raw: Raw value at 2**from_shift
        from_shift: Source shift
        to_shift: Target shift

    Returns:
        Exact (unbounded) raw value at 2**to_shift

    Examples:
        >>> rescale_raw(457, 7, 27)
        479199232
        >>> rescale_raw(479199232, 27, 7)
        457
    """
    if to_shift >= from_shift:
        return raw << (to_shift - from_shift)
    return shift_round_half_even(raw, from_shift - to_shift)


def convert(value: "FixedPoint", target: type[TTarget]) -> TTarget:
    """
    Convert a fixed-point value to another variant.

    The rescaled raw is fitted to the target width under the active
    overflow mode (FP8 -> FP2I can exceed 32 bits).
    """
    if type(value) is target:
        return value
    raw = rescale_raw(value.raw_value, value.SHIFT, target.SHIFT)
    return target.from_raw(raw)
