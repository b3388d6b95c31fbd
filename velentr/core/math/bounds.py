"""
Bounded Numbers — Clamping and Circular Wrapping

Generic helpers over any ordered numeric type (int, float, Decimal or a
fixed-point variant) plus immutable value types that keep a number inside a
range.

CRITICAL INVARIANTS:
1. clamp() returns a value in [min, max] (closed range)
2. circular_clamp() returns a value in [min, max) (half-open range); a value
   equal to max wraps to min
3. Bounds always satisfy minimum <= maximum (reversed limits are swapped)
4. BoundedNumber / CircularBoundedNumber are immutable; arithmetic returns
   a new instance re-clamped (or re-wrapped) into the same range

Examples:
    >>> circular_clamp(11, 5, 10)
    6
    >>> (CircularBoundedNumber(7, 5, 10) - 3).value
    9
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


# =============================================================================
# FUNCTIONS
# =============================================================================


def clamp(value: T, min_value: T | None = None, max_value: T | None = None) -> T:
    """
    Limit a value to [min_value, max_value].

    Args:
        value: Value to limit
        min_value: Lower limit (optional)
        max_value: Upper limit (optional)

    Returns:
        value limited to the range

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15, max_value=10)
        10
    """
    if min_value is not None and value < min_value:
        return min_value
    if max_value is not None and value > max_value:
        return max_value
    return value


def circular_clamp(value: T, min_value: T, max_value: T) -> T:
    """
    Wrap a value into the half-open range [min_value, max_value).

    Reversed limits are swapped. Works with any type supporting +, -, % and
    ordering; a truncating % (fixed-point remainder) is corrected to the
    non-negative residue.

    Out-of-range values map to (value mod span) + min_value. With a negative
    minimum the residue is taken relative to min_value instead, so the
    result is congruent to value.

    Examples:
        >>> circular_clamp(12, 1, 10)
        4
        >>> circular_clamp(-5, 0, 10)
        5
        >>> circular_clamp(370.0, 0.0, 360.0)
        10.0
    """
    low, high = (max_value, min_value) if min_value > max_value else (min_value, max_value)
    if low <= value < high:
        return value

    zero = low - low
    correction = zero
    shifted = value
    if low < zero:
        # Work on [0, high - low) and shift back afterwards
        correction = low
        high = high - low
        low = zero
        shifted = value - correction

    span = high - low
    remainder = shifted % span
    if remainder < zero:
        remainder = remainder + span

    return remainder + low + correction


def delta_clamp(
    new_value: T,
    current_value: T,
    delta_min: T,
    delta_max: T,
    absolute_min: T,
    absolute_max: T,
) -> T:
    """
    Move from current_value toward new_value by a limited step.

    The step (new_value - current_value) is limited to [delta_min, delta_max]
    and the result to [absolute_min, absolute_max].

    Examples:
        >>> delta_clamp(100, 10, -5, 5, 0, 50)
        15
    """
    delta = clamp(new_value - current_value, delta_min, delta_max)
    return clamp(current_value + delta, absolute_min, absolute_max)


def maximum(*values: T) -> T:
    """
    Largest value; the first one wins ties.

    Raises:
        ValueError: If no values are given
    """
    if not values:
        raise ValueError("maximum() requires at least one value")
    result = values[0]
    for value in values[1:]:
        if value > result:
            result = value
    return result


def minimum(*values: T) -> T:
    """
    Smallest value; the first one wins ties.

    Raises:
        ValueError: If no values are given
    """
    if not values:
        raise ValueError("minimum() requires at least one value")
    result = values[0]
    for value in values[1:]:
        if value < result:
            result = value
    return result


def min_max_delta(*values: T) -> T:
    """Spread of the values: maximum - minimum."""
    return maximum(*values) - minimum(*values)


# =============================================================================
# VALUE TYPES
# =============================================================================


@dataclass(frozen=True)
class Bounds(Generic[T]):
    """
    Closed range [minimum, maximum]; reversed limits are swapped.
    """

    minimum: T
    maximum: T

    def __post_init__(self) -> None:
        if self.maximum < self.minimum:
            low, high = self.maximum, self.minimum
            object.__setattr__(self, "minimum", low)
            object.__setattr__(self, "maximum", high)

    def clamp_value(self, value: T) -> T:
        return clamp(value, self.minimum, self.maximum)

    def circular_clamp_value(self, value: T) -> T:
        return circular_clamp(value, self.minimum, self.maximum)

    def with_minimum(self, minimum: T) -> "Bounds[T]":
        return replace(self, minimum=minimum)

    def with_maximum(self, maximum: T) -> "Bounds[T]":
        return replace(self, maximum=maximum)

    def __contains__(self, value: Any) -> bool:
        return self.minimum <= value <= self.maximum

    def __str__(self) -> str:
        return f"({self.minimum} -> {self.maximum})"


DEGREE_BOUNDS: Bounds[int] = Bounds(0, 360)
PERCENTAGE_BOUNDS: Bounds[float] = Bounds(0.0, 1.0)
NEURAL_NETWORK_BOUNDS: Bounds[float] = Bounds(-1.0, 1.0)
BYTE_BOUNDS: Bounds[int] = Bounds(0, 255)


@dataclass(frozen=True, eq=False)
class BoundedNumber(Generic[T]):
    """
    Number clamped into [minimum, maximum].

    Arithmetic with a plain operand returns a new instance over the same
    range:
        >>> (BoundedNumber(8, 0, 10) + 5).value
        10
    """

    value: T
    minimum: T
    maximum: T

    def __post_init__(self) -> None:
        bounds = Bounds(self.minimum, self.maximum)
        object.__setattr__(self, "minimum", bounds.minimum)
        object.__setattr__(self, "maximum", bounds.maximum)
        object.__setattr__(self, "value", self._fit(bounds, self.value))

    @staticmethod
    def _fit(bounds: Bounds[T], value: T) -> T:
        return bounds.clamp_value(value)

    @property
    def bounds(self) -> Bounds[T]:
        return Bounds(self.minimum, self.maximum)

    def with_value(self, value: T):
        return replace(self, value=value)

    def with_minimum(self, minimum: T):
        return replace(self, minimum=minimum)

    def with_maximum(self, maximum: T):
        return replace(self, maximum=maximum)

    def _apply(self, op: Callable[[T, Any], T], other: Any):
        if isinstance(other, BoundedNumber):
            other = other.value
        return self.with_value(op(self.value, other))

    def __add__(self, other: Any):
        return self._apply(lambda a, b: a + b, other)

    def __sub__(self, other: Any):
        return self._apply(lambda a, b: a - b, other)

    def __mul__(self, other: Any):
        return self._apply(lambda a, b: a * b, other)

    def __truediv__(self, other: Any):
        return self._apply(lambda a, b: a / b, other)

    def __mod__(self, other: Any):
        return self._apply(lambda a, b: a % b, other)

    def increment(self):
        return self.with_value(self.value + 1)

    def decrement(self):
        return self.with_value(self.value - 1)

    def _plain(self, other: Any) -> Any:
        return other.value if isinstance(other, BoundedNumber) else other

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return (
                self.value == other.value
                and self.minimum == other.minimum
                and self.maximum == other.maximum
            )
        if isinstance(other, BoundedNumber):
            return False
        return self.value == other

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value, self.minimum, self.maximum))

    def __lt__(self, other: Any) -> bool:
        return self.value < self._plain(other)

    def __le__(self, other: Any) -> bool:
        return self.value <= self._plain(other)

    def __gt__(self, other: Any) -> bool:
        return self.value > self._plain(other)

    def __ge__(self, other: Any) -> bool:
        return self.value >= self._plain(other)

    def __str__(self) -> str:
        return f"{self.minimum} <= {self.value} <= {self.maximum}"


@dataclass(frozen=True, eq=False)
class CircularBoundedNumber(BoundedNumber[T]):
    """
    Number wrapped into [minimum, maximum), e.g. an angle in degrees.

        >>> (CircularBoundedNumber(3, 1, 10) * 4).value
        4
    """

    @staticmethod
    def _fit(bounds: Bounds[T], value: T) -> T:
        return bounds.circular_clamp_value(value)

    def __str__(self) -> str:
        return f"{self.minimum} <= {self.value} <= {self.maximum} (circular)"
