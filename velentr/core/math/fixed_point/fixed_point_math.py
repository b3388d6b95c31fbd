"""
FixedPointMath — Math Facade Over One Fixed-Point Variant

Exact operations (add, multiply, min, max, ...) delegate to the variant's own
arithmetic. Transcendental functions convert to double, evaluate with NumPy
ufuncs and re-quantize with from_double.

CRITICAL INVARIANTS:
1. A facade is bound to exactly one variant; any other operand type is a
   TypeError (no implicit conversion between variants)
2. IEEE semantics for transcendental domain errors: sqrt(-1), log(0),
   asin(2) produce NaN / inf, which re-quantize under the active
   OverflowMode (MIN_RAW under WRAP)
3. round() is half-even, like the variant's from_double

Usage:
    fp2_math = FixedPointMath(FP2)
    fp2_math.sqrt(FP2.from_int(4))      # FP2 2.00
    fp2_math.atan2(FP2.ONE, FP2.ONE)    # FP2 0.79
"""

import operator
from typing import Any, Callable, Generic, Optional, TypeVar

import numpy as np

from velentr.core.math.fixed_point.base import FixedPoint
from velentr.core.math.fixed_point.protocols import SupportsFixedPoint

T = TypeVar("T", bound=SupportsFixedPoint)


class FixedPointMath(Generic[T]):
    """
    Math operations over a single fixed-point variant.

    Args:
        kind: Concrete variant class, e.g. FP4
    """

    __slots__ = ("kind",)

    def __init__(self, kind: type[T]):
        if not isinstance(kind, type) or not issubclass(kind, SupportsFixedPoint):
            raise TypeError(f"{kind!r} is not a fixed-point type")
        if kind is FixedPoint:
            raise TypeError("FixedPointMath needs a concrete variant, not FixedPoint")
        self.kind = kind

    def __repr__(self) -> str:
        return f"FixedPointMath({self.kind.__name__})"

    def _check(self, *values: Any) -> None:
        for value in values:
            if type(value) is not self.kind:
                raise TypeError(
                    f"FixedPointMath({self.kind.__name__}) cannot operate on "
                    f"{type(value).__name__}"
                )

    def _unary(self, func: Callable[[float], Any], value: T) -> T:
        self._check(value)
        with np.errstate(all="ignore"):
            result = func(value.to_double())
        return self.kind.from_double(float(result))

    def _binary(self, func: Callable[[float, float], Any], x: T, y: T) -> T:
        self._check(x, y)
        with np.errstate(all="ignore"):
            result = func(x.to_double(), y.to_double())
        return self.kind.from_double(float(result))

    # =========================================================================
    # EXACT ARITHMETIC
    # =========================================================================

    def add(self, left: T, right: T) -> T:
        self._check(left, right)
        return left.add(right)

    def subtract(self, left: T, right: T) -> T:
        self._check(left, right)
        return left.subtract(right)

    def multiply(self, left: T, right: T) -> T:
        self._check(left, right)
        return left.multiply(right)

    def divide(self, left: T, right: T) -> T:
        """
        Truncating division.

        Raises:
            FixedPointDivisionByZeroError: If right is zero
        """
        self._check(left, right)
        return left.divide(right)

    def abs(self, value: T) -> T:
        self._check(value)
        return abs(value)

    def square(self, value: T) -> T:
        self._check(value)
        return value.multiply(value)

    def cube(self, value: T) -> T:
        self._check(value)
        return value.multiply(value).multiply(value)

    def is_zero(self, value: T) -> bool:
        self._check(value)
        return value.is_zero()

    def is_positive(self, value: T) -> bool:
        self._check(value)
        return value.is_positive()

    def is_negative(self, value: T) -> bool:
        self._check(value)
        return value.is_negative()

    # =========================================================================
    # SELECTION / AGGREGATION
    # =========================================================================

    def max(self, x: T, y: T) -> T:
        """Larger operand; y on ties."""
        self._check(x, y)
        return x if x.compare_to(y) > 0 else y

    def min(self, x: T, y: T) -> T:
        """Smaller operand; y on ties."""
        self._check(x, y)
        return x if x.compare_to(y) < 0 else y

    def maximum(self, *values: T) -> T:
        """
        Largest of one or more values.

        Raises:
            ValueError: If no values are given
        """
        if not values:
            raise ValueError("maximum() requires at least one value")
        self._check(*values)
        result = values[0]
        for value in values[1:]:
            if value.compare_to(result) > 0:
                result = value
        return result

    def minimum(self, *values: T) -> T:
        """
        Smallest of one or more values.

        Raises:
            ValueError: If no values are given
        """
        if not values:
            raise ValueError("minimum() requires at least one value")
        self._check(*values)
        result = values[0]
        for value in values[1:]:
            if value.compare_to(result) < 0:
                result = value
        return result

    def sum(self, *values: T) -> T:
        """Sum of the values; ZERO when empty."""
        self._check(*values)
        result = self.kind.ZERO
        for value in values:
            result = result.add(value)
        return result

    def max_magnitude(self, x: T, y: T) -> T:
        self._check(x, y)
        return self.kind.max_magnitude(x, y)

    def min_magnitude(self, x: T, y: T) -> T:
        self._check(x, y)
        return self.kind.min_magnitude(x, y)

    # =========================================================================
    # POWERS / LOGARITHMS
    # =========================================================================

    def sqrt(self, value: T) -> T:
        return self._unary(np.sqrt, value)

    def pow(self, value: T, exponent: T) -> T:
        return self._binary(np.power, value, exponent)

    def pow10(self, value: T) -> T:
        """10 raised to value."""
        return self._unary(lambda v: np.power(10.0, v), value)

    def pow_pi(self, value: T) -> T:
        """pi raised to value."""
        return self._unary(lambda v: np.power(np.pi, v), value)

    def exp(self, value: T) -> T:
        return self._unary(np.exp, value)

    def log(self, value: T, base: Optional[T] = None) -> T:
        """
        Natural logarithm, or logarithm in the given base.

        Args:
            value: Operand
            base: Optional logarithm base (same variant)
        """
        if base is None:
            return self._unary(np.log, value)
        return self._binary(lambda v, b: np.log(v) / np.log(b), value, base)

    def log10(self, value: T) -> T:
        return self._unary(np.log10, value)

    def log2(self, value: T) -> T:
        return self._unary(np.log2, value)

    def log1p(self, value: T) -> T:
        """ln(1 + value)."""
        return self._unary(np.log1p, value)

    # =========================================================================
    # TRIGONOMETRY (radians)
    # =========================================================================

    def sin(self, value: T) -> T:
        return self._unary(np.sin, value)

    def cos(self, value: T) -> T:
        return self._unary(np.cos, value)

    def tan(self, value: T) -> T:
        return self._unary(np.tan, value)

    def asin(self, value: T) -> T:
        return self._unary(np.arcsin, value)

    def acos(self, value: T) -> T:
        return self._unary(np.arccos, value)

    def atan(self, value: T) -> T:
        return self._unary(np.arctan, value)

    def atan2(self, y: T, x: T) -> T:
        """Angle of the point (x, y), in radians."""
        return self._binary(np.arctan2, y, x)

    def sinh(self, value: T) -> T:
        return self._unary(np.sinh, value)

    def cosh(self, value: T) -> T:
        return self._unary(np.cosh, value)

    def tanh(self, value: T) -> T:
        return self._unary(np.tanh, value)

    # =========================================================================
    # ROUNDING
    # =========================================================================

    def round(self, value: T, digits: Optional[int] = None) -> T:
        """
        Round half-even to a whole number, or to `digits` decimal places.

        Examples:
            >>> FixedPointMath(FP2).round(FP2.from_double(2.5)).to_string()
            '2.00'
        """
        if digits is None:
            return self._unary(np.rint, value)
        digits = operator.index(digits)
        return self._unary(lambda v: np.round(v, digits), value)

    def floor(self, value: T) -> T:
        return self._unary(np.floor, value)

    def ceiling(self, value: T) -> T:
        return self._unary(np.ceil, value)
