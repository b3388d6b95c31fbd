"""
FixedPoint — Scaled-Integer Number Base

A fixed-point value stores one signed raw integer equal to
`real_value * BASE_ONE`, with BASE_ONE = 2**SHIFT. Concrete variants (FP2,
FP2I, FP4, FP6, FP8) only declare PRECISION, SHIFT and RAW_BITS; everything
else lives here.

CRITICAL INVARIANTS:
1. raw_value always lies inside the variant's signed RAW_BITS range
2. Values are immutable; every operation returns a new instance
3. Binary operations never mix variants implicitly (TypeError); plain
   numbers are coerced into the receiver's variant
4. Results outside the raw range follow the active OverflowMode
   (WRAP by default: unchecked two's-complement semantics)

ROUNDING:
    from_double / from_decimal / multiply / narrowing  -> half-even
    from_float                                          -> toward zero (float32)
    divide / remainder / int()                          -> toward zero
    to_string                                           -> half away from zero
"""

import logging
import math
import numbers
import operator
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from fractions import Fraction
from typing import Any, Callable, ClassVar, Final, Optional, TypeVar

import numpy as np

from velentr.core.math.fixed_point.conversions import convert
from velentr.core.math.fixed_point.errors import (
    FixedPointDivisionByZeroError,
    FixedPointFormatError,
    FixedPointNotFiniteError,
    FixedPointOverflowError,
)
from velentr.core.math.fixed_point.formatting import Culture, format_fixed, parse_decimal
from velentr.core.math.fixed_point.settings import OverflowMode, get_settings
from velentr.core.math.scaled_integers import (
    RAW_BITS_64,
    is_valid_float,
    raw_bounds,
    saturate_signed,
    shift_round_half_even,
    truncating_divide,
    truncating_remainder,
    wrap_signed,
)

logger = logging.getLogger(__name__)

TFixedPoint = TypeVar("TFixedPoint", bound="FixedPoint")

# Decimal magnitudes above this are infinite as doubles
DECIMAL_MAX_ADJUSTED_EXPONENT: Final[int] = 308

_VARIANTS: dict[str, type["FixedPoint"]] = {}


def variant(name: str) -> type["FixedPoint"]:
    """
    Look up a concrete fixed-point variant by class name (e.g. "FP4").

    Raises:
        KeyError: If no such variant is defined
    """
    try:
        return _VARIANTS[name]
    except KeyError:
        raise KeyError(f"Unknown fixed-point variant: {name!r}") from None


def variants() -> tuple[type["FixedPoint"], ...]:
    """All concrete variants in definition order."""
    return tuple(_VARIANTS.values())


@dataclass(frozen=True, eq=False, slots=True)
class FixedPoint:
    """
    Base class of the fixed-point family.

    Construct a concrete variant directly from a raw integer with
    `FP2(raw_value=457)`; the raw value is wrapped to RAW_BITS without any
    range check, like an integer cast. Use from_double / from_float /
    from_int / parse for real values.
    """

    raw_value: int = 0

    PRECISION: ClassVar[int] = 0
    SHIFT: ClassVar[int] = 0
    RAW_BITS: ClassVar[int] = RAW_BITS_64

    # Derived in __init_subclass__
    BASE_ONE: ClassVar[int] = 1
    MIN_RAW: ClassVar[int] = 0
    MAX_RAW: ClassVar[int] = 0
    MAX_VALUE: ClassVar["FixedPoint"]
    MIN_VALUE: ClassVar["FixedPoint"]
    ZERO: ClassVar["FixedPoint"]
    ONE: ClassVar["FixedPoint"]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        cls.BASE_ONE = 1 << cls.SHIFT
        cls.MIN_RAW, cls.MAX_RAW = raw_bounds(cls.RAW_BITS)
        cls.MAX_VALUE = cls(cls.MAX_RAW)
        cls.MIN_VALUE = cls(cls.MIN_RAW)
        cls.ZERO = cls(0)
        cls.ONE = cls(cls.BASE_ONE)
        _VARIANTS[cls.__name__] = cls

    def __post_init__(self) -> None:
        if type(self) is FixedPoint:
            raise TypeError("FixedPoint is abstract; instantiate a concrete variant such as FP2")
        raw = operator.index(self.raw_value)
        object.__setattr__(self, "raw_value", wrap_signed(raw, self.RAW_BITS))

    # -------------------------------------------------------------------------
    # Overflow handling
    # -------------------------------------------------------------------------

    @classmethod
    def _fit(cls, raw: int) -> int:
        """Reduce an exact raw result to RAW_BITS under the active overflow mode."""
        if cls.MIN_RAW <= raw <= cls.MAX_RAW:
            return raw

        mode = get_settings().overflow_mode
        if mode is OverflowMode.RAISE:
            raise FixedPointOverflowError(
                f"{cls.__name__} raw result {raw} outside [{cls.MIN_RAW}, {cls.MAX_RAW}]"
            )

        if mode is OverflowMode.SATURATE:
            fitted = saturate_signed(raw, cls.RAW_BITS)
        else:
            fitted = wrap_signed(raw, cls.RAW_BITS)

        logger.debug("%s overflow (%s): raw %d -> %d", cls.__name__, mode.value, raw, fitted)
        return fitted

    @classmethod
    def _from_non_finite(cls: type[TFixedPoint], value: float) -> TFixedPoint:
        """
        Re-quantize NaN / ±inf.

        WRAP yields MIN_RAW (the integer-indefinite value of a hardware
        float-to-int conversion). SATURATE sends +inf to MAX_RAW and
        -inf / NaN to MIN_RAW.
        """
        mode = get_settings().overflow_mode
        if mode is OverflowMode.RAISE:
            raise FixedPointNotFiniteError(f"Cannot represent {value!r} as {cls.__name__}")

        raw = cls.MAX_RAW if mode is OverflowMode.SATURATE and value > 0 else cls.MIN_RAW
        logger.debug("%s non-finite %r re-quantized to raw %d", cls.__name__, value, raw)
        return cls(raw)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_raw(cls: type[TFixedPoint], raw: int) -> TFixedPoint:
        """
        Build from an exact raw integer, fitted under the active overflow mode.

        Unlike the constructor, this honours OverflowMode.SATURATE / RAISE.
        """
        return cls(cls._fit(operator.index(raw)))

    @classmethod
    def from_double(cls: type[TFixedPoint], value: float) -> TFixedPoint:
        """
        Re-quantize a double: round_half_even(value * BASE_ONE).

        Examples:
            >>> FP2.from_double(3.57).raw_value
            457
        """
        scaled = float(value) * cls.BASE_ONE
        if not is_valid_float(scaled):
            return cls._from_non_finite(scaled)
        return cls(cls._fit(round(scaled)))

    @classmethod
    def from_float(cls: type[TFixedPoint], value: float) -> TFixedPoint:
        """
        Single-precision path: float32(value) * float32(BASE_ONE), truncated.

        Lower fidelity than from_double on purpose:
            >>> FP2.from_float(3.57).raw_value
            456
        """
        with np.errstate(over="ignore", invalid="ignore"):
            scaled = np.float32(value) * np.float32(cls.BASE_ONE)
        if not np.isfinite(scaled):
            return cls._from_non_finite(float(scaled))
        return cls(cls._fit(int(scaled)))

    @classmethod
    def from_int(cls: type[TFixedPoint], value: int) -> TFixedPoint:
        """Whole number: value * BASE_ONE."""
        return cls(cls._fit(operator.index(value) * cls.BASE_ONE))

    @classmethod
    def from_decimal(cls: type[TFixedPoint], value: Decimal) -> TFixedPoint:
        """Exact decimal: round_half_even(value * BASE_ONE) without a double step."""
        if not value.is_finite():
            return cls._from_non_finite(float(value))
        if value.is_zero():
            return cls(0)
        if value.adjusted() > DECIMAL_MAX_ADJUSTED_EXPONENT:
            return cls._from_non_finite(-math.inf if value.is_signed() else math.inf)

        with localcontext() as ctx:
            ctx.prec = len(value.as_tuple().digits) + 24
            scaled = value * cls.BASE_ONE
            raw = int(scaled.to_integral_value(rounding=ROUND_HALF_EVEN))
        return cls(cls._fit(raw))

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_double(self) -> float:
        """raw / BASE_ONE in double precision."""
        return float(self.raw_value) / self.BASE_ONE

    def to_float(self) -> np.float32:
        """raw / BASE_ONE computed in single precision."""
        return np.float32(self.raw_value) / np.float32(self.BASE_ONE)

    def as_fraction(self) -> Fraction:
        """Exact rational value."""
        return Fraction(self.raw_value, self.BASE_ONE)

    def convert_to(self, target: type[TFixedPoint]) -> TFixedPoint:
        """Explicit conversion to another variant (see conversions.convert)."""
        return convert(self, target)

    def to_fixed_point_precision_2(self) -> "FixedPoint":
        return self.convert_to(variant("FP2"))

    def to_fixed_point_precision_2i(self) -> "FixedPoint":
        return self.convert_to(variant("FP2I"))

    def to_fixed_point_precision_4(self) -> "FixedPoint":
        return self.convert_to(variant("FP4"))

    def to_fixed_point_precision_6(self) -> "FixedPoint":
        return self.convert_to(variant("FP6"))

    def to_fixed_point_precision_8(self) -> "FixedPoint":
        return self.convert_to(variant("FP8"))

    def __float__(self) -> float:
        return self.to_double()

    def __int__(self) -> int:
        return truncating_divide(self.raw_value, self.BASE_ONE)

    def __bool__(self) -> bool:
        return self.raw_value != 0

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------

    def to_string(self, culture: Optional[Culture] = None) -> str:
        """
        Fixed-decimal text with exactly PRECISION fractional digits.

        Args:
            culture: Separators to use (default: active settings culture)
        """
        return format_fixed(self.to_double(), self.PRECISION, culture or get_settings().culture)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return self.to_string()
        return format(self.to_double(), format_spec)

    @classmethod
    def parse(cls: type[TFixedPoint], text: str, culture: Optional[Culture] = None) -> TFixedPoint:
        """
        Parse decimal text; digits beyond the scale round half-even.

        Raises:
            FixedPointFormatError: If text is malformed
        """
        return cls.from_decimal(parse_decimal(text, culture or get_settings().culture))

    @classmethod
    def try_parse(
        cls: type[TFixedPoint], text: Optional[str], culture: Optional[Culture] = None
    ) -> tuple[bool, TFixedPoint]:
        """
        Non-raising parse.

        Returns:
            (True, value) on success, (False, ZERO) otherwise
        """
        try:
            return True, cls.parse(text, culture)
        except (FixedPointFormatError, FixedPointOverflowError, FixedPointNotFiniteError) as e:
            logger.debug("%s.try_parse rejected %r: %s", cls.__name__, text, e)
            return False, cls.ZERO

    # -------------------------------------------------------------------------
    # Arithmetic (named)
    # -------------------------------------------------------------------------

    def _coerce(self: TFixedPoint, other: Any) -> Optional[TFixedPoint]:
        """Bring a plain number into this variant; None if not allowed."""
        cls = type(self)
        if type(other) is cls:
            return other
        if isinstance(other, FixedPoint):
            return None
        if isinstance(other, numbers.Integral):
            return cls.from_int(other)
        if isinstance(other, np.float32):
            return cls.from_float(other)
        if isinstance(other, float):
            return cls.from_double(other)
        if isinstance(other, Decimal):
            return cls.from_decimal(other)
        return None

    def _require(self: TFixedPoint, other: Any) -> TFixedPoint:
        coerced = self._coerce(other)
        if coerced is None:
            raise TypeError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}; "
                f"convert explicitly first"
            )
        return coerced

    def add(self: TFixedPoint, other: Any) -> TFixedPoint:
        rhs = self._require(other)
        return type(self)(self._fit(self.raw_value + rhs.raw_value))

    def subtract(self: TFixedPoint, other: Any) -> TFixedPoint:
        rhs = self._require(other)
        return type(self)(self._fit(self.raw_value - rhs.raw_value))

    def multiply(self: TFixedPoint, other: Any) -> TFixedPoint:
        """round_half_even(a.raw * b.raw / BASE_ONE) on the exact product."""
        rhs = self._require(other)
        product = self.raw_value * rhs.raw_value
        return type(self)(self._fit(shift_round_half_even(product, self.SHIFT)))

    def divide(self: TFixedPoint, other: Any) -> TFixedPoint:
        """
        (a.raw * BASE_ONE) / b.raw, truncated toward zero.

        Raises:
            FixedPointDivisionByZeroError: If other is zero
        """
        rhs = self._require(other)
        if rhs.raw_value == 0:
            raise FixedPointDivisionByZeroError(f"{type(self).__name__} division by zero")
        quotient = truncating_divide(self.raw_value << self.SHIFT, rhs.raw_value)
        return type(self)(self._fit(quotient))

    def remainder(self: TFixedPoint, other: Any) -> TFixedPoint:
        """
        Raw remainder with the sign of self.

        Raises:
            FixedPointDivisionByZeroError: If other is zero
        """
        rhs = self._require(other)
        if rhs.raw_value == 0:
            raise FixedPointDivisionByZeroError(f"{type(self).__name__} remainder by zero")
        return type(self)(truncating_remainder(self.raw_value, rhs.raw_value))

    def negate(self: TFixedPoint) -> TFixedPoint:
        return type(self)(self._fit(-self.raw_value))

    def increment(self: TFixedPoint) -> TFixedPoint:
        """Add exactly 1.0 (BASE_ONE raw units)."""
        return type(self)(self._fit(self.raw_value + self.BASE_ONE))

    def decrement(self: TFixedPoint) -> TFixedPoint:
        """Subtract exactly 1.0 (BASE_ONE raw units)."""
        return type(self)(self._fit(self.raw_value - self.BASE_ONE))

    def compare_to(self, other: Any) -> int:
        """-1, 0 or 1 by raw value."""
        rhs = self._require(other)
        return (self.raw_value > rhs.raw_value) - (self.raw_value < rhs.raw_value)

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.raw_value == 0

    def is_positive(self) -> bool:
        return self.raw_value > 0

    def is_negative(self) -> bool:
        return self.raw_value < 0

    def is_integer(self) -> bool:
        return self.raw_value % self.BASE_ONE == 0

    def is_even_integer(self) -> bool:
        return self.is_integer() and (self.raw_value // self.BASE_ONE) % 2 == 0

    def is_odd_integer(self) -> bool:
        return self.is_integer() and (self.raw_value // self.BASE_ONE) % 2 != 0

    @staticmethod
    def max_magnitude(x: TFixedPoint, y: TFixedPoint) -> TFixedPoint:
        """Operand with the larger absolute value; x on ties."""
        return x if abs(x.raw_value) >= abs(y.raw_value) else y

    @staticmethod
    def min_magnitude(x: TFixedPoint, y: TFixedPoint) -> TFixedPoint:
        """Operand with the smaller absolute value; x on ties."""
        return x if abs(x.raw_value) <= abs(y.raw_value) else y

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def _binary(self, other: Any, method: Callable, reflected: bool = False) -> Any:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        if reflected:
            return method(coerced, self)
        return method(self, coerced)

    def __add__(self, other: Any) -> Any:
        return self._binary(other, FixedPoint.add)

    def __radd__(self, other: Any) -> Any:
        return self._binary(other, FixedPoint.add, reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._binary(other, FixedPoint.subtract)

    def __rsub__(self, other: Any) -> Any:
        return self._binary(other, FixedPoint.subtract, reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary(other, FixedPoint.multiply)

    def __rmul__(self, other: Any) -> Any:
        return self._binary(other, FixedPoint.multiply, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        return self._binary(other, FixedPoint.divide)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary(other, FixedPoint.divide, reflected=True)

    def __mod__(self, other: Any) -> Any:
        return self._binary(other, FixedPoint.remainder)

    def __rmod__(self, other: Any) -> Any:
        return self._binary(other, FixedPoint.remainder, reflected=True)

    def __neg__(self: TFixedPoint) -> TFixedPoint:
        return self.negate()

    def __pos__(self: TFixedPoint) -> TFixedPoint:
        return self

    def __abs__(self: TFixedPoint) -> TFixedPoint:
        return type(self)(self._fit(abs(self.raw_value)))

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def _compare(self, other: Any, op: Callable[[Any, Any], bool]) -> Any:
        if type(other) is type(self):
            return op(self.raw_value, other.raw_value)
        if isinstance(other, FixedPoint):
            return NotImplemented
        if isinstance(other, np.floating):
            other = float(other)
        elif isinstance(other, Decimal):
            other = Fraction(other) if other.is_finite() else float(other)
        if isinstance(other, (numbers.Rational, float)):
            return op(self.as_fraction(), other)
        return NotImplemented

    def __eq__(self, other: object) -> Any:
        return self._compare(other, operator.eq)

    def __ne__(self, other: object) -> Any:
        return self._compare(other, operator.ne)

    def __lt__(self, other: Any) -> Any:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        # Consistent with numeric equality: FP2.from_int(1) == 1
        return hash(self.as_fraction())
