"""
Fixed-point exception hierarchy.

Every error raised by the fixed-point family derives from FixedPointError and
from the builtin exception a caller would naturally catch for the same
condition (ValueError, OverflowError, ZeroDivisionError).
"""


class FixedPointError(Exception):
    """Base class for fixed-point errors."""


class FixedPointFormatError(FixedPointError, ValueError):
    """Text could not be parsed as a decimal number in the given culture."""


class FixedPointOverflowError(FixedPointError, OverflowError):
    """
    A result does not fit the variant's raw width.

    Raised only under OverflowMode.RAISE; the default mode wraps.
    """


class FixedPointNotFiniteError(FixedPointError, ValueError):
    """A NaN or infinite double was re-quantized under OverflowMode.RAISE."""


class FixedPointDivisionByZeroError(FixedPointError, ZeroDivisionError):
    """Division or remainder by a zero-valued fixed-point operand."""
