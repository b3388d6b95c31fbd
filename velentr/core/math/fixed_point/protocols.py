"""
Structural contract shared by all fixed-point variants.

Generic code (FixedPointMath, bounds helpers) depends on this protocol
rather than on the concrete classes.
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

import numpy as np

TSelf = TypeVar("TSelf", bound="SupportsFixedPoint")


@runtime_checkable
class SupportsFixedPoint(Protocol):
    """
    Operations every fixed-point variant provides.

    Only methods are listed so that issubclass() checks work on the classes
    themselves.
    """

    def to_double(self) -> float: ...

    def to_float(self) -> np.float32: ...

    def to_string(self, culture: Any = None) -> str: ...

    def add(self: TSelf, other: Any) -> TSelf: ...

    def subtract(self: TSelf, other: Any) -> TSelf: ...

    def multiply(self: TSelf, other: Any) -> TSelf: ...

    def divide(self: TSelf, other: Any) -> TSelf: ...

    def negate(self: TSelf) -> TSelf: ...

    def compare_to(self, other: Any) -> int: ...

    def is_zero(self) -> bool: ...

    def is_positive(self) -> bool: ...

    def is_negative(self) -> bool: ...

    @classmethod
    def from_double(cls: type[TSelf], value: float) -> TSelf: ...

    @classmethod
    def from_raw(cls: type[TSelf], raw: int) -> TSelf: ...
