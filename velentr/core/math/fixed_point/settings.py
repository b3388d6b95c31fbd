"""
Fixed-point runtime settings.

The active FixedPointSettings is held in a ContextVar, so an override made with
override_settings() is visible only to the current thread / asyncio task and
is restored when the block exits.

Usage:
    with override_settings(overflow_mode=OverflowMode.RAISE):
        FP2I.from_double(1e9)  # raises FixedPointOverflowError
"""

from contextlib import contextmanager
from contextvars import ContextVar
from enum import Enum
from typing import Any, Iterator

from pydantic import BaseModel, Field

from velentr.core.math.fixed_point.formatting import INVARIANT_CULTURE, Culture


# =============================================================================
# ENUMS
# =============================================================================


class OverflowMode(str, Enum):
    """How a result outside the raw width is reduced."""

    WRAP = "wrap"  # two's-complement, unchecked integer semantics
    SATURATE = "saturate"
    RAISE = "raise"


# =============================================================================
# SETTINGS MODEL
# =============================================================================


class FixedPointSettings(BaseModel):
    """
    Settings consulted by every fixed-point operation.

    Immutable model (frozen=True). Use override_settings() to change them for
    a block of code.
    """

    overflow_mode: OverflowMode = Field(
        OverflowMode.WRAP, description="Overflow policy for raw results"
    )
    culture: Culture = Field(
        INVARIANT_CULTURE, description="Default culture for to_string / parse"
    )

    model_config = {"frozen": True, "extra": "forbid"}


DEFAULT_SETTINGS = FixedPointSettings()

_ACTIVE_SETTINGS: ContextVar[FixedPointSettings] = ContextVar(
    "fixed_point_settings", default=DEFAULT_SETTINGS
)


def get_settings() -> FixedPointSettings:
    """Settings active in the current context."""
    return _ACTIVE_SETTINGS.get()


@contextmanager
def override_settings(**changes: Any) -> Iterator[FixedPointSettings]:
    """
    Temporarily replace fields of the active settings.

    Args:
        **changes: FixedPointSettings fields to override

    Yields:
        The settings in effect inside the block

    Raises:
        pydantic.ValidationError: If a field value is invalid
    """
    settings = FixedPointSettings.model_validate(
        {**get_settings().model_dump(), **changes}
    )
    token = _ACTIVE_SETTINGS.set(settings)
    try:
        yield settings
    finally:
        _ACTIVE_SETTINGS.reset(token)
