"""
Domain models and value objects.

Contains the serializable forms of core values.
"""

from velentr.core.domain.fixed_point_payload import FixedPointPayload, VariantName

__all__ = [
    "FixedPointPayload",
    "VariantName",
]
