"""
FixedPointPayload — Serialized Fixed-Point Value

Immutable Pydantic model carrying a fixed-point value across process
boundaries. Matches contracts/schema/fixed_point_value.json.

The raw integer is authoritative; `text` is the invariant-culture rendering
kept for human readers and is not used to rebuild the value.
"""

from typing import Any, Dict, Literal

from pydantic import BaseModel, Field, model_validator

from velentr.core.math.fixed_point import INVARIANT_CULTURE, FixedPoint, variant
from velentr.core.math.scaled_integers import fits_signed

VariantName = Literal["FP2", "FP2I", "FP4", "FP6", "FP8"]


class FixedPointPayload(BaseModel):
    """
    Wire form of a fixed-point value.

    Immutable model (frozen=True).
    """

    variant: VariantName = Field(..., description="Fixed-point variant name")
    raw_value: int = Field(..., description="Scaled raw integer (value * 2**SHIFT)")
    text: str = Field(..., min_length=1, description="Invariant-culture rendering")

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def validate_raw_width(self) -> "FixedPointPayload":
        """raw_value must fit the variant's raw width."""
        kind = variant(self.variant)
        if not fits_signed(self.raw_value, kind.RAW_BITS):
            raise ValueError(
                f"raw_value {self.raw_value} does not fit {self.variant} "
                f"({kind.RAW_BITS}-bit)"
            )
        return self

    @classmethod
    def from_value(cls, value: FixedPoint) -> "FixedPointPayload":
        """
        Serialize a fixed-point value.

        Args:
            value: Instance of a concrete variant

        Returns:
            Payload with the raw value and its invariant-culture text
        """
        return cls(
            variant=type(value).__name__,
            raw_value=value.raw_value,
            text=value.to_string(INVARIANT_CULTURE),
        )

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "FixedPointPayload":
        """
        Build from JSON data after checking it against the contract schema.

        Raises:
            jsonschema.ValidationError: If data violates fixed_point_value.json
            pydantic.ValidationError: If raw_value does not fit the variant
        """
        from velentr.core.contracts.validators import validate_fixed_point_value

        validate_fixed_point_value(data)
        return cls.model_validate(data)

    def to_value(self) -> FixedPoint:
        """Rebuild the fixed-point value from the raw integer."""
        return variant(self.variant)(self.raw_value)
