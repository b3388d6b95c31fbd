"""
Contract Validation Module

Validation of the JSON contracts exchanged by velentr-core.
"""

from .validators import (
    ContractValidator,
    FixedPointValueValidator,
    SchemaLoader,
    get_fixed_point_value_validator,
    validate_fixed_point_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FixedPointValueValidator",
    # Functions
    "get_fixed_point_value_validator",
    "validate_fixed_point_value",
]
