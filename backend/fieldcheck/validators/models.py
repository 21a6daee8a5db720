"""Validation models — constraint descriptors, error codes, and violations.

All validation is deterministic: same target + same descriptors → same output.
"""

import math
import sys
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Reserved date_format value: delegate to the ISO-8601 check instead of a pattern
ISO_DATE_FORMAT = "ISO_DATE_FORMAT"


class ErrorCode(str, Enum):
    """One code per rule in the evaluation chain, in priority order."""

    MANDATORY = "MANDATORY"
    MIN_LENGTH = "MIN_LENGTH"
    MAX_LENGTH = "MAX_LENGTH"
    SIZE = "SIZE"
    MIN_VALUE = "MIN_VALUE"
    MAX_VALUE = "MAX_VALUE"
    ISO_DATE = "ISO_DATE"
    DATE_FORMAT = "DATE_FORMAT"
    INVALID_DATE = "INVALID_DATE"
    ALLOWABLE_VALUE = "ALLOWABLE_VALUE"


class ConstraintDescriptor(BaseModel):
    """Constraints attached to a single attribute.

    Lengths are measured on ``str(value)``. ``min_value``/``max_value`` only
    apply to attributes declared with a numeric type.
    """

    model_config = ConfigDict(frozen=True)

    nullable: bool = True
    min: int = Field(default=0, ge=0, description="Minimum string length")
    max: int = Field(default=sys.maxsize, ge=0, description="Maximum string length")
    size: int = Field(default=0, ge=0, description="Exact string length, 0 = unused")
    min_value: float = -math.inf
    max_value: float = math.inf
    date_format: tuple[str, ...] = Field(
        default=(), description="Only the first pattern is consulted"
    )
    allowable_values: tuple[str, ...] = Field(
        default=(), description="Empty = unrestricted"
    )

    @field_validator("date_format", "allowable_values", mode="before")
    @classmethod
    def _accept_single_string(cls, value):
        if isinstance(value, str):
            return (value,)
        return value

    @property
    def uses_iso_date(self) -> bool:
        return bool(self.date_format) and self.date_format[0] == ISO_DATE_FORMAT


class Violation(BaseModel):
    """The first broken constraint found on a target."""

    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    field: str = Field(description="Resolved (alias-or-raw) attribute name")
    params: tuple = ()
