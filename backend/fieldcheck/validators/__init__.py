"""Field validator — first-violation-wins constraint checks on registered types.

Usage:
    from fieldcheck.validators import ConstraintDescriptor, default_registry, validate

    @default_registry.constrained(code=ConstraintDescriptor(nullable=False, size=4))
    class Order(BaseModel):
        code: Optional[str] = None

    message = validate(Order(code="AB"))   # "code length must be 4"
"""

from fieldcheck.validators.engine import FieldValidator, field_validator, validate
from fieldcheck.validators.messages import MESSAGE_TEMPLATES, ErrorFormatter
from fieldcheck.validators.metadata import (
    AttributeReading,
    ConstraintRegistry,
    FieldSpec,
    default_registry,
    read_attributes,
)
from fieldcheck.validators.models import ISO_DATE_FORMAT, ConstraintDescriptor, ErrorCode, Violation
from fieldcheck.validators.rules import RuleEvaluator
from fieldcheck.validators.types import is_numeric_type

__all__ = [
    "FieldValidator",
    "field_validator",
    "validate",
    "MESSAGE_TEMPLATES",
    "ErrorFormatter",
    "AttributeReading",
    "ConstraintRegistry",
    "FieldSpec",
    "default_registry",
    "read_attributes",
    "ISO_DATE_FORMAT",
    "ConstraintDescriptor",
    "ErrorCode",
    "Violation",
    "RuleEvaluator",
    "is_numeric_type",
]
