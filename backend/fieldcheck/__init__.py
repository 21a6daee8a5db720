"""fieldcheck — declarative, metadata-driven attribute validation."""

import logging

from fieldcheck.entities import BaseEntity
from fieldcheck.validators import (
    ISO_DATE_FORMAT,
    ConstraintDescriptor,
    ConstraintRegistry,
    FieldSpec,
    FieldValidator,
    default_registry,
    validate,
)

logging.getLogger("fieldcheck").addHandler(logging.NullHandler())

__all__ = [
    "BaseEntity",
    "ISO_DATE_FORMAT",
    "ConstraintDescriptor",
    "ConstraintRegistry",
    "FieldSpec",
    "FieldValidator",
    "default_registry",
    "validate",
]
