"""Field validation engine — finds the first broken constraint on a target.

This is the main entry point. Attributes are scanned in declaration order and
the rule chain runs per attribute; the first violation found anywhere wins.

Usage:
    message = field_validator.validate(order)
    if message is not None:
        # e.g. "code length must be 4"
"""

import time
from typing import Any, Optional

from fieldcheck.logging_config import get_logger
from fieldcheck.validators.messages import ErrorFormatter
from fieldcheck.validators.metadata import ConstraintRegistry, default_registry, read_attributes
from fieldcheck.validators.models import Violation
from fieldcheck.validators.rules import RuleEvaluator

logger = get_logger(__name__)


class FieldValidator:
    """Composes metadata reading, rule evaluation, and message formatting.

    Design principles:
        - Deterministic: same target + descriptors → same output
        - Stateless: holds no reference to a target after a call returns
        - First violation wins: at most one message per call
    """

    def __init__(
        self,
        registry: Optional[ConstraintRegistry] = None,
        evaluator: Optional[RuleEvaluator] = None,
        formatter: Optional[ErrorFormatter] = None,
    ):
        """Initialize with defaults or custom collaborators.

        Args:
            registry: Field registration table. Defaults to the module registry.
            evaluator: Rule chain. Defaults to RuleEvaluator().
            formatter: Message renderer. Defaults to the built-in templates.
        """
        self.registry = registry if registry is not None else default_registry
        self.evaluator = evaluator or RuleEvaluator()
        self.formatter = formatter or ErrorFormatter()

    def find_violation(self, target: Any) -> Optional[Violation]:
        """Return the first violation on the target, or None if it is valid."""
        start_time = time.perf_counter()
        violation = None

        for reading in read_attributes(target, self.registry):
            violation = self.evaluator.evaluate(reading)
            if violation is not None:
                break

        logger.debug(
            "validation_complete",
            target_type=type(target).__name__,
            code=violation.code.value if violation else None,
            field=violation.field if violation else None,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )
        return violation

    def validate(self, target: Any) -> Optional[str]:
        """Validate a target.

        Args:
            target: Any object whose type is registered, or that exposes field_specs()

        Returns:
            Human-readable message for the first violation, or None if valid
        """
        violation = self.find_violation(target)
        if violation is None:
            return None
        return self.formatter.format(violation)


# Module-level singleton
field_validator = FieldValidator()


def validate(target: Any) -> Optional[str]:
    """Validate a target with the module-level validator."""
    return field_validator.validate(target)
