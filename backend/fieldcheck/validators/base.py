"""Base rule — abstract class implementing the Strategy Pattern.

Each rule is a standalone, independently testable unit. The evaluator runs
them in a fixed priority order.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from fieldcheck.validators.metadata import AttributeReading
from fieldcheck.validators.models import ErrorCode, Violation


class BaseRule(ABC):
    """Abstract base for all attribute rules.

    Contract:
        - check() is deterministic: same reading → same output
        - check() returns a Violation or None, it never raises
        - check() is only called with a non-None value, except by MandatoryRule
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def check(self, reading: AttributeReading) -> Optional[Violation]:
        """Check one attribute against its descriptor.

        Args:
            reading: Resolved name, current value, descriptor, declared type

        Returns:
            The Violation for this rule, or None if the rule is satisfied
        """
        ...

    # ── Helper Methods ──

    def _violation(self, code: ErrorCode, reading: AttributeReading, *params: Any) -> Violation:
        """Convenience method to create a Violation."""
        return Violation(code=code, field=reading.name, params=params)

    def _text(self, value: Any) -> str:
        """String form every length/date/membership check works on."""
        return str(value)
