"""Error formatter — renders a Violation into a fixed message template.

Templates are plain ``str.format`` strings: ``{field}`` is the resolved
attribute name and ``{0}`` the rule parameter. No escaping is applied.
Pass a replacement table to ``ErrorFormatter`` to localize messages.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

from fieldcheck.validators.models import ErrorCode, Violation

MESSAGE_TEMPLATES: Mapping[ErrorCode, str] = MappingProxyType({
    ErrorCode.MANDATORY: "{field} cannot be null",
    ErrorCode.MIN_LENGTH: "{field} minimum length is {0}",
    ErrorCode.MAX_LENGTH: "{field} maximum length is {0}",
    ErrorCode.SIZE: "{field} length must be {0}",
    ErrorCode.MIN_VALUE: "{field} must be greater than or equal to {0}",
    ErrorCode.MAX_VALUE: "{field} must be less than or equal to {0}",
    ErrorCode.ISO_DATE: "{field} date format must be ISO 8601",
    ErrorCode.DATE_FORMAT: "{field} date format must be {0}",
    ErrorCode.INVALID_DATE: "{field} invalid date",
    ErrorCode.ALLOWABLE_VALUE: "{field} value must be {0}",
})


class ErrorFormatter:
    """Turns violations into human-readable messages."""

    def __init__(self, templates: Optional[Mapping[ErrorCode, str]] = None):
        """Initialize with the default templates or a replacement table.

        Args:
            templates: Optional table covering every ErrorCode.

        Raises:
            ValueError: If the replacement table is missing any code.
        """
        if templates is None:
            self.templates = MESSAGE_TEMPLATES
        else:
            missing = [code.value for code in ErrorCode if code not in templates]
            if missing:
                raise ValueError(f"Message templates missing for: {', '.join(missing)}")
            self.templates = MappingProxyType(dict(templates))

    def format(self, violation: Violation) -> str:
        template = self.templates[ErrorCode(violation.code)]
        return template.format(*violation.params, field=violation.field)
