"""Date checks used by the date rule.

Patterns for custom formats use ``datetime.strptime`` directives, e.g.
``"%Y-%m-%d"``, not Java ``SimpleDateFormat`` letters (``yyyy-MM-dd``).
Descriptors carried over from Java-style patterns must be rewritten.

Parsing is strict: the whole text must match and out-of-range fields are
rejected. ``"2023-01-15T10:00"`` is an invalid date for ``"%Y-%m-%d"``, and
so is ``"2023-02-30"``; a lenient prefix parse with field roll-over would
accept both.

A parser is any callable ``(text, pattern) -> datetime | None`` that raises
``ValueError`` when the text does not match.
"""

from datetime import datetime
from typing import Callable, Optional

DateParser = Callable[[str, str], Optional[datetime]]


def is_iso8601(text: str) -> bool:
    """Check whether text is an ISO-8601 date or date-time string."""
    if not text:
        return False
    try:
        datetime.fromisoformat(text)
    except ValueError:
        return False
    return True


def parse_custom_date(text: str, pattern: str) -> datetime:
    """Parse text with a strptime pattern. Raises ValueError on mismatch."""
    return datetime.strptime(text, pattern)
