"""Type classifier — decides which declared types get numeric range checks."""

import types
import typing
from typing import Any, Optional

# Python's float is double precision and also stands in for single precision.
NUMERIC_TYPES: frozenset[type] = frozenset({int, float})


def _unwrap_optional(declared_type: Any) -> Any:
    """Reduce ``Optional[X]`` / ``X | None`` to ``X``; leave anything else alone."""
    origin = typing.get_origin(declared_type)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(declared_type) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return declared_type


def is_numeric_type(declared_type: Optional[Any]) -> bool:
    """True only if the declared type is exactly one of the whitelisted numeric kinds.

    Identity check, not ``issubclass``: ``bool`` is an ``int`` subclass but is
    not eligible, and neither is ``Decimal`` or a numeric-looking ``str``.
    """
    if declared_type is None:
        return False
    return _unwrap_optional(declared_type) in NUMERIC_TYPES
