"""Shared pytest fixtures for fieldcheck tests."""

from __future__ import annotations

import pytest

from fieldcheck.config import get_settings
from fieldcheck.logging_config import configure_logging
from fieldcheck.validators import ConstraintRegistry, FieldValidator


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging() -> None:
    configure_logging(debug=True, level="warning")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached; drop the cache around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry() -> ConstraintRegistry:
    """Empty registration table, isolated from the module default."""
    return ConstraintRegistry()


@pytest.fixture
def validator(registry: ConstraintRegistry) -> FieldValidator:
    return FieldValidator(registry=registry)
