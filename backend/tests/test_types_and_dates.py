"""Tests for the numeric type gate and the date checks."""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

import pytest

from fieldcheck.validators.dates import is_iso8601, parse_custom_date
from fieldcheck.validators.types import is_numeric_type


class TestIsNumericType:
    @pytest.mark.parametrize("declared", [int, float, Optional[int], Optional[float], int | None])
    def test_eligible(self, declared) -> None:
        assert is_numeric_type(declared)

    @pytest.mark.parametrize("declared", [None, str, bool, Decimal, complex, Union[int, str], list[int]])
    def test_exempt(self, declared) -> None:
        assert not is_numeric_type(declared)


class TestIsIso8601:
    @pytest.mark.parametrize(
        "text",
        ["2023-01-15", "2023-01-15T00:00:00", "2023-01-15T00:00:00Z", "2023-01-15T10:30:00+02:00"],
    )
    def test_valid(self, text: str) -> None:
        assert is_iso8601(text)

    @pytest.mark.parametrize("text", ["", "not-a-date", "15/01/2023", "2023-13-01"])
    def test_invalid(self, text: str) -> None:
        assert not is_iso8601(text)


class TestParseCustomDate:
    def test_matching_pattern(self) -> None:
        assert parse_custom_date("15/01/2023", "%d/%m/%Y") == datetime(2023, 1, 15)

    def test_mismatch_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_custom_date("2023-01-15", "%d/%m/%Y")
