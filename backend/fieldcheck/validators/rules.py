"""Attribute rules and the evaluator that chains them.

Order matters: the evaluator returns the first violation in this order.

    1. Mandatory: non-nullable attribute is None or ""
    2. (absent value): None stops the chain with no violation
    3. MinLength: len(str(value)) < min
    4. MaxLength: len(str(value)) > max
    5. Size: size > 0 and len(str(value)) != size
    6. MinValue: numeric-declared attributes only
    7. MaxValue: numeric-declared attributes only
    8. Date: ISO-8601 sentinel or custom strptime pattern
    9. AllowableValue: str(value) not in allowable_values
"""

from decimal import Decimal, InvalidOperation
from typing import Optional

from fieldcheck.config import get_settings
from fieldcheck.logging_config import get_logger
from fieldcheck.validators.base import BaseRule
from fieldcheck.validators.dates import DateParser, is_iso8601, parse_custom_date
from fieldcheck.validators.metadata import AttributeReading
from fieldcheck.validators.models import ErrorCode, Violation
from fieldcheck.validators.types import is_numeric_type

logger = get_logger(__name__)


class MandatoryRule(BaseRule):
    """Non-nullable attributes must hold a non-empty value."""

    @property
    def name(self) -> str:
        return "MandatoryRule"

    def check(self, reading: AttributeReading) -> Optional[Violation]:
        if reading.descriptor.nullable:
            return None
        if reading.value is None or self._text(reading.value) == "":
            return self._violation(ErrorCode.MANDATORY, reading)
        return None


class MinLengthRule(BaseRule):

    @property
    def name(self) -> str:
        return "MinLengthRule"

    def check(self, reading: AttributeReading) -> Optional[Violation]:
        minimum = reading.descriptor.min
        if minimum > len(self._text(reading.value)):
            return self._violation(ErrorCode.MIN_LENGTH, reading, minimum)
        return None


class MaxLengthRule(BaseRule):

    @property
    def name(self) -> str:
        return "MaxLengthRule"

    def check(self, reading: AttributeReading) -> Optional[Violation]:
        maximum = reading.descriptor.max
        if maximum < len(self._text(reading.value)):
            return self._violation(ErrorCode.MAX_LENGTH, reading, maximum)
        return None


class SizeRule(BaseRule):
    """Exact length; size 0 means unused."""

    @property
    def name(self) -> str:
        return "SizeRule"

    def check(self, reading: AttributeReading) -> Optional[Violation]:
        size = reading.descriptor.size
        if size > 0 and size != len(self._text(reading.value)):
            return self._violation(ErrorCode.SIZE, reading, size)
        return None


class _NumericRangeRule(BaseRule):
    """Shared gate for MinValue/MaxValue: declared numeric type, parseable value.

    Values are compared as Decimal so large ints keep every digit; Decimal
    against the float bound is an exact comparison.
    """

    def _number(self, reading: AttributeReading) -> Optional[Decimal]:
        if not is_numeric_type(reading.declared_type):
            return None
        try:
            number = Decimal(self._text(reading.value))
        except InvalidOperation:
            number = None
        if number is None or number.is_nan():
            logger.warning(
                "numeric_value_unparseable",
                attribute=reading.name,
                value=self._text(reading.value),
            )
            return None
        return number


class MinValueRule(_NumericRangeRule):

    @property
    def name(self) -> str:
        return "MinValueRule"

    def check(self, reading: AttributeReading) -> Optional[Violation]:
        number = self._number(reading)
        if number is not None and reading.descriptor.min_value > number:
            return self._violation(ErrorCode.MIN_VALUE, reading, reading.descriptor.min_value)
        return None


class MaxValueRule(_NumericRangeRule):

    @property
    def name(self) -> str:
        return "MaxValueRule"

    def check(self, reading: AttributeReading) -> Optional[Violation]:
        number = self._number(reading)
        if number is not None and reading.descriptor.max_value < number:
            return self._violation(ErrorCode.MAX_VALUE, reading, reading.descriptor.max_value)
        return None


class DateRule(BaseRule):
    """ISO-8601 sentinel check or custom-pattern parse of the first date_format."""

    def __init__(self, parser: Optional[DateParser] = None):
        self.parser = parser or parse_custom_date

    @property
    def name(self) -> str:
        return "DateRule"

    def check(self, reading: AttributeReading) -> Optional[Violation]:
        descriptor = reading.descriptor
        if not descriptor.date_format:
            return None

        text = self._text(reading.value)
        if descriptor.uses_iso_date:
            if not is_iso8601(text):
                return self._violation(ErrorCode.ISO_DATE, reading)
            return None

        pattern = descriptor.date_format[0]
        try:
            parsed = self.parser(text, pattern)
        except ValueError:
            return self._violation(ErrorCode.INVALID_DATE, reading)
        if parsed is None:
            return self._violation(ErrorCode.DATE_FORMAT, reading, pattern)
        return None


class AllowableValueRule(BaseRule):

    def __init__(self, separator: Optional[str] = None):
        self.separator = separator if separator is not None else get_settings().ALLOWABLE_VALUES_SEPARATOR

    @property
    def name(self) -> str:
        return "AllowableValueRule"

    def check(self, reading: AttributeReading) -> Optional[Violation]:
        allowed = reading.descriptor.allowable_values
        if allowed and self._text(reading.value) not in allowed:
            return self._violation(ErrorCode.ALLOWABLE_VALUE, reading, self.separator.join(allowed))
        return None


class RuleEvaluator:
    """Runs the fixed rule chain for one attribute and returns the first violation."""

    def __init__(self, date_parser: Optional[DateParser] = None):
        self.mandatory_rule = MandatoryRule()
        self.rules = self._default_rules(date_parser)

    @staticmethod
    def _default_rules(date_parser: Optional[DateParser]) -> list[BaseRule]:
        """Rules that only apply once a value is present, in priority order."""
        return [
            MinLengthRule(),
            MaxLengthRule(),
            SizeRule(),
            MinValueRule(),
            MaxValueRule(),
            DateRule(date_parser),
            AllowableValueRule(),
        ]

    def evaluate(self, reading: AttributeReading) -> Optional[Violation]:
        violation = self.mandatory_rule.check(reading)
        if violation is not None:
            return violation

        # Absent value: nothing else applies to this attribute
        if reading.value is None:
            return None

        for rule in self.rules:
            violation = rule.check(reading)
            if violation is not None:
                return violation
        return None
