"""
DecimalNumberMatcher -- checks that a string is a decimal number (or empty)
within configured digit-count limits.

Contract:
    match(value) -> ValidationResult. Never raises for any input; problems
    are returned as ValidationErrors with stable codes:

        doubleNumber.e001  value is not a valid decimal number
        doubleNumber.e002  value has more digits than allowed
        doubleNumber.e003  value has more decimal places than allowed

    e001 short-circuits: no digit checks run on an unparseable value.
    e002 and e003 are independent and may both be reported, in that order.

    Empty values (None, "") are valid; presence is not this matcher's concern.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from validation_kernel.domain.decimal_parsing import (
    DecimalParseFailure,
    decimal_text,
    parse_decimal,
)
from validation_kernel.domain.digit_limits import (
    DigitLimits,
    MaxDigitsAndPlaces,
    NoLimit,
    digit_limits_from_params,
)
from validation_kernel.domain.dtos import ValidationError, ValidationResult
from validation_kernel.logging_config import LogContext, get_logger

logger = get_logger("matchers.decimal_number")


class DecimalNumberErrors:
    """Error catalog for DecimalNumberMatcher. Codes are part of the public contract."""

    INVALID_DECIMAL = ValidationError(
        code="doubleNumber.e001",
        message="The value is not a valid decimal number.",
    )
    MAX_DIGITS = ValidationError(
        code="doubleNumber.e002",
        message="The value exceeded maximum number of digits.",
    )
    MAX_PLACES = ValidationError(
        code="doubleNumber.e003",
        message="The value exceeded maximum number of decimal places.",
    )


@dataclass(frozen=True)
class DecimalNumberMatcher:
    """Matches decimal numbers; the decimal separator is always ".".

    Configure with a DigitLimits variant, or use from_params() for the
    positional form: no parameters, (max_digits) or (max_digits, max_places).
    ``name`` identifies the configured rule in log records.
    """

    limits: DigitLimits = field(default_factory=NoLimit)
    name: str | None = None

    @classmethod
    def from_params(cls, *params: Any, name: str | None = None) -> DecimalNumberMatcher:
        """Build a matcher from 0-2 positional limits."""
        return cls(limits=digit_limits_from_params(*params), name=name)

    def match(self, value: Any, field: str | None = None) -> ValidationResult:
        """Validate value; ``field`` is copied onto every recorded error."""
        result = ValidationResult.success()
        if not value:
            return result

        parsed = parse_decimal(decimal_text(value))
        if isinstance(parsed, DecimalParseFailure):
            with LogContext.bind(rule_name=self.name, field=field):
                logger.debug("decimal_parse_failed", extra={"reason": parsed.reason})
            return result.add_invalid_type_error(
                DecimalNumberErrors.INVALID_DECIMAL.code,
                DecimalNumberErrors.INVALID_DECIMAL.message,
                field=field,
            )

        limits = self.limits
        if parsed.precision > limits.max_digits:
            result = result.add_invalid_type_error(
                DecimalNumberErrors.MAX_DIGITS.code,
                DecimalNumberErrors.MAX_DIGITS.message,
                field=field,
            )
        if isinstance(limits, MaxDigitsAndPlaces) and parsed.decimal_places > limits.max_places:
            result = result.add_invalid_type_error(
                DecimalNumberErrors.MAX_PLACES.code,
                DecimalNumberErrors.MAX_PLACES.message,
                field=field,
            )

        if not result.is_valid:
            with LogContext.bind(rule_name=self.name, field=field):
                logger.debug(
                    "decimal_limits_exceeded",
                    extra={
                        "value": parsed.value,
                        "limits": type(limits).__name__,
                        "number_of_digits": parsed.precision,
                        "decimal_places": parsed.decimal_places,
                        "error_codes": list(result.error_codes),
                    },
                )
        return result

    def __call__(self, value: Any, field: str | None = None) -> ValidationResult:
        return self.match(value, field=field)
