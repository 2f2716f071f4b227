"""
Pure domain layer.

Value objects and pure functions with NO dependencies on I/O, clocks or
configuration files. All domain objects are immutable and deterministic.
"""

from validation_kernel.domain.decimal_parsing import (
    DecimalParseFailure,
    ParsedDecimal,
    count_decimal_places,
    count_precision,
    decimal_text,
    parse_decimal,
)
from validation_kernel.domain.digit_limits import (
    DEFAULT_MAX_DIGITS,
    DigitLimits,
    MaxDigits,
    MaxDigitsAndPlaces,
    NoLimit,
    digit_limits_from_params,
)
from validation_kernel.domain.dtos import (
    ValidationError,
    ValidationErrorKind,
    ValidationResult,
)

__all__ = [
    "DEFAULT_MAX_DIGITS",
    "DecimalParseFailure",
    "DigitLimits",
    "MaxDigits",
    "MaxDigitsAndPlaces",
    "NoLimit",
    "ParsedDecimal",
    "ValidationError",
    "ValidationErrorKind",
    "ValidationResult",
    "count_decimal_places",
    "count_precision",
    "decimal_text",
    "digit_limits_from_params",
    "parse_decimal",
]
