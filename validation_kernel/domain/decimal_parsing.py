"""
Decimal parsing -- pure string-to-Decimal conversion with digit statistics.

Parsing returns a tagged result (ParsedDecimal | DecimalParseFailure) rather
than raising. Only plain positional notation is accepted:

    [+-]? ( digits [ "." digits? ] | "." digits )

No whitespace, exponents, underscores, NaN or Infinity. The "." is the only
decimal separator.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


@dataclass(frozen=True)
class ParsedDecimal:
    """A successfully parsed decimal and its digit statistics.

    Counts are computed once, at parse time.
    """

    value: Decimal
    precision: int
    decimal_places: int

    @classmethod
    def from_decimal(cls, value: Decimal) -> ParsedDecimal:
        return cls(
            value=value,
            precision=count_precision(value),
            decimal_places=count_decimal_places(value),
        )


@dataclass(frozen=True)
class DecimalParseFailure:
    """Input text that is not a decimal number."""

    text: str
    reason: str


DecimalParseOutcome = ParsedDecimal | DecimalParseFailure


def _normalized_digits(value: Decimal) -> tuple[tuple[int, ...], int]:
    """Digit tuple and exponent with trailing fractional zeros removed.

    Trailing zeros of the integer part are kept: 100 stays (1, 0, 0), exp 0.
    """
    _, digits, exponent = value.as_tuple()
    assert isinstance(exponent, int), "finite decimal expected"
    digits = list(digits)
    while exponent < 0 and len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    return tuple(digits), exponent


def count_precision(value: Decimal) -> int:
    """Total number of digits in the normalized value.

    Leading zeros are not counted, trailing integer zeros are. Zero is 1.
    """
    if value.is_zero():
        return 1
    digits, exponent = _normalized_digits(value)
    if exponent > 0:
        return len(digits) + exponent
    return len(digits)


def count_decimal_places(value: Decimal) -> int:
    """Number of digits after the decimal point, ignoring trailing zeros."""
    if value.is_zero():
        return 0
    _, exponent = _normalized_digits(value)
    return max(0, -exponent)


def parse_decimal(text: str) -> DecimalParseOutcome:
    """Parse text into a ParsedDecimal, or describe why it is not one."""
    if not _DECIMAL_PATTERN.fullmatch(text):
        return DecimalParseFailure(text=text, reason="not a plain decimal literal")
    try:
        value = Decimal(text)
    except InvalidOperation:
        return DecimalParseFailure(text=text, reason="rejected by decimal constructor")
    return ParsedDecimal.from_decimal(value)


def decimal_text(value: Any) -> str:
    """Positional text for a non-string value handed to a matcher.

    Floats go through their shortest repr and Decimals are rendered without
    an exponent, so 1e-07 becomes "0.0000001" rather than "1e-07".
    """
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        value = Decimal(repr(value))
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)
