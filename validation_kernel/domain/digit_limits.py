"""
Digit-count limits for decimal matchers.

A matcher is configured with exactly one of three explicit variants instead
of a positional parameter list whose length decides the meaning:

    NoLimit()                        -- default maximum of total digits (11)
    MaxDigits(max_digits)            -- caller-supplied maximum of total digits
    MaxDigitsAndPlaces(max_digits, max_places)
                                     -- both limits apply independently

Limit values are accepted as-is; zero or negative limits simply produce
matchers that reject every non-empty number.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from validation_kernel.exceptions import MatcherConfigurationError

DEFAULT_MAX_DIGITS = 11


@dataclass(frozen=True)
class NoLimit:
    """Use the default maximum number of digits."""

    @property
    def max_digits(self) -> int:
        return DEFAULT_MAX_DIGITS


@dataclass(frozen=True)
class MaxDigits:
    """Limit the total number of digits."""

    max_digits: int


@dataclass(frozen=True)
class MaxDigitsAndPlaces:
    """Limit the total number of digits and the number of decimal places."""

    max_digits: int
    max_places: int


DigitLimits = NoLimit | MaxDigits | MaxDigitsAndPlaces


def digit_limits_from_params(*params: Any) -> DigitLimits:
    """Translate a 0-2 item positional parameter list into a DigitLimits.

    Raises:
        MatcherConfigurationError: more than two parameters were given.
    """
    if len(params) == 0:
        return NoLimit()
    if len(params) == 1:
        return MaxDigits(max_digits=params[0])
    if len(params) == 2:
        return MaxDigitsAndPlaces(max_digits=params[0], max_places=params[1])
    raise MatcherConfigurationError(
        f"expected at most 2 parameters, got {len(params)}", params=params
    )
