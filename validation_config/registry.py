"""
Matcher registry -- maps definition types to matcher factories.

Each MatcherDefinition becomes exactly one matcher. Nothing here combines
matchers; callers decide how to apply them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from validation_config.schema import MatcherDefinition
from validation_kernel.domain.digit_limits import (
    DigitLimits,
    MaxDigits,
    MaxDigitsAndPlaces,
    NoLimit,
)
from validation_kernel.exceptions import UnknownMatcherTypeError
from validation_kernel.matchers.decimal_number import DecimalNumberMatcher


def digit_limits_for(definition: MatcherDefinition) -> DigitLimits:
    """Translate the optional limit fields of a definition into a DigitLimits."""
    if definition.max_digits is None:
        return NoLimit()
    if definition.max_places is None:
        return MaxDigits(max_digits=definition.max_digits)
    return MaxDigitsAndPlaces(
        max_digits=definition.max_digits,
        max_places=definition.max_places,
    )


def _build_decimal_number(definition: MatcherDefinition) -> DecimalNumberMatcher:
    return DecimalNumberMatcher(
        limits=digit_limits_for(definition), name=definition.name
    )


MATCHER_BUILDERS: dict[str, Callable[[MatcherDefinition], Any]] = {
    "decimal_number": _build_decimal_number,
}


def known_matcher_types() -> tuple[str, ...]:
    return tuple(sorted(MATCHER_BUILDERS))


def build_matcher(definition: MatcherDefinition) -> Any:
    """
    Build the matcher described by a definition.

    Raises:
        UnknownMatcherTypeError: definition.matcher_type is not registered.
    """
    builder = MATCHER_BUILDERS.get(definition.matcher_type)
    if builder is None:
        raise UnknownMatcherTypeError(
            definition.name, definition.matcher_type, known_matcher_types()
        )
    return builder(definition)
