"""Value matchers. Each matcher returns a ValidationResult and never raises on input."""

from validation_kernel.matchers.decimal_number import (
    DecimalNumberErrors,
    DecimalNumberMatcher,
)

__all__ = [
    "DecimalNumberErrors",
    "DecimalNumberMatcher",
]
