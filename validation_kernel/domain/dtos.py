"""
Validation outcome DTOs.

Pure, immutable value objects returned by matchers. No I/O, no exceptions:
a ValidationResult IS the error representation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ValidationErrorKind(str, Enum):
    """Category of a validation error."""

    INVALID_TYPE = "invalid_type"  # Value does not have the expected shape/type


@dataclass(frozen=True)
class ValidationError:
    """
    A single validation error.

    Contract:
        Carries a machine-readable code, human-readable message, an error
        kind, optional field path, and optional details dict.

    Guarantees:
        - Immutable (frozen dataclass)
        - code is always present (machine-readable error codes)

    Non-goals:
        - Does NOT raise exceptions -- it IS the error representation.
    """

    code: str
    message: str
    kind: ValidationErrorKind = ValidationErrorKind.INVALID_TYPE
    field: str | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True)
class ValidationResult:
    """
    Result of validation.

    Contract:
        Aggregates zero or more ValidationErrors in the order they were
        recorded. is_valid is True only when there are no errors.

    Guarantees:
        - Immutable (frozen dataclass); add_error returns a new result
        - errors is always a tuple (never None)
        - bool(result) == result.is_valid for convenience
    """

    errors: tuple[ValidationError, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_codes(self) -> tuple[str, ...]:
        """Codes of all recorded errors, in order."""
        return tuple(e.code for e in self.errors)

    @classmethod
    def success(cls) -> ValidationResult:
        """Create a successful validation result."""
        return cls(errors=())

    @classmethod
    def failure(cls, *errors: ValidationError) -> ValidationResult:
        """Create a failed validation result."""
        return cls(errors=tuple(errors))

    def add_error(
        self,
        code: str,
        message: str,
        kind: ValidationErrorKind = ValidationErrorKind.INVALID_TYPE,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> ValidationResult:
        """Return a new result with one more error appended."""
        error = ValidationError(
            code=code, message=message, kind=kind, field=field, details=details
        )
        return ValidationResult(errors=(*self.errors, error))

    def add_invalid_type_error(
        self, code: str, message: str, field: str | None = None
    ) -> ValidationResult:
        """Shorthand for add_error with kind INVALID_TYPE."""
        return self.add_error(
            code, message, kind=ValidationErrorKind.INVALID_TYPE, field=field
        )

    def __bool__(self) -> bool:
        return self.is_valid
