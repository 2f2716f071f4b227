"""
Typed Exception Hierarchy for the Validation Kernel.

===============================================================================
ERRORS AS DATA VS. ERRORS AS EXCEPTIONS
===============================================================================

Matchers never raise for bad *input*. A value that is not a decimal, or that
has too many digits, is reported as a ValidationError inside the returned
ValidationResult.

Exceptions are reserved for bad *configuration*: a matcher built with
parameters it cannot interpret, or a YAML definition that names an unknown
matcher type. These are programming/deployment problems and must surface
loudly, at construction time, not as validation errors on user data.

Every exception carries:
  1. A TYPED class (catch by type, not message)
  2. A CODE class attribute (machine-readable, API-safe)
  3. Structured DATA as attributes (not just a message string)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    ValidationKernelError (base)
    |
    +-- MatcherConfigurationError
        +-- UnknownMatcherTypeError
        +-- InvalidMatcherDefinitionError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Code                            | When Raised
--------------------------------|----------------------------------------------
MATCHER_CONFIGURATION_INVALID   | Matcher parameters cannot be interpreted
UNKNOWN_MATCHER_TYPE            | Definition names a matcher type not registered
INVALID_MATCHER_DEFINITION      | Definition fields are missing or malformed

===============================================================================
"""

from typing import Any


class ValidationKernelError(Exception):
    """
    Base exception for all validation kernel errors.

    All subclasses must have a `code` class attribute
    for machine-readable error identification.
    """

    code: str = "VALIDATION_KERNEL_ERROR"


class MatcherConfigurationError(ValidationKernelError):
    """Matcher parameters cannot be interpreted.

    Every subclass carries ``params`` (the offending positional limits,
    empty when none were given) and ``reason``.
    """

    code: str = "MATCHER_CONFIGURATION_INVALID"

    def __init__(
        self,
        reason: str,
        params: tuple[Any, ...] = (),
        message: str | None = None,
    ):
        self.params = params
        self.reason = reason
        super().__init__(message or f"Invalid matcher parameters {params!r}: {reason}")


class UnknownMatcherTypeError(MatcherConfigurationError):
    """Matcher definition names a type that is not registered."""

    code: str = "UNKNOWN_MATCHER_TYPE"

    def __init__(self, name: str, matcher_type: str, known_types: tuple[str, ...]):
        self.name = name
        self.matcher_type = matcher_type
        self.known_types = known_types
        super().__init__(
            f"unknown type '{matcher_type}'",
            message=(
                f"Matcher '{name}' has unknown type '{matcher_type}' "
                f"(known: {', '.join(known_types)})"
            ),
        )


class InvalidMatcherDefinitionError(MatcherConfigurationError):
    """Matcher definition fields are missing or malformed."""

    code: str = "INVALID_MATCHER_DEFINITION"

    def __init__(self, name: str, reason: str, params: tuple[Any, ...] = ()):
        self.name = name
        super().__init__(
            reason,
            params=params,
            message=f"Invalid definition for matcher '{name}': {reason}",
        )
