"""
Matcher definition schema.

Human-authored, reviewable source artifact for matcher configuration. YAML
files are parsed into these types by the loader; the registry turns each
definition into exactly one matcher instance.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MatcherDefinition:
    """Declarative matcher configuration -- no executable logic."""

    name: str
    matcher_type: str  # e.g. "decimal_number"
    max_digits: int | None = None
    max_places: int | None = None  # Only meaningful together with max_digits
