"""
validation_config -- YAML-driven matcher configuration.

Responsibility:
    Turns reviewable YAML matcher definitions into ready-to-use matcher
    instances. Each named definition yields exactly one matcher; this
    package never combines matchers into record or schema validation.

Architecture position:
    Sits above ``validation_kernel``. The kernel MUST NEVER import from
    ``validation_config``.

Failure modes:
    - ``FileNotFoundError`` -- configuration file does not exist.
    - ``yaml.YAMLError`` -- file is not valid YAML.
    - ``MatcherConfigurationError`` subclasses -- unknown matcher type or
      malformed definition.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from validation_config.loader import (
    compute_checksum,
    load_matcher_definitions,
    parse_matcher_definition,
)
from validation_config.registry import build_matcher
from validation_config.schema import MatcherDefinition


def load_matchers(path: Path) -> dict[str, Any]:
    """Load a YAML file and build one matcher per named definition."""
    definitions = load_matcher_definitions(Path(path))
    return {name: build_matcher(d) for name, d in definitions.items()}


__all__ = [
    "MatcherDefinition",
    "build_matcher",
    "compute_checksum",
    "load_matcher_definitions",
    "load_matchers",
    "parse_matcher_definition",
]
