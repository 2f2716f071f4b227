"""
Configuration Loader (``validation_config.loader``).

Responsibility
--------------
Loads YAML matcher-definition files and parses them into typed
``validation_config.schema.MatcherDefinition`` instances.

File format
-----------
::

    matchers:
      amount:
        type: decimal_number
        max_digits: 10
        max_places: 2
      quantity:
        type: decimal_number
        params: [5]          # positional form: [], [max_digits] or
                             # [max_digits, max_places]

Invariants enforced
-------------------
* Every parsed object is a frozen dataclass from ``schema.py``.
* ``max_places`` is only accepted together with ``max_digits``.
* ``params`` and the named limit keys are mutually exclusive.
* ``compute_checksum`` produces a deterministic SHA-256 hash for
  configuration identity and change detection.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Unknown matcher type  -> ``UnknownMatcherTypeError``.
* Missing/malformed fields  -> ``InvalidMatcherDefinitionError``.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

import yaml

from validation_config.registry import known_matcher_types
from validation_config.schema import MatcherDefinition
from validation_kernel.exceptions import (
    InvalidMatcherDefinitionError,
    MatcherConfigurationError,
    UnknownMatcherTypeError,
)
from validation_kernel.logging_config import LogContext, get_logger

logger = get_logger("config.loader")

_LIMIT_KEYS = ("max_digits", "max_places")


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _require_int(name: str, key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidMatcherDefinitionError(
            name, f"{key} must be an integer, got {value!r}"
        )
    return value


def _limits_from_params(name: str, params: Any) -> tuple[int | None, int | None]:
    if not isinstance(params, list):
        raise InvalidMatcherDefinitionError(name, "params must be a list")
    if len(params) > 2:
        raise InvalidMatcherDefinitionError(
            name,
            f"params accepts at most 2 values, got {len(params)}",
            params=tuple(params),
        )
    values = [_require_int(name, "params", p) for p in params]
    values += [None] * (2 - len(values))
    return values[0], values[1]


def parse_matcher_definition(name: str, data: Any) -> MatcherDefinition:
    """
    Parse a ``MatcherDefinition`` from the mapping stored under ``name``.

    A null entry (``free_form:`` with no body) is rejected: the type is
    always required.
    """
    if not isinstance(data, dict):
        raise InvalidMatcherDefinitionError(name, "definition must be a mapping")
    if "type" not in data:
        raise InvalidMatcherDefinitionError(name, "missing required key 'type'")

    matcher_type = data["type"]
    if matcher_type not in known_matcher_types():
        raise UnknownMatcherTypeError(name, str(matcher_type), known_matcher_types())

    has_named = any(k in data for k in _LIMIT_KEYS)
    if "params" in data:
        if has_named:
            raise InvalidMatcherDefinitionError(
                name, "use either params or max_digits/max_places, not both"
            )
        max_digits, max_places = _limits_from_params(name, data["params"])
    else:
        max_digits = data.get("max_digits")
        max_places = data.get("max_places")
        if max_digits is not None:
            max_digits = _require_int(name, "max_digits", max_digits)
        if max_places is not None:
            if max_digits is None:
                raise InvalidMatcherDefinitionError(
                    name, "max_places requires max_digits"
                )
            max_places = _require_int(name, "max_places", max_places)

    return MatcherDefinition(
        name=name,
        matcher_type=matcher_type,
        max_digits=max_digits,
        max_places=max_places,
    )


def parse_matcher_definitions(data: dict[str, Any]) -> dict[str, MatcherDefinition]:
    """Parse the ``matchers`` section of a loaded YAML document.

    Each definition is parsed with ``rule_name`` bound in the log context.
    """
    if not isinstance(data, dict):
        raise InvalidMatcherDefinitionError("<document>", "top level must be a mapping")
    section = data.get("matchers") or {}
    if not isinstance(section, dict):
        raise InvalidMatcherDefinitionError("matchers", "section must be a mapping")
    definitions: dict[str, MatcherDefinition] = {}
    for name, body in section.items():
        with LogContext.bind(rule_name=str(name)):
            definitions[str(name)] = parse_matcher_definition(str(name), body)
            logger.debug(
                "matcher_definition_parsed",
                extra={"matcher_type": definitions[str(name)].matcher_type},
            )
    return definitions


def load_matcher_definitions(path: Path) -> dict[str, MatcherDefinition]:
    """Load and parse every matcher definition in a YAML file."""
    data = load_yaml_file(path)
    try:
        definitions = parse_matcher_definitions(data)
    except MatcherConfigurationError:
        logger.error(
            "matcher_definitions_invalid",
            extra={"path": str(path)},
            exc_info=True,
        )
        raise
    logger.info(
        "matcher_definitions_loaded",
        extra={
            "path": str(path),
            "matcher_count": len(definitions),
            "checksum": compute_checksum(definitions),
        },
    )
    return definitions


def compute_checksum(definitions: dict[str, MatcherDefinition]) -> str:
    """
    Compute SHA-256 checksum of the canonical JSON serialization.

    Identical definitions always produce identical checksums.
    """
    data = {name: asdict(d) for name, d in definitions.items()}
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
