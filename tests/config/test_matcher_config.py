"""Tests for YAML matcher configuration (validation_config)."""

from pathlib import Path

import pytest
import yaml

from validation_config import (
    MatcherDefinition,
    build_matcher,
    compute_checksum,
    load_matcher_definitions,
    load_matchers,
    parse_matcher_definition,
)
from validation_kernel.domain.digit_limits import MaxDigits, MaxDigitsAndPlaces, NoLimit
from validation_kernel.exceptions import (
    InvalidMatcherDefinitionError,
    MatcherConfigurationError,
    UnknownMatcherTypeError,
)
from validation_kernel.matchers.decimal_number import DecimalNumberMatcher

SAMPLE_YAML = """
matchers:
  amount:
    type: decimal_number
    max_digits: 10
    max_places: 2
  quantity:
    type: decimal_number
    params: [5]
  free_form:
    type: decimal_number
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "matchers.yaml"
    path.write_text(SAMPLE_YAML)
    return path


class TestLoadMatcherDefinitions:
    def test_parses_all_entries(self, config_file):
        definitions = load_matcher_definitions(config_file)
        assert definitions == {
            "amount": MatcherDefinition("amount", "decimal_number", 10, 2),
            "quantity": MatcherDefinition("quantity", "decimal_number", 5, None),
            "free_form": MatcherDefinition("free_form", "decimal_number"),
        }

    def test_load_is_logged(self, config_file, captured_logs):
        definitions = load_matcher_definitions(config_file)
        records = [r for r in captured_logs() if r["message"] == "matcher_definitions_loaded"]
        assert len(records) == 1
        assert records[0]["matcher_count"] == 3
        assert records[0]["checksum"] == compute_checksum(definitions)
        assert records[0]["logger"] == "validation_kernel.config.loader"

    def test_each_definition_logged_with_rule_name(self, config_file, captured_logs):
        load_matcher_definitions(config_file)
        parsed = [r for r in captured_logs() if r["message"] == "matcher_definition_parsed"]
        assert [r["rule_name"] for r in parsed] == ["amount", "quantity", "free_form"]
        assert all(r["matcher_type"] == "decimal_number" for r in parsed)

    def test_invalid_definition_logged_and_raised(self, tmp_path, captured_logs):
        path = tmp_path / "bad_type.yaml"
        path.write_text("matchers:\n  amount:\n    type: date\n")
        with pytest.raises(UnknownMatcherTypeError):
            load_matcher_definitions(path)

        records = [r for r in captured_logs() if r["message"] == "matcher_definitions_invalid"]
        assert len(records) == 1
        assert records[0]["level"] == "ERROR"
        assert records[0]["exc_code"] == "UNKNOWN_MATCHER_TYPE"
        assert records[0]["exc_name"] == "amount"
        assert records[0]["exc_known_types"] == ["decimal_number"]
        assert records[0]["exc_params"] == []
        assert "traceback" in records[0]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_matcher_definitions(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_matcher_definitions(tmp_path / "nope.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("matchers: [unclosed")
        with pytest.raises(yaml.YAMLError):
            load_matcher_definitions(path)

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(InvalidMatcherDefinitionError):
            load_matcher_definitions(path)


class TestParseMatcherDefinition:
    def test_two_params(self):
        d = parse_matcher_definition("x", {"type": "decimal_number", "params": [7, 3]})
        assert (d.max_digits, d.max_places) == (7, 3)

    def test_empty_params(self):
        d = parse_matcher_definition("x", {"type": "decimal_number", "params": []})
        assert (d.max_digits, d.max_places) == (None, None)

    def test_unknown_type(self):
        with pytest.raises(UnknownMatcherTypeError) as exc_info:
            parse_matcher_definition("x", {"type": "date"})
        assert exc_info.value.code == "UNKNOWN_MATCHER_TYPE"
        assert exc_info.value.known_types == ("decimal_number",)

    @pytest.mark.parametrize(
        "data, reason",
        [
            (None, "mapping"),
            ({}, "type"),
            ({"type": "decimal_number", "params": [1, 2, 3]}, "at most 2"),
            ({"type": "decimal_number", "params": 5}, "list"),
            ({"type": "decimal_number", "params": [5], "max_digits": 5}, "not both"),
            ({"type": "decimal_number", "max_places": 2}, "requires max_digits"),
            ({"type": "decimal_number", "max_digits": "ten"}, "integer"),
            ({"type": "decimal_number", "max_digits": True}, "integer"),
        ],
    )
    def test_invalid_definitions(self, data, reason):
        with pytest.raises(InvalidMatcherDefinitionError, match=reason) as exc_info:
            parse_matcher_definition("x", data)
        assert exc_info.value.code == "INVALID_MATCHER_DEFINITION"
        assert exc_info.value.name == "x"

    def test_definition_errors_are_configuration_errors(self):
        with pytest.raises(MatcherConfigurationError):
            parse_matcher_definition("x", {"type": "decimal_number", "params": [1, 2, 3]})

    @pytest.mark.parametrize(
        "data, params",
        [
            ({"type": "date"}, ()),
            ({}, ()),
            ({"type": "decimal_number", "params": [1, 2, 3]}, (1, 2, 3)),
        ],
    )
    def test_params_and_reason_readable_through_base_class(self, data, params):
        with pytest.raises(MatcherConfigurationError) as exc_info:
            parse_matcher_definition("x", data)
        assert exc_info.value.params == params
        assert exc_info.value.reason
        assert exc_info.value.reason in str(exc_info.value)

    def test_unknown_type_reason(self):
        with pytest.raises(MatcherConfigurationError) as exc_info:
            parse_matcher_definition("x", {"type": "date"})
        assert exc_info.value.reason == "unknown type 'date'"


class TestBuildMatcher:
    @pytest.mark.parametrize(
        "definition, limits",
        [
            (MatcherDefinition("a", "decimal_number"), NoLimit()),
            (MatcherDefinition("a", "decimal_number", 4), MaxDigits(4)),
            (MatcherDefinition("a", "decimal_number", 4, 1), MaxDigitsAndPlaces(4, 1)),
        ],
    )
    def test_limits_follow_definition(self, definition, limits):
        matcher = build_matcher(definition)
        assert matcher == DecimalNumberMatcher(limits=limits, name="a")

    def test_unregistered_type(self):
        with pytest.raises(UnknownMatcherTypeError):
            build_matcher(MatcherDefinition("a", "string"))

    def test_load_matchers_end_to_end(self, config_file):
        matchers = load_matchers(config_file)
        assert set(matchers) == {"amount", "quantity", "free_form"}
        assert matchers["amount"].match("12345678.90").is_valid
        assert matchers["amount"].match("1.234").error_codes == ("doubleNumber.e003",)
        assert matchers["quantity"].match("123456").error_codes == ("doubleNumber.e002",)
        assert matchers["free_form"].match("12345678901").is_valid


class TestChecksum:
    def test_deterministic(self, config_file):
        a = compute_checksum(load_matcher_definitions(config_file))
        b = compute_checksum(load_matcher_definitions(config_file))
        assert a == b
        assert len(a) == 64

    def test_changes_with_content(self, config_file, tmp_path):
        other = tmp_path / "other.yaml"
        other.write_text(SAMPLE_YAML.replace("max_digits: 10", "max_digits: 12"))
        assert compute_checksum(load_matcher_definitions(config_file)) != compute_checksum(
            load_matcher_definitions(other)
        )
