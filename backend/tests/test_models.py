"""Tests for the rule and report models."""

import pytest
from pydantic import ValidationError

from jsonrules.validators.models import (
    ErrorCode,
    Rule,
    RuleKind,
    ValidationReport,
    Violation,
)


def test_rule_accepts_schema_spellings():
    rule = Rule.model_validate({
        "field": "username",
        "type": "string",
        "required": True,
        "minLength": 3,
        "maxLength": 20,
        "strictEnum": True,
    })

    assert rule.field_name == "username"
    assert rule.kind is RuleKind.STRING
    assert (rule.min_length, rule.max_length) == (3, 20)
    assert rule.strict_enum is True


def test_rule_defaults():
    rule = Rule(field_name="age", kind=RuleKind.INTEGER)

    assert rule.required is False
    assert rule.min is None and rule.max is None
    assert rule.pattern is None
    assert rule.enum == ()
    assert rule.description == ""


def test_rule_is_immutable():
    rule = Rule(field_name="age", kind=RuleKind.INTEGER)

    with pytest.raises(ValidationError):
        rule.required = True


def test_enum_list_is_stored_as_tuple():
    rule = Rule(field_name="country", kind=RuleKind.STRING, enum=["USA", "UK"])

    assert rule.enum == ("USA", "UK")


def test_null_enum_and_empty_pattern_mean_unset():
    rule = Rule.model_validate({"field": "x", "type": "string", "enum": None, "pattern": ""})

    assert rule.enum == ()
    assert rule.pattern is None


@pytest.mark.parametrize(
    "data",
    [
        {"field": "x", "type": "object"},
        {"field": "", "type": "string"},
        {"field": "x", "type": "string", "minLength": -1},
        {"field": "x", "type": "string", "pattern": "([a-z"},
        {"type": "string"},
    ],
)
def test_invalid_rules_are_rejected(data):
    with pytest.raises(ValidationError):
        Rule.model_validate(data)


def test_min_above_max_is_not_checked():
    rule = Rule(field_name="n", kind=RuleKind.NUMBER, min=10, max=1)

    assert (rule.min, rule.max) == (10, 1)


def test_type_labels():
    assert RuleKind.STRING.type_label == "string"
    assert RuleKind.NUMBER.type_label == "number"
    assert RuleKind.INTEGER.type_label == "number"
    assert RuleKind.BOOLEAN.type_label == "boolean"
    assert RuleKind.ARRAY.type_label == "array"


def test_report_build_counts_codes_and_keeps_order():
    violations = [
        Violation(code=ErrorCode.TOO_SHORT, field="a", message="Field 'a' must have at least 3 characters"),
        Violation(code=ErrorCode.BELOW_MIN, field="b", message="Field 'b' must be >= 1"),
        Violation(code=ErrorCode.TOO_SHORT, field="c", message="Field 'c' must have at least 8 characters"),
    ]
    report = ValidationReport.build(violations)

    assert report.is_valid is False
    assert report.summary == {"TOO_SHORT": 2, "BELOW_MIN": 1}
    assert [v.field for v in report.violations] == ["a", "b", "c"]
    assert report.verdict == "FAIL: 3 violation(s) across 3 field(s)."


def test_report_build_for_parse_error():
    report = ValidationReport.build([
        Violation(code=ErrorCode.PARSE_ERROR, message="Invalid JSON: Expecting value")
    ])

    assert report.verdict == "FAIL: Invalid JSON: Expecting value"
    assert report.as_tuple() == (False, ["Invalid JSON: Expecting value"])


def test_empty_report_passes():
    report = ValidationReport.build([])

    assert report.is_valid is True
    assert report.summary == {}
    assert report.verdict.startswith("PASS")
