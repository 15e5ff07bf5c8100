"""Document Validator: deterministic, field-by-field validation of JSON objects.

Usage:
    from jsonrules.validators import Rule, RuleKind, RuleRegistry, validation_engine

    registry = RuleRegistry()
    registry.add_rule(Rule(field_name="age", kind=RuleKind.INTEGER, required=True, min=18))
    report = validation_engine.validate(registry, '{"age": 15}')
    if not report.is_valid:
        print(report.messages)
"""

from jsonrules.validators.engine import ValidationEngine, validation_engine
from jsonrules.validators.models import (
    ErrorCode,
    Rule,
    RuleKind,
    ValidationReport,
    Violation,
)
from jsonrules.validators.registry import RuleRegistry
from jsonrules.validators.schemas import SchemaLoadError, load_schema, load_schema_file

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "ValidationReport",
    "Violation",
    "ErrorCode",
    "Rule",
    "RuleKind",
    "RuleRegistry",
    "SchemaLoadError",
    "load_schema",
    "load_schema_file",
]
