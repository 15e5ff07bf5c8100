"""Validation Engine: walks a document against a rule registry and produces a report.

This is the main entry point for document validation. The engine holds no
per-call state; the same engine can validate many documents against many
registries, concurrently.

Usage:
    engine = ValidationEngine()
    report = engine.validate(registry, '{"username": "john_doe"}')
    if not report.is_valid:
        for message in report.messages:
            ...
"""

import json
import math
import time
from typing import Any, Mapping, Optional, Union

import structlog

from jsonrules.validators.base import BaseKindChecker
from jsonrules.validators.coercion import describe_kind, format_value, values_equal
from jsonrules.validators.models import (
    ErrorCode,
    Rule,
    RuleKind,
    ValidationReport,
    Violation,
)
from jsonrules.validators.registry import RuleRegistry

# Import all checkers
from jsonrules.validators.array_checker import ArrayChecker
from jsonrules.validators.boolean_checker import BooleanChecker
from jsonrules.validators.number_checker import NumberChecker
from jsonrules.validators.string_checker import StringChecker

logger = structlog.get_logger()

Document = Union[str, bytes, bytearray, Mapping[str, Any]]


class DocumentParseError(ValueError):
    """Raised internally when the document text is not a JSON object."""


def _reject_constant(name: str) -> Any:
    raise DocumentParseError(f"invalid literal {name}")


def _parse_float(text: str) -> float:
    number = float(text)
    if not math.isfinite(number):
        raise DocumentParseError(f"number {text} is out of range")
    return number


def _parse_int(text: str) -> int:
    number = int(text)
    try:
        float(number)
    except OverflowError as e:
        raise DocumentParseError(f"number {text[:32]}... is out of range") from e
    return number


def parse_document(document: Document) -> Mapping[str, Any]:
    """Decode JSON text into its top-level mapping.

    Mappings are passed through unchanged.

    Raises:
        DocumentParseError: On syntax errors, NaN/Infinity literals, numbers
            outside the float range, or a top level that is not an object.
    """
    if isinstance(document, Mapping):
        return document
    try:
        parsed = json.loads(
            document,
            parse_constant=_reject_constant,
            parse_float=_parse_float,
            parse_int=_parse_int,
        )
    except DocumentParseError:
        raise
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise DocumentParseError(str(e)) from e
    if not isinstance(parsed, dict):
        raise DocumentParseError(
            f"top-level value must be an object, got {describe_kind(parsed)}"
        )
    return parsed


class ValidationEngine:
    """Dispatches each rule to the checker for its kind and collects violations.

    Design principles:
        - Deterministic: rule order in → violation order out
        - Total: malformed documents produce a report, never an exception
        - Per-field short-circuit: a wrong-kind value stops that field only
    """

    def __init__(self, checkers: Optional[dict[RuleKind, BaseKindChecker]] = None):
        """Initialize with default checkers or a custom map.

        Args:
            checkers: Optional map of kind → checker. Must cover every RuleKind.

        Raises:
            ValueError: If a RuleKind has no checker.
        """
        self.checkers = self._default_checkers() if checkers is None else checkers
        missing = [kind.value for kind in RuleKind if kind not in self.checkers]
        if missing:
            raise ValueError(f"No checker registered for rule kind(s): {', '.join(missing)}")

    @staticmethod
    def _default_checkers() -> dict[RuleKind, BaseKindChecker]:
        """Create the default checker for every rule kind."""
        number_checker = NumberChecker()
        return {
            RuleKind.STRING: StringChecker(),
            RuleKind.NUMBER: number_checker,
            RuleKind.INTEGER: number_checker,
            RuleKind.BOOLEAN: BooleanChecker(),
            RuleKind.ARRAY: ArrayChecker(),
        }

    def validate(self, registry: RuleRegistry, document: Document) -> ValidationReport:
        """Validate a document against every rule of the registry.

        Args:
            registry: Rules to apply, in reporting order
            document: JSON text (str or UTF-8 bytes) or an already decoded mapping

        Returns:
            ValidationReport with validity flag and ordered violations
        """
        start_time = time.perf_counter()

        try:
            data = parse_document(document)
        except DocumentParseError as e:
            logger.warning("document_parse_failed", schema=registry.name, error=str(e))
            return ValidationReport.build([
                Violation(code=ErrorCode.PARSE_ERROR, message=f"Invalid JSON: {e}")
            ])

        rules = registry.all_rules()
        violations: list[Violation] = []
        for rule in rules:
            violations.extend(self._check_field(rule, data))

        report = ValidationReport.build(violations)

        logger.info(
            "validation_complete",
            schema=registry.name,
            is_valid=report.is_valid,
            rules=len(rules),
            total_violations=len(violations),
            summary=report.summary,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )

        return report

    def _check_field(self, rule: Rule, data: Mapping[str, Any]) -> list[Violation]:
        """All checks for one field; returns early at each short-circuit point."""
        if rule.field_name not in data:
            if rule.required:
                return [Violation(
                    code=ErrorCode.REQUIRED_MISSING,
                    field=rule.field_name,
                    message=f"Field '{rule.field_name}' is required",
                )]
            return []

        value = data[rule.field_name]
        checker = self.checkers[rule.kind]
        if not checker.accepts(value):
            return [checker.type_violation(rule)]

        errors = checker.check(rule, value)
        errors.extend(self._check_enum(rule, value))
        return errors

    @staticmethod
    def _check_enum(rule: Rule, value: Any) -> list[Violation]:
        if not rule.enum:
            return []
        if any(values_equal(value, allowed, strict=rule.strict_enum) for allowed in rule.enum):
            return []
        return [Violation(
            code=ErrorCode.ENUM_MISMATCH,
            field=rule.field_name,
            message=f"Field '{rule.field_name}' must be one of {format_value(list(rule.enum))}",
        )]


# Module-level singleton
validation_engine = ValidationEngine()
