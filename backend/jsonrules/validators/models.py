"""Validation models: rule kinds, error codes, rules, violations and the report.

All validation is deterministic: same registry + same document → same report.
"""

import re
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RuleKind(str, Enum):
    """Closed set of value kinds a rule can require."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"

    @property
    def type_label(self) -> str:
        """Kind name used in wrong-type messages. Integers share the number label."""
        if self is RuleKind.INTEGER:
            return RuleKind.NUMBER.value
        return self.value


class ErrorCode(str, Enum):
    """Reason code for every violation the engine can emit."""

    REQUIRED_MISSING = "REQUIRED_MISSING"
    WRONG_TYPE = "WRONG_TYPE"
    BELOW_MIN = "BELOW_MIN"
    ABOVE_MAX = "ABOVE_MAX"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    PATTERN_MISMATCH = "PATTERN_MISMATCH"
    NOT_INTEGER = "NOT_INTEGER"
    ENUM_MISMATCH = "ENUM_MISMATCH"
    NOT_ARRAY = "NOT_ARRAY"
    PARSE_ERROR = "PARSE_ERROR"


class Rule(BaseModel):
    """Constraints for one top-level field of a document.

    Bounds are optional: presence, not value, decides whether a bound is
    enforced. ``min <= max`` is left to the caller.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    field_name: str = Field(alias="field", min_length=1)
    kind: RuleKind = Field(alias="type")
    required: bool = False
    min: Optional[float] = None
    max: Optional[float] = None
    min_length: Optional[int] = Field(default=None, alias="minLength", ge=0)
    max_length: Optional[int] = Field(default=None, alias="maxLength", ge=0)
    pattern: Optional[str] = None
    enum: tuple[Any, ...] = ()
    description: str = ""
    strict_enum: bool = Field(default=False, alias="strictEnum")

    @field_validator("pattern")
    @classmethod
    def _pattern_compiles(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid pattern {value!r}: {e}") from e
        return value

    @field_validator("enum", mode="before")
    @classmethod
    def _enum_as_tuple(cls, value: Any) -> Any:
        if value is None:
            return ()
        return value


class Violation(BaseModel):
    """A single validation finding."""

    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    message: str
    field: Optional[str] = None  # None only for document-level parse errors


class ValidationReport(BaseModel):
    """Complete validation report, the output of the validation engine."""

    is_valid: bool = Field(description="True when no violation was found")
    violations: list[Violation] = Field(default_factory=list)
    summary: dict[str, int] = Field(
        default_factory=dict,
        description="Count of violations per error code",
    )
    verdict: str = Field(default="", description="Human-readable verdict")

    @classmethod
    def build(cls, violations: list[Violation]) -> "ValidationReport":
        """Build a report from violations, keeping their order."""
        summary: dict[str, int] = {}
        for violation in violations:
            summary[violation.code.value] = summary.get(violation.code.value, 0) + 1

        if not violations:
            verdict = "PASS: document satisfies every rule."
        else:
            fields = {v.field for v in violations if v.field}
            verdict = (
                f"FAIL: {len(violations)} violation(s) across {len(fields)} field(s)."
                if fields
                else f"FAIL: {violations[0].message}"
            )

        return cls(
            is_valid=not violations,
            violations=list(violations),
            summary=summary,
            verdict=verdict,
        )

    @property
    def messages(self) -> list[str]:
        return [v.message for v in self.violations]

    def as_tuple(self) -> tuple[bool, list[str]]:
        """Return ``(is_valid, messages)``."""
        return self.is_valid, self.messages
