"""Number Checker: numeric coercion, integer check and inclusive range bounds.

Serves both the NUMBER and INTEGER kinds. A fractional value on an INTEGER
field is reported but does not stop the range checks.
"""

from typing import Any

from jsonrules.validators.base import BaseKindChecker
from jsonrules.validators.coercion import format_number, is_integral, to_number
from jsonrules.validators.models import ErrorCode, Rule, RuleKind, Violation


class NumberChecker(BaseKindChecker):
    """Validates number and integer fields against min/max bounds."""

    @property
    def name(self) -> str:
        return "NumberChecker"

    def accepts(self, value: Any) -> bool:
        return to_number(value) is not None

    def check(self, rule: Rule, value: Any) -> list[Violation]:
        errors = []
        number = to_number(value)

        if rule.kind is RuleKind.INTEGER and not is_integral(number):
            errors.append(self._violation(
                ErrorCode.NOT_INTEGER,
                rule,
                f"Field '{rule.field_name}' must be an integer",
            ))

        if rule.min is not None and number < rule.min:
            errors.append(self._violation(
                ErrorCode.BELOW_MIN,
                rule,
                f"Field '{rule.field_name}' must be >= {format_number(rule.min)}",
            ))

        if rule.max is not None and number > rule.max:
            errors.append(self._violation(
                ErrorCode.ABOVE_MAX,
                rule,
                f"Field '{rule.field_name}' must be <= {format_number(rule.max)}",
            ))

        return errors
