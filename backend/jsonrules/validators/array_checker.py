"""Array Checker: the value must be a list. Elements are not inspected."""

from typing import Any

from jsonrules.validators.base import BaseKindChecker
from jsonrules.validators.models import ErrorCode, Rule, Violation


class ArrayChecker(BaseKindChecker):
    """Validates array fields. An empty list is a valid array."""

    @property
    def name(self) -> str:
        return "ArrayChecker"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, list)

    def type_violation(self, rule: Rule) -> Violation:
        return self._violation(
            ErrorCode.NOT_ARRAY,
            rule,
            f"Field '{rule.field_name}' must be an array",
        )
