"""String Checker: length bounds and pattern matching."""

import re
from typing import Any

from jsonrules.validators.base import BaseKindChecker
from jsonrules.validators.models import ErrorCode, Rule, Violation


class StringChecker(BaseKindChecker):
    """Validates string fields. Length and pattern checks are independent."""

    @property
    def name(self) -> str:
        return "StringChecker"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, str)

    def check(self, rule: Rule, value: Any) -> list[Violation]:
        errors = []
        length = len(value)

        if rule.min_length is not None and length < rule.min_length:
            errors.append(self._violation(
                ErrorCode.TOO_SHORT,
                rule,
                f"Field '{rule.field_name}' must have at least {rule.min_length} characters",
            ))

        if rule.max_length is not None and length > rule.max_length:
            errors.append(self._violation(
                ErrorCode.TOO_LONG,
                rule,
                f"Field '{rule.field_name}' must have at most {rule.max_length} characters",
            ))

        # re.search is the contract: a match anywhere passes, anchors belong
        # in the pattern itself
        if rule.pattern and re.search(rule.pattern, value) is None:
            errors.append(self._violation(
                ErrorCode.PATTERN_MISMATCH,
                rule,
                f"Field '{rule.field_name}' must match pattern {rule.pattern}",
            ))

        return errors
