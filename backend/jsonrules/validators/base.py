"""Base kind checker: abstract class implementing the Strategy Pattern.

One checker per RuleKind. The engine asks ``accepts()`` first; a value of the
wrong kind yields a single ``type_violation()`` and nothing else for that
field. Only accepted values reach ``check()``.
"""

from abc import ABC, abstractmethod
from typing import Any

from jsonrules.validators.models import ErrorCode, Rule, Violation


class BaseKindChecker(ABC):
    """Abstract base for per-kind constraint checks.

    Contract:
        - check() is deterministic: same rule + value → same violations
        - check() never raises for document values
        - No I/O, no shared mutable state
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def accepts(self, value: Any) -> bool:
        """True when the value has the kind this checker validates."""
        ...

    def type_violation(self, rule: Rule) -> Violation:
        """Violation emitted when ``accepts()`` is False."""
        return self._violation(
            ErrorCode.WRONG_TYPE,
            rule,
            f"Field '{rule.field_name}' must be a {rule.kind.type_label}",
        )

    def check(self, rule: Rule, value: Any) -> list[Violation]:
        """Run the kind-specific constraints on an accepted value.

        Args:
            rule: Rule of the field being checked
            value: Decoded value of the field, already accepted

        Returns:
            List of violations (empty if every constraint holds)
        """
        return []

    # ── Helper Methods ──

    def _violation(self, code: ErrorCode, rule: Rule, message: str) -> Violation:
        """Convenience method to create a Violation for the rule's field."""
        return Violation(code=code, field=rule.field_name, message=message)
