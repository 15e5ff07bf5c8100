"""Rule Registry: the ordered rule set of one validation context.

Rules are kept in first-insertion order, which is also the order violations
are reported in. Adding a rule for an existing field replaces it in place.
"""

import threading
from typing import Iterable, Iterator, Optional

import structlog

from jsonrules.validators.models import Rule

logger = structlog.get_logger()


class RuleRegistry:
    """Mapping of field name → Rule with deterministic iteration order.

    ``add_rule`` and ``all_rules`` share a lock, so rules can be added while
    other threads validate against a snapshot.
    """

    def __init__(self, name: str = "", description: str = ""):
        self.name = name
        self.description = description
        self._rules: dict[str, Rule] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_rules(
        cls, rules: Iterable[Rule], name: str = "", description: str = ""
    ) -> "RuleRegistry":
        """Build a registry from rules, later duplicates winning."""
        registry = cls(name=name, description=description)
        for rule in rules:
            registry.add_rule(rule)
        return registry

    def add_rule(self, rule: Rule) -> None:
        """Insert or replace the rule for ``rule.field_name``."""
        with self._lock:
            replaced = rule.field_name in self._rules
            self._rules[rule.field_name] = rule
        if replaced:
            logger.debug("rule_replaced", schema=self.name, field=rule.field_name)

    def all_rules(self) -> tuple[Rule, ...]:
        """Snapshot of every rule in insertion order."""
        with self._lock:
            return tuple(self._rules.values())

    def get_rule(self, field_name: str) -> Optional[Rule]:
        with self._lock:
            return self._rules.get(field_name)

    def schema_info(self) -> tuple[str, str]:
        """Return ``(name, description)`` of the schema this registry holds."""
        return self.name, self.description

    def __len__(self) -> int:
        with self._lock:
            return len(self._rules)

    def __contains__(self, field_name: object) -> bool:
        with self._lock:
            return field_name in self._rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.all_rules())

    def __repr__(self) -> str:
        return f"RuleRegistry(name={self.name!r}, rules={len(self)})"
