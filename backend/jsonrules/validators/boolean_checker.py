"""Boolean Checker: type check only."""

from typing import Any

from jsonrules.validators.base import BaseKindChecker


class BooleanChecker(BaseKindChecker):
    """Validates boolean fields. Booleans carry no further constraints."""

    @property
    def name(self) -> str:
        return "BooleanChecker"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, bool)
