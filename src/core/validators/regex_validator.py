"""
RegexValidator - validates field values against a regular expression pattern.
"""

import re
from re import Pattern
from typing import Any

from .base_validator import BaseValidator


class RegexValidator(BaseValidator):
    """
    Validates that the whole string matches the rule's pattern.

    Parameters:
    - flags: Optional regex flags (e.g., re.IGNORECASE)
    """

    def __init__(self, rule, parameters=None):
        super().__init__(rule, parameters)

        if not rule.pattern:
            raise ValueError(f"RegexValidator requires a pattern for '{rule.name}'")

        flags = self.parameters.get("flags", 0)
        try:
            self.pattern: Pattern = re.compile(rule.pattern, flags)
        except re.error as e:
            raise ValueError(f"Invalid regex pattern: {e}")

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        # Skip validation for None (handled by required_field validator)
        if value is None:
            return

        if not self.pattern.fullmatch(value):
            raise self.fail("pattern", pattern=self.pattern.pattern)

    @property
    def rule_type(self) -> str:
        return "regex"
