"""
ChoiceValidator - validates that a value is one of a fixed set of choices.
"""

from typing import Any

from .base_validator import BaseValidator


class ChoiceValidator(BaseValidator):
    """Validates enumerated string fields (exact, case-sensitive match)."""

    def __init__(self, rule, parameters=None):
        super().__init__(rule, parameters)
        if not rule.choices:
            raise ValueError(f"ChoiceValidator requires choices for '{rule.name}'")
        self.choices = tuple(rule.choices)

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        if value is None:
            return

        if value not in self.choices:
            raise self.fail("choice", choices=", ".join(self.choices))

    @property
    def rule_type(self) -> str:
        return "choice"
