"""
LengthValidator - validates string length bounds.
"""

from typing import Any

from .base_validator import BaseValidator


class LengthValidator(BaseValidator):
    """
    Validates that a string's length is within [min_length, max_length].

    Length is counted in characters, not bytes.
    """

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        if value is None:
            return

        length = len(value)
        if self.rule.min_length is not None and length < self.rule.min_length:
            raise self.fail("min_length", min_length=self.rule.min_length)

        if self.rule.max_length is not None and length > self.rule.max_length:
            raise self.fail("max_length", max_length=self.rule.max_length)

    @property
    def rule_type(self) -> str:
        return "length"
