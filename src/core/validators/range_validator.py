"""
RangeValidator - validates numeric values against integer and bound constraints.
"""

from typing import Any

from .base_validator import BaseValidator


class RangeValidator(BaseValidator):
    """
    Validates a coerced numeric value.

    Checks, in order:
    - integer: value has no fractional part (integer fields only)
    - minimum: value >= rule.minimum (inclusive)
    - maximum: value <= rule.maximum (inclusive)
    """

    def __init__(self, rule, parameters=None):
        super().__init__(rule, parameters)
        self.integer_only = rule.field_type == "integer"
        self.min_value = rule.minimum
        self.max_value = rule.maximum

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        # Skip validation for None (handled by required_field validator)
        if value is None:
            return

        if self.integer_only and not isinstance(value, int):
            raise self.fail("integer")

        if self.min_value is not None and value < self.min_value:
            raise self.fail("minimum", minimum=self.min_value)

        if self.max_value is not None and value > self.max_value:
            raise self.fail("maximum", maximum=self.max_value)

    @property
    def rule_type(self) -> str:
        return "range"
