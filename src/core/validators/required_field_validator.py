"""
RequiredFieldValidator - ensures a field is present and not null/empty.
"""

from typing import Any

from .base_validator import BaseValidator


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a required field is present and not null/empty.

    Fails if:
    - Field value is None (missing fields arrive as None)
    - Field value is an empty string
    - Field value is whitespace only, when ``strip_whitespace`` is set
    """

    def __init__(self, rule, parameters=None):
        super().__init__(rule, parameters)
        self.strip_whitespace = self.parameters.get("strip_whitespace", False)

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        if value is None:
            raise self.fail("required")

        if isinstance(value, str):
            text = value.strip() if self.strip_whitespace else value
            if text == "":
                raise self.fail("required")

    @property
    def rule_type(self) -> str:
        return "required_field"
