"""
ConditionalRequiredValidator - requiredness selected by a discriminator field.
"""

from typing import Any

from src.core.messages import render_message
from src.core.models import discriminator_key

from .base_validator import BaseValidator, ValidationError


class ConditionalRequiredValidator(BaseValidator):
    """
    Requires the dependent field whenever the discriminator holds one of
    ``when`` values.

    One instance exists per (conditional rule, dependent field) pair; the
    issue is always attached to the dependent field.

    Parameters:
    - discriminator: Name of the discriminator field
    - when: Discriminator values that make this field required
    - message: Optional message; defaults to the field's required message
    """

    def __init__(self, rule, parameters=None):
        super().__init__(rule, parameters)

        self.discriminator = self.parameters.get("discriminator")
        if not self.discriminator:
            raise ValueError("ConditionalRequiredValidator requires 'discriminator' parameter")

        self.when = tuple(self.parameters.get("when") or ())
        if not self.when:
            raise ValueError("ConditionalRequiredValidator requires at least one 'when' value")

        self.message = self.parameters.get("message") or render_message(rule, "required")

    def applies(self, record: dict[str, Any]) -> bool:
        """
        Whether the discriminator currently selects this field.

        The coerced discriminator is compared by its text form, so boolean
        and integer discriminators match "true" / "3" style keys.
        """
        return discriminator_key(record.get(self.discriminator)) in self.when

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        if not self.applies(record):
            return

        if value is None or value == "":
            raise ValidationError(
                rule_name=self.rule_type,
                field_name=self.field_name,
                message=self.message,
            )

    @property
    def rule_type(self) -> str:
        return "conditional_required"
