"""
Base validator interface for all per-field checks.

Validators raise ValidationError internally; the rule engine catches it and
turns it into an Issue, so callers of the engine never see the exception.
"""

from abc import ABC, abstractmethod
from typing import Any

from src.core.messages import render_message
from src.core.models import FieldRule


class ValidationError(Exception):
    """Raised when a validation check fails."""

    def __init__(self, rule_name: str, field_name: str, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator implements one kind of check (required, type, range,
    length, regex, choice, conditional) for a single field.
    """

    def __init__(self, rule: FieldRule, parameters: dict[str, Any] | None = None):
        """
        Initialize validator.

        Args:
            rule: The field rule this validator enforces
            parameters: Check-specific parameters not carried by the rule
        """
        self.rule = rule
        self.field_name = rule.name
        self.parameters = parameters or {}

    @abstractmethod
    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate a value against this check.

        Args:
            value: The (already coerced) field value
            record: The whole coerced record snapshot

        Raises:
            ValidationError: If the check fails
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def fail(self, key: str, **params: Any) -> ValidationError:
        """Build the ValidationError for a failed check, message included."""
        return ValidationError(
            rule_name=self.rule_type,
            field_name=self.field_name,
            message=render_message(self.rule, key, **params),
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name}, params={self.parameters})"
