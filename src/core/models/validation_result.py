"""
ValidationResult model representing the outcome of validating a candidate record.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from .issue import Issue


class ValidationResult(BaseModel):
    """
    Outcome of validating one candidate record (ephemeral, never persisted).

    Either ``ok`` is True and ``value`` holds the normalized record, or ``ok``
    is False and ``issues`` lists every failure found.

    Attributes:
        ok: Overall validation status
        value: Normalized record (declared fields only, defaults applied,
            values coerced); None when validation failed
        issues: Accumulated issues in canonical order
    """

    ok: bool
    value: dict[str, Any] | None = None
    issues: list[Issue] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_ok_consistency(self) -> "ValidationResult":
        """ok=True implies no issues and a value; ok=False implies issues."""
        if self.ok and self.issues:
            raise ValueError("ok=True but issues is not empty")
        if self.ok and self.value is None:
            raise ValueError("ok=True but value is missing")
        if not self.ok and not self.issues:
            raise ValueError("ok=False but issues is empty")
        return self

    @classmethod
    def accepted(cls, value: dict[str, Any]) -> "ValidationResult":
        return cls(ok=True, value=value)

    @classmethod
    def rejected(cls, issues: list[Issue]) -> "ValidationResult":
        return cls(ok=False, issues=issues)

    def issues_for(self, field: str) -> list[Issue]:
        """Issues attached to one field, in result order."""
        return [issue for issue in self.issues if issue.field == field]

    def as_dict(self) -> dict[str, Any]:
        """Plain payload for JSON output."""
        return {
            "ok": self.ok,
            "value": self.value,
            "issues": [{"field": i.field, "message": i.message} for i in self.issues],
        }

    class Config:
        json_schema_extra = {
            "example": {
                "ok": False,
                "value": None,
                "issues": [
                    {"field": "name", "message": "氏名を入力してください"},
                    {"field": "hourly_rate", "message": "時給タイプの場合は時給を入力してください"},
                ],
            }
        }
