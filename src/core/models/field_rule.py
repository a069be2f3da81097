"""
Declarative rule models: per-field rules, discriminator-keyed conditional
rules, and the per-entity schema that groups them.
"""

import re
import string
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

FieldType = Literal["string", "integer", "number", "boolean", "choice"]

MessageKey = Literal[
    "required",
    "type",
    "integer",
    "minimum",
    "maximum",
    "min_length",
    "max_length",
    "pattern",
    "choice",
]

TEXT_TYPES = ("string", "choice")
NUMERIC_TYPES = ("integer", "number")

# Placeholders a message template may use besides {label}
MESSAGE_PLACEHOLDERS: dict[str, tuple[str, ...]] = {
    "required": (),
    "type": (),
    "integer": (),
    "minimum": ("minimum",),
    "maximum": ("maximum",),
    "min_length": ("min_length",),
    "max_length": ("max_length",),
    "pattern": ("pattern",),
    "choice": ("choices",),
}


def discriminator_key(value: Any) -> str | None:
    """
    Text form of a coerced discriminator value, as used in requirement keys.

    True/False -> "true"/"false", numbers -> their decimal text, strings
    unchanged. None (and anything else) selects nothing.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    return None


class FieldRule(BaseModel):
    """
    Constraints for one field of an entity.

    Attributes:
        name: Field name in the record
        label: Display label used in messages (defaults to name)
        field_type: "string", "integer", "number", "boolean" or "choice"
        required: Field must be present and non-empty
        min_length / max_length: String length bounds
        pattern: Regular expression the whole string must match
        minimum / maximum: Inclusive numeric bounds
        choices: Allowed values for "choice" fields
        default: Value used when the field is missing or None
        blank_to_null: Turn "" into None before checks
        messages: Per-check message overrides keyed by check name
    """

    name: str = Field(..., min_length=1)
    label: str | None = None
    field_type: FieldType = "string"
    required: bool = False
    min_length: int | None = Field(None, ge=0)
    max_length: int | None = Field(None, ge=0)
    pattern: str | None = None
    minimum: int | float | None = None
    maximum: int | float | None = None
    choices: list[str] | None = None
    default: Any = None
    blank_to_null: bool = False
    messages: dict[MessageKey, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_constraints(self) -> "FieldRule":
        if self.field_type == "choice" and not self.choices:
            raise ValueError(f"choice field '{self.name}' requires non-empty choices")
        if self.pattern is not None:
            try:
                re.compile(self.pattern)
            except re.error as e:
                raise ValueError(f"Invalid regex pattern for '{self.name}': {e}")
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ValueError(f"min_length exceeds max_length for '{self.name}'")
        if (
            self.minimum is not None
            and self.maximum is not None
            and self.minimum > self.maximum
        ):
            raise ValueError(f"minimum exceeds maximum for '{self.name}'")

        misplaced = []
        if self.field_type not in TEXT_TYPES:
            misplaced += [
                opt for opt in ("min_length", "max_length", "pattern") if getattr(self, opt) is not None
            ]
        if self.field_type not in NUMERIC_TYPES:
            misplaced += [opt for opt in ("minimum", "maximum") if getattr(self, opt) is not None]
        if misplaced:
            raise ValueError(
                f"{misplaced} cannot be used on {self.field_type} field '{self.name}'"
            )

        for key, template in self.messages.items():
            self._check_template(key, template)
        return self

    def _check_template(self, key: str, template: str) -> None:
        allowed = {"label", *MESSAGE_PLACEHOLDERS[key]}
        try:
            placeholders = [
                name for _, name, _, _ in string.Formatter().parse(template) if name is not None
            ]
        except ValueError as e:
            raise ValueError(f"Malformed {key} message for '{self.name}': {e}")

        unknown = [name for name in placeholders if name not in allowed]
        if unknown:
            raise ValueError(
                f"Unknown placeholders {unknown} in {key} message for '{self.name}' "
                f"(allowed: {sorted(allowed)}; write literal braces as {{{{ and }}}})"
            )

    @property
    def display_label(self) -> str:
        return self.label or self.name

    @property
    def is_numeric(self) -> bool:
        return self.field_type in NUMERIC_TYPES


class ConditionalRule(BaseModel):
    """
    Cross-field requiredness selected by a discriminator field.

    ``requirements`` maps each discriminator value to the fields that become
    required when the discriminator holds that value, e.g.::

        {"hourly": ["hourly_rate"], "daily": ["daily_rate"], "monthly": ["daily_rate"]}

    Attributes:
        discriminator: Field whose value selects the dependent fields
        requirements: Discriminator value -> dependent fields, in check order
        messages: Dependent field -> message; missing entries fall back to
            the dependent field's required message
    """

    discriminator: str = Field(..., min_length=1)
    requirements: dict[str, list[str]]
    messages: dict[str, str] = Field(default_factory=dict)

    @field_validator("requirements", mode="before")
    @classmethod
    def canonical_keys(cls, v):
        """YAML reads `true:` / `1:` keys as bool / int; store them as text."""
        if isinstance(v, dict):
            return {k if isinstance(k, str) else discriminator_key(k): deps for k, deps in v.items()}
        return v

    @model_validator(mode="after")
    def check_requirements(self) -> "ConditionalRule":
        if not self.requirements:
            raise ValueError(f"conditional on '{self.discriminator}' has no requirements")
        for value, dependents in self.requirements.items():
            if self.discriminator in dependents:
                raise ValueError(
                    f"discriminator '{self.discriminator}' cannot depend on itself (value '{value}')"
                )
        return self

    def required_fields(self, discriminator_value: Any) -> list[str]:
        """Dependent fields selected by the given (coerced) discriminator value."""
        key = discriminator_key(discriminator_value)
        if key is None:
            return []
        return list(self.requirements.get(key, []))

    @property
    def dependent_fields(self) -> list[str]:
        seen: list[str] = []
        for dependents in self.requirements.values():
            for name in dependents:
                if name not in seen:
                    seen.append(name)
        return seen


class RecordSchema(BaseModel):
    """
    The complete rule set for one entity type.

    Field order is significant: it is the order of the normalized record and
    of per-field issues.
    """

    entity: str = Field(..., min_length=1)
    field_rules: list[FieldRule]
    conditionals: list[ConditionalRule] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_references(self) -> "RecordSchema":
        names = [rule.name for rule in self.field_rules]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate field rules in '{self.entity}': {duplicates}")

        declared = set(names)
        for conditional in self.conditionals:
            referenced = [conditional.discriminator, *conditional.dependent_fields]
            unknown = [name for name in referenced if name not in declared]
            if unknown:
                raise ValueError(
                    f"Conditional rule in '{self.entity}' references undeclared fields: {unknown}"
                )

            unreachable = self._unreachable_keys(conditional)
            if unreachable:
                raise ValueError(
                    f"Conditional rule in '{self.entity}' has values {unreachable} "
                    f"that '{conditional.discriminator}' can never take"
                )
        return self

    def _unreachable_keys(self, conditional: "ConditionalRule") -> list[str]:
        """Requirement keys no coerced discriminator value can match."""
        rule = self.get_field(conditional.discriminator)
        keys = list(conditional.requirements)

        if rule.field_type == "boolean":
            return [key for key in keys if key not in ("true", "false")]
        if rule.field_type == "choice":
            return [key for key in keys if key not in rule.choices]
        if rule.field_type == "integer":
            return [key for key in keys if not re.fullmatch(r"-?(0|[1-9]\d*)", key)]
        return []

    @property
    def field_names(self) -> list[str]:
        return [rule.name for rule in self.field_rules]

    def get_field(self, name: str) -> FieldRule:
        for rule in self.field_rules:
            if rule.name == name:
                return rule
        raise KeyError(f"Unknown field '{name}' in schema '{self.entity}'")
