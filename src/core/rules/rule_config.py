"""
Rule configuration management.

Loads entity schemas from YAML files and provides a fluent builder for
declaring them in code.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from src.core.models import ConditionalRule, FieldRule, RecordSchema

FIELD_KEYS = {
    "type": "field_type",
    "label": "label",
    "required": "required",
    "min_length": "min_length",
    "max_length": "max_length",
    "pattern": "pattern",
    "minimum": "minimum",
    "maximum": "maximum",
    "choices": "choices",
    "default": "default",
    "blank_to_null": "blank_to_null",
    "messages": "messages",
}


class RuleConfigLoader:
    """
    Loads an entity schema from a YAML configuration file.

    Expected YAML format:
    ```yaml
    entity: employee
    fields:
      employee_code:
        type: string
        label: 従業員コード
        required: true
        max_length: 10
        pattern: "^[a-zA-Z0-9-_]+$"
      salary_type:
        type: choice
        choices: [hourly, daily, monthly]
        required: true
      hourly_rate:
        type: integer
        minimum: 0
    conditionals:
      - discriminator: salary_type
        requirements:
          hourly: [hourly_rate]
        messages:
          hourly_rate: 時給タイプの場合は時給を入力してください
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_schema(self) -> RecordSchema:
        """
        Load and parse the entity schema from the YAML file.

        Raises:
            ValueError: If YAML is invalid or the schema is malformed
        """
        with open(self.config_path, encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}")

        if not isinstance(config, dict) or "fields" not in config:
            raise ValueError("Configuration file must contain 'fields' section")

        field_defs = config["fields"]
        if not isinstance(field_defs, dict) or not field_defs:
            raise ValueError("'fields' must be a non-empty mapping")

        entity = config.get("entity") or self.config_path.stem
        field_rules = [self._parse_field(name, field_def) for name, field_def in field_defs.items()]
        conditionals = [
            self._parse_conditional(idx, cond_def)
            for idx, cond_def in enumerate(config.get("conditionals") or [])
        ]

        try:
            return RecordSchema(entity=entity, field_rules=field_rules, conditionals=conditionals)
        except PydanticValidationError as e:
            raise ValueError(f"Invalid schema '{entity}': {e}")

    def _parse_field(self, field_name: str, field_def: dict[str, Any] | None) -> FieldRule:
        """
        Parse a single field definition.

        Raises:
            ValueError: If the definition has unknown keys or bad values
        """
        field_def = field_def or {}
        if not isinstance(field_def, dict):
            raise ValueError(f"Definition for field '{field_name}' must be a mapping")

        unknown = sorted(set(field_def) - set(FIELD_KEYS))
        if unknown:
            raise ValueError(f"Unknown keys for field '{field_name}': {unknown}")

        kwargs = {FIELD_KEYS[key]: value for key, value in field_def.items()}
        try:
            return FieldRule(name=field_name, **kwargs)
        except PydanticValidationError as e:
            raise ValueError(f"Invalid rule for field '{field_name}': {e}")

    def _parse_conditional(self, idx: int, cond_def: dict[str, Any]) -> ConditionalRule:
        if not isinstance(cond_def, dict) or "discriminator" not in cond_def:
            raise ValueError(f"Conditional #{idx} is missing 'discriminator'")

        try:
            return ConditionalRule(
                discriminator=cond_def["discriminator"],
                requirements=cond_def.get("requirements") or {},
                messages=cond_def.get("messages") or {},
            )
        except PydanticValidationError as e:
            raise ValueError(f"Invalid conditional #{idx}: {e}")


class RuleConfigBuilder:
    """
    Programmatically build entity schemas.

    Usage:
        schema = RuleConfigBuilder("expense") \\
            .add_string("expense_item", label="項目名", required=True, max_length=255) \\
            .add_integer("amount", label="金額", required=True, minimum=0) \\
            .build()
    """

    def __init__(self, entity: str):
        self.entity = entity
        self.field_rules: list[FieldRule] = []
        self.conditionals: list[ConditionalRule] = []

    def add_field(self, name: str, field_type: str, **options: Any) -> "RuleConfigBuilder":
        """Add a field rule of any type."""
        self.field_rules.append(FieldRule(name=name, field_type=field_type, **options))
        return self

    def add_string(self, name: str, **options: Any) -> "RuleConfigBuilder":
        """Add a string field rule."""
        return self.add_field(name, "string", **options)

    def add_integer(self, name: str, **options: Any) -> "RuleConfigBuilder":
        """Add an integer field rule (numeric strings are coerced)."""
        return self.add_field(name, "integer", **options)

    def add_number(self, name: str, **options: Any) -> "RuleConfigBuilder":
        """Add a numeric field rule that allows fractions."""
        return self.add_field(name, "number", **options)

    def add_boolean(self, name: str, **options: Any) -> "RuleConfigBuilder":
        """Add a boolean field rule."""
        return self.add_field(name, "boolean", **options)

    def add_choice(self, name: str, choices: list[str], **options: Any) -> "RuleConfigBuilder":
        """Add an enumerated field rule."""
        return self.add_field(name, "choice", choices=choices, **options)

    def add_conditional(
        self,
        discriminator: str,
        requirements: dict[str, list[str]],
        messages: dict[str, str] | None = None,
    ) -> "RuleConfigBuilder":
        """Add a discriminator-keyed conditional requiredness rule."""
        self.conditionals.append(
            ConditionalRule(
                discriminator=discriminator,
                requirements=requirements,
                messages=messages or {},
            )
        )
        return self

    def build(self) -> RecordSchema:
        """Build and return the entity schema."""
        return RecordSchema(
            entity=self.entity,
            field_rules=list(self.field_rules),
            conditionals=list(self.conditionals),
        )
