"""
Rule engine for validating candidate records against an entity schema.

The engine builds one validator chain per field plus the conditional
validators, evaluates them all against a single coerced snapshot of the
candidate, and accumulates every failure into one ValidationResult.
"""

import copy
from collections.abc import Mapping
from typing import Any

from src.core.models import FieldRule, Issue, RecordSchema, ValidationResult
from src.core.validators import (
    BaseValidator,
    ChoiceValidator,
    ConditionalRequiredValidator,
    LengthValidator,
    RangeValidator,
    RegexValidator,
    RequiredFieldValidator,
    TypeValidator,
    ValidationError,
)
from src.observability.logger import get_logger

logger = get_logger(__name__)


class RuleEngine:
    """
    Validates candidate records for one entity schema.

    Evaluation order (and therefore issue order):
    1. per-field checks, in field-declaration order, at most one issue per
       field (first failing check wins)
    2. conditional requiredness, in conditional declaration order
    """

    VALIDATOR_REGISTRY = {
        "required_field": RequiredFieldValidator,
        "type_check": TypeValidator,
        "range": RangeValidator,
        "length": LengthValidator,
        "regex": RegexValidator,
        "choice": ChoiceValidator,
        "conditional_required": ConditionalRequiredValidator,
    }

    def __init__(self, schema: RecordSchema):
        """
        Initialize the rule engine.

        Args:
            schema: Entity schema to enforce

        Raises:
            ValueError: If a validator cannot be built from the schema
        """
        self.schema = schema
        self.coercers: dict[str, TypeValidator] = {}
        self.field_validators: dict[str, list[BaseValidator]] = {}
        self.conditional_validators: list[BaseValidator] = []
        self._build_validators()

    def _build_validators(self) -> None:
        """Build validator instances from the schema."""
        for rule in self.schema.field_rules:
            self.coercers[rule.name] = self._create("type_check", rule)
            self.field_validators[rule.name] = [
                self._create(rule_type, rule) for rule_type in self._checks_for(rule)
            ]

        for conditional in self.schema.conditionals:
            for dependent in conditional.dependent_fields:
                when = [
                    value
                    for value, dependents in conditional.requirements.items()
                    if dependent in dependents
                ]
                self.conditional_validators.append(
                    self._create(
                        "conditional_required",
                        self.schema.get_field(dependent),
                        {
                            "discriminator": conditional.discriminator,
                            "when": when,
                            "message": conditional.messages.get(dependent),
                        },
                    )
                )

    @staticmethod
    def _checks_for(rule: FieldRule) -> list[str]:
        checks = []
        if rule.required:
            checks.append("required_field")
        if rule.field_type == "choice":
            checks.append("choice")
        if rule.is_numeric:
            checks.append("range")
        if rule.min_length is not None or rule.max_length is not None:
            checks.append("length")
        if rule.pattern is not None:
            checks.append("regex")
        return checks

    def _create(
        self,
        rule_type: str,
        rule: FieldRule,
        parameters: dict[str, Any] | None = None,
    ) -> BaseValidator:
        validator_class = self.VALIDATOR_REGISTRY.get(rule_type)
        if not validator_class:
            raise ValueError(f"Unknown rule type: {rule_type}")
        try:
            return validator_class(rule, parameters)
        except Exception as e:
            raise ValueError(
                f"Failed to create {rule_type} validator for '{self.schema.entity}.{rule.name}': {e}"
            )

    def normalize(self, candidate: Mapping[str, Any]) -> tuple[dict[str, Any], list[Issue]]:
        """
        Build the coerced snapshot of a candidate.

        The snapshot holds only declared fields, in declaration order, with
        defaults applied to missing/None values. The candidate itself is
        never modified.

        Returns:
            (snapshot, coercion issues in field order)
        """
        snapshot: dict[str, Any] = {}
        issues: list[Issue] = []

        for rule in self.schema.field_rules:
            value = candidate.get(rule.name)
            if value is None and rule.default is not None:
                value = copy.deepcopy(rule.default)

            try:
                snapshot[rule.name] = self.coercers[rule.name].coerce(value)
            except ValidationError as e:
                # Raw value stays in the snapshot so conditionals see it as present
                snapshot[rule.name] = value
                issues.append(Issue(field=e.field_name, message=e.message))

        return snapshot, issues

    def validate(self, candidate: Mapping[str, Any]) -> ValidationResult:
        """
        Validate a candidate record.

        Args:
            candidate: Field-to-value mapping supplied by the caller

        Returns:
            ValidationResult with the normalized record, or every issue found
        """
        if not isinstance(candidate, Mapping):
            issue = Issue(field="*", message=f"{self.schema.entity}の形式が不正です")
            return ValidationResult.rejected([issue])

        snapshot, coercion_issues = self.normalize(candidate)
        failed_fields = {issue.field for issue in coercion_issues}

        issues_by_field: dict[str, Issue] = {issue.field: issue for issue in coercion_issues}
        for rule in self.schema.field_rules:
            if rule.name in failed_fields:
                continue
            for validator in self.field_validators[rule.name]:
                try:
                    validator.validate(snapshot[rule.name], snapshot)
                except ValidationError as e:
                    issues_by_field[rule.name] = Issue(field=e.field_name, message=e.message)
                    break

        issues = [
            issues_by_field[name] for name in self.schema.field_names if name in issues_by_field
        ]

        for validator in self.conditional_validators:
            try:
                validator.validate(snapshot.get(validator.field_name), snapshot)
            except ValidationError as e:
                issues.append(Issue(field=e.field_name, message=e.message))

        if issues:
            logger.debug(
                f"Rejected {self.schema.entity} record",
                extra={"entity": self.schema.entity, "issue_count": len(issues)},
            )
            return ValidationResult.rejected(issues)

        return ValidationResult.accepted(snapshot)

    def validate_batch(self, candidates: list[Mapping[str, Any]]) -> list[ValidationResult]:
        """
        Validate a batch of candidates.

        Returns:
            List of ValidationResult objects, one per candidate
        """
        return [self.validate(candidate) for candidate in candidates]

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with rule counts by type
        """
        counts: dict[str, int] = {}
        validators = [v for chain in self.field_validators.values() for v in chain]
        for validator in [*self.coercers.values(), *validators, *self.conditional_validators]:
            counts[validator.rule_type] = counts.get(validator.rule_type, 0) + 1

        return {
            "entity": self.schema.entity,
            "total_fields": len(self.schema.field_rules),
            "total_conditionals": len(self.schema.conditionals),
            "rules_by_type": counts,
        }
