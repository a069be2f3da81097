"""
Core models for record validation.

All models use Pydantic for runtime validation and type safety.
"""

from .field_rule import ConditionalRule, FieldRule, FieldType, RecordSchema, discriminator_key
from .issue import Issue
from .validation_result import ValidationResult

__all__ = [
    "FieldRule",
    "FieldType",
    "ConditionalRule",
    "RecordSchema",
    "discriminator_key",
    "Issue",
    "ValidationResult",
]
