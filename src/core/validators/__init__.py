"""
Validation check implementations.

Provides validators for required fields, type coercion, numeric ranges,
string lengths, regex patterns, enumerated choices and discriminator-driven
conditional requiredness.
"""

from .base_validator import BaseValidator, ValidationError
from .choice_validator import ChoiceValidator
from .conditional_validator import ConditionalRequiredValidator
from .length_validator import LengthValidator
from .range_validator import RangeValidator
from .regex_validator import RegexValidator
from .required_field_validator import RequiredFieldValidator
from .type_validator import TypeValidator

__all__ = [
    "BaseValidator",
    "ValidationError",
    "RequiredFieldValidator",
    "TypeValidator",
    "RangeValidator",
    "LengthValidator",
    "RegexValidator",
    "ChoiceValidator",
    "ConditionalRequiredValidator",
]
