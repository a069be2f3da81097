"""
TypeValidator - coerces field values to the declared type.
"""

import math
from typing import Any

from .base_validator import BaseValidator

TRUE_STRINGS = ("true", "1", "yes")
FALSE_STRINGS = ("false", "0", "no")


class TypeValidator(BaseValidator):
    """
    Coerces a raw field value to the rule's field type.

    Coercion runs before every other check, so range, length and pattern
    checks only ever see coerced values.

    - integer / number: int and float pass; strings are stripped and parsed,
      blank strings become None; NaN becomes None; infinities and "1_000"
      style digit separators are type errors; integral values become int
    - boolean: bool passes; "true"/"false"/"1"/"0"/"yes"/"no" in any case
    - string / choice: must already be str
    """

    def coerce(self, value: Any) -> Any:
        """
        Return the coerced value.

        Raises:
            ValidationError: If the value cannot be coerced
        """
        if value is None:
            return None

        field_type = self.rule.field_type
        if field_type in ("integer", "number"):
            return self._coerce_number(value)
        if field_type == "boolean":
            return self._coerce_bool(value)

        if not isinstance(value, str):
            raise self.fail("type")
        if self.rule.blank_to_null and value == "":
            return None
        return value

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        self.coerce(value)

    def _coerce_number(self, value: Any) -> int | float | None:
        # bool is an int subclass; True is not a quantity
        if isinstance(value, bool):
            raise self.fail("type")

        if isinstance(value, str):
            text = value.strip()
            if text == "":
                return None
            # float() also takes digit separators ("1_000")
            if "_" in text:
                raise self.fail("type")
            try:
                value = float(text)
            except ValueError:
                raise self.fail("type")

        if isinstance(value, int):
            return value
        if not isinstance(value, float):
            raise self.fail("type")

        if math.isnan(value):
            return None
        if math.isinf(value):
            raise self.fail("type")
        if value.is_integer():
            return int(value)
        return value

    def _coerce_bool(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in TRUE_STRINGS:
                return True
            if lowered in FALSE_STRINGS:
                return False
        raise self.fail("type")

    @property
    def rule_type(self) -> str:
        return "type_check"
