"""
Column specifications for CSV export.

A column is either a plain field projection or a projection with its own
formatter. The two variants are a discriminated union on ``kind``.
"""

from collections.abc import Callable, Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

Formatter = Callable[[Any], str]


class FieldColumn(BaseModel):
    """Column whose cells are ``format_scalar(record[field])``."""

    kind: Literal["field"] = "field"
    field: str = Field(..., min_length=1)
    label: str

    class Config:
        frozen = True


class FormattedColumn(BaseModel):
    """Column whose cells are ``formatter(record[field])``."""

    kind: Literal["formatted"] = "formatted"
    field: str = Field(..., min_length=1)
    label: str
    formatter: Formatter

    class Config:
        frozen = True


ColumnSpec = Annotated[FieldColumn | FormattedColumn, Field(discriminator="kind")]


def column(field: str, label: str, formatter: Formatter | None = None) -> FieldColumn | FormattedColumn:
    """Build the right column variant for a field."""
    if formatter is None:
        return FieldColumn(field=field, label=label)
    return FormattedColumn(field=field, label=label, formatter=formatter)


def resolve_value(record: Any, field: str) -> Any:
    """
    Look up a field on a record.

    Mappings are read by key, other objects (e.g. pydantic models) by
    attribute. Missing fields resolve to None.
    """
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)
