"""
CSV generation from in-memory records.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from .columns import FieldColumn, FormattedColumn, resolve_value
from .formatting import DELIMITER, escape_field, format_scalar

# Lets spreadsheet tools detect UTF-8 instead of guessing a locale encoding
BOM = "\ufeff"

ROW_SEPARATOR = "\n"


def format_cell(record: Any, col: FieldColumn | FormattedColumn) -> str:
    """
    Render one cell, escaped.

    Raises:
        TypeError: If a column formatter returns something other than str
    """
    value = resolve_value(record, col.field)

    if isinstance(col, FormattedColumn):
        text = col.formatter(value)
        if not isinstance(text, str):
            raise TypeError(
                f"Formatter for column '{col.field}' returned {type(text).__name__}, expected str"
            )
    else:
        text = format_scalar(value)

    return escape_field(text)


def generate_csv(
    records: Iterable[Any],
    columns: Sequence[FieldColumn | FormattedColumn],
) -> str:
    """
    Build a complete CSV document.

    The result starts with a byte-order mark, then a header row of escaped
    labels, then one row per record; rows are joined by "\\n" with no
    trailing separator. Output depends only on record order and column
    order.

    Args:
        records: Records in output order (mappings or attribute objects)
        columns: Column specifications in output order

    Returns:
        CSV text

    Raises:
        Whatever a column formatter raises; nothing is returned partially.
    """
    header = DELIMITER.join(escape_field(col.label) for col in columns)
    rows = [
        DELIMITER.join(format_cell(record, col) for col in columns)
        for record in records
    ]
    return BOM + ROW_SEPARATOR.join([header, *rows])
