"""
Scalar formatting and CSV field escaping.

Everything here is pure: one value in, one cell string out.
"""

import math
from datetime import date, datetime
from decimal import Decimal
from typing import Any

TRUE_TOKEN = "はい"
FALSE_TOKEN = "いいえ"

DELIMITER = ","
QUOTE = '"'

# Any of these forces the field to be quoted
QUOTE_TRIGGERS = (DELIMITER, QUOTE, "\n", "\r")


def format_scalar(value: Any) -> str:
    """
    Convert a record value to its cell text.

    - None -> ""
    - bool -> TRUE_TOKEN / FALSE_TOKEN
    - int -> decimal digits
    - float -> shortest round-trip text, integral floats without ".0",
      NaN -> "NaN", infinities -> "Infinity" / "-Infinity"
    - Decimal -> plain positional notation
    - anything else -> str(value)

    Numbers never get grouping separators or locale formatting.
    """
    if value is None:
        return ""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return TRUE_TOKEN if value else FALSE_TOKEN
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def escape_field(text: str) -> str:
    """
    Quote a cell for CSV output (RFC 4180 style).

    Text containing a comma, a double quote or a line break is wrapped in
    double quotes with every internal quote doubled; other text is returned
    unchanged.

    >>> escape_field("plain")
    'plain'
    >>> escape_field('say "hi", bye')
    '"say ""hi"", bye"'
    """
    if any(trigger in text for trigger in QUOTE_TRIGGERS):
        return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE
    return text


def _parse_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_date_for_export(value: str | date | None) -> str:
    """
    Format a date for export as YYYY/MM/DD.

    Unparseable input is returned unchanged; one malformed date must not
    block a whole export.
    """
    if value is None or value == "":
        return ""
    parsed = _parse_datetime(value)
    if parsed is None:
        return value if isinstance(value, str) else str(value)
    return parsed.strftime("%Y/%m/%d")


def format_datetime_for_export(value: str | datetime | None) -> str:
    """
    Format a timestamp for export as YYYY/MM/DD HH:MM.

    The input's own wall-clock time is used (no timezone conversion).
    Unparseable input is returned unchanged.
    """
    if value is None or value == "":
        return ""
    parsed = _parse_datetime(value)
    if parsed is None:
        return value if isinstance(value, str) else str(value)
    return parsed.strftime("%Y/%m/%d %H:%M")


def format_currency_for_export(value: int | float | Decimal | None) -> str:
    """Plain amount: no currency symbol, no grouping separators."""
    if value is None:
        return ""
    return format_scalar(value)


def format_fixed(value: int | float | None, digits: int = 1) -> str:
    """Fixed-point text with ``digits`` decimals, e.g. 12.345 -> "12.3"."""
    if value is None:
        return ""
    return f"{value:.{digits}f}"
