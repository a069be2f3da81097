"""
Business day schemas: per-month working/closure day counts for a year.
"""

from src.core.rules import RuleConfigBuilder

# February allows 29 to cover leap years
DAYS_IN_MONTH = {
    "jan": 31,
    "feb": 29,
    "mar": 31,
    "apr": 30,
    "may": 31,
    "jun": 30,
    "jul": 31,
    "aug": 31,
    "sep": 30,
    "oct": 31,
    "nov": 30,
    "dec": 31,
}

MONTH_NAMES = {key: f"{number}月" for number, key in enumerate(DAYS_IN_MONTH, start=1)}

MONTH_KEYS = list(DAYS_IN_MONTH)

DAY_TYPES = ["working_days", "temporary_closure"]

YEAR_MESSAGES = {
    "minimum": "{minimum}年以上で入力してください",
    "maximum": "{maximum}年以下で入力してください",
}

MONTH_MESSAGES = {
    "integer": "整数で入力してください",
    "minimum": "{minimum}以上で入力してください",
    "maximum": "{maximum}以下で入力してください",
}


def get_max_days_in_month(month: str) -> int:
    return DAYS_IN_MONTH[month]


def _business_day_builder() -> RuleConfigBuilder:
    builder = (
        RuleConfigBuilder("business_day")
        .add_integer(
            "year", label="年", required=True, minimum=2000, maximum=2100, messages=YEAR_MESSAGES
        )
        .add_choice("day_type", DAY_TYPES, label="日数タイプ", required=True)
    )
    for month in MONTH_KEYS:
        builder.add_integer(
            month,
            label=MONTH_NAMES[month],
            required=True,
            minimum=0,
            maximum=DAYS_IN_MONTH[month],
            messages=MONTH_MESSAGES,
        )
    return builder.add_string("notes", label="備考", max_length=1000, blank_to_null=True)


BUSINESS_DAY_SCHEMA = _business_day_builder().build()

ADD_YEAR_SCHEMA = (
    RuleConfigBuilder("add_year")
    .add_integer(
        "year", label="年", required=True, minimum=2000, maximum=2100, messages=YEAR_MESSAGES
    )
    .build()
)
