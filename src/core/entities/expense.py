"""Expense and monthly cost schemas."""

from src.core.rules import RuleConfigBuilder

from ._common import UUID_PATTERN

COST_TYPES = ["fixed", "variable"]

EXPENSE_SCHEMA = (
    RuleConfigBuilder("expense")
    .add_string(
        "project_id",
        label="案件ID",
        required=True,
        pattern=UUID_PATTERN,
        messages={"required": "案件IDが無効です", "pattern": "案件IDが無効です"},
    )
    .add_string("expense_item", label="項目名", required=True, max_length=255)
    .add_integer("amount", label="金額", required=True, minimum=0)
    .add_string("expense_date", label="日付")
    .add_string("notes", label="備考")
    .build()
)

MONTHLY_COST_SCHEMA = (
    RuleConfigBuilder("monthly_cost")
    .add_string(
        "year_month",
        label="対象年月",
        required=True,
        pattern=r"\d{4}-\d{2}",
        messages={"pattern": "対象年月の形式が不正です（例: 2026-01）"},
    )
    .add_choice("cost_type", COST_TYPES, label="経費種別", required=True)
    .add_string("category", label="カテゴリ", required=True, max_length=100)
    .add_integer("amount", label="金額", required=True, minimum=0)
    .add_string("notes", label="備考", max_length=1000, blank_to_null=True)
    .build()
)
