"""
Employee schema.

``salary_type`` selects which rate is mandatory: hourly workers need an
hourly rate, daily/monthly salaried workers need a daily rate.
"""

from src.core.rules import RuleConfigBuilder

from ._common import EMPLOYEE_CODE_PATTERN

SALARY_TYPES = ["hourly", "daily", "monthly"]

EMPLOYEE_SCHEMA = (
    RuleConfigBuilder("employee")
    .add_string(
        "employee_code",
        label="従業員コード",
        required=True,
        max_length=10,
        pattern=EMPLOYEE_CODE_PATTERN,
        messages={
            "required": "従業員コードを入力してください",
            "pattern": "従業員コードは半角英数字とハイフン、アンダースコアのみ使用可能です",
        },
    )
    .add_string(
        "name",
        label="氏名",
        required=True,
        max_length=100,
        messages={"required": "氏名を入力してください"},
    )
    .add_choice("salary_type", SALARY_TYPES, label="給与形態", required=True)
    .add_integer("hourly_rate", label="時給", minimum=0)
    .add_integer("daily_rate", label="日給", minimum=0)
    .add_boolean("is_active", label="在籍", default=True)
    .add_conditional(
        "salary_type",
        {"hourly": ["hourly_rate"], "daily": ["daily_rate"], "monthly": ["daily_rate"]},
        messages={
            "hourly_rate": "時給タイプの場合は時給を入力してください",
            "daily_rate": "日給月給/月給タイプの場合は日給を入力してください",
        },
    )
    .build()
)
