"""
Work day schemas.

A work day's weather entries and work records are validated one by one with
their own schemas; the work day schema itself covers only scalar fields.
"""

from src.core.rules import RuleConfigBuilder

from ._common import UUID_PATTERN

WEATHER_ENTRY_SCHEMA = (
    RuleConfigBuilder("weather_entry")
    .add_string("time", label="時刻", required=True, messages={"required": "時刻を入力してください"})
    .add_string(
        "condition", label="天候", required=True, messages={"required": "天候を入力してください"}
    )
    .build()
)

WORK_RECORD_INPUT_SCHEMA = (
    RuleConfigBuilder("work_record_input")
    .add_string("id", label="ID")
    .add_string(
        "employee_code",
        label="従業員コード",
        required=True,
        max_length=10,
        messages={"required": "従業員コードを入力してください"},
    )
    .add_string(
        "start_time",
        label="開始時刻",
        required=True,
        messages={"required": "開始時刻を入力してください"},
    )
    .add_string(
        "end_time",
        label="終了時刻",
        required=True,
        messages={"required": "終了時刻を入力してください"},
    )
    .add_integer("break_minutes", label="休憩時間", minimum=0, default=60)
    .build()
)

WORK_DAY_SCHEMA = (
    RuleConfigBuilder("work_day")
    .add_string(
        "project_id",
        label="案件ID",
        required=True,
        pattern=UUID_PATTERN,
        messages={"required": "案件IDが無効です", "pattern": "案件IDが無効です"},
    )
    .add_integer("day_number", label="日番号", required=True, minimum=1)
    .add_string("work_date", label="作業日", required=True)
    .add_string("work_description", label="作業内容")
    .add_string("troubles", label="トラブル")
    .build()
)
