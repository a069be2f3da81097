"""
Project schema. Annual-contract projects must reference their contract.
"""

from src.core.rules import RuleConfigBuilder

from ._common import UUID_PATTERN

CONTRACT_TYPES = ["standard", "annual"]

PROJECT_SCHEMA = (
    RuleConfigBuilder("project")
    .add_string(
        "field_id",
        label="現場ID",
        required=True,
        pattern=UUID_PATTERN,
        messages={"required": "現場IDが無効です", "pattern": "現場IDが無効です"},
    )
    .add_integer("project_number", label="案件番号", required=True, minimum=1)
    .add_string("implementation_date", label="実施日", required=True)
    .add_boolean("work_type_pruning", label="剪定", default=False)
    .add_boolean("work_type_weeding", label="除草", default=False)
    .add_boolean("work_type_cleaning", label="清掃", default=False)
    .add_string("work_type_other", label="その他作業内容", max_length=255)
    .add_integer("estimate_amount", label="見積金額", minimum=0)
    .add_integer("invoice_amount", label="請求金額", minimum=0)
    .add_integer("labor_cost", label="人件費", minimum=0)
    .add_string("review_good_points", label="良かった点")
    .add_string("review_improvements", label="改善点")
    .add_string("review_next_actions", label="次回申し送り")
    .add_choice("contract_type", CONTRACT_TYPES, label="契約種別", default="standard")
    .add_string(
        "annual_contract_id",
        label="年間契約ID",
        pattern=UUID_PATTERN,
        blank_to_null=True,
        messages={"pattern": "年間契約IDが無効です"},
    )
    .add_conditional(
        "contract_type",
        {"annual": ["annual_contract_id"]},
        messages={
            "annual_contract_id": "年間契約を選択した場合は、対象の年間契約を選択してください",
        },
    )
    .build()
)
