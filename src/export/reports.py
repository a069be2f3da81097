"""
Column sets for the analysis reports the UI can export.
"""

from datetime import date

from .columns import FieldColumn, FormattedColumn, column
from .formatting import (
    format_currency_for_export,
    format_date_for_export,
    format_fixed,
    format_scalar,
)

PROFITABILITY_COLUMNS = [
    column("fieldCode", "現場コード"),
    column("fieldName", "現場名"),
    column("customerName", "顧客名"),
    column("totalInvoice", "売上", format_currency_for_export),
    column("totalLaborCost", "人件費", format_currency_for_export),
    column("totalExpense", "経費", format_currency_for_export),
    column("profit", "粗利益", format_currency_for_export),
    column("profitMargin", "粗利益率(%)", format_fixed),
    column("projectCount", "案件数", format_scalar),
]

PROJECT_REVIEW_COLUMNS = [
    column("fieldCode", "現場コード"),
    column("fieldName", "現場名"),
    column("projectNumber", "案件番号", format_scalar),
    column("implementationDate", "実施日", format_date_for_export),
    column("goodPoints", "良かった点"),
    column("improvements", "改善点"),
    column("nextActions", "次回申し送り"),
]

# report name -> (columns, file name prefix)
REPORTS: dict[str, tuple[list[FieldColumn | FormattedColumn], str]] = {
    "profitability": (PROFITABILITY_COLUMNS, "収益性レポート"),
    "project_review": (PROJECT_REVIEW_COLUMNS, "案件レビュー"),
}


def report_filename(prefix: str, on: date | None = None) -> str:
    """``{prefix}_{YYYY-MM-DD}.csv`` for the given (default: today's) date."""
    on = on or date.today()
    return f"{prefix}_{on.isoformat()}.csv"


def get_report(name: str) -> tuple[list[FieldColumn | FormattedColumn], str]:
    try:
        return REPORTS[name]
    except KeyError:
        raise KeyError(f"Unknown report '{name}'. Known: {sorted(REPORTS)}")
