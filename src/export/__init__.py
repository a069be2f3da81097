"""
CSV export: formatting, generation and the export driver.
"""

from .columns import ColumnSpec, FieldColumn, FormattedColumn, column
from .csv_generator import BOM, generate_csv
from .driver import ArtifactHost, download_file, export_to_csv, trigger_print
from .formatting import (
    escape_field,
    format_currency_for_export,
    format_date_for_export,
    format_datetime_for_export,
    format_fixed,
    format_scalar,
)
from .hosts import DirectoryArtifactHost
from .reports import PROFITABILITY_COLUMNS, PROJECT_REVIEW_COLUMNS, REPORTS, report_filename

__all__ = [
    "ColumnSpec",
    "FieldColumn",
    "FormattedColumn",
    "column",
    "BOM",
    "generate_csv",
    "ArtifactHost",
    "download_file",
    "export_to_csv",
    "trigger_print",
    "escape_field",
    "format_scalar",
    "format_date_for_export",
    "format_datetime_for_export",
    "format_currency_for_export",
    "format_fixed",
    "DirectoryArtifactHost",
    "PROFITABILITY_COLUMNS",
    "PROJECT_REVIEW_COLUMNS",
    "REPORTS",
    "report_filename",
]
