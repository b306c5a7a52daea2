"""
Table services

Pure, synchronous operations over table values:
    row_normalizer — canonical rows keyed by column id and handle
    row_validator  — per-cell validation
    row_count      — unconstrained / bounded / static row-count policy
    projector      — display string, export mapping, summary table/markup, CSV
"""

from .projector import (
    SummaryTable,
    row_export_mapping,
    table_export_mapping,
    to_csv,
    to_display_string,
    to_summary_markup,
    to_summary_table,
)
from .results import FieldValidationResult, SubfieldValidationResult
from .row_count import RowCountMode, RowCountPolicy
from .row_normalizer import normalize_row, normalize_rows, strip_template_rows
from .row_validator import TableValidationResult, validate_rows

__all__ = [
    "FieldValidationResult",
    "RowCountMode",
    "RowCountPolicy",
    "SubfieldValidationResult",
    "SummaryTable",
    "TableValidationResult",
    "normalize_row",
    "normalize_rows",
    "row_export_mapping",
    "strip_template_rows",
    "table_export_mapping",
    "to_csv",
    "to_display_string",
    "to_summary_markup",
    "to_summary_table",
    "validate_rows",
]
