"""
Table Field

Rows of typed cells. Value handling is delegated to the row services:

    normalize   row_normalizer  (dual id/handle keys, template row stripped)
    validate    row_count + row_validator
    project     projector       (display string, export mapping, summary)
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Any

from markupsafe import Markup

from formfields.cells.color import ColorData
from formfields.config import settings
from formfields.fields.base import FieldBase, FieldMeta, decode_if_json
from formfields.i18n import messages
from formfields.schemas.table import ColumnDefinition, TableFieldConfig
from formfields.services.projector import (
    SummaryTable,
    table_export_mapping,
    to_csv,
    to_display_string,
    to_summary_markup,
    to_summary_table,
)
from formfields.services.row_count import RowCountPolicy
from formfields.services.row_normalizer import Row, normalize_rows, resolve_cell
from formfields.services.row_validator import TableValidationResult, validate_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddRowControl:
    """State of the "Add row" button rendered under an editable table."""

    label: str
    min_rows: int | None
    max_rows: int | None
    disabled: bool


def _serialize_cell(value: Any) -> Any:
    if isinstance(value, ColorData):
        return value.hex
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


class TableField(FieldBase):
    meta = FieldMeta(
        type_name="table",
        display_name="Table",
        description="Rows of typed columns: text, dates, colors, links and emails.",
    )
    config_model = TableFieldConfig

    config: TableFieldConfig

    @property
    def columns(self) -> list[ColumnDefinition]:
        return list(self.config.columns)

    @property
    def row_count_policy(self) -> RowCountPolicy:
        return RowCountPolicy.from_config(self.config)

    # ── Normalization ────────────────────────────────────────────────────────

    def normalize_value(self, value: Any, fresh: bool = False) -> list[Row] | None:
        """
        Canonical rows for a submitted or stored value.

        A JSON string is decoded first. A fresh element with no value starts
        from the configured default rows.
        """
        if isinstance(value, str):
            value = decode_if_json(value)

        if value is None and fresh:
            value = self.config.defaults

        if not self.columns or not isinstance(value, (list, dict)):
            return None

        return normalize_rows(value, self.columns, registry=self.registry, template_key=settings.row_template_key)

    def serialize_value(self, rows: list[Row] | None) -> str:
        """JSON text for storage; ``normalize_value`` reads it back."""
        if rows is None:
            return json.dumps(None)
        return json.dumps([{key: _serialize_cell(cell) for key, cell in row.items()} for row in rows])

    def is_value_empty(self, value: Any) -> bool:
        return value is None or value == []

    # ── Validation ───────────────────────────────────────────────────────────

    def validate(self, value: Any) -> TableValidationResult:
        rows = value if isinstance(value, list) else []
        result = TableValidationResult()

        error = self.required_error(value)
        if error:
            result.field_errors.append(error)

        count_error = self.row_count_policy.check(len(rows), self.label, self.translator)
        if count_error:
            result.field_errors.append(count_error)

        result.cell_errors.update(validate_rows(rows, self.columns, self.registry, self.translator))

        if not result.is_valid:
            logger.debug(
                "Table field %r invalid: %d field errors, %d cell errors",
                self.handle,
                len(result.field_errors),
                len(result.cell_errors),
            )
        return result

    # ── Projections ──────────────────────────────────────────────────────────

    def value_as_string(self, value: Any) -> str:
        if not isinstance(value, list):
            return ""
        return to_display_string(value, self.columns, self.registry, settings.display_delimiter)

    def value_for_export(self, value: Any, label_prefix: str | None = None) -> dict[str, Any]:
        if not isinstance(value, list):
            return {}
        return table_export_mapping(value, self.columns, label_prefix or self.label, self.registry)

    def value_for_summary(self, value: Any) -> Markup:
        return to_summary_markup(value if isinstance(value, list) else [], self.columns, self.registry, self.translator)

    def summary_table(self, value: Any) -> SummaryTable:
        return to_summary_table(value if isinstance(value, list) else [], self.columns, self.registry, self.translator)

    def value_as_csv(self, value: Any) -> str:
        return to_csv(value if isinstance(value, list) else [], self.columns, self.registry, self.translator)

    # ── Rendering context ────────────────────────────────────────────────────

    def input_rows(self, value: Any, has_errors: TableValidationResult | None = None) -> list[dict[str, Any]]:
        """
        Per-row cell context for the front-end table.

        Each declared column yields ``{"value": ..., "has_errors": bool}``,
        keyed by column id. Tables with a minimum are padded with empty rows.
        Static tables always render exactly their default row count.
        """
        rows = list(value) if isinstance(value, list) else []
        if self.config.static:
            target = self.row_count_policy.effective_row_count(len(rows))
            rows = rows[:target]
        else:
            target = self.config.min_rows or 0
        rows.extend({} for _ in range(target - len(rows)))

        context = []
        for row_index, row in enumerate(rows or [{}]):
            cells = {}
            for column in self.columns:
                cells[column.id] = {
                    "value": self.registry.to_string(column.type, resolve_cell(row, column)),
                    "has_errors": bool(has_errors and has_errors.has_cell_error(row_index, column.id)),
                }
            context.append(cells)
        return context

    def add_row_control(self) -> AddRowControl | None:
        policy = self.row_count_policy
        if not policy.allows_add_remove:
            return None
        return AddRowControl(
            label=self.translator(self.config.add_row_label),
            min_rows=policy.min_rows,
            max_rows=policy.max_rows,
            disabled=bool(policy.min_rows and policy.max_rows and policy.min_rows == policy.max_rows),
        )

    def input_context(self, value: Any, result: TableValidationResult | None = None) -> dict[str, Any]:
        control = self.add_row_control()
        return {
            "handle": self.handle,
            "label": self.label,
            "static": self.config.static,
            "columns": self.columns_for_builder(),
            "rows": self.input_rows(value, result),
            "add_row": asdict(control) if control else None,
            "remove_label": self.translator(messages.REMOVE_ROW),
        }

    # ── Builder ──────────────────────────────────────────────────────────────

    def columns_for_builder(self) -> list[dict[str, Any]]:
        return self.config.builder_columns()

    def builder_settings(self) -> dict[str, Any]:
        data = super().builder_settings()
        data["columns"] = self.config.column_mapping()
        return data
