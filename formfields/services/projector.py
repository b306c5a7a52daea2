"""
String / export projections of table values

Each cell is read by column handle (falling back to the column id) and
rendered through its cell type's ``to_string``. Empty cells render as "".
"""

from __future__ import annotations

import csv
import io
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from markupsafe import Markup

from formfields.cells.registry import CellTypeRegistry, cell_registry
from formfields.config import settings
from formfields.i18n.translator import Translator
from formfields.schemas.table import ColumnDefinition
from formfields.utils.security import sanitize_csv_field


@dataclass(frozen=True)
class SummaryTable:
    """Plain structured form of the summary: headings plus rows of strings."""

    headers: list[str]
    rows: list[list[str]]


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def cell_display_value(row: Mapping[str, Any], column: ColumnDefinition, registry: CellTypeRegistry = cell_registry) -> Any:
    if column.handle and column.handle in row:
        value = row[column.handle]
    else:
        value = row.get(column.id)
    return registry.to_string(column.type, value)


def to_display_string(
    rows: list[Mapping[str, Any]],
    columns: list[ColumnDefinition],
    registry: CellTypeRegistry = cell_registry,
    delimiter: str = settings.display_delimiter,
) -> str:
    """Every cell of every row, in order, joined into one line (search index, list views)."""
    return delimiter.join(
        _text(cell_display_value(row, column, registry)) for row in rows or [] for column in columns
    )


def row_export_mapping(
    row: Mapping[str, Any],
    columns: list[ColumnDefinition],
    row_index: int,
    label_prefix: str,
    registry: CellTypeRegistry = cell_registry,
) -> dict[str, Any]:
    """Flat ``"{label}: {row number}: {heading}"`` -> value mapping for one row."""
    return {
        f"{label_prefix}: {row_index + 1}: {column.heading}": cell_display_value(row, column, registry)
        for column in columns
    }


def table_export_mapping(
    rows: list[Mapping[str, Any]],
    columns: list[ColumnDefinition],
    label_prefix: str,
    registry: CellTypeRegistry = cell_registry,
) -> dict[str, Any]:
    mapping: dict[str, Any] = {}
    for row_index, row in enumerate(rows or []):
        mapping.update(row_export_mapping(row, columns, row_index, label_prefix, registry))
    return mapping


def to_summary_table(
    rows: list[Mapping[str, Any]],
    columns: list[ColumnDefinition],
    registry: CellTypeRegistry = cell_registry,
    translator: Translator | None = None,
) -> SummaryTable:
    translator = translator or Translator()
    return SummaryTable(
        headers=[translator(column.heading) if column.heading else "" for column in columns],
        rows=[[_text(cell_display_value(row, column, registry)) for column in columns] for row in rows or []],
    )


def to_summary_markup(
    rows: list[Mapping[str, Any]],
    columns: list[ColumnDefinition],
    registry: CellTypeRegistry = cell_registry,
    translator: Translator | None = None,
) -> Markup:
    """HTML table for email and submission summaries; cell text is escaped."""
    table = to_summary_table(rows, columns, registry, translator)

    head = Markup("").join(Markup("<th>{}</th>").format(heading) for heading in table.headers)
    body = Markup("").join(
        Markup("<tr>{}</tr>").format(Markup("").join(Markup("<td>{}</td>").format(cell) for cell in cells))
        for cells in table.rows
    )
    return Markup("<table><thead><tr>{}</tr></thead><tbody>{}</tbody></table>").format(head, body)


def to_csv(
    rows: list[Mapping[str, Any]],
    columns: list[ColumnDefinition],
    registry: CellTypeRegistry = cell_registry,
    translator: Translator | None = None,
) -> str:
    """Spreadsheet export: heading row, then one line per table row."""
    table = to_summary_table(rows, columns, registry, translator)

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow([sanitize_csv_field(heading) for heading in table.headers])
    for cells in table.rows:
        writer.writerow([sanitize_csv_field(cell) for cell in cells])
    return output.getvalue()
