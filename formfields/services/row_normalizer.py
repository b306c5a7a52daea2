"""Row normalization for table fields."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from formfields.cells.registry import CellTypeRegistry, cell_registry
from formfields.config import settings
from formfields.schemas.table import ColumnDefinition

logger = logging.getLogger(__name__)

Row = dict[str, Any]


def strip_template_rows(value: Any, template_key: str = settings.row_template_key) -> list[Any]:
    """
    Return the table's rows in order, without the editor's row template.

    The editor submits its hidden row template alongside real rows, so a
    posted table may be a mapping of row keys to rows that contains the
    template key.
    """
    if isinstance(value, Mapping):
        if template_key in value:
            logger.debug("Dropped template placeholder row %r", template_key)
        return [row for key, row in value.items() if key != template_key]
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        return list(value)
    return []


def resolve_cell(row: Mapping[str, Any], column: ColumnDefinition) -> Any:
    """Raw value of a column: by id, then by handle, else None."""
    if column.id in row:
        return row[column.id]
    if column.handle and column.handle in row:
        return row[column.handle]
    return None


def normalize_row(
    row: Any,
    columns: list[ColumnDefinition],
    registry: CellTypeRegistry = cell_registry,
    template_key: str = settings.row_template_key,
) -> Row:
    """
    Normalize every declared column of one row.

    The result holds each normalized value under both the column id and the
    column handle. Keys that are not declared columns are kept as they are.
    """
    source = row if isinstance(row, Mapping) else {}
    normalized: Row = {key: value for key, value in source.items() if key != template_key}

    for column in columns:
        cell = registry.normalize(column.type, resolve_cell(normalized, column))
        normalized[column.id] = cell
        if column.handle:
            normalized[column.handle] = cell

    return normalized


def normalize_rows(
    rows: Any,
    columns: list[ColumnDefinition],
    registry: CellTypeRegistry = cell_registry,
    template_key: str = settings.row_template_key,
) -> list[Row]:
    """Normalize a whole table value (list of rows or mapping of row keys to rows)."""
    return [
        normalize_row(row, columns, registry=registry, template_key=template_key)
        for row in strip_template_rows(rows, template_key=template_key)
    ]
