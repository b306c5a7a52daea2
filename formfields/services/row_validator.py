"""Per-cell validation for table fields."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from formfields.cells.registry import CellTypeRegistry, cell_registry
from formfields.i18n.translator import Translator
from formfields.schemas.table import ColumnDefinition
from formfields.services.results import FieldValidationResult

logger = logging.getLogger(__name__)

CellKey = tuple[int, str]


@dataclass
class TableValidationResult(FieldValidationResult):
    """
    Outcome of validating one table value.

    Attributes:
        field_errors: Field-level messages (required, row count).
        cell_errors:  (row_index, column_id) -> message, one per failing cell.
    """

    cell_errors: dict[CellKey, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.cell_errors and not self.field_errors

    def has_cell_error(self, row_index: int, column_id: str) -> bool:
        return (row_index, column_id) in self.cell_errors

    def errors_for_row(self, row_index: int) -> dict[str, str]:
        return {column_id: message for (index, column_id), message in self.cell_errors.items() if index == row_index}

    def as_dict(self) -> dict[str, Any]:
        """JSON-friendly form used by the HTTP layer."""
        return {
            "field": list(self.field_errors),
            "cells": [
                {"row": row_index, "column": column_id, "message": message}
                for (row_index, column_id), message in self.cell_errors.items()
            ],
        }


def validate_rows(
    rows: list[Mapping[str, Any]],
    columns: list[ColumnDefinition],
    registry: CellTypeRegistry = cell_registry,
    translator: Translator | None = None,
) -> dict[CellKey, str]:
    """
    Validate every cell of every row.

    Cells are read by column id. Empty cells are skipped; requiredness is a
    field-level concern. Nothing short-circuits: all failures are collected.
    """
    translator = translator or Translator()
    errors: dict[CellKey, str] = {}

    for row_index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            continue
        for column in columns:
            value = row.get(column.id)
            if value is None or value == "":
                continue
            message = registry.validate(column.type, value, translator)
            if message:
                errors[(row_index, column.id)] = message

    if errors:
        logger.debug("Table validation found %d invalid cells", len(errors))
    return errors
