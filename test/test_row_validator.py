"""Tests for per-cell validation and the table validation result."""

from __future__ import annotations

from formfields.services.row_normalizer import normalize_rows
from formfields.services.row_validator import TableValidationResult, validate_rows


class TestValidateRows:
    def test_valid_rows_have_no_errors(self, registry, translator, contact_columns):
        rows = normalize_rows([{"col2": "jane@example.com", "col3": "https://example.com"}], contact_columns, registry)
        assert validate_rows(rows, contact_columns, registry, translator) == {}

    def test_errors_keyed_by_row_and_column_id(self, registry, translator, contact_columns):
        rows = normalize_rows(
            [{"col2": "jane@example.com"}, {"col2": "not-an-email", "col3": "not a url"}],
            contact_columns,
            registry,
        )
        errors = validate_rows(rows, contact_columns, registry, translator)
        assert set(errors) == {(1, "col2"), (1, "col3")}
        assert errors[(1, "col2")] == "not-an-email is not a valid email address."

    def test_empty_cells_skipped(self, registry, translator, contact_columns):
        rows = normalize_rows([{"col2": "", "col3": None}], contact_columns, registry)
        assert validate_rows(rows, contact_columns, registry, translator) == {}

    def test_all_failures_collected(self, registry, translator, contact_columns):
        rows = normalize_rows([{"col2": "bad"}] * 3, contact_columns, registry)
        assert len(validate_rows(rows, contact_columns, registry, translator)) == 3


class TestTableValidationResult:
    def test_valid_by_default(self):
        assert TableValidationResult().is_valid is True

    def test_field_error_invalidates(self):
        assert TableValidationResult(field_errors=["x"]).is_valid is False

    def test_cell_helpers(self):
        result = TableValidationResult(cell_errors={(0, "col1"): "a", (1, "col2"): "b"})
        assert result.has_cell_error(0, "col1") is True
        assert result.has_cell_error(0, "col2") is False
        assert result.errors_for_row(1) == {"col2": "b"}

    def test_as_dict(self):
        result = TableValidationResult(field_errors=["f"], cell_errors={(0, "col1"): "c"})
        assert result.as_dict() == {"field": ["f"], "cells": [{"row": 0, "column": "col1", "message": "c"}]}
