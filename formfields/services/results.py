"""Validation results returned (never raised) by the field types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class FieldValidationResult:
    """Field-level messages, e.g. required or invalid option."""

    field_errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.field_errors

    def as_dict(self) -> dict[str, Any]:
        return {"field": list(self.field_errors)}


@dataclass
class SubfieldValidationResult(FieldValidationResult):
    """Adds messages keyed by ``"{field_handle}.{subfield_handle}"``."""

    subfield_errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.field_errors and not self.subfield_errors

    def as_dict(self) -> dict[str, Any]:
        return {"field": list(self.field_errors), "subfields": dict(self.subfield_errors)}
