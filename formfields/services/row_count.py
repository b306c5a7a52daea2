"""
Row-count enforcement

A table's configuration puts it in exactly one mode:

    unconstrained  no bounds set, any row count is accepted
    bounded        min and/or max set, violations give one field error
    static         fixed default rows, bounds are ignored entirely
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from formfields.i18n import messages
from formfields.i18n.translator import Translator
from formfields.schemas.table import TableFieldConfig


class RowCountMode(str, enum.Enum):
    UNCONSTRAINED = "unconstrained"
    BOUNDED = "bounded"
    STATIC = "static"


@dataclass(frozen=True)
class RowCountPolicy:
    mode: RowCountMode
    min_rows: int | None = None
    max_rows: int | None = None
    fixed_count: int | None = None

    @classmethod
    def from_config(cls, config: TableFieldConfig) -> RowCountPolicy:
        """Classify a table configuration. Zero or unset bounds are disabled."""
        if config.static:
            return cls(RowCountMode.STATIC, fixed_count=len(config.defaults))
        if config.min_rows or config.max_rows:
            return cls(RowCountMode.BOUNDED, min_rows=config.min_rows or None, max_rows=config.max_rows or None)
        return cls(RowCountMode.UNCONSTRAINED)

    @property
    def allows_add_remove(self) -> bool:
        return self.mode != RowCountMode.STATIC

    def effective_row_count(self, count: int) -> int:
        if self.mode == RowCountMode.STATIC:
            return self.fixed_count or 0
        return count

    def check(self, count: int, attribute: str, translator: Translator | None = None) -> str | None:
        """Return the field-level error for ``count`` rows, or None."""
        if self.mode != RowCountMode.BOUNDED:
            return None

        translator = translator or Translator()

        # Empty tables are only checked when a minimum exists
        if count == 0 and not self.min_rows:
            return None
        if self.min_rows and count < self.min_rows:
            return translator(messages.TOO_FEW_ROWS, {"attribute": attribute, "min": self.min_rows})
        if self.max_rows and count > self.max_rows:
            return translator(messages.TOO_MANY_ROWS, {"attribute": attribute, "max": self.max_rows})
        return None
