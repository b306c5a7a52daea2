"""
Cell Type Registry

CellTypeRegistry: maps a column type tag to its handler and exposes the
normalize / validate / to_string contract used by the row services.

Unknown tags resolve to a passthrough handler so that tables declaring a
newer column type keep working: values flow through untouched and are never
rejected.
"""

from __future__ import annotations

import logging
from typing import Any

from formfields.cells.base import CellType, CellTypeHandler, PassthroughHandler, cell_type_tag
from formfields.cells.handlers import (
    ColorCellHandler,
    DateTimeCellHandler,
    EmailCellHandler,
    TextCellHandler,
    UrlCellHandler,
)
from formfields.config import settings
from formfields.exceptions import UnknownCellTypeError
from formfields.i18n.translator import Translator

logger = logging.getLogger(__name__)


class CellTypeRegistry:
    """
    In-process registry of cell type handlers.

    Populated once, then only read; safe to share between threads.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, CellTypeHandler] = {}
        self._fallback: CellTypeHandler = PassthroughHandler()

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, handler: CellTypeHandler) -> None:
        """Register a handler under every tag it declares (last writer wins)."""
        for tag in handler.cell_types:
            self._handlers[tag] = handler
        logger.debug("Cell handler registered: %s -> %s", ", ".join(handler.cell_types), type(handler).__name__)

    # ── Lookup ────────────────────────────────────────────────────────────────

    def get(self, cell_type: CellType | str) -> CellTypeHandler:
        """Return the handler for a tag, or the passthrough handler."""
        return self._handlers.get(cell_type_tag(cell_type), self._fallback)

    def require(self, cell_type: CellType | str) -> CellTypeHandler:
        """Return the handler for a tag, raising for unregistered tags."""
        handler = self._handlers.get(cell_type_tag(cell_type))
        if handler is None:
            raise UnknownCellTypeError(cell_type_tag(cell_type))
        return handler

    def is_registered(self, cell_type: CellType | str) -> bool:
        return cell_type_tag(cell_type) in self._handlers

    def types(self) -> list[str]:
        """Registered tags in registration order."""
        return list(self._handlers)

    # ── Cell operations ───────────────────────────────────────────────────────

    def normalize(self, cell_type: CellType | str, value: Any) -> Any:
        return self.get(cell_type).normalize(value)

    def validate(self, cell_type: CellType | str, value: Any, translator: Translator | None = None) -> str | None:
        """Validate one cell. Null and empty values always pass."""
        if value is None or value == "":
            return None
        return self.get(cell_type).validate(value, translator or Translator())

    def to_string(self, cell_type: CellType | str, value: Any) -> Any:
        """Display projection of a normalized cell; None stays None."""
        if value is None:
            return None
        return self.get(cell_type).to_string(value)


def build_default_registry(url_valid_schemes: list[str] | None = None) -> CellTypeRegistry:
    """Create a registry holding every built-in cell type."""
    registry = CellTypeRegistry()
    for handler in (
        TextCellHandler(),
        DateTimeCellHandler(),
        ColorCellHandler(),
        UrlCellHandler(url_valid_schemes),
        EmailCellHandler(),
    ):
        registry.register(handler)
    return registry


# ── Global instance ───────────────────────────────────────────────────────────
# Shared by the field types unless a custom registry is passed in.
cell_registry = build_default_registry(settings.url_valid_schemes)
