"""
Cell types

Public API:
    CellType           — built-in column type tags
    CellTypeHandler    — base class for a cell type's behavior
    ColorData          — structured color cell value
    CellTypeRegistry   — tag -> handler lookup
    cell_registry      — registry holding the built-in handlers
"""

from .base import CellType, CellTypeHandler, PassthroughHandler
from .color import ColorData
from .registry import CellTypeRegistry, build_default_registry, cell_registry

__all__ = [
    "CellType",
    "CellTypeHandler",
    "CellTypeRegistry",
    "ColorData",
    "PassthroughHandler",
    "build_default_registry",
    "cell_registry",
]
