"""
Cell Type Base Classes

CellType:        closed set of built-in column type tags.
CellTypeHandler: capability interface (normalize / validate / to_string)
                 implemented once per cell type and registered in a
                 CellTypeRegistry.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from formfields.i18n.translator import format_message

if TYPE_CHECKING:
    from formfields.i18n.translator import Translator


class CellType(str, enum.Enum):
    """Types of table columns."""

    SINGLELINE = "singleline"
    MULTILINE = "multiline"
    DATE = "date"
    TIME = "time"
    COLOR = "color"
    URL = "url"
    EMAIL = "email"


def cell_type_tag(cell_type: CellType | str) -> str:
    """Return the plain string tag for a CellType member or raw tag."""
    return cell_type.value if isinstance(cell_type, CellType) else str(cell_type)


def is_empty(value: Any) -> bool:
    """Null and the empty string never fail cell validation."""
    return value is None or value == ""


class CellTypeHandler(ABC):
    """
    Abstract base class for cell type handlers.

    Subclasses must declare the tags they serve. Every operation has a
    passthrough default so a handler only overrides what its type needs.
    """

    # Validator message template; "{attribute}" is swapped for "{value}"
    message: str = ""

    @property
    @abstractmethod
    def cell_types(self) -> tuple[str, ...]:
        """Type tags served by this handler."""
        ...

    def normalize(self, value: Any) -> Any:
        """Convert a raw submitted value into its canonical form."""
        return value

    def validate(self, value: Any, translator: Translator) -> str | None:
        """Return an error message, or None when the value is acceptable."""
        return None

    def to_string(self, value: Any) -> Any:
        """Project a normalized value for display and export."""
        return value

    def error_message(self, value: Any, translator: Translator) -> str:
        """
        Format the validator message for a single cell.

        Cell errors name the offending value instead of the field label.
        """
        template = translator(self.message).replace("{attribute}", "{value}")
        return format_message(template, {"value": self.to_string(value)})


class PassthroughHandler(CellTypeHandler):
    """Handler used for unknown tags: every operation is a no-op."""

    @property
    def cell_types(self) -> tuple[str, ...]:
        return ()
