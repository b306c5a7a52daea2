"""
Built-in cell type handlers

One handler per family of column types:
  TextCellHandler     — singleline, multiline
  DateTimeCellHandler — date, time
  ColorCellHandler    — color
  UrlCellHandler      — url
  EmailCellHandler    — email
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from formfields.cells.base import CellType, CellTypeHandler, is_empty
from formfields.cells.color import ColorData
from formfields.i18n import messages
from formfields.utils.dates import to_datetime, to_iso8601
from formfields.utils.text import normalize_text

if TYPE_CHECKING:
    from formfields.i18n.translator import Translator

_URL_ADAPTER = TypeAdapter(AnyUrl)


class TextCellHandler(CellTypeHandler):
    @property
    def cell_types(self) -> tuple[str, ...]:
        return (CellType.SINGLELINE.value, CellType.MULTILINE.value)

    def normalize(self, value: Any) -> Any:
        if value is None:
            return None
        return normalize_text(value)


class DateTimeCellHandler(CellTypeHandler):
    """Lenient: anything unparseable becomes None rather than an error."""

    @property
    def cell_types(self) -> tuple[str, ...]:
        return (CellType.DATE.value, CellType.TIME.value)

    def normalize(self, value: Any) -> Any:
        return to_datetime(value)

    def to_string(self, value: Any) -> Any:
        return to_iso8601(value)


class ColorCellHandler(CellTypeHandler):
    message = messages.INVALID_COLOR

    @property
    def cell_types(self) -> tuple[str, ...]:
        return (CellType.COLOR.value,)

    def normalize(self, value: Any) -> Any:
        if isinstance(value, ColorData):
            return value

        if not value or value == "#":
            return None

        text = str(value).lower()
        if not text.startswith("#"):
            text = "#" + text
        if len(text) == 4:
            text = "#" + text[1] * 2 + text[2] * 2 + text[3] * 2
        return ColorData(text)

    def validate(self, value: Any, translator: Translator) -> str | None:
        if is_empty(value):
            return None
        color = value if isinstance(value, ColorData) else ColorData(str(value))
        if color.is_valid:
            return None
        return self.error_message(value, translator)

    def to_string(self, value: Any) -> Any:
        if isinstance(value, ColorData):
            return value.hex
        return value


class UrlCellHandler(CellTypeHandler):
    message = messages.INVALID_URL

    def __init__(self, valid_schemes: list[str] | None = None) -> None:
        self.valid_schemes = [scheme.lower() for scheme in (valid_schemes or ["http", "https"])]

    @property
    def cell_types(self) -> tuple[str, ...]:
        return (CellType.URL.value,)

    def normalize(self, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    def validate(self, value: Any, translator: Translator) -> str | None:
        if is_empty(value):
            return None
        try:
            url = _URL_ADAPTER.validate_python(str(value))
        except PydanticValidationError:
            return self.error_message(value, translator)
        if url.scheme.lower() not in self.valid_schemes or not url.host:
            return self.error_message(value, translator)
        return None


class EmailCellHandler(CellTypeHandler):
    message = messages.INVALID_EMAIL

    @property
    def cell_types(self) -> tuple[str, ...]:
        return (CellType.EMAIL.value,)

    def validate(self, value: Any, translator: Translator) -> str | None:
        if is_empty(value):
            return None
        # Bare addresses only, "Name <addr>" is rejected
        try:
            validate_email(str(value), check_deliverability=False)
        except EmailNotValidError:
            return self.error_message(value, translator)
        return None
