"""
Field Base Classes

FieldMeta: declarative metadata for a field type (type name, display name).
FieldBase: abstract base class every field type subclasses.
"""

from __future__ import annotations

import json
from abc import ABC
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from formfields.cells.registry import CellTypeRegistry, cell_registry
from formfields.exceptions import FieldConfigurationError
from formfields.i18n import messages
from formfields.i18n.translator import Translator
from formfields.services.results import FieldValidationResult


@dataclass(frozen=True)
class FieldMeta:
    """
    Declarative metadata describing a field type.

    Attributes:
        type_name:      Machine-readable slug, e.g. "table", "dropdown".
        display_name:   Human-readable name shown in the form builder.
        description:    Short description of the field type.
        has_sub_fields: Whether values are composites of named subfields.
    """

    type_name: str
    display_name: str
    description: str = ""
    has_sub_fields: bool = False


def is_blank(value: Any) -> bool:
    """None, whitespace-only strings and empty containers count as blank."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return not value
    return False


def decode_if_json(value: str) -> Any:
    """Decode a JSON document, returning the original string when it is not one."""
    try:
        return json.loads(value)
    except ValueError:
        return value


class FieldBase(ABC):
    """
    Abstract base class for form field types.

    Subclasses set ``meta`` and ``config_model``. Every value operation has a
    sensible default so subclasses only override what they need.
    """

    meta: ClassVar[FieldMeta]
    config_model: ClassVar[type[BaseModel]]

    def __init__(
        self,
        config: BaseModel | None = None,
        registry: CellTypeRegistry = cell_registry,
        translator: Translator | None = None,
    ) -> None:
        self.config = config if config is not None else self.default_config()
        self.registry = registry
        self.translator = translator or Translator()

    # ── Construction ─────────────────────────────────────────────────────────

    @classmethod
    def default_config(cls) -> BaseModel:
        return cls.config_model()

    @classmethod
    def from_settings(cls, data: dict[str, Any], **kwargs: Any) -> FieldBase:
        """Build a field from a raw settings mapping, as stored or posted by the builder."""
        try:
            config = cls.config_model.model_validate(data)
        except PydanticValidationError as exc:
            raise FieldConfigurationError(
                f"Invalid {cls.meta.display_name} settings",
                details={"errors": exc.errors(include_url=False, include_context=False)},
            ) from exc
        return cls(config, **kwargs)

    def builder_settings(self) -> dict[str, Any]:
        """Settings in the form builder's camelCase shape."""
        return self.config.model_dump(by_alias=True)

    # ── Identity ─────────────────────────────────────────────────────────────

    @property
    def handle(self) -> str:
        return getattr(self.config, "handle", "")

    @property
    def label(self) -> str:
        return getattr(self.config, "label", "") or self.handle

    @property
    def required(self) -> bool:
        return bool(getattr(self.config, "required", False))

    # ── Values ───────────────────────────────────────────────────────────────

    def normalize_value(self, value: Any, fresh: bool = False) -> Any:
        return value

    def is_value_empty(self, value: Any) -> bool:
        return is_blank(value)

    def required_error(self, value: Any) -> str | None:
        """The "cannot be blank" message when a required field has no value."""
        if not self.required or not self.is_value_empty(value):
            return None
        custom = getattr(self.config, "error_message", None)
        if custom:
            return self.translator(custom)
        return self.translator(messages.CANNOT_BE_BLANK, {"attribute": self.label})

    def validate(self, value: Any) -> FieldValidationResult:
        result = FieldValidationResult()
        error = self.required_error(value)
        if error:
            result.field_errors.append(error)
        return result

    def value_as_string(self, value: Any) -> str:
        return "" if value is None else str(value)

    def value_for_export(self, value: Any) -> Any:
        return self.value_as_string(value)

    def value_for_summary(self, value: Any) -> Any:
        return self.value_as_string(value)
