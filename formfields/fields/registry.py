"""
Field Type Registry

FieldTypeRegistry: in-process registry mapping a field type slug to its
FieldBase subclass, and building configured field instances from raw
settings.
"""

from __future__ import annotations

import logging
from typing import Any

from formfields.exceptions import UnknownFieldTypeError
from formfields.fields.base import FieldBase
from formfields.fields.dropdown import DropdownField
from formfields.fields.subfields import DateAmPmDropdown, NameFirst, SubfieldField
from formfields.fields.table import TableField
from formfields.fields.text import SingleLineTextField

logger = logging.getLogger(__name__)


class FieldTypeRegistry:
    """Stores field type classes by their ``meta.type_name``."""

    def __init__(self) -> None:
        self._types: dict[str, type[FieldBase]] = {}

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, field_class: type[FieldBase]) -> None:
        self._types[field_class.meta.type_name] = field_class
        logger.debug("Field type registered: %s", field_class.meta.type_name)

    # ── Lookup ────────────────────────────────────────────────────────────────

    def get(self, type_name: str) -> type[FieldBase] | None:
        """Return the field class for a slug, or None if not registered."""
        return self._types.get(type_name)

    def require(self, type_name: str) -> type[FieldBase]:
        field_class = self._types.get(type_name)
        if field_class is None:
            raise UnknownFieldTypeError(type_name, available=list(self._types))
        return field_class

    def all_types(self) -> list[type[FieldBase]]:
        """Return all registered field classes in registration order."""
        return list(self._types.values())

    def is_registered(self, type_name: str) -> bool:
        return type_name in self._types

    # ── Construction ──────────────────────────────────────────────────────────

    def create(self, type_name: str, settings: dict[str, Any] | None = None, **kwargs: Any) -> FieldBase:
        """
        Build a configured field from its type slug and raw settings.

        Raises:
            UnknownFieldTypeError: no field type is registered under the slug.
            FieldConfigurationError: the settings are invalid for the type.
        """
        return self.require(type_name).from_settings(settings or {}, **kwargs)


def build_default_registry() -> FieldTypeRegistry:
    registry = FieldTypeRegistry()
    for field_class in (TableField, DropdownField, SingleLineTextField, NameFirst, DateAmPmDropdown, SubfieldField):
        registry.register(field_class)
    return registry


# ── Global singleton ──────────────────────────────────────────────────────────
field_registry = build_default_registry()
