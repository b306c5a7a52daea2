"""
Subfield Fields

Composite fields whose value is a mapping of subfield handle -> value.
SubfieldField holds an ordered list of Subfield entries, each wrapping a
concrete field instance it delegates to (e.g. Name -> NameFirst,
Date -> DateAmPmDropdown).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import Field

from formfields.fields.base import FieldBase, FieldMeta, decode_if_json, is_blank
from formfields.fields.dropdown import DropdownField
from formfields.fields.text import SingleLineTextField
from formfields.i18n import messages
from formfields.schemas.dropdown import DropdownFieldConfig, DropdownOption
from formfields.schemas.subfields import SubfieldFieldConfig
from formfields.services.results import SubfieldValidationResult

logger = logging.getLogger(__name__)


class NameFirst(SingleLineTextField):
    meta = FieldMeta(type_name="name-first", display_name="Name - First Name")


def am_pm_options() -> list[DropdownOption]:
    return [
        DropdownOption(label=messages.AM, value="AM"),
        DropdownOption(label=messages.PM, value="PM"),
    ]


class DateAmPmConfig(DropdownFieldConfig):
    options: list[DropdownOption] = Field(default_factory=am_pm_options, title="Options")


class DateAmPmDropdown(DropdownField):
    meta = FieldMeta(type_name="date-ampm", display_name="Date - AM/PM")
    config_model = DateAmPmConfig


@dataclass(frozen=True)
class Subfield:
    handle: str
    label: str
    enabled: bool
    required: bool
    field: FieldBase


def get_path(value: Any, path: str) -> Any:
    """Read a dotted key (``"name.firstName"``) out of nested mappings."""
    current = value
    for part in path.split("."):
        if isinstance(current, Mapping):
            current = current.get(part)
        else:
            current = getattr(current, part, None)
        if current is None:
            return None
    return current


class SubfieldField(FieldBase):
    meta = FieldMeta(
        type_name="subfields",
        display_name="Subfields",
        description="A composite of named subfields, e.g. first and last name.",
        has_sub_fields=True,
    )
    config_model = SubfieldFieldConfig

    config: SubfieldFieldConfig

    def __init__(self, config: SubfieldFieldConfig | None = None, **kwargs: Any) -> None:
        super().__init__(config, **kwargs)
        self.subfields = self._build_subfields()

    def _build_subfields(self) -> list[Subfield]:
        from formfields.fields.registry import field_registry

        subfields = []
        for entry in self.config.subfields:
            field = field_registry.create(
                entry.field_type,
                {"handle": entry.handle, "label": entry.label},
                registry=self.registry,
                translator=self.translator,
            )
            subfields.append(
                Subfield(
                    handle=entry.handle,
                    label=entry.label or entry.handle,
                    enabled=entry.enabled,
                    required=entry.required,
                    field=field,
                )
            )
        return subfields

    def enabled_subfields(self) -> list[Subfield]:
        return [subfield for subfield in self.subfields if subfield.enabled]

    # ── Values ───────────────────────────────────────────────────────────────

    def normalize_value(self, value: Any, fresh: bool = False) -> dict[str, Any]:
        if isinstance(value, str):
            value = decode_if_json(value)
        source = value if isinstance(value, Mapping) else {}
        return {
            subfield.handle: subfield.field.normalize_value(source.get(subfield.handle), fresh=fresh)
            for subfield in self.enabled_subfields()
        }

    def is_value_empty(self, value: Any) -> bool:
        if not isinstance(value, Mapping):
            return True
        return all(is_blank(value.get(subfield.handle)) for subfield in self.enabled_subfields())

    def validate_required_fields(self, value: Any) -> dict[str, str]:
        """Messages keyed by ``"{field_handle}.{subfield_handle}"`` for blank required subfields."""
        source = value if isinstance(value, Mapping) else {}
        errors: dict[str, str] = {}
        for subfield in self.enabled_subfields():
            if not (self.required or subfield.required):
                continue
            if is_blank(source.get(subfield.handle, "")):
                errors[f"{self.handle}.{subfield.handle}"] = self.translator(
                    messages.SUBFIELD_CANNOT_BE_BLANK, {"label": subfield.label}
                )
        return errors

    def validate(self, value: Any) -> SubfieldValidationResult:
        result = SubfieldValidationResult()
        result.subfield_errors.update(self.validate_required_fields(value))

        source = value if isinstance(value, Mapping) else {}
        for subfield in self.enabled_subfields():
            sub_value = source.get(subfield.handle)
            if is_blank(sub_value):
                continue
            for message in subfield.field.validate(sub_value).field_errors:
                result.subfield_errors.setdefault(f"{self.handle}.{subfield.handle}", message)

        if not result.is_valid:
            logger.debug("Subfield field %r invalid: %s", self.handle, sorted(result.subfield_errors))
        return result

    # ── Projections ──────────────────────────────────────────────────────────

    def value_as_string(self, value: Any) -> str:
        if not isinstance(value, Mapping):
            return ""
        parts = [subfield.field.value_as_string(value.get(subfield.handle)) for subfield in self.enabled_subfields()]
        return " ".join(part for part in parts if part)

    def value_for_export(self, value: Any) -> dict[str, Any]:
        source = value if isinstance(value, Mapping) else {}
        return {
            f"{self.label}: {subfield.label}": subfield.field.value_for_export(source.get(subfield.handle))
            for subfield in self.enabled_subfields()
        }

    def value_for_integration(self, value: Any, field_key: str = "") -> Any:
        """The whole composite, or one subfield's value when ``field_key`` names it."""
        if field_key:
            return get_path(value, field_key)
        return value
