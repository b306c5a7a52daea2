"""Dropdown field: a single or multiple choice among configured options."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from formfields.config import settings
from formfields.fields.base import FieldBase, FieldMeta, decode_if_json
from formfields.i18n import messages
from formfields.schemas.dropdown import DropdownFieldConfig, DropdownOption
from formfields.services.results import FieldValidationResult


class DropdownField(FieldBase):
    meta = FieldMeta(
        type_name="dropdown",
        display_name="Dropdown",
        description="Pick one or more values from a list of options.",
    )
    config_model = DropdownFieldConfig

    config: DropdownFieldConfig

    @staticmethod
    def builder_options(raw: Iterable[dict[str, Any]]) -> list[DropdownOption]:
        """Parse stored or posted options, including legacy optgroup entries."""
        return [DropdownOption.model_validate(option) for option in raw or []]

    def field_options(self) -> list[DropdownOption]:
        """Options as rendered, with the placeholder first when one is set."""
        options = list(self.config.options)
        if self.config.placeholder:
            options.insert(0, DropdownOption(label=self.translator(self.config.placeholder), value=""))
        return options

    def selectable_values(self) -> list[str]:
        return [option.value for option in self.config.options if option.selectable]

    def default_value(self) -> str | list[str] | None:
        defaults = [option.value for option in self.config.options if option.is_default and option.selectable]
        if self.config.multi:
            return [value for value in defaults if value != ""]
        return defaults[0] if defaults and defaults[0] != "" else None

    def normalize_value(self, value: Any, fresh: bool = False) -> str | list[str] | None:
        if value is None and fresh:
            return self.default_value()

        if self.config.multi:
            if isinstance(value, str):
                value = decode_if_json(value) if value.startswith("[") else [value]
            if not isinstance(value, (list, tuple)):
                return []
            return [str(item) for item in value if item is not None and str(item) != ""]

        if isinstance(value, (list, tuple)):
            value = value[0] if value else None
        if value is None or value == "":
            return None
        return str(value)

    def validate(self, value: Any) -> FieldValidationResult:
        result = super().validate(value)

        selected = value if isinstance(value, list) else ([] if value is None or value == "" else [value])
        allowed = set(self.selectable_values())
        if any(item not in allowed for item in selected):
            result.field_errors.append(self.translator(messages.INVALID_OPTION, {"attribute": self.label}))
        return result

    def option_label(self, value: str) -> str:
        for option in self.config.options:
            if not option.is_optgroup and option.value == value:
                return option.label
        return value

    def value_as_string(self, value: Any) -> str:
        if value is None or value == "":
            return ""
        if isinstance(value, list):
            return settings.display_delimiter.join(self.option_label(item) for item in value)
        return self.option_label(str(value))

    def value_for_export(self, value: Any) -> Any:
        if isinstance(value, list):
            return list(value)
        return "" if value is None else value

    def options_context(self) -> list[dict[str, Any]]:
        """Options in the form builder's camelCase shape."""
        return [option.model_dump(by_alias=True) for option in self.field_options()]
