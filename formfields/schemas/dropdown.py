from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from formfields.i18n import messages


class DropdownOption(BaseModel):
    label: str = Field("", title="Option Label")
    value: str = Field("", title="Value")
    is_optgroup: bool = Field(False, title="Optgroup?")
    is_default: bool = Field(False, title="Default")
    disabled: bool = Field(False, title="Disabled")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore")

    @field_validator("label", "value", mode="before")
    @classmethod
    def coerce_text(cls, value):
        return "" if value is None else str(value)

    @model_validator(mode="before")
    @classmethod
    def legacy_optgroup(cls, data):
        """Stored options mark a group header with an ``optgroup`` key holding its label."""
        if isinstance(data, dict) and data.get("optgroup"):
            data = dict(data)
            group = data.pop("optgroup")
            data["label"] = group if isinstance(group, str) else data.get("label", "")
            data["isOptgroup"] = True
        return data

    @property
    def selectable(self) -> bool:
        return not self.is_optgroup and not self.disabled


def default_options() -> list[DropdownOption]:
    return [DropdownOption(label=messages.SELECT_AN_OPTION, value="", is_default=True)]


class DropdownFieldConfig(BaseModel):
    handle: str = Field("", title="Handle")
    label: str = Field("", title="Label")
    options: list[DropdownOption] = Field(default_factory=default_options, title="Options")
    placeholder: Optional[str] = Field(None, title="Placeholder")
    multi: bool = Field(False, title="Allow Multiple")
    optgroups: bool = True
    required: bool = Field(False, title="Required Field")
    error_message: Optional[str] = Field(None, title="Error Message")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore")
