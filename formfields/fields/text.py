"""Single-line text field."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from formfields.cells.base import CellType
from formfields.fields.base import FieldBase, FieldMeta


class SingleLineTextConfig(BaseModel):
    handle: str = Field("", title="Handle")
    label: str = Field("", title="Label")
    placeholder: Optional[str] = Field(None, title="Placeholder")
    default_value: Optional[str] = Field(None, title="Default Value")
    required: bool = Field(False, title="Required Field")
    error_message: Optional[str] = Field(None, title="Error Message")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore")


class SingleLineTextField(FieldBase):
    meta = FieldMeta(
        type_name="single-line-text",
        display_name="Single-Line Text",
        description="One line of free text.",
    )
    config_model = SingleLineTextConfig

    config: SingleLineTextConfig

    def normalize_value(self, value: Any, fresh: bool = False) -> str | None:
        if value is None and fresh:
            value = self.config.default_value
        return self.registry.normalize(CellType.SINGLELINE, value)
