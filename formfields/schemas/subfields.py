from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SubfieldSettings(BaseModel):
    handle: str = Field(..., title="Handle", description="Key of the subfield inside the composite value.")
    label: str = Field("", title="Label")
    enabled: bool = Field(True, title="Enabled")
    required: bool = Field(False, title="Required")
    field_type: str = Field("single-line-text", title="Field Type", description="Registered field type of the subfield.")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore")


class SubfieldFieldConfig(BaseModel):
    handle: str = Field("", title="Handle")
    label: str = Field("", title="Label")
    required: bool = Field(False, title="Required Field")
    subfield_label_position: Optional[str] = Field(None, title="Subfield Label Position")
    subfields: list[SubfieldSettings] = Field(default_factory=list, title="Subfields")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore")
