from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from formfields.cells.base import CellType, cell_type_tag
from formfields.i18n import messages
from formfields.utils.text import generate_handle

# Builder-only settings that older form builders still post
_LEGACY_KEYS = ("tableDropdownOptions",)


class ColumnDefinition(BaseModel):
    id: str = Field(..., title="Column ID", description="Stable positional key of the column.")
    handle: str = Field("", title="Handle", description="Stable semantic key of the column.")
    heading: str = Field("", title="Column Heading", description="Label shown above the column.")
    type: str = Field(CellType.SINGLELINE.value, title="Type", description="Cell type tag of the column.")
    width: Optional[str] = Field(None, title="Width", description="Optional column width, e.g. '50' or '20%'.")

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, value):
        if value is None or value == "":
            return CellType.SINGLELINE.value
        return cell_type_tag(value)

    @field_validator("width", mode="before")
    @classmethod
    def coerce_width(cls, value):
        if value is None or value == "":
            return None
        return str(value)

    @model_validator(mode="before")
    @classmethod
    def fill_handle(cls, data):
        if isinstance(data, dict) and not data.get("handle") and data.get("heading"):
            data = {**data, "handle": generate_handle(data["heading"])}
        return data


class TableFieldConfig(BaseModel):
    handle: str = Field("", title="Handle", description="Handle of the table field.")
    label: str = Field("", title="Label", description="Field label, used in field-level messages and exports.")
    columns: list[ColumnDefinition] = Field(default_factory=list, title="Table Columns")
    defaults: list[dict[str, Any]] = Field(default_factory=list, title="Default Values")
    min_rows: Optional[int] = Field(None, ge=0, title="Minimum instances")
    max_rows: Optional[int] = Field(None, ge=0, title="Maximum instances")
    static: bool = Field(False, title="Static", description="Disallow adding or removing rows.")
    required: bool = Field(False, title="Required Field")
    error_message: Optional[str] = Field(None, title="Error Message")
    add_row_label: str = Field(messages.ADD_ROW, title="Add Row Label")
    searchable: bool = True

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "handle": "contacts",
                "label": "Contacts",
                "columns": [
                    {"id": "col1", "heading": "Name", "handle": "name", "type": "singleline"},
                    {"id": "col2", "heading": "Email", "handle": "email", "type": "email"},
                ],
                "minRows": 1,
                "maxRows": 5,
            }
        },
    )

    @model_validator(mode="before")
    @classmethod
    def accept_builder_shapes(cls, data):
        """
        Accept columns either as the builder's ordered list or as the stored
        mapping of column id -> column, and drop legacy builder keys.
        """
        if not isinstance(data, dict):
            return data

        data = {key: value for key, value in data.items() if key not in _LEGACY_KEYS}

        columns = data.get("columns")
        if isinstance(columns, dict):
            data["columns"] = [{**column, "id": column_id} for column_id, column in columns.items()]
        elif isinstance(columns, list):
            data["columns"] = [
                column if not isinstance(column, dict) or column.get("id") else {**column, "id": f"col{index + 1}"}
                for index, column in enumerate(columns)
            ]

        defaults = data.get("defaults")
        if isinstance(defaults, dict):
            data["defaults"] = list(defaults.values())
        elif defaults is None and "defaults" in data:
            data["defaults"] = []

        return data

    @field_validator("columns")
    @classmethod
    def unique_column_keys(cls, columns: list[ColumnDefinition]) -> list[ColumnDefinition]:
        ids = [column.id for column in columns]
        if len(ids) != len(set(ids)):
            raise ValueError("Column IDs must be unique")
        handles = [column.handle for column in columns if column.handle]
        if len(handles) != len(set(handles)):
            raise ValueError("Column handles must be unique")
        return columns

    def column_mapping(self) -> dict[str, dict[str, Any]]:
        """Stored representation: column id -> column settings (without the id)."""
        return {column.id: column.model_dump(exclude={"id"}) for column in self.columns}

    def builder_columns(self) -> list[dict[str, Any]]:
        """Builder representation: ordered list, each column carrying its id."""
        return [column.model_dump() for column in self.columns]
