"""
Form Field Routes

GET  /api/v1/fields/types        → list registered field types
POST /api/v1/tables/normalize    → canonical rows for a table value
POST /api/v1/tables/validate     → validate a table value (422 when invalid)
POST /api/v1/tables/export       → export mapping, display string, summary
POST /api/v1/dropdowns/options   → rendered dropdown options
POST /api/v1/subfields/validate  → validate a composite subfield value

Every request carries the field settings alongside the value; nothing is
persisted. Messages are translated for the request's locale.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from formfields.config import settings
from formfields.exceptions import ValidationFailedError
from formfields.fields import DropdownField, SubfieldField, TableField, field_registry
from formfields.i18n.translator import Translator

router = APIRouter(tags=["Fields"])
logger = logging.getLogger(__name__)


# ── Pydantic schemas ───────────────────────────────────────────────────────────


class FieldTypeResponse(BaseModel):
    type_name: str
    display_name: str
    description: str
    has_sub_fields: bool


class FieldValueRequest(BaseModel):
    field: dict[str, Any] = Field(default_factory=dict, description="Field settings, as saved by the form builder.")
    value: Any = None
    fresh: bool = False


class TableExportRequest(FieldValueRequest):
    label_prefix: Optional[str] = None
    include_csv: bool = False


class FieldSettingsRequest(BaseModel):
    field: dict[str, Any] = Field(default_factory=dict)


class NormalizedTableResponse(BaseModel):
    rows: Optional[list[dict[str, Any]]]
    serialized: str


class ValidationResponse(BaseModel):
    valid: bool
    errors: dict[str, Any]
    value: Any = None


class TableExportResponse(BaseModel):
    mapping: dict[str, Any]
    display: str
    headers: list[str]
    rows: list[list[str]]
    markup: str
    csv: Optional[str] = None


class DropdownOptionsResponse(BaseModel):
    options: list[dict[str, Any]]
    default: Any = None


# ── Dependencies ───────────────────────────────────────────────────────────────


def get_translator(request: Request) -> Translator:
    """Translator for the locale chosen by LanguageMiddleware, or from the headers."""
    locale = getattr(request.state, "locale", None)
    if locale:
        return Translator(locale)
    return Translator.for_accept_language(
        request.headers.get("Accept-Language"), settings.supported_locales, settings.default_locale
    )


def _jsonable_rows(field: TableField, rows: list[dict[str, Any]] | None) -> tuple[list[dict[str, Any]] | None, str]:
    serialized = field.serialize_value(rows)
    return json.loads(serialized), serialized


# ── Routes ─────────────────────────────────────────────────────────────────────


@router.get("/fields/types", response_model=list[FieldTypeResponse])
async def list_field_types() -> list[FieldTypeResponse]:
    """List all registered field types."""
    return [
        FieldTypeResponse(
            type_name=field_class.meta.type_name,
            display_name=field_class.meta.display_name,
            description=field_class.meta.description,
            has_sub_fields=field_class.meta.has_sub_fields,
        )
        for field_class in field_registry.all_types()
    ]


@router.post("/tables/normalize", response_model=NormalizedTableResponse)
async def normalize_table(
    payload: FieldValueRequest,
    translator: Translator = Depends(get_translator),
) -> NormalizedTableResponse:
    """Normalize a posted or stored table value against its column definitions."""
    field = TableField.from_settings(payload.field, translator=translator)
    rows, serialized = _jsonable_rows(field, field.normalize_value(payload.value, fresh=payload.fresh))
    return NormalizedTableResponse(rows=rows, serialized=serialized)


@router.post("/tables/validate", response_model=ValidationResponse)
async def validate_table(
    payload: FieldValueRequest,
    translator: Translator = Depends(get_translator),
) -> ValidationResponse:
    """Normalize then validate a table value; invalid values answer 422."""
    field = TableField.from_settings(payload.field, translator=translator)
    rows = field.normalize_value(payload.value, fresh=payload.fresh)
    result = field.validate(rows)

    if not result.is_valid:
        logger.info("Table %r rejected with %d cell errors", field.handle, len(result.cell_errors))
        raise ValidationFailedError(errors=result.as_dict())

    jsonable, _ = _jsonable_rows(field, rows)
    return ValidationResponse(valid=True, errors=result.as_dict(), value=jsonable)


@router.post("/tables/export", response_model=TableExportResponse)
async def export_table(
    payload: TableExportRequest,
    translator: Translator = Depends(get_translator),
) -> TableExportResponse:
    """Export projections of a table value."""
    field = TableField.from_settings(payload.field, translator=translator)
    rows = field.normalize_value(payload.value, fresh=payload.fresh)
    summary = field.summary_table(rows)

    return TableExportResponse(
        mapping=field.value_for_export(rows, label_prefix=payload.label_prefix),
        display=field.value_as_string(rows),
        headers=summary.headers,
        rows=summary.rows,
        markup=str(field.value_for_summary(rows)),
        csv=field.value_as_csv(rows) if payload.include_csv else None,
    )


@router.post("/dropdowns/options", response_model=DropdownOptionsResponse)
async def dropdown_options(
    payload: FieldSettingsRequest,
    translator: Translator = Depends(get_translator),
) -> DropdownOptionsResponse:
    """Options as rendered on the front end, placeholder first."""
    field = DropdownField.from_settings(payload.field, translator=translator)
    return DropdownOptionsResponse(options=field.options_context(), default=field.default_value())


@router.post("/subfields/validate", response_model=ValidationResponse)
async def validate_subfields(
    payload: FieldValueRequest,
    translator: Translator = Depends(get_translator),
) -> ValidationResponse:
    """Normalize then validate a composite value; invalid values answer 422."""
    field = SubfieldField.from_settings(payload.field, translator=translator)
    value = field.normalize_value(payload.value, fresh=payload.fresh)
    result = field.validate(value)

    if not result.is_valid:
        raise ValidationFailedError(errors=result.as_dict())

    return ValidationResponse(valid=True, errors=result.as_dict(), value=value)
