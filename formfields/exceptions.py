"""
Custom Exception Classes for Form Fields

This module defines the exceptions raised for configuration and programming
faults. Data-level problems (invalid cells, wrong row counts) are never
raised: they are returned as validation results.
"""

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes, usable by clients for localization."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    FIELD_CONFIGURATION_INVALID = "FIELD_CONFIGURATION_INVALID"
    FIELD_TYPE_UNKNOWN = "FIELD_TYPE_UNKNOWN"
    CELL_TYPE_UNKNOWN = "CELL_TYPE_UNKNOWN"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class FormFieldsError(Exception):
    """Base exception class for all form field exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code
        super().__init__(self.message)


# ============================================================================
# Configuration Exceptions
# ============================================================================


class FieldConfigurationError(FormFieldsError):
    """Raised when a field configuration is inconsistent"""

    def __init__(self, message: str, setting: str | None = None, details: dict[str, Any] | None = None):
        error_details = details or {}
        if setting:
            error_details["setting"] = setting
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=error_details,
            error_code=ErrorCode.FIELD_CONFIGURATION_INVALID,
        )


class UnknownFieldTypeError(FormFieldsError):
    """Raised when a field type is not registered"""

    def __init__(self, field_type: str, available: list[str] | None = None):
        super().__init__(
            message=f"Field type '{field_type}' is not registered",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"field_type": field_type, "available": available or []},
            error_code=ErrorCode.FIELD_TYPE_UNKNOWN,
        )


class UnknownCellTypeError(FormFieldsError):
    """Raised when a strict lookup asks for a cell type nobody registered"""

    def __init__(self, cell_type: str):
        super().__init__(
            message=f"Cell type '{cell_type}' is not registered",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"cell_type": cell_type},
            error_code=ErrorCode.CELL_TYPE_UNKNOWN,
        )


# ============================================================================
# Validation Exceptions
# ============================================================================


class ValidationFailedError(FormFieldsError):
    """Raised by callers that want a submission with errors to abort"""

    def __init__(self, message: str = "Field validation failed", errors: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details={"errors": errors or {}},
            error_code=ErrorCode.VALIDATION_FAILED,
        )
