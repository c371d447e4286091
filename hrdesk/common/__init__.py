"""Common module — shared utilities for HR Desk."""

from hrdesk.common.constants import (
    AUDIT_DEFAULT_LIMIT,
    AUDIT_MAX_LIMIT,
    DATE_FORMAT,
    AuditEntityType,
    NotificationType,
)
from hrdesk.common.exceptions import (
    AppException,
    BackendError,
    ConfigurationError,
    MissingParameterError,
    NotFoundException,
    StoreError,
    ValidationException,
    register_exception_handlers,
    translate_store_errors,
)

__all__ = [
    # Constants / Enums
    "AuditEntityType",
    "NotificationType",
    "DATE_FORMAT",
    "AUDIT_DEFAULT_LIMIT",
    "AUDIT_MAX_LIMIT",
    # Exceptions
    "AppException",
    "BackendError",
    "ConfigurationError",
    "MissingParameterError",
    "NotFoundException",
    "StoreError",
    "ValidationException",
    "register_exception_handlers",
    "translate_store_errors",
]
