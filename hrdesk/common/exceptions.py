"""Custom exceptions and RFC 7807 Problem Detail error handlers."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

BASE_ERROR_URI = "https://hrdesk.local/errors"


# ── Exception hierarchy ─────────────────────────────────────────────

class AppException(Exception):
    """Base for all application exceptions → RFC 7807 JSON."""

    def __init__(
        self,
        status_code: int,
        error_type: str,
        title: str,
        detail: str,
        errors: Optional[dict[str, Any]] = None,
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        self.title = title
        self.detail = detail
        self.errors = errors
        super().__init__(detail)


class ValidationException(AppException):
    """400 — missing or invalid request input."""

    def __init__(
        self,
        detail: str = "Missing required fields",
        errors: Optional[dict[str, list[str]]] = None,
    ) -> None:
        super().__init__(
            status_code=400,
            error_type="validation-error",
            title="Validation Error",
            detail=detail,
            errors=errors,
        )


class MissingParameterError(ValidationException):
    """400 — one or more required parameters are absent or empty."""

    def __init__(self, fields: list[str], detail: str = "Missing required fields") -> None:
        super().__init__(
            detail=detail,
            errors={name: ["This field is required."] for name in fields},
        )
        self.fields = fields


class NotFoundException(AppException):
    """404 — entity not found."""

    def __init__(self, entity_type: str, entity_id: Any) -> None:
        super().__init__(
            status_code=404,
            error_type="not-found",
            title=f"{entity_type} Not Found",
            detail=f"{entity_type} with id '{entity_id}' does not exist.",
        )


class BackendError(AppException):
    """500 — external store unreachable, misconfigured, or erroring."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=500,
            error_type="backend-error",
            title="Backend Error",
            detail=detail,
        )


class ConfigurationError(BackendError):
    """500 — required server configuration is missing."""

    def __init__(self, detail: str = "Spreadsheet ID not configured") -> None:
        super().__init__(detail)
        self.error_type = "configuration-error"
        self.title = "Configuration Error"


class StoreError(Exception):
    """Raised by store implementations when the external service rejects a call."""


# ── Store-call translation ──────────────────────────────────────────

@contextmanager
def translate_store_errors(detail: str, *, passthrough: bool = False) -> Iterator[None]:
    """
    Convert any exception raised inside the block into a ``BackendError``.

    The original exception is logged with its traceback. With
    *passthrough* the store's own message is used as the response detail
    when it has one; otherwise *detail* is used.
    """
    try:
        yield
    except AppException:
        raise
    except Exception as exc:
        logger.exception(detail)
        message = str(exc) if passthrough and str(exc) else detail
        raise BackendError(message) from exc


# ── RFC 7807 builder ────────────────────────────────────────────────

def _build_problem_detail(exc: AppException, request: Request) -> dict[str, Any]:
    body: dict[str, Any] = {
        "type": f"{BASE_ERROR_URI}/{exc.error_type}",
        "title": exc.title,
        "status": exc.status_code,
        "detail": exc.detail,
        "instance": str(request.url.path),
        # Legacy clients read {"error": "..."}
        "error": exc.detail,
    }
    if exc.errors:
        body["errors"] = exc.errors
    return body


# ── FastAPI handlers ────────────────────────────────────────────────

async def _handle_app_exception(
    request: Request,
    exc: AppException,
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_build_problem_detail(exc, request),
        media_type="application/problem+json",
    )


async def _handle_validation_error(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    # Gated routes report missing configuration ahead of input errors
    from hrdesk.dependencies import pending_configuration_error

    config_error = pending_configuration_error(request)
    if config_error is not None:
        return await _handle_app_exception(request, config_error)

    field_errors: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = err.get("loc", ())
        name = (
            ".".join(str(p) for p in loc[1:])
            if len(loc) > 1
            else str(loc[0]) if loc else "unknown"
        )
        field_errors.setdefault(name or "body", []).append(err.get("msg", "Invalid value"))

    return JSONResponse(
        status_code=400,
        content={
            "type": f"{BASE_ERROR_URI}/validation-error",
            "title": "Validation Error",
            "status": 400,
            "detail": "Request validation failed.",
            "instance": str(request.url.path),
            "error": "Request validation failed.",
            "errors": field_errors,
        },
        media_type="application/problem+json",
    )


# ── Registration helper (called from main.py) ──────────────────────

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""
    app.add_exception_handler(AppException, _handle_app_exception)          # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _handle_validation_error)  # type: ignore[arg-type]
