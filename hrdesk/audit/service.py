"""Audit log service — read-only queries by employee, by entity, or by filter."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from hrdesk.audit.schemas import AuditLogListResponse, AuditLogResponse
from hrdesk.audit.store import AuditLogStore
from hrdesk.common.constants import (
    AUDIT_DEFAULT_LIMIT,
    DATE_FORMAT,
    AuditEntityType,
)
from hrdesk.common.exceptions import ValidationException, translate_store_errors
from hrdesk.common.validation import is_blank

FETCH_FAILED = "Failed to fetch audit logs"


def parse_day(value: Optional[str], field: str) -> Optional[date]:
    """``YYYY-MM-DD`` → ``date``; blank values mean "no bound"."""
    if is_blank(value):
        return None
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        raise ValidationException(
            f"{field} must be a date in YYYY-MM-DD format",
            errors={field: ["Expected YYYY-MM-DD."]},
        ) from None


def _as_response(logs: list[dict[str, Any]]) -> AuditLogListResponse:
    return AuditLogListResponse(
        logs=[AuditLogResponse.model_validate(log) for log in logs],
        total=len(logs),
    )


class AuditService:
    """Async audit-log queries."""

    @staticmethod
    async def employee_logs(
        store: AuditLogStore,
        employee_id: str,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> AuditLogListResponse:
        """Logs about one employee, optionally bounded by inclusive dates."""
        start = parse_day(start_date, "startDate")
        end = parse_day(end_date, "endDate")
        with translate_store_errors(FETCH_FAILED):
            logs = await store.for_employee(employee_id, start, end)
        return _as_response(logs)

    @staticmethod
    async def entity_logs(
        store: AuditLogStore,
        entity_type: AuditEntityType,
        entity_id: str,
    ) -> AuditLogListResponse:
        with translate_store_errors(FETCH_FAILED):
            logs = await store.for_entity(entity_type.value, entity_id)
        return _as_response(logs)

    @staticmethod
    async def search_logs(
        store: AuditLogStore,
        *,
        entity_type: Optional[AuditEntityType] = None,
        action: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        limit: int = AUDIT_DEFAULT_LIMIT,
    ) -> AuditLogListResponse:
        start = parse_day(start_date, "startDate")
        end = parse_day(end_date, "endDate")
        with translate_store_errors(FETCH_FAILED):
            logs = await store.search(
                entity_type=entity_type.value if entity_type else None,
                action=None if is_blank(action) else action.strip(),
                start=start,
                end=end,
                limit=limit,
            )
        return _as_response(logs)
