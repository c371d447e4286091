"""Audit log data access (Firestore ``auditLogs`` collection, read-only here)."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Optional, Protocol

from fastapi.concurrency import run_in_threadpool
from firebase_admin import firestore

from hrdesk.common.constants import AUDIT_DEFAULT_LIMIT, AUDIT_LOGS_COLLECTION

# Firestore field → API field
_FIELDS = {
    "01_action": "action",
    "02_performedBy": "performedBy",
    "03_performedById": "performedById",
    "04_employeeId": "employeeId",
    "05_employeeName": "employeeName",
    "06_details": "details",
    "07_oldValue": "oldValue",
    "08_newValue": "newValue",
    "09_ipAddress": "ipAddress",
    "10_userAgent": "userAgent",
    "12_entityType": "entityType",
    "13_entityId": "entityId",
}


def day_bounds(
    start: Optional[date],
    end: Optional[date],
) -> tuple[Optional[datetime], Optional[datetime]]:
    """Inclusive calendar-day range → ``[lower, upper)`` UTC datetimes."""
    lower = datetime.combine(start, time.min, tzinfo=timezone.utc) if start else None
    upper = (
        datetime.combine(end + timedelta(days=1), time.min, tzinfo=timezone.utc)
        if end else None
    )
    return lower, upper


def _document_to_log(doc_id: str, data: dict[str, Any]) -> dict[str, Any]:
    log: dict[str, Any] = {"id": doc_id}
    for field, name in _FIELDS.items():
        log[name] = data.get(field) or ""
    log["timestamp"] = data.get("11_timestamp")
    return log


class AuditLogStore(Protocol):
    async def for_employee(
        self,
        employee_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[dict[str, Any]]:
        ...

    async def for_entity(self, entity_type: str, entity_id: str) -> list[dict[str, Any]]:
        ...

    async def search(
        self,
        *,
        entity_type: Optional[str] = None,
        action: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        limit: int = AUDIT_DEFAULT_LIMIT,
    ) -> list[dict[str, Any]]:
        ...


# ── Firestore-backed ────────────────────────────────────────────────

class FirestoreAuditLogStore:
    def __init__(self, firestore_client: Any) -> None:
        self._db = firestore_client

    def _run(
        self,
        equals: dict[str, str],
        start: Optional[date],
        end: Optional[date],
        limit: int,
    ) -> list[dict[str, Any]]:
        query = self._db.collection(AUDIT_LOGS_COLLECTION)
        for field, value in equals.items():
            query = query.where(field, "==", value)
        lower, upper = day_bounds(start, end)
        if lower:
            query = query.where("11_timestamp", ">=", lower)
        if upper:
            query = query.where("11_timestamp", "<", upper)
        query = query.order_by("11_timestamp", direction=firestore.Query.DESCENDING).limit(limit)
        return [_document_to_log(doc.id, doc.to_dict() or {}) for doc in query.stream()]

    async def for_employee(
        self,
        employee_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[dict[str, Any]]:
        return await run_in_threadpool(
            self._run, {"04_employeeId": employee_id}, start, end, AUDIT_DEFAULT_LIMIT,
        )

    async def for_entity(self, entity_type: str, entity_id: str) -> list[dict[str, Any]]:
        return await run_in_threadpool(
            self._run,
            {"12_entityType": entity_type, "13_entityId": entity_id},
            None,
            None,
            AUDIT_DEFAULT_LIMIT,
        )

    async def search(
        self,
        *,
        entity_type: Optional[str] = None,
        action: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        limit: int = AUDIT_DEFAULT_LIMIT,
    ) -> list[dict[str, Any]]:
        equals = {}
        if entity_type:
            equals["12_entityType"] = entity_type
        if action:
            equals["01_action"] = action
        return await run_in_threadpool(self._run, equals, start, end, limit)


# ── In-memory ───────────────────────────────────────────────────────

class InMemoryAuditLogStore:
    """Holds entries in the API shape; ``timestamp`` must be timezone-aware."""

    def __init__(self, logs: Optional[list[dict[str, Any]]] = None) -> None:
        self.logs: list[dict[str, Any]] = [dict(log) for log in logs or []]

    def _select(
        self,
        equals: dict[str, str],
        start: Optional[date],
        end: Optional[date],
        limit: int,
    ) -> list[dict[str, Any]]:
        lower, upper = day_bounds(start, end)
        matched = []
        for log in self.logs:
            if any(log.get(k) != v for k, v in equals.items()):
                continue
            ts = log.get("timestamp")
            if lower and (ts is None or ts < lower):
                continue
            if upper and (ts is None or ts >= upper):
                continue
            matched.append(dict(log))
        matched.sort(
            key=lambda log: log.get("timestamp") or datetime.min.replace(tzinfo=timezone.utc),
            reverse=True,
        )
        return matched[:limit]

    async def for_employee(
        self,
        employee_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[dict[str, Any]]:
        return self._select({"employeeId": employee_id}, start, end, AUDIT_DEFAULT_LIMIT)

    async def for_entity(self, entity_type: str, entity_id: str) -> list[dict[str, Any]]:
        return self._select(
            {"entityType": entity_type, "entityId": entity_id}, None, None, AUDIT_DEFAULT_LIMIT,
        )

    async def search(
        self,
        *,
        entity_type: Optional[str] = None,
        action: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        limit: int = AUDIT_DEFAULT_LIMIT,
    ) -> list[dict[str, Any]]:
        equals = {}
        if entity_type:
            equals["entityType"] = entity_type
        if action:
            equals["action"] = action
        return self._select(equals, start, end, limit)
