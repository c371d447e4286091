"""Audit router — read-only views over the audit trail.

Every endpoint is gated on the spreadsheet identifier being configured.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from hrdesk.audit.schemas import AuditLogListResponse
from hrdesk.audit.service import AuditService
from hrdesk.audit.store import AuditLogStore
from hrdesk.common.constants import (
    AUDIT_DEFAULT_LIMIT,
    AUDIT_MAX_LIMIT,
    AuditEntityType,
)
from hrdesk.dependencies import get_audit_store, require_spreadsheet_id

router = APIRouter(
    prefix="",
    tags=["audit"],
    dependencies=[Depends(require_spreadsheet_id)],
)


# ── GET /employee/{employee_id} ─────────────────────────────────────

@router.get("/employee/{employee_id}", response_model=AuditLogListResponse)
async def employee_audit_logs(
    employee_id: str,
    startDate: Optional[str] = Query(None, description="YYYY-MM-DD, inclusive"),
    endDate: Optional[str] = Query(None, description="YYYY-MM-DD, inclusive"),
    store: AuditLogStore = Depends(get_audit_store),
):
    """Audit logs for one employee, e.g. ``/employee/001?startDate=2025-01-01``."""
    return await AuditService.employee_logs(store, employee_id, startDate, endDate)


# ── GET /logs ───────────────────────────────────────────────────────

@router.get("/logs", response_model=AuditLogListResponse)
async def search_audit_logs(
    entityType: Optional[AuditEntityType] = Query(None),
    action: Optional[str] = Query(None, description="Stored action, e.g. LEAVE_APPROVE"),
    startDate: Optional[str] = Query(None),
    endDate: Optional[str] = Query(None),
    limit: int = Query(AUDIT_DEFAULT_LIMIT, ge=1, le=AUDIT_MAX_LIMIT),
    store: AuditLogStore = Depends(get_audit_store),
):
    return await AuditService.search_logs(
        store,
        entity_type=entityType,
        action=action,
        start_date=startDate,
        end_date=endDate,
        limit=limit,
    )


# ── GET /logs/{entity_type}/{entity_id} ─────────────────────────────

@router.get("/logs/{entity_type}/{entity_id}", response_model=AuditLogListResponse)
async def entity_audit_logs(
    entity_type: AuditEntityType,
    entity_id: str,
    store: AuditLogStore = Depends(get_audit_store),
):
    """Audit logs for one entity, e.g. ``/logs/Attendance/2025-01-15_001``."""
    return await AuditService.entity_logs(store, entity_type, entity_id)
