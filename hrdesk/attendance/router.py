"""Attendance router — monthly records and daily check-in status."""

from typing import Any

from fastapi import APIRouter, Depends

from hrdesk.attendance.schemas import AttendanceStatusRequest, MonthlyAttendanceRequest
from hrdesk.attendance.service import AttendanceService
from hrdesk.attendance.store import AttendanceStore
from hrdesk.dependencies import get_attendance_store, require_spreadsheet_id

router = APIRouter(prefix="", tags=["attendance"])


# ── POST /month ─────────────────────────────────────────────────────

@router.post("/month")
async def monthly_attendance(
    body: MonthlyAttendanceRequest,
    spreadsheet_id: str = Depends(require_spreadsheet_id),
    store: AttendanceStore = Depends(get_attendance_store),
) -> list[dict[str, Any]]:
    """List all attendance records for a year / month."""
    return await AttendanceService.fetch_monthly_attendance(store, spreadsheet_id, body)


# ── POST /status ────────────────────────────────────────────────────

@router.post("/status")
async def attendance_status(
    body: AttendanceStatusRequest,
    store: AttendanceStore = Depends(get_attendance_store),
) -> dict[str, Any]:
    """Check whether an employee has checked in / out on a date."""
    return await AttendanceService.check_attendance_status(store, body)
