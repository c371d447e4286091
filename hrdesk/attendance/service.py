"""Attendance service — monthly listing and daily check-in status."""

from __future__ import annotations

import logging
from typing import Any, Union

from hrdesk.attendance.schemas import AttendanceStatusRequest, MonthlyAttendanceRequest
from hrdesk.attendance.store import AttendanceStore
from hrdesk.common.exceptions import ValidationException, translate_store_errors
from hrdesk.common.validation import require_fields

logger = logging.getLogger(__name__)


def _as_int(value: Union[int, str], field: str) -> int:
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationException(
            f"{field.capitalize()} must be a number",
            errors={field: ["Must be a number."]},
        ) from None


class AttendanceService:
    """Async attendance operations."""

    @staticmethod
    async def fetch_monthly_attendance(
        store: AttendanceStore,
        spreadsheet_id: str,
        body: MonthlyAttendanceRequest,
    ) -> list[dict[str, Any]]:
        """Return every record in the given month, as the store reports it."""
        require_fields(
            body.model_dump(), "year", "month",
            detail="Year and month required",
            falsy_is_missing=True,
        )
        year = _as_int(body.year, "year")
        month = _as_int(body.month, "month")
        if not 1 <= month <= 12:
            raise ValidationException(
                "Month must be between 1 and 12",
                errors={"month": ["Must be between 1 and 12."]},
            )

        with translate_store_errors("Failed to fetch attendance records"):
            records = await store.get_month(spreadsheet_id, year, month)
        logger.debug("Fetched %d attendance records for %04d-%02d", len(records), year, month)
        return records

    @staticmethod
    async def check_attendance_status(
        store: AttendanceStore,
        body: AttendanceStatusRequest,
    ) -> dict[str, Any]:
        """Return whether the employee has checked in / out on the date."""
        require_fields(body.model_dump(), "employeeName", "date")

        with translate_store_errors("Failed to check attendance status"):
            return await store.get_status(body.employeeName, body.date)
