"""Leave request data access (``Leaves`` worksheet of the configured spreadsheet)."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Protocol

from fastapi.concurrency import run_in_threadpool
from gspread.utils import rowcol_to_a1

from hrdesk.common.constants import LEAVES_HEADERS, LEAVES_WORKSHEET
from hrdesk.common.exceptions import StoreError
from hrdesk.integrations.sheets import worksheet_records

LEAVE_NOT_FOUND = "Leave request not found"


def _approval_stamp(now: Optional[datetime] = None) -> tuple[str, str]:
    now = now or datetime.now()
    return now.date().isoformat(), now.strftime("%I:%M:%S %p")


class LeaveStore(Protocol):
    async def update_status(
        self,
        spreadsheet_id: str,
        leave_id: str,
        status: str,
        payment_status: Optional[str] = None,
        approved_by: Optional[str] = None,
    ) -> None:
        ...


# ── Google-backed ───────────────────────────────────────────────────

class SheetsLeaveStore:
    """Updates the matching row of the ``Leaves`` worksheet in one batch."""

    def __init__(self, sheets_client: Any) -> None:
        self._sheets = sheets_client

    def _update(
        self,
        spreadsheet_id: str,
        leave_id: str,
        status: str,
        payment_status: Optional[str],
        approved_by: Optional[str],
    ) -> None:
        worksheet, values = worksheet_records(self._sheets, spreadsheet_id, LEAVES_WORKSHEET)
        id_col = LEAVES_HEADERS.index("ID")

        row_number = None
        # Row 1 is the header; sheet rows are 1-based
        for idx, line in enumerate(values[1:], start=2):
            if len(line) > id_col and line[id_col] == leave_id:
                row_number = idx
                break
        if row_number is None:
            raise StoreError(LEAVE_NOT_FOUND)

        approved_date, approved_time = _approval_stamp()
        changes = {
            "Status": status,
            "Approved By": approved_by or "",
            "Approved Date": approved_date,
            "Approved Time": approved_time,
        }
        if payment_status:
            changes["Payment Status"] = payment_status

        worksheet.batch_update(
            [
                {
                    "range": rowcol_to_a1(row_number, LEAVES_HEADERS.index(header) + 1),
                    "values": [[value]],
                }
                for header, value in changes.items()
            ]
        )

    async def update_status(
        self,
        spreadsheet_id: str,
        leave_id: str,
        status: str,
        payment_status: Optional[str] = None,
        approved_by: Optional[str] = None,
    ) -> None:
        await run_in_threadpool(
            self._update, spreadsheet_id, leave_id, status, payment_status, approved_by,
        )


# ── In-memory ───────────────────────────────────────────────────────

class InMemoryLeaveStore:
    def __init__(self, leaves: Optional[list[dict[str, Any]]] = None) -> None:
        self.leaves: dict[str, dict[str, Any]] = {
            str(leave["id"]): dict(leave) for leave in leaves or []
        }

    async def update_status(
        self,
        spreadsheet_id: str,
        leave_id: str,
        status: str,
        payment_status: Optional[str] = None,
        approved_by: Optional[str] = None,
    ) -> None:
        leave = self.leaves.get(leave_id)
        if leave is None:
            raise StoreError(LEAVE_NOT_FOUND)

        approved_date, approved_time = _approval_stamp()
        leave.update(
            status=status,
            approvedBy=approved_by or "",
            approvedDate=approved_date,
            approvedTime=approved_time,
        )
        if payment_status:
            leave["paymentStatus"] = payment_status
