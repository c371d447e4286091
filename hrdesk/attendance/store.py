"""Attendance data access.

Monthly listings come from the ``Attendance`` worksheet of the configured
spreadsheet; per-day check-in state comes from Firestore
(``attendance/{employeeName}/records/{date}``).
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

from fastapi.concurrency import run_in_threadpool

from hrdesk.common.constants import (
    ATTENDANCE_COLLECTION,
    ATTENDANCE_HEADERS,
    ATTENDANCE_WORKSHEET,
)
from hrdesk.integrations.sheets import rows_as_dicts, worksheet_records

# Sheet header → API field
_SHEET_FIELDS = {
    "Date": "date",
    "Employee Name": "employeeName",
    "In Time": "inTime",
    "Out Time": "outTime",
    "In Location": "inLocation",
    "Out Location": "outLocation",
    "Total Minutes": "totalMinutes",
    "Total Hours": "totalHours",
}


def month_prefix(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def _sheet_row_to_record(row: dict[str, str]) -> dict[str, Any]:
    record: dict[str, Any] = {field: row.get(header, "") for header, field in _SHEET_FIELDS.items()}
    minutes = str(record["totalMinutes"]).strip()
    record["totalMinutes"] = int(minutes) if minutes.isdigit() else 0
    return record


def _status_from_document(data: Optional[dict[str, Any]]) -> dict[str, Any]:
    if data is None:
        return {"hasCheckedIn": False, "hasCheckedOut": False}
    return {
        "hasCheckedIn": True,
        "hasCheckedOut": bool(data.get("03_outTime")),
        "inTime": data.get("02_inTime"),
        "outTime": data.get("03_outTime"),
        "inLocation": data.get("04_inLocation"),
        "outLocation": data.get("05_outLocation"),
    }


class AttendanceStore(Protocol):
    async def get_month(self, spreadsheet_id: str, year: int, month: int) -> list[dict[str, Any]]:
        ...

    async def get_status(self, employee_name: str, date: str) -> dict[str, Any]:
        ...


# ── Google-backed ───────────────────────────────────────────────────

class GoogleAttendanceStore:
    """Sheets for monthly listings, Firestore for daily status."""

    def __init__(self, sheets_client: Any, firestore_client: Any) -> None:
        self._sheets = sheets_client
        self._db = firestore_client

    def _read_month(self, spreadsheet_id: str, year: int, month: int) -> list[dict[str, Any]]:
        _, values = worksheet_records(self._sheets, spreadsheet_id, ATTENDANCE_WORKSHEET)
        prefix = month_prefix(year, month)
        records = [
            _sheet_row_to_record(row)
            for row in rows_as_dicts(values, ATTENDANCE_HEADERS)
            if row["Date"].startswith(prefix)
        ]
        records.sort(key=lambda r: r["date"], reverse=True)
        return records

    def _read_status(self, employee_name: str, date: str) -> dict[str, Any]:
        snapshot = (
            self._db.collection(ATTENDANCE_COLLECTION)
            .document(employee_name)
            .collection("records")
            .document(date)
            .get()
        )
        return _status_from_document(snapshot.to_dict() if snapshot.exists else None)

    async def get_month(self, spreadsheet_id: str, year: int, month: int) -> list[dict[str, Any]]:
        return await run_in_threadpool(self._read_month, spreadsheet_id, year, month)

    async def get_status(self, employee_name: str, date: str) -> dict[str, Any]:
        return await run_in_threadpool(self._read_status, employee_name, date)


# ── In-memory ───────────────────────────────────────────────────────

class InMemoryAttendanceStore:
    """Process-local store keyed on the same fields as the sheet rows."""

    def __init__(self, records: Optional[list[dict[str, Any]]] = None) -> None:
        self.records: list[dict[str, Any]] = [dict(r) for r in records or []]

    async def get_month(self, spreadsheet_id: str, year: int, month: int) -> list[dict[str, Any]]:
        prefix = month_prefix(year, month)
        matched = [dict(r) for r in self.records if str(r.get("date", "")).startswith(prefix)]
        matched.sort(key=lambda r: r["date"], reverse=True)
        return matched

    async def get_status(self, employee_name: str, date: str) -> dict[str, Any]:
        for r in self.records:
            if r.get("employeeName") == employee_name and r.get("date") == date:
                return _status_from_document({
                    "02_inTime": r.get("inTime"),
                    "03_outTime": r.get("outTime") or "",
                    "04_inLocation": r.get("inLocation"),
                    "05_outLocation": r.get("outLocation") or "",
                })
        return _status_from_document(None)
