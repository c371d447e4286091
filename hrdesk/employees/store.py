"""Employee directory.

Employee IDs for broadcasts come from column A of the ``Employees``
worksheet; administrators are the ``employees`` documents whose
``04_role`` is ``admin``.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

from fastapi.concurrency import run_in_threadpool

from hrdesk.common.constants import ADMIN_ROLE, EMPLOYEES_COLLECTION, EMPLOYEES_WORKSHEET
from hrdesk.integrations.sheets import worksheet_records


class EmployeeDirectory(Protocol):
    async def employee_ids(self, spreadsheet_id: str) -> list[str]:
        ...

    async def admin_ids(self) -> list[str]:
        ...


# ── Google-backed ───────────────────────────────────────────────────

class GoogleEmployeeDirectory:
    def __init__(self, sheets_client: Any, firestore_client: Any) -> None:
        self._sheets = sheets_client
        self._db = firestore_client

    def _employee_ids(self, spreadsheet_id: str) -> list[str]:
        _, values = worksheet_records(self._sheets, spreadsheet_id, EMPLOYEES_WORKSHEET)
        # Row 1 is the header
        return [
            str(line[0]).strip()
            for line in values[1:]
            if line and str(line[0]).strip()
        ]

    def _admin_ids(self) -> list[str]:
        query = self._db.collection(EMPLOYEES_COLLECTION).where("04_role", "==", ADMIN_ROLE)
        return [(doc.to_dict() or {}).get("01_id") or doc.id for doc in query.stream()]

    async def employee_ids(self, spreadsheet_id: str) -> list[str]:
        return await run_in_threadpool(self._employee_ids, spreadsheet_id)

    async def admin_ids(self) -> list[str]:
        return await run_in_threadpool(self._admin_ids)


# ── In-memory ───────────────────────────────────────────────────────

class InMemoryEmployeeDirectory:
    """Entries are ``{"id": ..., "role": "admin" | "user"}``."""

    def __init__(self, employees: Optional[list[dict[str, Any]]] = None) -> None:
        self.employees: list[dict[str, Any]] = [dict(e) for e in employees or []]

    async def employee_ids(self, spreadsheet_id: str) -> list[str]:
        return [str(e["id"]) for e in self.employees if e.get("id")]

    async def admin_ids(self) -> list[str]:
        return [
            str(e["id"]) for e in self.employees
            if e.get("id") and e.get("role") == ADMIN_ROLE
        ]
