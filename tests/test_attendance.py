"""Attendance endpoints — monthly listing, daily status, validation, config gate."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from hrdesk.attendance.schemas import AttendanceStatusRequest, MonthlyAttendanceRequest
from hrdesk.attendance.service import AttendanceService
from hrdesk.attendance.store import InMemoryAttendanceStore
from hrdesk.common.exceptions import BackendError, MissingParameterError, ValidationException
from hrdesk.dependencies import get_attendance_store


# ═════════════════════════════════════════════════════════════════════
# 1. POST /attendance/month
# ═════════════════════════════════════════════════════════════════════


class TestMonthlyAttendance:

    async def test_returns_records_for_month(self, client):
        """{year: 2025, month: 3} → 200 with only March records, newest first."""
        resp = await client.post("/api/attendance/month", json={"year": 2025, "month": 3})

        assert resp.status_code == 200
        records = resp.json()
        assert isinstance(records, list)
        assert [r["date"] for r in records] == ["2025-03-11", "2025-03-10", "2025-03-02"]

    async def test_string_month_is_zero_padded(self, client):
        resp = await client.post("/api/attendance/month", json={"year": "2025", "month": "4"})

        assert resp.status_code == 200
        assert [r["date"] for r in resp.json()] == ["2025-04-01"]

    async def test_empty_month_returns_empty_list(self, client):
        resp = await client.post("/api/attendance/month", json={"year": 2024, "month": 12})

        assert resp.status_code == 200
        assert resp.json() == []

    @pytest.mark.parametrize(
        "body",
        [{}, {"year": 2025}, {"month": 3}, {"year": "", "month": 3}, {"year": 2025, "month": None}],
    )
    async def test_missing_fields_return_400_without_store_call(self, app, client, body):
        store = AsyncMock(spec=InMemoryAttendanceStore)
        app.dependency_overrides[get_attendance_store] = lambda: store

        resp = await client.post("/api/attendance/month", json=body)

        assert resp.status_code == 400
        assert resp.json()["error"] == "Year and month required"
        store.get_month.assert_not_awaited()

    async def test_non_numeric_month_is_400(self, client):
        resp = await client.post("/api/attendance/month", json={"year": 2025, "month": "March"})
        assert resp.status_code == 400

    async def test_month_out_of_range_is_400(self, client):
        resp = await client.post("/api/attendance/month", json={"year": 2025, "month": 13})
        assert resp.status_code == 400

    async def test_missing_spreadsheet_id_is_500(self, unconfigured_client):
        resp = await unconfigured_client.post(
            "/api/attendance/month", json={"year": 2025, "month": 3},
        )

        assert resp.status_code == 500
        assert resp.json()["error"] == "Spreadsheet ID not configured"

    async def test_missing_spreadsheet_id_wins_over_bad_input(self, unconfigured_client):
        resp = await unconfigured_client.post("/api/attendance/month", json={})

        assert resp.status_code == 500
        assert resp.json()["error"] == "Spreadsheet ID not configured"

    async def test_missing_spreadsheet_id_wins_over_malformed_json(self, unconfigured_client):
        resp = await unconfigured_client.post(
            "/api/attendance/month",
            content=b"{bad",
            headers={"content-type": "application/json"},
        )

        assert resp.status_code == 500
        assert resp.json()["error"] == "Spreadsheet ID not configured"

    async def test_malformed_json_is_400_when_configured(self, client):
        resp = await client.post(
            "/api/attendance/month",
            content=b"{bad",
            headers={"content-type": "application/json"},
        )
        assert resp.status_code == 400

    async def test_store_failure_is_generic_500(self, app, client):
        store = AsyncMock(spec=InMemoryAttendanceStore)
        store.get_month.side_effect = RuntimeError("quota exceeded for sheet xyz")
        app.dependency_overrides[get_attendance_store] = lambda: store

        resp = await client.post("/api/attendance/month", json={"year": 2025, "month": 3})

        assert resp.status_code == 500
        assert resp.json()["error"] == "Failed to fetch attendance records"
        assert "quota" not in resp.text

    async def test_spreadsheet_id_is_forwarded(self, app, client):
        store = AsyncMock(spec=InMemoryAttendanceStore)
        store.get_month.return_value = []
        app.dependency_overrides[get_attendance_store] = lambda: store

        await client.post("/api/attendance/month", json={"year": 2025, "month": 3})

        store.get_month.assert_awaited_once_with("sheet-123", 2025, 3)


# ═════════════════════════════════════════════════════════════════════
# 2. POST /attendance/status
# ═════════════════════════════════════════════════════════════════════


class TestAttendanceStatus:

    async def test_checked_in_and_out(self, client):
        resp = await client.post(
            "/api/attendance/status", json={"employeeName": "Asha", "date": "2025-03-10"},
        )

        assert resp.status_code == 200
        body = resp.json()
        assert body["hasCheckedIn"] is True
        assert body["hasCheckedOut"] is True
        assert body["inTime"] == "09:05 AM"
        assert body["outTime"] == "06:00 PM"

    async def test_checked_in_only(self, client):
        resp = await client.post(
            "/api/attendance/status", json={"employeeName": "Asha", "date": "2025-03-11"},
        )

        body = resp.json()
        assert body["hasCheckedIn"] is True
        assert body["hasCheckedOut"] is False

    async def test_no_record(self, client):
        resp = await client.post(
            "/api/attendance/status", json={"employeeName": "Nobody", "date": "2025-03-11"},
        )

        assert resp.status_code == 200
        assert resp.json() == {"hasCheckedIn": False, "hasCheckedOut": False}

    @pytest.mark.parametrize(
        "body",
        [{}, {"employeeName": "Asha"}, {"date": "2025-03-10"}, {"employeeName": "  ", "date": "2025-03-10"}],
    )
    async def test_missing_fields_return_400_without_store_call(self, app, client, body):
        store = AsyncMock(spec=InMemoryAttendanceStore)
        app.dependency_overrides[get_attendance_store] = lambda: store

        resp = await client.post("/api/attendance/status", json=body)

        assert resp.status_code == 400
        store.get_status.assert_not_awaited()

    async def test_does_not_need_spreadsheet_id(self, unconfigured_client):
        resp = await unconfigured_client.post(
            "/api/attendance/status", json={"employeeName": "Asha", "date": "2025-03-10"},
        )
        assert resp.status_code == 200

    async def test_store_failure_is_500(self, app, client):
        store = AsyncMock(spec=InMemoryAttendanceStore)
        store.get_status.side_effect = ConnectionError("firestore unavailable")
        app.dependency_overrides[get_attendance_store] = lambda: store

        resp = await client.post(
            "/api/attendance/status", json={"employeeName": "Asha", "date": "2025-03-10"},
        )

        assert resp.status_code == 500
        assert resp.json()["error"] == "Failed to check attendance status"


# ═════════════════════════════════════════════════════════════════════
# 3. Service-level
# ═════════════════════════════════════════════════════════════════════


class TestAttendanceService:

    async def test_missing_parameter_lists_fields(self, attendance_store):
        with pytest.raises(MissingParameterError) as exc_info:
            await AttendanceService.fetch_monthly_attendance(
                attendance_store, "sheet", MonthlyAttendanceRequest(),
            )
        assert exc_info.value.fields == ["year", "month"]
        assert exc_info.value.status_code == 400

    async def test_invalid_year_raises_validation(self, attendance_store):
        with pytest.raises(ValidationException):
            await AttendanceService.fetch_monthly_attendance(
                attendance_store, "sheet", MonthlyAttendanceRequest(year="twenty", month=1),
            )

    async def test_store_error_translated(self):
        store = AsyncMock(spec=InMemoryAttendanceStore)
        store.get_status.side_effect = ValueError("boom")

        with pytest.raises(BackendError) as exc_info:
            await AttendanceService.check_attendance_status(
                store, AttendanceStatusRequest(employeeName="Asha", date="2025-03-10"),
            )
        assert exc_info.value.detail == "Failed to check attendance status"
        assert isinstance(exc_info.value.__cause__, ValueError)
