"""Leave status endpoint and Sheets-free store behaviour."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from hrdesk.common.exceptions import StoreError
from hrdesk.dependencies import get_leave_store
from hrdesk.leave.store import InMemoryLeaveStore


class TestUpdateLeaveStatus:

    async def test_approve_updates_store(self, client, leave_store):
        resp = await client.put(
            "/api/leaves/status",
            json={"id": "L1", "status": "approved", "approvedBy": "Manager"},
        )

        assert resp.status_code == 200
        assert resp.json() == {"success": True}
        leave = leave_store.leaves["L1"]
        assert leave["status"] == "approved"
        assert leave["approvedBy"] == "Manager"
        assert leave["approvedDate"]
        assert leave["approvedTime"]
        assert "paymentStatus" not in leave

    async def test_payment_status_written_when_given(self, client, leave_store):
        resp = await client.put(
            "/api/leaves/status",
            json={"id": "L2", "status": "approved", "paymentStatus": "unpaid"},
        )

        assert resp.status_code == 200
        assert leave_store.leaves["L2"]["paymentStatus"] == "unpaid"
        assert leave_store.leaves["L2"]["approvedBy"] == ""

    async def test_other_leaves_untouched(self, client, leave_store):
        await client.put("/api/leaves/status", json={"id": "L1", "status": "rejected"})

        assert leave_store.leaves["L2"]["status"] == "pending"

    @pytest.mark.parametrize(
        "body",
        [{}, {"id": "L1"}, {"status": "approved"}, {"id": "", "status": "approved"}],
    )
    async def test_missing_fields_return_400_without_store_call(self, app, client, body):
        store = AsyncMock(spec=InMemoryLeaveStore)
        app.dependency_overrides[get_leave_store] = lambda: store

        resp = await client.put("/api/leaves/status", json=body)

        assert resp.status_code == 400
        store.update_status.assert_not_awaited()

    async def test_unknown_leave_passes_store_message(self, client):
        resp = await client.put("/api/leaves/status", json={"id": "L999", "status": "approved"})

        assert resp.status_code == 500
        assert resp.json()["error"] == "Leave request not found"

    async def test_store_failure_without_message_uses_default(self, app, client):
        store = AsyncMock(spec=InMemoryLeaveStore)
        store.update_status.side_effect = StoreError()
        app.dependency_overrides[get_leave_store] = lambda: store

        resp = await client.put("/api/leaves/status", json={"id": "L1", "status": "approved"})

        assert resp.status_code == 500
        assert resp.json()["error"] == "Failed to update leave status"

    async def test_arguments_forwarded_to_store(self, app, client):
        store = AsyncMock(spec=InMemoryLeaveStore)
        app.dependency_overrides[get_leave_store] = lambda: store

        await client.put(
            "/api/leaves/status",
            json={"id": "L1", "status": "approved", "paymentStatus": "paid", "approvedBy": "HR"},
        )

        store.update_status.assert_awaited_once_with(
            "sheet-123", "L1", "approved", payment_status="paid", approved_by="HR",
        )

    async def test_numeric_id_accepted(self, app, client):
        store = AsyncMock(spec=InMemoryLeaveStore)
        app.dependency_overrides[get_leave_store] = lambda: store

        resp = await client.put("/api/leaves/status", json={"id": 42, "status": "approved"})

        assert resp.status_code == 200
        store.update_status.assert_awaited_once_with(
            "sheet-123", "42", "approved", payment_status=None, approved_by=None,
        )

    async def test_zero_id_is_missing(self, client):
        resp = await client.put("/api/leaves/status", json={"id": 0, "status": "approved"})
        assert resp.status_code == 400

    async def test_missing_spreadsheet_id_wins_over_bad_body(self, unconfigured_client):
        resp = await unconfigured_client.put(
            "/api/leaves/status", json={"id": ["not", "an", "id"], "status": "approved"},
        )

        assert resp.status_code == 500
        assert resp.json()["error"] == "Spreadsheet ID not configured"

    async def test_missing_spreadsheet_id_is_500(self, unconfigured_client, leave_store):
        resp = await unconfigured_client.put(
            "/api/leaves/status", json={"id": "L1", "status": "approved"},
        )

        assert resp.status_code == 500
        assert resp.json()["error"] == "Spreadsheet ID not configured"
        assert leave_store.leaves["L1"]["status"] == "pending"
