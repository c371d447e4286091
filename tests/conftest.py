"""Shared test fixtures — in-memory stores, settings overrides, HTTP client.

Stores are the in-memory implementations, so no Google credentials or
network access are needed.
"""

from __future__ import annotations

import os

# Set test env before any import touches pydantic-settings
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("GOOGLE_SPREADSHEET_ID", "test-spreadsheet")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from hrdesk.attendance.store import InMemoryAttendanceStore
from hrdesk.audit.store import InMemoryAuditLogStore
from hrdesk.config import Settings, get_settings
from hrdesk.employees.store import InMemoryEmployeeDirectory
from hrdesk.leave.store import InMemoryLeaveStore
from hrdesk.main import create_app
from hrdesk.notifications.store import InMemoryNotificationStore
from hrdesk.stores import Stores

SPREADSHEET_ID = "sheet-123"


# ── Rate limiter ────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def _disable_rate_limiter():
    """Keep slowapi out of the way unless a test turns it back on."""
    from hrdesk.common.rate_limit import limiter

    original = limiter.enabled
    limiter.enabled = False
    limiter.reset()
    yield
    limiter.enabled = original


# ── Seed data ───────────────────────────────────────────────────────

def _make_attendance(
    *,
    employee_name: str = "Asha",
    date: str = "2025-03-10",
    in_time: str = "09:05 AM",
    out_time: str = "",
) -> dict:
    return {
        "employeeName": employee_name,
        "date": date,
        "inTime": in_time,
        "outTime": out_time,
        "inLocation": "Office",
        "outLocation": "Office" if out_time else "",
        "totalMinutes": 0,
        "totalHours": "",
    }


def _make_notification(
    notification_id: str,
    user_id: str,
    *,
    read: bool = False,
    minutes_ago: int = 0,
) -> dict:
    return {
        "id": notification_id,
        "userId": user_id,
        "type": "system_alert",
        "title": f"Title {notification_id}",
        "message": f"Message {notification_id}",
        "read": read,
        "createdAt": datetime.now(timezone.utc) - timedelta(minutes=minutes_ago),
    }


def _make_audit_log(
    log_id: str,
    *,
    employee_id: str = "001",
    entity_type: str = "Attendance",
    entity_id: str = "2025-01-15_001",
    action: str = "ATTENDANCE_MODIFIED",
    timestamp: datetime,
) -> dict:
    return {
        "id": log_id,
        "action": action,
        "entityType": entity_type,
        "entityId": entity_id,
        "employeeId": employee_id,
        "employeeName": "Asha",
        "performedBy": "Admin",
        "performedById": "ADMIN",
        "timestamp": timestamp,
    }


@pytest.fixture
def attendance_store() -> InMemoryAttendanceStore:
    return InMemoryAttendanceStore([
        _make_attendance(date="2025-03-10", out_time="06:00 PM"),
        _make_attendance(date="2025-03-11"),
        _make_attendance(employee_name="Ravi", date="2025-03-02", out_time="05:30 PM"),
        _make_attendance(date="2025-04-01"),
    ])


@pytest.fixture
def leave_store() -> InMemoryLeaveStore:
    return InMemoryLeaveStore([
        {"id": "L1", "employeeName": "Asha", "leaveType": "Casual", "status": "pending"},
        {"id": "L2", "employeeName": "Ravi", "leaveType": "Sick", "status": "pending"},
    ])


@pytest.fixture
def notification_store() -> InMemoryNotificationStore:
    return InMemoryNotificationStore([
        _make_notification("N1", "u1", minutes_ago=30),
        _make_notification("N2", "u1", minutes_ago=20),
        _make_notification("N3", "u1", read=True, minutes_ago=10),
        _make_notification("N4", "u2"),
    ])


@pytest.fixture
def audit_store() -> InMemoryAuditLogStore:
    base = datetime(2025, 1, 15, 10, 0, tzinfo=timezone.utc)
    return InMemoryAuditLogStore([
        _make_audit_log("A1", timestamp=base - timedelta(days=20)),
        _make_audit_log("A2", timestamp=base),
        _make_audit_log(
            "A3", entity_type="Leave", entity_id="L1", action="LEAVE_APPROVE",
            timestamp=base + timedelta(days=1),
        ),
        _make_audit_log(
            "A4", employee_id="002", entity_type="Employee", entity_id="002",
            action="EMPLOYEE_CREATE", timestamp=base + timedelta(days=2),
        ),
    ])


@pytest.fixture
def employee_directory() -> InMemoryEmployeeDirectory:
    return InMemoryEmployeeDirectory([
        {"id": "001", "role": "admin"},
        {"id": "002", "role": "user"},
        {"id": "003", "role": "admin"},
    ])


@pytest.fixture
def stores(
    attendance_store, leave_store, notification_store, audit_store, employee_directory,
) -> Stores:
    return Stores(
        attendance=attendance_store,
        leave=leave_store,
        notifications=notification_store,
        audit=audit_store,
        employees=employee_directory,
    )


# ── Settings ────────────────────────────────────────────────────────

@pytest.fixture
def settings() -> Settings:
    return Settings(GOOGLE_SPREADSHEET_ID=SPREADSHEET_ID, STORE_BACKEND="memory")


@pytest.fixture
def unconfigured_settings() -> Settings:
    return Settings(GOOGLE_SPREADSHEET_ID="", STORE_BACKEND="memory")


# ── FastAPI test client ─────────────────────────────────────────────

@pytest.fixture
async def app(stores, settings):
    """Create a fresh app instance wired to in-memory stores."""
    application = create_app(stores=stores)
    application.dependency_overrides[get_settings] = lambda: settings
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def unconfigured_client(app, unconfigured_settings) -> AsyncGenerator[AsyncClient, None]:
    """Client for an app whose spreadsheet identifier is not set."""
    app.dependency_overrides[get_settings] = lambda: unconfigured_settings
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
