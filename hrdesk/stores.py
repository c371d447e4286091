"""Store wiring — pick Google-backed or in-memory implementations from settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from hrdesk.attendance.store import (
    AttendanceStore,
    GoogleAttendanceStore,
    InMemoryAttendanceStore,
)
from hrdesk.audit.store import AuditLogStore, FirestoreAuditLogStore, InMemoryAuditLogStore
from hrdesk.config import Settings
from hrdesk.employees.store import (
    EmployeeDirectory,
    GoogleEmployeeDirectory,
    InMemoryEmployeeDirectory,
)
from hrdesk.leave.store import InMemoryLeaveStore, LeaveStore, SheetsLeaveStore
from hrdesk.notifications.store import (
    FirestoreNotificationStore,
    InMemoryNotificationStore,
    NotificationStore,
)

logger = logging.getLogger(__name__)


@dataclass
class Stores:
    attendance: AttendanceStore = field(default_factory=InMemoryAttendanceStore)
    leave: LeaveStore = field(default_factory=InMemoryLeaveStore)
    notifications: NotificationStore = field(default_factory=InMemoryNotificationStore)
    audit: AuditLogStore = field(default_factory=InMemoryAuditLogStore)
    employees: EmployeeDirectory = field(default_factory=InMemoryEmployeeDirectory)


def build_stores(settings: Settings) -> Stores:
    """Construct the stores for ``settings.STORE_BACKEND`` (``google`` or ``memory``)."""
    backend = settings.STORE_BACKEND.strip().lower()
    if backend in {"memory", "inmemory"}:
        logger.warning("Using in-memory stores; data is lost on restart")
        return Stores()
    if backend != "google":
        raise ValueError(f"Unknown STORE_BACKEND {settings.STORE_BACKEND!r}")

    # Imported lazily so memory mode needs no Google credentials
    from hrdesk.integrations.firestore import build_firestore_client
    from hrdesk.integrations.sheets import build_sheets_client

    sheets = build_sheets_client(settings)
    db = build_firestore_client(settings)
    return Stores(
        attendance=GoogleAttendanceStore(sheets, db),
        leave=SheetsLeaveStore(sheets),
        notifications=FirestoreNotificationStore(db),
        audit=FirestoreAuditLogStore(db),
        employees=GoogleEmployeeDirectory(sheets, db),
    )
