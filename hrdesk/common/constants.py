"""Enums and constants shared across resources."""

from __future__ import annotations

import enum


# ── Audit ───────────────────────────────────────────────────────────

class AuditEntityType(str, enum.Enum):
    attendance = "Attendance"
    leave = "Leave"
    night_duty = "Night_Duty"
    employee = "Employee"
    notification = "Notification"


# ── Notifications ───────────────────────────────────────────────────

class NotificationType(str, enum.Enum):
    leave_request = "leave_request"
    leave_approved = "leave_approved"
    leave_rejected = "leave_rejected"
    night_duty_request = "night_duty_request"
    night_duty_approved = "night_duty_approved"
    night_duty_rejected = "night_duty_rejected"
    attendance_modified = "attendance_modified"
    late_arrival = "late_arrival"
    password_reset = "password_reset"
    system_alert = "system_alert"


# ── Sheets layout ───────────────────────────────────────────────────

ATTENDANCE_WORKSHEET = "Attendance"
ATTENDANCE_HEADERS = [
    "Date",
    "Employee Name",
    "In Time",
    "Out Time",
    "In Location",
    "Out Location",
    "Total Minutes",
    "Total Hours",
]

LEAVES_WORKSHEET = "Leaves"
LEAVES_HEADERS = [
    "ID",
    "Employee Name",
    "Leave Type",
    "Start Date",
    "End Date",
    "Reason",
    "Status",
    "Payment Status",
    "Applied Date",
    "Approved By",
    "Approved Date",
    "Approved Time",
]

# Column A holds employee IDs
EMPLOYEES_WORKSHEET = "Employees"

# ── Firestore layout ────────────────────────────────────────────────

ATTENDANCE_COLLECTION = "attendance"
NOTIFICATIONS_COLLECTION = "notifications"
NOTIFICATION_ITEMS = "items"
AUDIT_LOGS_COLLECTION = "auditLogs"
EMPLOYEES_COLLECTION = "employees"
ADMIN_ROLE = "admin"

# ── Misc constants ──────────────────────────────────────────────────

DATE_FORMAT = "%Y-%m-%d"
AUDIT_DEFAULT_LIMIT = 100
AUDIT_MAX_LIMIT = 500
