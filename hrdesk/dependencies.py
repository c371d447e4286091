"""Shared FastAPI dependencies — settings, configuration gate, stores."""

from typing import Optional

from fastapi import Depends, Request
from fastapi.dependencies.models import Dependant

from hrdesk.attendance.store import AttendanceStore
from hrdesk.audit.store import AuditLogStore
from hrdesk.common.exceptions import ConfigurationError
from hrdesk.config import Settings, get_settings
from hrdesk.employees.store import EmployeeDirectory
from hrdesk.leave.store import LeaveStore
from hrdesk.notifications.store import NotificationStore


def require_spreadsheet_id(settings: Settings = Depends(get_settings)) -> str:
    """Return the configured spreadsheet identifier or fail with a 500.

    Body validation failures on routes using this gate are answered with
    the same error (see ``pending_configuration_error``), so a missing
    identifier wins over bad input.
    """
    if not settings.spreadsheet_configured:
        raise ConfigurationError()
    return settings.GOOGLE_SPREADSHEET_ID.strip()


def get_attendance_store(request: Request) -> AttendanceStore:
    return request.app.state.stores.attendance


def get_leave_store(request: Request) -> LeaveStore:
    return request.app.state.stores.leave


def get_notification_store(request: Request) -> NotificationStore:
    return request.app.state.stores.notifications


def get_audit_store(request: Request) -> AuditLogStore:
    return request.app.state.stores.audit


def get_employee_directory(request: Request) -> EmployeeDirectory:
    return request.app.state.stores.employees


def _depends_on(dependant: Dependant, call) -> bool:
    return any(
        sub.call is call or _depends_on(sub, call)
        for sub in dependant.dependencies
    )


def pending_configuration_error(request: Request) -> Optional[ConfigurationError]:
    """The gate's error for a request that failed before dependencies ran.

    FastAPI decodes the body before resolving dependencies, so a malformed
    body on a gated route would otherwise answer 400 while the spreadsheet
    identifier is unset.
    """
    route = request.scope.get("route")
    dependant = getattr(route, "dependant", None)
    if dependant is None or not _depends_on(dependant, require_spreadsheet_id):
        return None
    settings_factory = request.app.dependency_overrides.get(get_settings, get_settings)
    if settings_factory().spreadsheet_configured:
        return None
    return ConfigurationError()
