"""Tracking router — location updates and geofence exits from the mobile tracker."""

from fastapi import APIRouter, Depends, Request

from hrdesk.common.rate_limit import limiter
from hrdesk.config import Settings, get_settings, settings as app_settings
from hrdesk.dependencies import get_employee_directory, get_notification_store
from hrdesk.employees.store import EmployeeDirectory
from hrdesk.notifications.store import NotificationStore
from hrdesk.tracking.schemas import (
    GeofenceAlert,
    GeofenceAlertResponse,
    LocationUpdate,
    LocationUpdateResponse,
)
from hrdesk.tracking.service import TrackingService

router = APIRouter(prefix="", tags=["tracking"])


# ── POST /location ──────────────────────────────────────────────────

@router.post("/location", response_model=LocationUpdateResponse)
@limiter.limit(app_settings.TRACKING_RATE_LIMIT)
async def location_update(
    request: Request,
    body: LocationUpdate,
    settings: Settings = Depends(get_settings),
):
    """Receive a location update for a user."""
    return await TrackingService.record_location(
        body,
        reject_zero_coordinates=settings.TRACKING_REJECT_ZERO_COORDINATES,
    )


# ── POST /geofence-alert ────────────────────────────────────────────

@router.post(
    "/geofence-alert",
    response_model=GeofenceAlertResponse,
    response_model_exclude_none=True,
)
@limiter.limit(app_settings.TRACKING_RATE_LIMIT)
async def geofence_alert(
    request: Request,
    body: GeofenceAlert,
    settings: Settings = Depends(get_settings),
    notifications: NotificationStore = Depends(get_notification_store),
    directory: EmployeeDirectory = Depends(get_employee_directory),
):
    """Tell the user and the administrators that the user left the office area."""
    return await TrackingService.send_geofence_alert(
        notifications, directory, settings.GOOGLE_SPREADSHEET_ID.strip(), body,
    )
