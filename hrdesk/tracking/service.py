"""Location tracking service.

Location updates are only logged; geofence exits are turned into
notifications for the user and the administrators.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional, Union

from hrdesk.common.constants import NotificationType
from hrdesk.common.exceptions import translate_store_errors
from hrdesk.common.validation import is_blank, require_fields
from hrdesk.employees.store import EmployeeDirectory
from hrdesk.notifications.store import NotificationStore
from hrdesk.tracking.schemas import (
    GeofenceAlert,
    GeofenceAlertResponse,
    LocationUpdate,
    LocationUpdateResponse,
)

logger = logging.getLogger(__name__)


def _format_metres(value: Optional[float]) -> str:
    return f"{value:.2f}m" if value is not None else "n/a"


def _format_time(timestamp: Optional[Union[int, float, str]]) -> str:
    if timestamp is None:
        return "n/a"
    if isinstance(timestamp, str):
        return timestamp
    try:
        return datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc).strftime("%H:%M:%S")
    except (OverflowError, OSError, ValueError):
        return f"invalid ({timestamp})"


class TrackingService:
    """Location update handling."""

    @staticmethod
    async def record_location(
        body: LocationUpdate,
        *,
        reject_zero_coordinates: bool = True,
    ) -> LocationUpdateResponse:
        """Validate and log a location update.

        With *reject_zero_coordinates* a latitude or longitude of exactly 0
        is treated as missing, matching what deployed clients expect.
        """
        require_fields(
            body.model_dump(), "userId", "latitude", "longitude",
            falsy_is_missing=reject_zero_coordinates,
        )

        with translate_store_errors("Failed to process location update"):
            logger.info(
                "Location update from %s: lat=%s lon=%s distance=%s accuracy=%s time=%s",
                body.userId,
                body.latitude,
                body.longitude,
                _format_metres(body.distance),
                _format_metres(body.accuracy),
                _format_time(body.timestamp),
            )
        return LocationUpdateResponse()

    @staticmethod
    async def send_geofence_alert(
        notifications: NotificationStore,
        directory: EmployeeDirectory,
        spreadsheet_id: Optional[str],
        body: GeofenceAlert,
    ) -> GeofenceAlertResponse:
        """Notify the user and every administrator that the user left the office area.

        Without a configured spreadsheet the alert is only logged.
        """
        require_fields(
            body.model_dump(), "userId", "userName", "distance",
            falsy_is_missing=True,
        )
        metres = f"{body.distance:.0f}m"
        logger.warning("Geofence alert: %s is %s away from office", body.userName, metres)

        if is_blank(spreadsheet_id):
            return GeofenceAlertResponse()

        position = {
            "distance": body.distance,
            "latitude": body.latitude,
            "longitude": body.longitude,
            "timestamp": body.timestamp,
        }
        with translate_store_errors("Failed to process geofence alert"):
            admin_ids = await directory.admin_ids()
            await notifications.create(
                body.userId,
                NotificationType.system_alert.value,
                "Geofence Alert",
                f"You are {metres} away from office location. Please return to office premises.",
                data=position,
            )
            for admin_id in admin_ids:
                await notifications.create(
                    admin_id,
                    NotificationType.system_alert.value,
                    "Employee Left Office Area",
                    f"{body.userName} is {metres} away from office location "
                    f"at {_format_time(body.timestamp)}",
                    data={"employeeId": body.userId, "employeeName": body.userName, **position},
                )
        return GeofenceAlertResponse(
            message="Geofence alert sent",
            notificationsSent=len(admin_ids) + 1,
        )
