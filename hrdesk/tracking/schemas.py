"""Location tracking Pydantic schemas."""

from typing import Optional, Union

from pydantic import BaseModel


class LocationUpdate(BaseModel):
    """Periodic position report from the mobile client."""

    userId: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    accuracy: Optional[float] = None
    distance: Optional[float] = None
    # epoch milliseconds, or an ISO-8601 string
    timestamp: Optional[Union[int, float, str]] = None


class LocationUpdateResponse(BaseModel):
    success: bool = True
    message: str = "Location updated"


class GeofenceAlert(BaseModel):
    """Sent by the mobile tracker when a user leaves the office radius."""

    userId: Optional[str] = None
    userName: Optional[str] = None
    # metres from the office
    distance: Optional[float] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timestamp: Optional[Union[int, float, str]] = None


class GeofenceAlertResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    notificationsSent: Optional[int] = None
