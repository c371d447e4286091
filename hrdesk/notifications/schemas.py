"""Notification Pydantic schemas for request / response validation."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from hrdesk.common.constants import NotificationType


# ── Requests ────────────────────────────────────────────────────────

class MarkAllReadRequest(BaseModel):
    userId: Optional[str] = None


class NotificationCreate(BaseModel):
    """Manual notification sent from the admin screen."""

    userId: Optional[str] = None
    type: NotificationType = NotificationType.system_alert
    title: Optional[str] = None
    message: Optional[str] = None
    data: Optional[dict[str, Any]] = None
    # Fan out to every employee listed in the Employees worksheet
    sendToAll: bool = False


# ── Responses ───────────────────────────────────────────────────────

class NotificationResponse(BaseModel):
    """Single notification in API responses."""

    id: str
    userId: str
    type: str
    title: str
    message: str
    read: bool
    createdAt: Optional[datetime] = None
    readAt: Optional[datetime] = None
    metadata: Optional[dict[str, Any]] = None


class NotificationListResponse(BaseModel):
    notifications: list[NotificationResponse]
    count: int


class NotificationActionResponse(BaseModel):
    success: bool = True
    message: str


class MarkAllReadResponse(NotificationActionResponse):
    count: int


class NotificationCreatedResponse(NotificationActionResponse):
    notificationId: str


class NotificationBroadcastResponse(NotificationActionResponse):
    count: int
    notificationIds: list[str]


class UnreadCountResponse(BaseModel):
    count: int
