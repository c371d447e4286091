"""Notification endpoints — list, create, mark read, unread count, delete."""

from typing import Optional, Union

from fastapi import APIRouter, Depends, Query

from hrdesk.config import Settings, get_settings
from hrdesk.dependencies import get_employee_directory, get_notification_store
from hrdesk.employees.store import EmployeeDirectory
from hrdesk.notifications.schemas import (
    MarkAllReadRequest,
    MarkAllReadResponse,
    NotificationActionResponse,
    NotificationBroadcastResponse,
    NotificationCreate,
    NotificationCreatedResponse,
    NotificationListResponse,
    UnreadCountResponse,
)
from hrdesk.notifications.service import NotificationService
from hrdesk.notifications.store import NotificationStore

router = APIRouter(prefix="", tags=["notifications"])


# ── GET / — list a user's notifications ─────────────────────────────

@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    userId: Optional[str] = Query(default=None, description="Owner of the notifications"),
    unreadOnly: bool = Query(default=False, description="Only return unread notifications"),
    store: NotificationStore = Depends(get_notification_store),
):
    return await NotificationService.list_notifications(store, userId, unread_only=unreadOnly)


# ── GET /unread-count — badge count ─────────────────────────────────
# NOTE: This route MUST be registered before /{notification_id} routes
# so that "unread-count" is not captured as a notification id.

@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(
    userId: Optional[str] = Query(default=None),
    store: NotificationStore = Depends(get_notification_store),
):
    """Return the number of unread notifications (for header badge)."""
    return await NotificationService.get_unread_count(store, userId)


# ── PUT /mark-all-read — bulk mark all as read ──────────────────────
# NOTE: This route MUST be registered before /{notification_id}/read.

@router.put("/mark-all-read", response_model=MarkAllReadResponse)
async def mark_all_read(
    body: MarkAllReadRequest,
    store: NotificationStore = Depends(get_notification_store),
):
    """Mark all unread notifications as read for a user."""
    return await NotificationService.mark_all_read(store, body)


# ── POST /create — manual notification ──────────────────────────────

@router.post(
    "/create",
    response_model=Union[NotificationCreatedResponse, NotificationBroadcastResponse],
)
async def create_notification(
    body: NotificationCreate,
    store: NotificationStore = Depends(get_notification_store),
    directory: EmployeeDirectory = Depends(get_employee_directory),
    settings: Settings = Depends(get_settings),
):
    """Notify one user, or every employee with ``sendToAll``."""
    return await NotificationService.create_notification(
        store, directory, settings.GOOGLE_SPREADSHEET_ID.strip(), body,
    )


# ── PUT /{notification_id}/read — mark single as read ───────────────

@router.put("/{notification_id}/read", response_model=NotificationActionResponse)
async def mark_read(
    notification_id: str,
    store: NotificationStore = Depends(get_notification_store),
):
    """Mark a single notification as read."""
    return await NotificationService.mark_read(store, notification_id)


# ── DELETE /{notification_id} ───────────────────────────────────────

@router.delete("/{notification_id}", response_model=NotificationActionResponse)
async def delete_notification(
    notification_id: str,
    store: NotificationStore = Depends(get_notification_store),
):
    return await NotificationService.delete_notification(store, notification_id)
