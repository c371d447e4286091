"""Notification service — list, create, mark read, unread count, delete."""

from __future__ import annotations

import logging
from typing import Optional, Union

from hrdesk.common.exceptions import (
    ConfigurationError,
    NotFoundException,
    translate_store_errors,
)
from hrdesk.common.validation import is_blank, require_fields
from hrdesk.employees.store import EmployeeDirectory
from hrdesk.notifications.schemas import (
    MarkAllReadRequest,
    MarkAllReadResponse,
    NotificationActionResponse,
    NotificationBroadcastResponse,
    NotificationCreate,
    NotificationCreatedResponse,
    NotificationListResponse,
    NotificationResponse,
    UnreadCountResponse,
)
from hrdesk.notifications.store import NotificationStore

logger = logging.getLogger(__name__)

USER_ID_REQUIRED = "User ID is required"


class NotificationService:
    """Async notification operations."""

    @staticmethod
    async def list_notifications(
        store: NotificationStore,
        user_id: Optional[str],
        *,
        unread_only: bool = False,
    ) -> NotificationListResponse:
        """Return a user's notifications, newest first."""
        require_fields({"userId": user_id}, "userId", detail=USER_ID_REQUIRED)

        with translate_store_errors("Failed to fetch notifications"):
            rows = await store.list_for_user(user_id, unread_only=unread_only)
        notifications = [NotificationResponse.model_validate(n) for n in rows]
        return NotificationListResponse(notifications=notifications, count=len(notifications))

    @staticmethod
    async def create_notification(
        store: NotificationStore,
        directory: EmployeeDirectory,
        spreadsheet_id: Optional[str],
        body: NotificationCreate,
    ) -> Union[NotificationCreatedResponse, NotificationBroadcastResponse]:
        """Create one notification, or one per employee when ``sendToAll`` is set."""
        require_fields(body.model_dump(), "title", "message", detail="Title and message are required")
        if body.sendToAll:
            return await NotificationService._broadcast(store, directory, spreadsheet_id, body)
        require_fields(body.model_dump(), "userId", detail="User ID is required when not sending to all")

        with translate_store_errors("Failed to create notification"):
            notification_id = await store.create(
                body.userId,
                body.type.value,
                body.title,
                body.message,
                data=body.data,
            )
        return NotificationCreatedResponse(
            message="Notification created successfully",
            notificationId=notification_id,
        )

    @staticmethod
    async def _broadcast(
        store: NotificationStore,
        directory: EmployeeDirectory,
        spreadsheet_id: Optional[str],
        body: NotificationCreate,
    ) -> NotificationBroadcastResponse:
        if is_blank(spreadsheet_id):
            raise ConfigurationError()

        with translate_store_errors("Failed to create notification"):
            employee_ids = await directory.employee_ids(spreadsheet_id)
            notification_ids = [
                await store.create(
                    employee_id,
                    body.type.value,
                    body.title,
                    body.message,
                    data=body.data,
                )
                for employee_id in employee_ids
            ]
        logger.info("Broadcast notification %r to %d employees", body.title, len(notification_ids))
        return NotificationBroadcastResponse(
            message=f"Notification sent to {len(notification_ids)} users",
            count=len(notification_ids),
            notificationIds=notification_ids,
        )

    @staticmethod
    async def mark_read(
        store: NotificationStore,
        notification_id: str,
    ) -> NotificationActionResponse:
        """Mark one notification as read.

        Unknown identifiers are not reported; the call succeeds either way.
        """
        with translate_store_errors("Failed to mark notification as read"):
            await store.mark_read(notification_id)
        return NotificationActionResponse(message="Notification marked as read")

    @staticmethod
    async def mark_all_read(
        store: NotificationStore,
        body: MarkAllReadRequest,
    ) -> MarkAllReadResponse:
        """Mark every unread notification of a user as read. Returns the count updated."""
        require_fields(body.model_dump(), "userId", detail=USER_ID_REQUIRED)

        with translate_store_errors("Failed to mark all notifications as read"):
            count = await store.mark_all_read(body.userId)
        logger.info("Marked %d notifications as read for user %s", count, body.userId)
        return MarkAllReadResponse(message=f"Marked {count} notifications as read", count=count)

    @staticmethod
    async def get_unread_count(
        store: NotificationStore,
        user_id: Optional[str],
    ) -> UnreadCountResponse:
        require_fields({"userId": user_id}, "userId", detail=USER_ID_REQUIRED)

        with translate_store_errors("Failed to fetch unread count"):
            count = await store.unread_count(user_id)
        return UnreadCountResponse(count=max(count, 0))

    @staticmethod
    async def delete_notification(
        store: NotificationStore,
        notification_id: str,
    ) -> NotificationActionResponse:
        with translate_store_errors("Failed to delete notification"):
            deleted = await store.delete(notification_id)
        if not deleted:
            raise NotFoundException("Notification", notification_id)
        return NotificationActionResponse(message="Notification deleted")
