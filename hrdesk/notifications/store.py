"""Notification data access.

Firestore layout: ``notifications/{userId}/items/{notificationId}`` with
numbered field names (``01_id`` … ``08_readAt``) so the console lists
fields in a stable order.
"""

from __future__ import annotations

import itertools
import json
import logging
import time
from datetime import datetime, timezone
from typing import Any, Optional, Protocol

from fastapi.concurrency import run_in_threadpool
from firebase_admin import firestore

from hrdesk.common.constants import NOTIFICATION_ITEMS, NOTIFICATIONS_COLLECTION

logger = logging.getLogger(__name__)

# Firestore caps a write batch at 500 operations
_BATCH_LIMIT = 500


def _new_notification_id() -> str:
    return f"N{int(time.time() * 1000)}"


def _document_to_notification(user_id: str, doc_id: str, data: dict[str, Any]) -> dict[str, Any]:
    raw = data.get("05_data") or ""
    return {
        "id": doc_id,
        "userId": user_id,
        "type": data.get("02_type") or "",
        "title": data.get("03_title") or "",
        "message": data.get("04_message") or "",
        "read": data.get("06_isRead") is True,
        "createdAt": data.get("07_createdAt"),
        "readAt": data.get("08_readAt"),
        "metadata": json.loads(raw) if raw else None,
    }


class NotificationStore(Protocol):
    async def list_for_user(self, user_id: str, unread_only: bool = False) -> list[dict[str, Any]]:
        ...

    async def create(
        self,
        user_id: str,
        type: str,
        title: str,
        message: str,
        data: Optional[dict[str, Any]] = None,
    ) -> str:
        ...

    async def mark_read(self, notification_id: str) -> None:
        ...

    async def mark_all_read(self, user_id: str) -> int:
        ...

    async def unread_count(self, user_id: str) -> int:
        ...

    async def delete(self, notification_id: str) -> bool:
        ...


# ── Firestore-backed ────────────────────────────────────────────────

class FirestoreNotificationStore:
    def __init__(self, firestore_client: Any) -> None:
        self._db = firestore_client

    def _items(self, user_id: str) -> Any:
        return (
            self._db.collection(NOTIFICATIONS_COLLECTION)
            .document(user_id)
            .collection(NOTIFICATION_ITEMS)
        )

    def _find(self, notification_id: str) -> list[Any]:
        """All item documents carrying *notification_id*, whichever user owns them."""
        query = self._db.collection_group(NOTIFICATION_ITEMS).where("01_id", "==", notification_id)
        return list(query.stream())

    def _unread(self, user_id: str) -> list[Any]:
        return list(self._items(user_id).where("06_isRead", "==", False).stream())

    def _list(self, user_id: str, unread_only: bool) -> list[dict[str, Any]]:
        query = self._items(user_id).order_by("07_createdAt", direction=firestore.Query.DESCENDING)
        notifications = [
            _document_to_notification(user_id, doc.id, doc.to_dict() or {})
            for doc in query.stream()
        ]
        if unread_only:
            notifications = [n for n in notifications if not n["read"]]
        return notifications

    def _create(
        self,
        user_id: str,
        type: str,
        title: str,
        message: str,
        data: Optional[dict[str, Any]],
    ) -> str:
        self._db.collection(NOTIFICATIONS_COLLECTION).document(user_id).set(
            {"userId": user_id, "lastUpdated": firestore.SERVER_TIMESTAMP},
            merge=True,
        )
        notification_id = _new_notification_id()
        self._items(user_id).document(notification_id).set({
            "01_id": notification_id,
            "02_type": type,
            "03_title": title,
            "04_message": message,
            "05_data": json.dumps(data) if data else "",
            "06_isRead": False,
            "07_createdAt": firestore.SERVER_TIMESTAMP,
            "08_readAt": None,
        })
        logger.info("Created notification %s for user %s", notification_id, user_id)
        return notification_id

    def _mark_read(self, notification_id: str) -> None:
        for doc in self._find(notification_id):
            doc.reference.update({"06_isRead": True, "08_readAt": firestore.SERVER_TIMESTAMP})

    def _mark_all_read(self, user_id: str) -> int:
        unread = self._unread(user_id)
        for start in range(0, len(unread), _BATCH_LIMIT):
            batch = self._db.batch()
            for doc in unread[start:start + _BATCH_LIMIT]:
                batch.update(doc.reference, {"06_isRead": True, "08_readAt": firestore.SERVER_TIMESTAMP})
            batch.commit()
        return len(unread)

    def _delete(self, notification_id: str) -> bool:
        docs = self._find(notification_id)
        for doc in docs:
            doc.reference.delete()
        return bool(docs)

    async def list_for_user(self, user_id: str, unread_only: bool = False) -> list[dict[str, Any]]:
        return await run_in_threadpool(self._list, user_id, unread_only)

    async def create(
        self,
        user_id: str,
        type: str,
        title: str,
        message: str,
        data: Optional[dict[str, Any]] = None,
    ) -> str:
        return await run_in_threadpool(self._create, user_id, type, title, message, data)

    async def mark_read(self, notification_id: str) -> None:
        await run_in_threadpool(self._mark_read, notification_id)

    async def mark_all_read(self, user_id: str) -> int:
        return await run_in_threadpool(self._mark_all_read, user_id)

    async def unread_count(self, user_id: str) -> int:
        return len(await run_in_threadpool(self._unread, user_id))

    async def delete(self, notification_id: str) -> bool:
        return await run_in_threadpool(self._delete, notification_id)


# ── In-memory ───────────────────────────────────────────────────────

class InMemoryNotificationStore:
    def __init__(self, notifications: Optional[list[dict[str, Any]]] = None) -> None:
        self._seq = itertools.count(1)
        self.notifications: dict[str, dict[str, Any]] = {}
        for n in notifications or []:
            record = {
                "type": "system_alert",
                "title": "",
                "message": "",
                "read": False,
                "createdAt": datetime.now(timezone.utc),
                "readAt": None,
                "metadata": None,
                **n,
            }
            self.notifications[str(record["id"])] = record

    async def list_for_user(self, user_id: str, unread_only: bool = False) -> list[dict[str, Any]]:
        items = [
            dict(n) for n in self.notifications.values()
            if n["userId"] == user_id and not (unread_only and n["read"])
        ]
        items.sort(key=lambda n: n["createdAt"], reverse=True)
        return items

    async def create(
        self,
        user_id: str,
        type: str,
        title: str,
        message: str,
        data: Optional[dict[str, Any]] = None,
    ) -> str:
        notification_id = f"{_new_notification_id()}-{next(self._seq)}"
        self.notifications[notification_id] = {
            "id": notification_id,
            "userId": user_id,
            "type": type,
            "title": title,
            "message": message,
            "read": False,
            "createdAt": datetime.now(timezone.utc),
            "readAt": None,
            "metadata": data,
        }
        return notification_id

    async def mark_read(self, notification_id: str) -> None:
        notification = self.notifications.get(notification_id)
        if notification is not None:
            notification["read"] = True
            notification["readAt"] = datetime.now(timezone.utc)

    async def mark_all_read(self, user_id: str) -> int:
        count = 0
        for n in self.notifications.values():
            if n["userId"] == user_id and not n["read"]:
                n["read"] = True
                n["readAt"] = datetime.now(timezone.utc)
                count += 1
        return count

    async def unread_count(self, user_id: str) -> int:
        return sum(1 for n in self.notifications.values() if n["userId"] == user_id and not n["read"])

    async def delete(self, notification_id: str) -> bool:
        return self.notifications.pop(notification_id, None) is not None
