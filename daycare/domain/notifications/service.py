"""Notification service - Feed pagination and read tracking"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from ...models import User
from ...shared.serializers import serialize_notification
from .repository import NotificationRepository

logger = logging.getLogger(__name__)

PAGE_SIZE = 10
HANDLED_RETENTION = timedelta(days=14)


class NotificationService:
    """Service layer for notifications"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = NotificationRepository()

    def get_notifications(self, cursor: Optional[str] = None) -> dict:
        """
        One page of the feed.

        ``nextCursor`` is the id of the first notification of the following
        page, or None on the last page. An unknown cursor yields an empty page.
        """
        cursor_row = None
        if cursor:
            cursor_row = self.repo.get_notification_by_id(self.db, cursor)
            if cursor_row is None:
                return {"notifications": [], "nextCursor": None}

        handled_since = datetime.utcnow() - HANDLED_RETENTION
        rows = self.repo.get_page(self.db, handled_since, PAGE_SIZE + 1, cursor_row)

        next_cursor = rows[PAGE_SIZE].id if len(rows) > PAGE_SIZE else None
        return {
            "notifications": [serialize_notification(n) for n in rows[:PAGE_SIZE]],
            "nextCursor": next_cursor,
        }

    def get_unread_count(self, user: User) -> dict:
        return {"unreadCount": self.repo.count_unread_for_user(self.db, user.id)}

    def mark_as_read(self, notification_id: str, user: User) -> None:
        count = self.repo.mark_as_read(self.db, notification_id, user.id, datetime.utcnow())
        if count:
            logger.info(f"📬 Notification {notification_id} marked read by {user.id}")
