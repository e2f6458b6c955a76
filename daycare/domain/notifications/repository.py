"""Notification repository - Database operations for notifications and read states"""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session, selectinload

from ...models import Canine, Notification, NotificationReadState


class NotificationRepository:
    """Repository for notification database operations"""

    @staticmethod
    def get_notification_by_id(db: Session, notification_id: str) -> Optional[Notification]:
        return db.query(Notification).filter(Notification.id == notification_id).first()

    @staticmethod
    def get_page(
        db: Session,
        handled_since: datetime,
        limit: int,
        cursor: Optional[Notification] = None,
    ) -> list[Notification]:
        """
        Newest-first page of notifications that are unhandled or were
        handled after ``handled_since``.

        The cursor row itself is the first row of the page.
        """
        query = (
            db.query(Notification)
            .options(
                selectinload(Notification.requested_by),
                selectinload(Notification.handled_by),
                selectinload(Notification.request),
                selectinload(Notification.canine).selectinload(Canine.owner),
                selectinload(Notification.read_states),
            )
            .filter(
                or_(Notification.handled_at.is_(None), Notification.handled_at >= handled_since)
            )
        )

        if cursor is not None:
            query = query.filter(
                or_(
                    Notification.created_at < cursor.created_at,
                    and_(
                        Notification.created_at == cursor.created_at,
                        Notification.id <= cursor.id,
                    ),
                )
            )

        return (
            query.order_by(Notification.created_at.desc(), Notification.id.desc())
            .limit(limit)
            .all()
        )

    @staticmethod
    def count_unread_for_user(db: Session, user_id: str) -> int:
        return (
            db.query(Notification)
            .filter(
                Notification.read_states.any(
                    and_(
                        NotificationReadState.user_id == user_id,
                        NotificationReadState.read.is_(False),
                    )
                )
            )
            .count()
        )

    @staticmethod
    def mark_as_read(db: Session, notification_id: str, user_id: str, now: datetime) -> int:
        count = (
            db.query(NotificationReadState)
            .filter(
                NotificationReadState.notification_id == notification_id,
                NotificationReadState.user_id == user_id,
                NotificationReadState.read.is_(False),
            )
            .update({"read": True, "read_at": now}, synchronize_session=False)
        )
        db.commit()
        return count
