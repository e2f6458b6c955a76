"""Role request repository - Database operations for role requests"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Notification, NotificationReadState, Role, RoleRequest, User


class RoleRequestRepository:
    """Repository for role request database operations"""

    @staticmethod
    def get_request_by_id(db: Session, request_id: str) -> Optional[RoleRequest]:
        return (
            db.query(RoleRequest)
            .options(joinedload(RoleRequest.user))
            .filter(RoleRequest.id == request_id)
            .first()
        )

    @staticmethod
    def get_admin_ids(db: Session) -> list[str]:
        rows = db.query(User.id).filter(User.role == Role.ADMIN.value).all()
        return [row.id for row in rows]

    @staticmethod
    def create_request_with_notification(
        db: Session,
        request_data: dict,
        notification_data: dict,
        admin_ids: list[str],
    ) -> RoleRequest:
        """Create the request, its notification and one unread read state per admin"""
        role_request = RoleRequest(**request_data)
        db.add(role_request)
        db.flush()

        notification = Notification(request_id=role_request.id, **notification_data)
        db.add(notification)
        db.flush()

        for admin_id in admin_ids:
            db.add(
                NotificationReadState(
                    notification_id=notification.id, user_id=admin_id, read=False
                )
            )

        db.commit()
        db.refresh(role_request)
        return role_request

    @staticmethod
    def mark_handled(
        db: Session,
        role_request: RoleRequest,
        handled_by_id: str,
        now: datetime,
        granted_role: Optional[str] = None,
        **updates,
    ) -> RoleRequest:
        """
        Record the decision and mark every notification of the request handled.

        When ``granted_role`` is given the requester's role changes in the
        same commit as the decision.
        """
        for key, value in updates.items():
            setattr(role_request, key, value)
        role_request.handled_by_id = handled_by_id

        if granted_role is not None:
            db.query(User).filter(User.id == role_request.user_id).update(
                {"role": granted_role}, synchronize_session=False
            )

        db.query(Notification).filter(Notification.request_id == role_request.id).update(
            {"handled_by_id": handled_by_id, "handled_at": now, "updated_at": now},
            synchronize_session=False,
        )
        db.commit()
        db.refresh(role_request)
        return role_request
