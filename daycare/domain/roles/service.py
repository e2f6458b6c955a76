"""Role request service - Submitting and deciding role change requests"""

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from ...email_service import send_role_accepted_email, send_role_rejected_email
from ...errors import NotFoundError, ValidationError
from ...models import NotificationType, RoleRequest, RoleRequestStatus, User
from ...shared.serializers import serialize_role_request
from .repository import RoleRequestRepository
from .schemas import RoleRequestCreate

logger = logging.getLogger(__name__)


class RoleRequestService:
    """Service layer for role requests"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = RoleRequestRepository()

    def submit_request(self, user: User, data: RoleRequestCreate) -> dict:
        requested_role = data.requestedRole.value
        display_name = user.name or "User"

        request_data = {
            "user_id": user.id,
            "requested_role": requested_role,
            "reason": data.reason,
        }
        notification_data = {
            "type": NotificationType.ROLE_REQUEST.value,
            "requested_by_id": user.id,
            "title": f"Role Change Request by {display_name}",
            "message": f"{user.name or 'A user'} has requested a role change to {requested_role}.",
            "extra": {"reason": data.reason},
        }

        admin_ids = self.repo.get_admin_ids(self.db)
        role_request = self.repo.create_request_with_notification(
            self.db, request_data, notification_data, admin_ids
        )
        logger.info(
            f"🔑 Role request {role_request.id} by {user.id} for {requested_role} "
            f"({len(admin_ids)} admin(s) notified)"
        )
        return serialize_role_request(role_request)

    def _get_request(self, request_id: str) -> RoleRequest:
        if not request_id:
            raise ValidationError("Request ID is required")
        role_request = self.repo.get_request_by_id(self.db, request_id)
        if not role_request:
            raise NotFoundError("Role request not found")
        return role_request

    async def accept_request(self, request_id: str, admin: User) -> dict:
        role_request = self._get_request(request_id)
        now = datetime.utcnow()

        role_request = self.repo.mark_handled(
            self.db,
            role_request,
            admin.id,
            now,
            granted_role=role_request.requested_role,
            status=RoleRequestStatus.ACCEPTED.value,
            approved_at=now,
        )
        logger.info(f"✅ Role request {request_id} accepted by {admin.id}")

        await self._notify_requester(role_request, accepted=True)
        return {"message": "Role request accepted"}

    async def reject_request(self, request_id: str, admin: User) -> dict:
        role_request = self._get_request(request_id)
        now = datetime.utcnow()

        role_request = self.repo.mark_handled(
            self.db,
            role_request,
            admin.id,
            now,
            status=RoleRequestStatus.REJECTED.value,
            rejected_at=now,
        )
        logger.info(f"🚫 Role request {request_id} rejected by {admin.id}")

        await self._notify_requester(role_request, accepted=False)
        return {"message": "Role request rejected"}

    async def _notify_requester(self, role_request: RoleRequest, accepted: bool) -> None:
        """Email the requester; the decision stands even if the email fails"""
        email = role_request.user.email if role_request.user else None
        if not email:
            logger.warning(f"⚠️ No email for requester of role request {role_request.id}")
            return

        send = send_role_accepted_email if accepted else send_role_rejected_email
        try:
            await send(email, role_request.requested_role)
        except Exception as e:
            logger.error(f"❌ Failed to send role decision email to {email}: {e}")
