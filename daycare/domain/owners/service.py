"""Owner service - Business logic for owner operations"""

import logging

from sqlalchemy.orm import Session

from ...errors import NotFoundError, ValidationError
from ...models import Owner
from ...shared.serializers import serialize_owner
from .repository import OwnerRepository
from .schemas import OwnerCreate, OwnerUpdate

logger = logging.getLogger(__name__)


class OwnerService:
    """Service layer for owner business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = OwnerRepository()

    @staticmethod
    def _to_columns(data: OwnerCreate) -> dict:
        return {
            "name": data.name,
            "email": data.email,
            "mobile": data.mobile,
            "work_phone": data.workPhone,
            "address": data.address,
            "emergency_contact": data.emergencyContact,
        }

    def get_owners(self) -> list[dict]:
        return [serialize_owner(o, include_relations=True) for o in self.repo.get_owners(self.db)]

    def get_owner(self, owner_id: str) -> Owner:
        owner = self.repo.get_owner_by_id(self.db, owner_id)
        if not owner:
            raise NotFoundError("Owner not found")
        return owner

    def create_owner(self, data: OwnerCreate) -> dict:
        owner = self.repo.create_owner(self.db, **self._to_columns(data))
        logger.info(f"🐾 Created owner {owner.id}")
        return serialize_owner(owner)

    def update_owner(self, owner_id: str, data: OwnerUpdate) -> dict:
        owner = self.get_owner(owner_id)
        owner = self.repo.update_owner(self.db, owner, **self._to_columns(data))
        return serialize_owner(owner)

    def delete_owner(self, owner_id: str) -> dict:
        if not owner_id:
            raise ValidationError("Owner ID is required")
        return {"count": self.repo.delete_owner(self.db, owner_id)}
