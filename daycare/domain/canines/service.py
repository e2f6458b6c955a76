"""Canine service - Business logic for canine operations"""

import logging
from typing import Union

from sqlalchemy.orm import Session

from ...errors import NotFoundError, ValidationError
from ...shared.serializers import serialize_canine
from ...shared.validators import parse_iso_datetime
from .repository import CanineRepository
from .schemas import CanineCreate, CanineUpdate

logger = logging.getLogger(__name__)


class CanineService:
    """Service layer for canine business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CanineRepository()

    @staticmethod
    def _split(data: Union[CanineCreate, CanineUpdate]) -> tuple[dict, dict]:
        """Separate canine columns from vaccination columns"""
        canine_data = {
            "owner_id": data.ownerId,
            "name": data.name,
            "breed": data.breed,
            "date_of_birth": parse_iso_datetime(data.dateOfBirth),
            "gender": data.gender.value,
            "color": data.color,
            "microchip_number": data.microChipNumber,
            "spayed": data.spayed,
            "notes": data.notes,
            "vet_name": data.vetName,
            "vet_phone": data.vetPhone,
            "vet_address": data.vetAddress,
            "social_skills": data.socialSkills,
            "behaviour": data.behaviour,
            "health": data.health,
        }
        vaccination_data = {
            "dhpp": parse_iso_datetime(data.DHPP) if data.DHPP else None,
            "lepto": parse_iso_datetime(data.LEPTO) if data.LEPTO else None,
            "kc": parse_iso_datetime(data.KC) if data.KC else None,
            "fleaed": data.fleaed,
        }
        return canine_data, vaccination_data

    def _require_owner(self, owner_id: str) -> None:
        if not self.repo.get_owner_by_id(self.db, owner_id):
            logger.error(f"Owner not found for ownerId: {owner_id}")
            raise NotFoundError("Owner Not Found")

    def get_canines(self) -> list[dict]:
        return [
            serialize_canine(c, include_vaccinations=True, include_bookings=True, include_owner=True)
            for c in self.repo.get_canines(self.db)
        ]

    def get_canine(self, canine_id: str) -> dict:
        canine = self.repo.get_canine_by_id(self.db, canine_id)
        if not canine:
            raise NotFoundError("Canine not found")
        return serialize_canine(canine, include_vaccinations=True)

    def create_canine(self, data: CanineCreate) -> dict:
        self._require_owner(data.ownerId)
        canine_data, vaccination_data = self._split(data)
        canine = self.repo.create_canine(self.db, vaccination_data, **canine_data)
        logger.info(f"🐕 Created canine {canine.id} for owner {canine.owner_id}")
        return serialize_canine(canine, include_vaccinations=True)

    def update_canine(self, canine_id: str, data: CanineUpdate) -> dict:
        self._require_owner(data.ownerId)
        canine = self.repo.get_canine_by_id(self.db, canine_id)
        if not canine:
            raise NotFoundError("Canine not found")

        canine_data, vaccination_data = self._split(data)
        canine = self.repo.update_canine(self.db, canine, vaccination_data, **canine_data)
        return serialize_canine(canine, include_vaccinations=True)

    def delete_canine(self, canine_id: str) -> dict:
        if not canine_id:
            raise ValidationError("Canine ID is required")
        return {"count": self.repo.delete_canine(self.db, canine_id)}
