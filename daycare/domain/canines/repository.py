"""Canine repository - Database operations for canines and vaccinations"""

from typing import Optional

from sqlalchemy.orm import Session, selectinload

from ...models import Canine, Owner, Vaccination


class CanineRepository:
    """Repository for canine database operations"""

    @staticmethod
    def get_canines(db: Session) -> list[Canine]:
        return (
            db.query(Canine)
            .options(
                selectinload(Canine.vaccinations),
                selectinload(Canine.bookings),
                selectinload(Canine.owner),
            )
            .all()
        )

    @staticmethod
    def get_canine_by_id(db: Session, canine_id: str) -> Optional[Canine]:
        return (
            db.query(Canine)
            .options(selectinload(Canine.vaccinations))
            .filter(Canine.id == canine_id)
            .first()
        )

    @staticmethod
    def get_owner_by_id(db: Session, owner_id: str) -> Optional[Owner]:
        return db.query(Owner).filter(Owner.id == owner_id).first()

    @staticmethod
    def create_canine(db: Session, vaccination_data: dict, **canine_data) -> Canine:
        """Create a canine and its vaccination record in one transaction"""
        canine = Canine(**canine_data)
        canine.vaccinations.append(Vaccination(**vaccination_data))
        db.add(canine)
        db.commit()
        db.refresh(canine)
        return canine

    @staticmethod
    def update_canine(
        db: Session, canine: Canine, vaccination_data: dict, **updates
    ) -> Canine:
        for key, value in updates.items():
            if hasattr(canine, key):
                setattr(canine, key, value)

        existing_vaccination = canine.vaccinations[0] if canine.vaccinations else None
        if existing_vaccination:
            for key, value in vaccination_data.items():
                setattr(existing_vaccination, key, value)
        else:
            canine.vaccinations.append(Vaccination(**vaccination_data))

        db.commit()
        db.refresh(canine)
        return canine

    @staticmethod
    def delete_canine(db: Session, canine_id: str) -> int:
        canine = db.query(Canine).filter(Canine.id == canine_id).first()
        if not canine:
            return 0
        db.delete(canine)
        db.commit()
        return 1
