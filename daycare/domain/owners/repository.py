"""Owner repository - Database operations for owners"""

from typing import Optional

from sqlalchemy.orm import Session, selectinload

from ...models import Owner


class OwnerRepository:
    """Repository for owner database operations"""

    @staticmethod
    def get_owners(db: Session) -> list[Owner]:
        """Get all owners with canines and bookings, newest first"""
        return (
            db.query(Owner)
            .options(selectinload(Owner.canines), selectinload(Owner.bookings))
            .order_by(Owner.created_at.desc())
            .all()
        )

    @staticmethod
    def get_owner_by_id(db: Session, owner_id: str) -> Optional[Owner]:
        return db.query(Owner).filter(Owner.id == owner_id).first()

    @staticmethod
    def create_owner(db: Session, **owner_data) -> Owner:
        owner = Owner(**owner_data)
        db.add(owner)
        db.commit()
        db.refresh(owner)
        return owner

    @staticmethod
    def update_owner(db: Session, owner: Owner, **updates) -> Owner:
        for key, value in updates.items():
            if hasattr(owner, key):
                setattr(owner, key, value)

        db.commit()
        db.refresh(owner)
        return owner

    @staticmethod
    def delete_owner(db: Session, owner_id: str) -> int:
        """Delete an owner along with its canines and bookings"""
        owner = db.query(Owner).filter(Owner.id == owner_id).first()
        if not owner:
            return 0
        db.delete(owner)
        db.commit()
        return 1
