"""Booking repository - Database operations for bookings"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Booking, Canine, Owner


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def get_canine(db: Session, canine_id: str) -> Optional[Canine]:
        return db.query(Canine).filter(Canine.id == canine_id).first()

    @staticmethod
    def get_owner(db: Session, owner_id: str) -> Optional[Owner]:
        return db.query(Owner).filter(Owner.id == owner_id).first()

    @staticmethod
    def create_booking(db: Session, **booking_data) -> Booking:
        """Create a booking and commit it in the given session"""
        booking = Booking(**booking_data)
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def get_bookings_for_canine(db: Session, canine_id: str) -> list[Booking]:
        return db.query(Booking).filter(Booking.canine_id == canine_id).all()

    @staticmethod
    def get_booking_dates_for_canine(db: Session, canine_id: str) -> list[datetime]:
        rows = (
            db.query(Booking.date)
            .filter(Booking.canine_id == canine_id)
            .order_by(Booking.date.asc())
            .all()
        )
        return [row.date for row in rows]

    @staticmethod
    def get_upcoming_booking(db: Session, canine_id: str, now: datetime) -> Optional[Booking]:
        """Earliest booking strictly after now"""
        return (
            db.query(Booking)
            .filter(Booking.canine_id == canine_id, Booking.date > now)
            .order_by(Booking.date.asc())
            .first()
        )

    @staticmethod
    def get_bookings_between(
        db: Session, start: datetime, end: datetime, canine_id: Optional[str] = None
    ) -> list[Booking]:
        query = (
            db.query(Booking)
            .options(joinedload(Booking.canine).joinedload(Canine.owner))
            .filter(Booking.date >= start, Booking.date < end)
        )
        if canine_id:
            query = query.filter(Booking.canine_id == canine_id)
        return query.order_by(Booking.date.asc()).all()

    @staticmethod
    def update_bookings(db: Session, booking_id: str, **updates) -> int:
        """Apply updates to every booking with this id, returning the affected count"""
        query = db.query(Booking).filter(Booking.id == booking_id)
        if not updates:
            return query.count()
        count = query.update(updates, synchronize_session=False)
        db.commit()
        return count

    @staticmethod
    def delete_booking(db: Session, booking_id: str) -> int:
        count = db.query(Booking).filter(Booking.id == booking_id).delete(synchronize_session=False)
        db.commit()
        return count
