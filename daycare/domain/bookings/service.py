"""Booking service - Business logic for booking operations"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from pydantic import ValidationError as SchemaError
from sqlalchemy.orm import Session, sessionmaker

from ...errors import NotFoundError, ValidationError
from ...shared.dates import day_bounds, normalize_to_utc_midnight, to_iso_utc
from ...shared.serializers import serialize_booking
from ...shared.validators import parse_iso_datetime
from .repository import BookingRepository
from .schemas import BookingCreate, BookingDateEntry, BookingStatusUpdate

logger = logging.getLogger(__name__)


@dataclass
class BookingOutcome:
    """Settled result of one entry in a batch: either a booking or an error"""

    index: int
    date: Any
    booking: Optional[dict] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None


class BookingService:
    """Service layer for booking business logic"""

    def __init__(self, db: Session, session_factory: Optional[sessionmaker] = None):
        self.db = db
        self.session_factory = session_factory
        self.repo = BookingRepository()

    # ------------------------------------------------------------------
    # Batch creation
    # ------------------------------------------------------------------
    async def create_multiple_bookings(self, canine_id: str, dates: Any) -> dict:
        """
        Create one booking per requested date for a canine.

        Every entry is created concurrently in its own session and
        transaction. A failing entry is recorded in ``failedBookings`` and
        never rolls back its siblings.
        """
        if not canine_id:
            raise ValidationError("Canine is required")

        if not dates or not isinstance(dates, list):
            raise ValidationError("Dates are required")

        canine = self.repo.get_canine(self.db, canine_id)
        if not canine:
            raise NotFoundError("Canine not found")

        owner_id = canine.owner_id
        logger.info(f"📅 Creating {len(dates)} booking(s) for canine {canine_id}")

        outcomes = await asyncio.gather(
            *(
                asyncio.to_thread(self._create_booking_for_entry, index, owner_id, canine_id, entry)
                for index, entry in enumerate(dates)
            )
        )

        successful_bookings = [
            {"success": True, "booking": outcome.booking} for outcome in outcomes if outcome.success
        ]
        failed_bookings = [
            {"success": False, "date": outcome.date, "error": outcome.error}
            for outcome in outcomes
            if not outcome.success
        ]

        logger.info(
            f"✅ Batch for canine {canine_id}: {len(successful_bookings)} created, "
            f"{len(failed_bookings)} failed"
        )
        return {"successfulBookings": successful_bookings, "failedBookings": failed_bookings}

    def _create_booking_for_entry(
        self, index: int, owner_id: str, canine_id: str, entry: Any
    ) -> BookingOutcome:
        """Runs on a worker thread; opens and closes its own session"""
        raw_date = entry.get("date") if isinstance(entry, dict) else entry

        try:
            parsed = BookingDateEntry.model_validate(entry)
            booking_date = normalize_to_utc_midnight(parsed.date).replace(tzinfo=None)

            with self.session_factory() as db:
                booking = self.repo.create_booking(
                    db,
                    owner_id=owner_id,
                    canine_id=canine_id,
                    date=booking_date,
                    is_half_day=parsed.isHalfDay,
                )
                return BookingOutcome(
                    index=index, date=raw_date, booking=serialize_booking(booking, include_canine=True)
                )
        except SchemaError as e:
            message = e.errors()[0]["msg"]
            logger.error(f"❌ Invalid booking entry: date={raw_date!r} error={message}")
            return BookingOutcome(index=index, date=raw_date, error=message)
        except Exception as e:
            logger.error(f"❌ Booking creation failed: date={raw_date!r} error={e}")
            return BookingOutcome(index=index, date=raw_date, error=str(e))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_bookings_for_canine(self, canine_id: str) -> list[dict]:
        return [serialize_booking(b) for b in self.repo.get_bookings_for_canine(self.db, canine_id)]

    def get_all_booking_dates(self, canine_id: str) -> dict:
        if not canine_id:
            raise ValidationError("Canine ID is required")
        dates = self.repo.get_booking_dates_for_canine(self.db, canine_id)
        return {"allBookings": [to_iso_utc(d) for d in dates]}

    def get_upcoming_booking(self, canine_id: str) -> Optional[dict]:
        """Next booking strictly after now, or None"""
        if not canine_id:
            raise ValidationError("Canine ID is required")

        booking = self.repo.get_upcoming_booking(self.db, canine_id, datetime.utcnow())
        return {"date": to_iso_utc(booking.date)} if booking else None

    def get_bookings_for_date(self, date: str, canine_id: Optional[str] = None) -> list[dict]:
        try:
            day_start = normalize_to_utc_midnight(date)
        except ValueError as e:
            raise ValidationError("Invalid or missing date parameter") from e

        start, end = day_bounds(day_start)
        bookings = self.repo.get_bookings_between(self.db, start, end, canine_id)
        return [serialize_booking(b, include_canine=True, include_owner=True) for b in bookings]

    # ------------------------------------------------------------------
    # Single booking mutations
    # ------------------------------------------------------------------
    def create_booking(self, data: BookingCreate) -> dict:
        if not data.ownerId:
            raise ValidationError("Owner is required")
        if not data.canineId:
            raise ValidationError("Canine is required")
        if not data.date:
            raise ValidationError("Date is required")

        try:
            booking_date = normalize_to_utc_midnight(data.date).replace(tzinfo=None)
            previous_date = (
                parse_iso_datetime(data.previousBookingDate) if data.previousBookingDate else None
            )
        except ValueError as e:
            raise ValidationError(f"Invalid date: {e}") from e

        if not self.repo.get_owner(self.db, data.ownerId):
            raise NotFoundError("Owner not found")
        if not self.repo.get_canine(self.db, data.canineId):
            raise NotFoundError("Canine not found")

        booking = self.repo.create_booking(
            self.db,
            owner_id=data.ownerId,
            canine_id=data.canineId,
            date=booking_date,
            is_half_day=data.isHalfDay,
            overnight_stay=data.overnightStay,
            previous_booking_date=previous_date,
        )
        return serialize_booking(booking, include_canine=True)

    def update_booking_status(self, booking_id: str, data: BookingStatusUpdate) -> dict:
        """
        Apply a partial update to the booking.

        Any check-in status may be written at any time; the
        NOT_CHECKED_IN -> CHECKED_IN -> CHECKED_OUT order is left to the caller.
        """
        field_map = {
            "isHalfDay": "is_half_day",
            "overnightStay": "overnight_stay",
            "checkInStatus": "check_in_status",
        }
        updates = {}
        for key, value in data.model_dump(exclude_unset=True).items():
            if value is None:
                continue
            updates[field_map[key]] = value.value if hasattr(value, "value") else value

        count = self.repo.update_bookings(self.db, booking_id, **updates)
        return {"count": count}

    def delete_booking(self, booking_id: str) -> dict:
        if not booking_id:
            raise ValidationError("Booking ID is required")
        return {"count": self.repo.delete_booking(self.db, booking_id)}
