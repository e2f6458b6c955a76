"""Booking router - FastAPI endpoints for booking operations"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session, sessionmaker

from ...auth import get_current_user
from ...database import get_db, get_session_factory
from ...models import User
from .schemas import BookingCreate, BookingStatusUpdate, MultipleBookingsCreate
from .service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["Bookings"])


def get_booking_service(
    db: Session = Depends(get_db),
    session_factory: sessionmaker = Depends(get_session_factory),
) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db, session_factory)


@router.post("")
async def create_booking(
    data: BookingCreate,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """Create a single booking"""
    return service.create_booking(data)


@router.get("/all-bookings/{canine_id}")
async def get_all_booking_dates(
    canine_id: str,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """Get every booking date for a canine, oldest first"""
    return service.get_all_booking_dates(canine_id)


@router.get("/multiple-bookings/{canine_id}")
async def get_canine_bookings(
    canine_id: str,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """Get all bookings for a canine"""
    return service.get_bookings_for_canine(canine_id)


@router.post("/multiple-bookings/{canine_id}")
async def create_multiple_bookings(
    canine_id: str,
    data: MultipleBookingsCreate,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """Create one booking per date; partial failures are reported, not raised"""
    return await service.create_multiple_bookings(canine_id, data.dates)


@router.get("/upcoming-bookings/{canine_id}")
async def get_upcoming_booking(
    canine_id: str,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """Get the next booking after now, or null"""
    return service.get_upcoming_booking(canine_id)


@router.patch("/book-in-out/{booking_id}")
async def update_booking_status(
    booking_id: str,
    data: BookingStatusUpdate,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """Update half-day, overnight or check-in status"""
    return service.update_booking_status(booking_id, data)


@router.delete("/delete/{booking_id}")
async def delete_booking(
    booking_id: str,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """Delete a booking"""
    return service.delete_booking(booking_id)


@router.get("/{date}")
async def get_bookings_for_date(
    date: str,
    canine_id: Optional[str] = Query(None, alias="canineId"),
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """Get bookings on a calendar day, optionally for one canine"""
    return service.get_bookings_for_date(date, canine_id)
