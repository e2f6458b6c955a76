"""Booking domain schemas - Pydantic models for validation"""

from typing import Any, Optional

from pydantic import BaseModel

from ...models import CheckInStatus


class BookingDateEntry(BaseModel):
    """One date of a batch booking request"""

    date: str
    isHalfDay: bool = False


class MultipleBookingsCreate(BaseModel):
    """
    Schema for batch booking creation.

    Entries are validated one by one inside the batch so that a malformed
    date only fails its own entry.
    """

    dates: Optional[Any] = None


class BookingCreate(BaseModel):
    """Schema for creating a single booking"""

    ownerId: Optional[str] = None
    canineId: Optional[str] = None
    date: Optional[str] = None
    isHalfDay: bool = False
    overnightStay: bool = False
    previousBookingDate: Optional[str] = None


class BookingStatusUpdate(BaseModel):
    """Partial update applied by the book-in/out endpoint"""

    isHalfDay: Optional[bool] = None
    overnightStay: Optional[bool] = None
    checkInStatus: Optional[CheckInStatus] = None
