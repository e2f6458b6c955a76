"""Convert ORM rows into the camelCase JSON shapes the dashboard consumes"""

from typing import Optional

from ..models import Booking, Canine, Notification, Owner, RoleRequest, ShopItem, User, Vaccination
from .dates import six_month_warning, to_iso_utc


def serialize_owner(owner: Owner, include_relations: bool = False) -> dict:
    data = {
        "id": owner.id,
        "name": owner.name,
        "email": owner.email,
        "mobile": owner.mobile,
        "workPhone": owner.work_phone,
        "address": owner.address,
        "emergencyContact": owner.emergency_contact,
        "createdAt": to_iso_utc(owner.created_at),
    }
    if include_relations:
        data["canines"] = [serialize_canine(c) for c in owner.canines]
        data["bookings"] = [serialize_booking(b) for b in owner.bookings]
    return data


def serialize_vaccination(vaccination: Vaccination) -> dict:
    return {
        "id": vaccination.id,
        "canineId": vaccination.canine_id,
        "DHPP": to_iso_utc(vaccination.dhpp),
        "LEPTO": to_iso_utc(vaccination.lepto),
        "KC": to_iso_utc(vaccination.kc),
        "fleaed": vaccination.fleaed,
    }


def serialize_canine(
    canine: Canine,
    include_vaccinations: bool = False,
    include_bookings: bool = False,
    include_owner: bool = False,
) -> dict:
    data = {
        "id": canine.id,
        "ownerId": canine.owner_id,
        "name": canine.name,
        "breed": canine.breed,
        "dateOfBirth": to_iso_utc(canine.date_of_birth),
        "gender": canine.gender,
        "color": canine.color,
        "microChipNumber": canine.microchip_number,
        "spayed": canine.spayed,
        "notes": canine.notes,
        "vetName": canine.vet_name,
        "vetPhone": canine.vet_phone,
        "vetAddress": canine.vet_address,
        "socialSkills": canine.social_skills,
        "behaviour": canine.behaviour,
        "health": canine.health,
        "createdAt": to_iso_utc(canine.created_at),
    }
    if include_vaccinations:
        data["vaccinations"] = [serialize_vaccination(v) for v in canine.vaccinations]
    if include_bookings:
        data["bookings"] = [serialize_booking(b) for b in canine.bookings]
    if include_owner:
        data["owner"] = serialize_owner(canine.owner) if canine.owner else None
    return data


def serialize_booking(
    booking: Booking, include_canine: bool = False, include_owner: bool = False
) -> dict:
    data = {
        "id": booking.id,
        "ownerId": booking.owner_id,
        "canineId": booking.canine_id,
        "date": to_iso_utc(booking.date),
        "isHalfDay": booking.is_half_day,
        "overnightStay": booking.overnight_stay,
        "previousBookingDate": to_iso_utc(booking.previous_booking_date),
        "checkInStatus": booking.check_in_status,
        "sixMonthWarning": six_month_warning(booking.date, booking.previous_booking_date),
        "createdAt": to_iso_utc(booking.created_at),
    }
    if include_canine:
        canine: Optional[Canine] = booking.canine
        data["canine"] = (
            serialize_canine(canine, include_owner=include_owner) if canine else None
        )
    return data


def serialize_shop_item(item: ShopItem) -> dict:
    return {
        "id": item.id,
        "title": item.title,
        "description": item.description,
        "price": item.price,
        "stock": item.stock,
        "createdAt": to_iso_utc(item.created_at),
    }


def serialize_user(user: User) -> dict:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "emailVerified": to_iso_utc(user.email_verified),
        "createdAt": to_iso_utc(user.created_at),
    }


def serialize_role_request(request: RoleRequest) -> dict:
    return {
        "id": request.id,
        "userId": request.user_id,
        "requestedRole": request.requested_role,
        "reason": request.reason,
        "status": request.status,
        "approvedAt": to_iso_utc(request.approved_at),
        "rejectedAt": to_iso_utc(request.rejected_at),
        "handledById": request.handled_by_id,
        "createdAt": to_iso_utc(request.created_at),
    }


def serialize_notification(notification: Notification) -> dict:
    """Notification with the related rows the notification feed renders"""
    requested_by = notification.requested_by
    handled_by = notification.handled_by
    request = notification.request
    canine = notification.canine

    return {
        "id": notification.id,
        "type": notification.type,
        "title": notification.title,
        "message": notification.message,
        "metadata": notification.extra,
        "requestedById": notification.requested_by_id,
        "requestId": notification.request_id,
        "canineId": notification.canine_id,
        "handledById": notification.handled_by_id,
        "handledAt": to_iso_utc(notification.handled_at),
        "createdAt": to_iso_utc(notification.created_at),
        "requestedBy": (
            {"id": requested_by.id, "name": requested_by.name, "email": requested_by.email}
            if requested_by
            else None
        ),
        "request": (
            {
                "id": request.id,
                "requestedRole": request.requested_role,
                "status": request.status,
                "reason": request.reason,
            }
            if request
            else None
        ),
        "handledBy": {"id": handled_by.id, "name": handled_by.name} if handled_by else None,
        "canine": (
            {
                "id": canine.id,
                "name": canine.name,
                "breed": canine.breed,
                "owner": {"id": canine.owner.id, "name": canine.owner.name},
            }
            if canine
            else None
        ),
        "readStates": [
            {"userId": state.user_id, "read": state.read} for state in notification.read_states
        ],
    }
