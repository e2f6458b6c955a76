"""Shared validation utilities"""

import re
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Args:
        email: Email address string

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    # Basic email validation pattern
    email_pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

    if not re.match(email_pattern, email):
        raise ValueError("Invalid email format")

    return email


def validate_required_text(value: Optional[str], field_name: str) -> str:
    """Strip a required text field and reject blank values"""
    if value is None or not value.strip():
        raise ValueError(f"{field_name} is required")
    return value.strip()


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """Treat empty form fields as absent"""
    if value is None or value.strip() == "":
        return None
    return value


def parse_iso_datetime(value: str) -> datetime:
    """
    Parse an ISO-8601 string (``Z`` suffix allowed) into a naive UTC datetime.

    Raises:
        ValueError: If the string is not a valid ISO date
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Date must be a non-empty ISO string")

    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def price_to_minor_units(price: str) -> int:
    """
    Convert a decimal price string into the integer stored in the database.

    Raises:
        ValueError: If the price is not a valid non-negative number
    """
    text = str(price).strip() if price is not None else ""
    if not re.match(r"^\d*\.?\d*$", text) or text in ("", "."):
        raise ValueError("Price must be a valid number")
    return int(Decimal(text).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
