"""Canine domain schemas - Pydantic models for validation"""

from typing import Any, Optional

from pydantic import BaseModel, field_validator

from ...models import Gender
from ...shared.validators import blank_to_none, parse_iso_datetime, validate_required_text


class CanineBase(BaseModel):
    ownerId: str
    name: str
    breed: str
    dateOfBirth: str
    gender: Gender
    color: str
    microChipNumber: Optional[str] = None
    spayed: bool
    notes: Optional[str] = None
    vetName: Optional[str] = None
    vetPhone: Optional[str] = None
    vetAddress: Optional[str] = None
    fleaed: bool
    # Intake questionnaires, stored as-is
    socialSkills: dict[str, Any]
    behaviour: dict[str, Any]
    health: dict[str, Any]

    @field_validator("name", "breed", "color")
    @classmethod
    def check_required(cls, v, info):
        return validate_required_text(v, info.field_name.capitalize())

    @field_validator("dateOfBirth")
    @classmethod
    def check_date_of_birth(cls, v):
        parse_iso_datetime(v)
        return v

    @field_validator("notes", "vetName", "vetPhone", "vetAddress")
    @classmethod
    def check_optional_text(cls, v, info):
        v = blank_to_none(v)
        if v is not None and len(v) < 2:
            raise ValueError(f"{info.field_name} must be at least 2 characters")
        return v


class CanineCreate(CanineBase):
    """Schema for creating a canine; vaccination dates are required"""

    DHPP: str
    LEPTO: str
    KC: str

    @field_validator("DHPP", "LEPTO", "KC")
    @classmethod
    def check_vaccination_date(cls, v, info):
        try:
            parse_iso_datetime(v)
        except ValueError as e:
            raise ValueError(f"{info.field_name} must be a valid date string") from e
        return v


class CanineUpdate(CanineBase):
    """Schema for updating a canine; empty vaccination dates clear the record"""

    DHPP: Optional[str] = None
    LEPTO: Optional[str] = None
    KC: Optional[str] = None

    @field_validator("DHPP", "LEPTO", "KC")
    @classmethod
    def check_vaccination_date(cls, v, info):
        v = blank_to_none(v)
        if v is not None:
            try:
                parse_iso_datetime(v)
            except ValueError as e:
                raise ValueError(f"{info.field_name} must be a valid date string") from e
        return v
