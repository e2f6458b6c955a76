"""Owner domain schemas - Pydantic models for validation"""

from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_email, validate_required_text


class OwnerCreate(BaseModel):
    """Schema for creating or replacing an owner"""

    name: str
    email: Optional[str] = None
    mobile: Optional[str] = None
    workPhone: Optional[str] = None
    address: Optional[str] = None
    emergencyContact: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return validate_required_text(v, "Name")

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        if v and v.strip():
            return validate_email(v)
        return None


class OwnerUpdate(OwnerCreate):
    """Owners are updated with the full form"""
