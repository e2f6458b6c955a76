"""User and authentication schemas"""

from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_email, validate_required_text

MIN_PASSWORD_LENGTH = 6


def _check_password(v: Optional[str]) -> Optional[str]:
    if v is not None and len(v) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    return v


class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return validate_required_text(v, "Name")

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        if not v:
            raise ValueError("Email is required")
        return validate_email(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v):
        return _check_password(v)


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower()


class VerificationRequest(BaseModel):
    token: str


class UserUpdate(BaseModel):
    """Profile update; changing the password needs the current one"""

    name: Optional[str] = None
    password: Optional[str] = None
    newPassword: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        if v is None:
            return v
        return validate_required_text(v, "Name")

    @field_validator("newPassword")
    @classmethod
    def check_new_password(cls, v):
        return _check_password(v)
