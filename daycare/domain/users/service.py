"""User service - Registration, login, email verification and profile updates"""

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from ...email_service import send_verification_email
from ...errors import AuthenticationError, ConflictError, NotFoundError, ValidationError
from ...models import Role, User
from ...security_utils import (
    create_access_token,
    generate_verification_token,
    hash_password,
    verify_password,
    verify_verification_token,
)
from ...shared.serializers import serialize_user
from .schemas import LoginRequest, RegisterRequest, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Service layer for users and authentication"""

    def __init__(self, db: Session):
        self.db = db

    def _get_by_email(self, email: str):
        return self.db.query(User).filter(User.email == email).first()

    async def register(self, data: RegisterRequest) -> dict:
        if self._get_by_email(data.email):
            raise ConflictError("Email already in use")

        user = User(
            name=data.name,
            email=data.email,
            password_hash=hash_password(data.password),
            role=Role.USER.value,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"👤 Registered user {user.id}")

        try:
            await send_verification_email(user.email, generate_verification_token(user.email))
        except Exception as e:
            logger.error(f"❌ Failed to send verification email to {user.email}: {e}")

        return serialize_user(user)

    def login(self, data: LoginRequest) -> dict:
        user = self._get_by_email(data.email)
        if not user or not verify_password(data.password, user.password_hash):
            logger.warning(f"⚠️ Failed login attempt for {data.email}")
            raise AuthenticationError("Invalid credentials")

        return {
            "accessToken": create_access_token(user.id),
            "tokenType": "bearer",
            "user": serialize_user(user),
        }

    def verify_email(self, token: str) -> dict:
        email = verify_verification_token(token)
        if not email:
            raise ValidationError("Token is invalid or has expired")

        user = self._get_by_email(email)
        if not user:
            raise NotFoundError("Email does not exist")

        user.email_verified = datetime.utcnow()
        self.db.commit()
        logger.info(f"✅ Email verified for user {user.id}")
        return {"message": "Email verified"}

    def update_profile(self, user: User, data: UserUpdate) -> dict:
        if data.name is not None:
            user.name = data.name

        if data.newPassword:
            if not data.password or not verify_password(data.password, user.password_hash):
                raise AuthenticationError("Incorrect password")
            user.password_hash = hash_password(data.newPassword)

        self.db.commit()
        self.db.refresh(user)
        return serialize_user(user)
