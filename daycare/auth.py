import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from .database import get_db
from .errors import AuthenticationError
from .models import Role, User
from .security_utils import verify_access_token

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Get current user from the bearer token"""
    if not credentials:
        raise AuthenticationError("Unauthorized")

    payload = verify_access_token(credentials.credentials)
    if not payload or not payload.get("sub"):
        raise AuthenticationError("Unauthorized")

    user = db.query(User).filter(User.id == payload["sub"]).first()
    if not user:
        logger.warning(f"⚠️ Token references unknown user {payload['sub']}")
        raise AuthenticationError("Unauthorized")

    return user


async def get_current_admin(user: User = Depends(get_current_user)) -> User:
    """Get current user and verify they hold the ADMIN role"""
    if user.role != Role.ADMIN.value:
        logger.warning(f"⚠️ User {user.email} attempted an admin-only action")
        raise AuthenticationError("Unauthorized")
    return user
