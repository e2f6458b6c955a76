"""User routers - Authentication and current-user endpoints"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import User
from ...shared.serializers import serialize_user
from .schemas import LoginRequest, RegisterRequest, UserUpdate, VerificationRequest
from .service import UserService

auth_router = APIRouter(prefix="/auth", tags=["Authentication"])
router = APIRouter(prefix="/users", tags=["Users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency injection for UserService"""
    return UserService(db)


@auth_router.post("/register", status_code=201)
async def register(data: RegisterRequest, service: UserService = Depends(get_user_service)):
    """Create an account and send the verification email"""
    return await service.register(data)


@auth_router.post("/login")
async def login(data: LoginRequest, service: UserService = Depends(get_user_service)):
    """Exchange email and password for a bearer token"""
    return service.login(data)


@auth_router.post("/new-verification")
async def new_verification(
    data: VerificationRequest, service: UserService = Depends(get_user_service)
):
    return service.verify_email(data.token)


@router.get("/me")
async def get_me(current_user: User = Depends(get_current_user)):
    """Get current authenticated user"""
    return serialize_user(current_user)


@router.patch("/me")
async def update_me(
    data: UserUpdate,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """Update current user profile"""
    return service.update_profile(current_user, data)
