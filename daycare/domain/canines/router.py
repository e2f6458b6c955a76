"""Canine router - FastAPI endpoints for canine operations"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import User
from .schemas import CanineCreate, CanineUpdate
from .service import CanineService

router = APIRouter(prefix="/canines", tags=["Canines"])


def get_canine_service(db: Session = Depends(get_db)) -> CanineService:
    """Dependency injection for CanineService"""
    return CanineService(db)


@router.get("")
async def get_canines(
    current_user: User = Depends(get_current_user),
    service: CanineService = Depends(get_canine_service),
):
    """Get all canines with owner, vaccinations and bookings"""
    return service.get_canines()


@router.post("", status_code=201)
async def create_canine(
    data: CanineCreate,
    current_user: User = Depends(get_current_user),
    service: CanineService = Depends(get_canine_service),
):
    """Create a canine together with its vaccination record"""
    return service.create_canine(data)


@router.get("/{canine_id}")
async def get_canine(
    canine_id: str,
    current_user: User = Depends(get_current_user),
    service: CanineService = Depends(get_canine_service),
):
    return service.get_canine(canine_id)


@router.patch("/{canine_id}")
async def update_canine(
    canine_id: str,
    data: CanineUpdate,
    current_user: User = Depends(get_current_user),
    service: CanineService = Depends(get_canine_service),
):
    return service.update_canine(canine_id, data)


@router.delete("/{canine_id}")
async def delete_canine(
    canine_id: str,
    current_user: User = Depends(get_current_user),
    service: CanineService = Depends(get_canine_service),
):
    return service.delete_canine(canine_id)
