"""Owner router - FastAPI endpoints for owner operations"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import User
from ...shared.serializers import serialize_owner
from .schemas import OwnerCreate, OwnerUpdate
from .service import OwnerService

router = APIRouter(prefix="/owners", tags=["Owners"])


def get_owner_service(db: Session = Depends(get_db)) -> OwnerService:
    """Dependency injection for OwnerService"""
    return OwnerService(db)


@router.get("")
async def get_owners(
    current_user: User = Depends(get_current_user),
    service: OwnerService = Depends(get_owner_service),
):
    """Get all owners with their canines and bookings"""
    return service.get_owners()


@router.post("", status_code=201)
async def create_owner(
    data: OwnerCreate,
    current_user: User = Depends(get_current_user),
    service: OwnerService = Depends(get_owner_service),
):
    return service.create_owner(data)


@router.get("/{owner_id}")
async def get_owner(
    owner_id: str,
    current_user: User = Depends(get_current_user),
    service: OwnerService = Depends(get_owner_service),
):
    return serialize_owner(service.get_owner(owner_id), include_relations=True)


@router.patch("/{owner_id}")
async def update_owner(
    owner_id: str,
    data: OwnerUpdate,
    current_user: User = Depends(get_current_user),
    service: OwnerService = Depends(get_owner_service),
):
    return service.update_owner(owner_id, data)


@router.delete("/{owner_id}")
async def delete_owner(
    owner_id: str,
    current_user: User = Depends(get_current_user),
    service: OwnerService = Depends(get_owner_service),
):
    """Delete an owner and everything it owns"""
    return service.delete_owner(owner_id)
