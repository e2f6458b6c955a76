"""Role request router - FastAPI endpoints for role change requests"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_admin, get_current_user
from ...database import get_db
from ...models import User
from .schemas import RoleRequestCreate
from .service import RoleRequestService

router = APIRouter(prefix="/roles", tags=["Roles"])


def get_role_request_service(db: Session = Depends(get_db)) -> RoleRequestService:
    """Dependency injection for RoleRequestService"""
    return RoleRequestService(db)


@router.post("/requests", status_code=201)
async def submit_role_request(
    data: RoleRequestCreate,
    current_user: User = Depends(get_current_user),
    service: RoleRequestService = Depends(get_role_request_service),
):
    """Ask the admins for a different role"""
    return service.submit_request(current_user, data)


@router.patch("/{request_id}/accept")
async def accept_role_request(
    request_id: str,
    admin: User = Depends(get_current_admin),
    service: RoleRequestService = Depends(get_role_request_service),
):
    return await service.accept_request(request_id, admin)


@router.patch("/{request_id}/reject")
async def reject_role_request(
    request_id: str,
    admin: User = Depends(get_current_admin),
    service: RoleRequestService = Depends(get_role_request_service),
):
    return await service.reject_request(request_id, admin)
