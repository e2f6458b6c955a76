"""Shop item router - FastAPI endpoints for shop items"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import User
from .schemas import ShopItemCreate, ShopItemUpdate
from .service import ShopItemService

router = APIRouter(prefix="/shop-items", tags=["Shop Items"])


def get_shop_item_service(db: Session = Depends(get_db)) -> ShopItemService:
    """Dependency injection for ShopItemService"""
    return ShopItemService(db)


@router.get("")
async def get_shop_items(
    current_user: User = Depends(get_current_user),
    service: ShopItemService = Depends(get_shop_item_service),
):
    return service.get_items()


@router.post("", status_code=201)
async def create_shop_item(
    data: ShopItemCreate,
    current_user: User = Depends(get_current_user),
    service: ShopItemService = Depends(get_shop_item_service),
):
    return service.create_item(data)


@router.get("/{item_id}")
async def get_shop_item(
    item_id: str,
    current_user: User = Depends(get_current_user),
    service: ShopItemService = Depends(get_shop_item_service),
):
    return service.get_item(item_id)


@router.patch("/{item_id}")
async def update_shop_item(
    item_id: str,
    data: ShopItemUpdate,
    current_user: User = Depends(get_current_user),
    service: ShopItemService = Depends(get_shop_item_service),
):
    return service.update_item(item_id, data)


@router.delete("/{item_id}")
async def delete_shop_item(
    item_id: str,
    current_user: User = Depends(get_current_user),
    service: ShopItemService = Depends(get_shop_item_service),
):
    return service.delete_item(item_id)
