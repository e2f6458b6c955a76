"""Shop item service - Business logic for shop items"""

import logging

from sqlalchemy.orm import Session

from ...errors import NotFoundError
from ...shared.serializers import serialize_shop_item
from .repository import ShopItemRepository
from .schemas import ShopItemCreate, ShopItemUpdate

logger = logging.getLogger(__name__)


class ShopItemService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ShopItemRepository()

    def _get_or_404(self, item_id: str):
        item = self.repo.get_item_by_id(self.db, item_id)
        if not item:
            raise NotFoundError("Shop item not found")
        return item

    def get_items(self) -> list[dict]:
        return [serialize_shop_item(item) for item in self.repo.get_items(self.db)]

    def get_item(self, item_id: str) -> dict:
        return serialize_shop_item(self._get_or_404(item_id))

    def create_item(self, data: ShopItemCreate) -> dict:
        item = self.repo.create_item(self.db, **data.model_dump())
        logger.info(f"🛒 Created shop item {item.id} ({item.title}) at {item.price}")
        return serialize_shop_item(item)

    def update_item(self, item_id: str, data: ShopItemUpdate) -> dict:
        item = self._get_or_404(item_id)
        item = self.repo.update_item(self.db, item, **data.model_dump(exclude_unset=True))
        return serialize_shop_item(item)

    def delete_item(self, item_id: str) -> dict:
        return {"count": self.repo.delete_item(self.db, item_id)}
