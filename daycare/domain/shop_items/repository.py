"""Shop item repository - Database operations for shop items"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import ShopItem


class ShopItemRepository:
    """Repository for shop item database operations"""

    @staticmethod
    def get_items(db: Session) -> list[ShopItem]:
        return db.query(ShopItem).order_by(ShopItem.title.asc()).all()

    @staticmethod
    def get_item_by_id(db: Session, item_id: str) -> Optional[ShopItem]:
        return db.query(ShopItem).filter(ShopItem.id == item_id).first()

    @staticmethod
    def create_item(db: Session, **item_data) -> ShopItem:
        item = ShopItem(**item_data)
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    @staticmethod
    def update_item(db: Session, item: ShopItem, **updates) -> ShopItem:
        for key, value in updates.items():
            if hasattr(item, key):
                setattr(item, key, value)
        db.commit()
        db.refresh(item)
        return item

    @staticmethod
    def delete_item(db: Session, item_id: str) -> int:
        count = db.query(ShopItem).filter(ShopItem.id == item_id).delete(synchronize_session=False)
        db.commit()
        return count
