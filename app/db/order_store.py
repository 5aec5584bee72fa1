# File: app/db/order_store.py

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.order import Order


class OrderStore:
    """
    Persisted orders keyed by an opaque string id.

    Every write commits immediately; on failure the session is rolled back
    and the SQLAlchemy error propagates to the caller.
    """

    def __init__(self, db: Session):
        self.db = db

    def insert(self, order: Order) -> Order:
        self.db.add(order)
        return self._commit(order)

    def save(self, order: Order) -> Order:
        return self._commit(order)

    def find_all(self) -> List[Order]:
        return list(self.db.scalars(select(Order)).all())

    def find_by_id(self, order_id: str) -> Optional[Order]:
        return self.db.get(Order, order_id)

    def delete_by_id(self, order_id: str) -> Optional[Order]:
        order = self.find_by_id(order_id)
        if order is None:
            return None
        self.db.delete(order)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return order

    def _commit(self, order: Order) -> Order:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(order)
        return order
