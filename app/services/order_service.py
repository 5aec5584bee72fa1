# File: app/services/order_service.py

"""
Order service: CRUD over the order store.

Update uses a falsy-merge: a stored field is replaced only when the
incoming value is truthy. Sending ``quantity: 0`` or ``customerName: ""``
therefore leaves the stored value alone, the same as omitting the field.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import InternalError, NotFoundError, ValidationError
from app.db.order_store import OrderStore
from app.models.order import Order
from app.schemas.order import ORDER_FIELDS, OrderCreate, OrderUpdate

logger = logging.getLogger(__name__)


class OrderService:
    def __init__(self, store: OrderStore):
        self.store = store

    def create(self, payload: OrderCreate) -> Order:
        try:
            order = self.store.insert(Order(**payload.model_dump(include=set(ORDER_FIELDS))))
        except SQLAlchemyError as exc:
            logger.exception("Create order error")
            raise InternalError("Failed to create order") from exc

        logger.info("Created order %s", order.id)
        return order

    def list(self) -> List[Order]:
        try:
            return self.store.find_all()
        except SQLAlchemyError as exc:
            logger.exception("Fetch orders error")
            raise InternalError("Failed to fetch orders") from exc

    def get(self, order_id: str) -> Order:
        order = self.store.find_by_id(order_id)
        if order is None:
            raise NotFoundError("Order not found")
        return order

    def update(self, order_id: str, payload: OrderUpdate) -> Order:
        try:
            order = self.store.find_by_id(order_id)
            if order is None:
                raise NotFoundError("Order not found")

            for field in ORDER_FIELDS:
                value = getattr(payload, field)
                if value:
                    setattr(order, field, value)

            order = self.store.save(order)
        except SQLAlchemyError as exc:
            logger.exception("Update order error")
            raise ValidationError(str(exc)) from exc

        logger.info("Updated order %s", order.id)
        return order

    def delete(self, order_id: str) -> None:
        try:
            removed = self.store.delete_by_id(order_id)
        except SQLAlchemyError as exc:
            logger.exception("Delete order error")
            raise ValidationError(str(exc)) from exc

        if removed is None:
            raise NotFoundError("Order not found")
        logger.info("Deleted order %s", order_id)
