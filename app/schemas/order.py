# File: app/schemas/order.py

from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


ORDER_FIELDS = ("customer_name", "product_name", "quantity", "price")


class OrderBase(BaseModel):
    customer_name: Optional[str] = None
    product_name: Optional[str] = None
    quantity: Optional[float] = None
    price: Optional[float] = None

    class Config:
        # customerName on the wire, customer_name in Python
        alias_generator = to_camel
        populate_by_name = True


class OrderCreate(OrderBase):
    pass


class OrderUpdate(OrderBase):
    pass


class OrderRead(OrderBase):
    id: str

    class Config:
        from_attributes = True


class OrderErrorResponse(BaseModel):
    error: str
