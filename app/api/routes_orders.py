# File: app/api/routes_orders.py

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.deps import get_order_service, orders_guard
from app.core.errors import AppError
from app.schemas.order import OrderCreate, OrderErrorResponse, OrderRead, OrderUpdate
from app.schemas.user import MessageResponse
from app.services.order_service import OrderService

router = APIRouter(tags=["orders"], dependencies=[Depends(orders_guard)])


@router.post(
    "",
    response_model=OrderRead,
    status_code=status.HTTP_201_CREATED,
    responses={500: {"model": OrderErrorResponse}},
)
def create_order(payload: OrderCreate, orders: OrderService = Depends(get_order_service)):
    try:
        return orders.create(payload)
    except AppError as e:
        return JSONResponse(status_code=e.status_code, content={"error": e.message})


@router.get(
    "",
    response_model=list[OrderRead],
    responses={500: {"model": OrderErrorResponse}},
)
def list_orders(orders: OrderService = Depends(get_order_service)):
    try:
        return orders.list()
    except AppError as e:
        return JSONResponse(status_code=e.status_code, content={"error": e.message})


@router.get(
    "/{order_id}",
    response_model=OrderRead,
    responses={404: {"model": MessageResponse}},
)
def get_order(order_id: str, orders: OrderService = Depends(get_order_service)):
    try:
        return orders.get(order_id)
    except AppError as e:
        return JSONResponse(status_code=e.status_code, content={"message": e.message})


@router.put(
    "/{order_id}",
    response_model=OrderRead,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
def update_order(
    order_id: str,
    payload: OrderUpdate,
    orders: OrderService = Depends(get_order_service),
):
    """
    Partial update: only truthy incoming values overwrite stored ones.
    """
    try:
        return orders.update(order_id, payload)
    except AppError as e:
        return JSONResponse(status_code=e.status_code, content={"message": e.message})


@router.delete(
    "/{order_id}",
    response_model=MessageResponse,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
def delete_order(order_id: str, orders: OrderService = Depends(get_order_service)):
    try:
        orders.delete(order_id)
    except AppError as e:
        return JSONResponse(status_code=e.status_code, content={"message": e.message})
    return MessageResponse(message="Order deleted successfully")
