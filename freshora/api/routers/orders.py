# freshora/api/routers/orders.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from freshora.data.database import get_db
from freshora.domain.schemas import (
    Envelope,
    OrderCreate,
    OrderOut,
    OrderStatusUpdate,
    TrackingOut,
)
from freshora.services.notification_service import NotificationService
from freshora.services.order_service import OrderService
from freshora.utils.settings import ORDER_LIST_DEFAULT_LIMIT, ORDER_LIST_MAX_LIMIT

router = APIRouter(prefix="/api/orders", tags=["orders"])


def get_notifier() -> NotificationService:
    return NotificationService()


def get_service(
    db: Session = Depends(get_db),
    notifier: NotificationService = Depends(get_notifier),
) -> OrderService:
    return OrderService(db, notifier)


@router.get("", response_model=Envelope[List[OrderOut]])
def list_orders(
    status: Optional[str] = Query(None),
    customer_email: Optional[str] = Query(None, alias="customerEmail"),
    limit: int = Query(ORDER_LIST_DEFAULT_LIMIT, ge=1, le=ORDER_LIST_MAX_LIMIT),
    svc: OrderService = Depends(get_service),
):
    return Envelope(data=svc.list_orders(status=status, customer_email=customer_email, limit=limit))


@router.post("", response_model=Envelope[OrderOut], status_code=201)
def create_order(payload: OrderCreate, svc: OrderService = Depends(get_service)):
    """
    Places an order from the submitted lines.
    Prices and the total come from the catalog, never from the request.
    """
    order = svc.create_order(
        items=[i.model_dump() for i in payload.items],
        customer_info=payload.customer_info.model_dump(),
        pickup_date=payload.pickup_date,
        delivery_date=payload.delivery_date,
        special_instructions=payload.special_instructions,
        notes=payload.notes,
        client_total=payload.total_amount,
    )

    if order["email_sent"]:
        message = "Order placed successfully! Check your email for tracking information."
    else:
        message = "Order placed successfully! Confirmation email could not be sent."
    return Envelope(data=order, message=message)


@router.get("/track/{order_ref}", response_model=Envelope[TrackingOut])
def track_order(order_ref: str = Path(..., min_length=1), svc: OrderService = Depends(get_service)):
    return Envelope(data=svc.track_order(order_ref))


@router.get("/{order_ref}", response_model=Envelope[OrderOut])
def get_order(order_ref: str = Path(..., min_length=1), svc: OrderService = Depends(get_service)):
    return Envelope(data=svc.get_order(order_ref))


@router.put("/{order_ref}", response_model=Envelope[OrderOut])
def update_order_status(
    payload: OrderStatusUpdate,
    order_ref: str = Path(..., min_length=1),
    svc: OrderService = Depends(get_service),
):
    order = svc.update_status(
        order_ref,
        payload.status,
        pickup_date=payload.pickup_date,
        delivery_date=payload.delivery_date,
    )
    return Envelope(data=order, message="Order status updated successfully")
