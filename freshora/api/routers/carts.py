# freshora/api/routers/carts.py
from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from freshora.data.database import get_db
from freshora.domain.schemas import AddToCartIn, CartOut, Envelope, UpdateCartItemIn
from freshora.services.cart_service import CartService
from freshora.utils.settings import DEFAULT_SESSION_ID

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(db: Session = Depends(get_db)) -> CartService:
    return CartService(db)


@router.get("", response_model=Envelope[CartOut])
def get_cart(
    session_id: str = Query(DEFAULT_SESSION_ID, alias="sessionId", min_length=1),
    svc: CartService = Depends(get_service),
):
    return Envelope(data=svc.get_cart(session_id))


@router.post("", response_model=Envelope[CartOut])
def add_item(payload: AddToCartIn, svc: CartService = Depends(get_service)):
    cart = svc.add_item(
        session_id=payload.session_id or DEFAULT_SESSION_ID,
        service_item_id=payload.item.id,
        quantity=payload.item.quantity,
    )
    return Envelope(data=cart, message="Item added to cart successfully")


@router.put("/{item_id}", response_model=Envelope[CartOut])
def update_item(
    payload: UpdateCartItemIn,
    item_id: str = Path(..., min_length=1),
    svc: CartService = Depends(get_service),
):
    cart = svc.update_quantity(
        session_id=payload.session_id or DEFAULT_SESSION_ID,
        service_item_id=item_id,
        quantity=payload.quantity,
    )
    return Envelope(data=cart, message="Cart item updated successfully")


@router.delete("/{item_id}", response_model=Envelope[CartOut])
def remove_item(
    item_id: str = Path(..., min_length=1),
    session_id: str = Query(DEFAULT_SESSION_ID, alias="sessionId", min_length=1),
    svc: CartService = Depends(get_service),
):
    cart = svc.remove_item(session_id, item_id)
    return Envelope(data=cart, message="Item removed from cart successfully")


@router.delete("", response_model=Envelope[CartOut])
def clear_cart(
    session_id: str = Query(DEFAULT_SESSION_ID, alias="sessionId", min_length=1),
    svc: CartService = Depends(get_service),
):
    cart = svc.clear_cart(session_id)
    return Envelope(data=cart, message="Cart cleared successfully")
