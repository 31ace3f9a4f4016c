# freshora/repos/cart_repo.py
from typing import List

from sqlalchemy import select, update, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from freshora.data.models.cart import CartModel
from freshora.data.models.cart_item import CartItemModel
from freshora.data.models.service_item import ServiceItemModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_by_session(self, session_id: str) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(CartModel.session_id == session_id)
        ).scalar_one_or_none()

    def get_or_create_cart(self, session_id: str) -> CartModel:
        cart = self.get_cart_by_session(session_id)
        if cart:
            return cart

        # unique session_id: a concurrent creator wins, we read its row
        try:
            with self.db.begin_nested():
                cart = CartModel(session_id=session_id)
                self.db.add(cart)
        except IntegrityError:
            cart = self.get_cart_by_session(session_id)
            if cart is None:
                raise
        return cart

    def get_cart_items(self, cart_id: int) -> List[CartItemModel]:
        stmt = (
            select(CartItemModel)
            .options(joinedload(CartItemModel.service), joinedload(CartItemModel.service_item))
            .where(CartItemModel.cart_id == cart_id)
            .order_by(CartItemModel.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def _increment(self, cart_id: int, service_item_id: str, quantity: int) -> int:
        # quantity = quantity + n runs in the database, no read-modify-write
        result = self.db.execute(
            update(CartItemModel)
            .where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.service_item_id == service_item_id,
            )
            .values(quantity=CartItemModel.quantity + quantity)
        )
        return result.rowcount

    def increment_or_create_item(self, cart_id: int, service_item: ServiceItemModel, quantity: int) -> bool:
        """Returns True when a new line was created, False when incremented."""
        if self._increment(cart_id, service_item.id, quantity):
            return False

        try:
            with self.db.begin_nested():
                self.db.add(
                    CartItemModel(
                        cart_id=cart_id,
                        service_id=service_item.service_id,
                        service_item_id=service_item.id,
                        quantity=quantity,
                    )
                )
            return True
        except IntegrityError:
            # lost the insert race on (cart_id, service_item_id)
            if not self._increment(cart_id, service_item.id, quantity):
                raise
            return False

    def set_item_quantity(self, cart_id: int, service_item_id: str, quantity: int) -> int:
        result = self.db.execute(
            update(CartItemModel)
            .where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.service_item_id == service_item_id,
            )
            .values(quantity=quantity)
        )
        return result.rowcount

    def delete_cart_item(self, cart_id: int, service_item_id: str) -> int:
        result = self.db.execute(
            delete(CartItemModel)
            .where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.service_item_id == service_item_id,
            )
        )
        return result.rowcount

    def clear_items(self, cart_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel)
            .where(CartItemModel.cart_id == cart_id)
        )
        return result.rowcount

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
