# freshora/services/cart_service.py
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from freshora.data.models.cart_item import CartItemModel
from freshora.domain.errors import NotFoundError, ValidationError
from freshora.repos.cart_repo import CartRepo
from freshora.repos.catalog_repo import CatalogRepo
from freshora.utils.logging import get_logger
from freshora.utils.retry import db_retry

logger = get_logger(__name__)


class CartService:
    """
    Session-scoped carts.
    commands (add, update, remove, clear) change state,
    get_cart also creates an empty cart on first use.
    Session ids are opaque: anonymous browsers and signed-in users look the same.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.catalog = CatalogRepo(db)

    def _cart_view(self, session_id: str, items: List[CartItemModel]) -> Dict[str, Any]:
        lines = [
            {
                "id": i.service_item.id,
                "service_item_id": i.service_item.id,
                "name": i.service_item.name,
                "category": i.service_item.category,
                "service_type": i.service.title,
                "price": i.service_item.price,
                "quantity": i.quantity,
            }
            for i in items
        ]

        # derived on every read, never stored
        total_items = sum(line["quantity"] for line in lines)
        total_price = sum((line["price"] * line["quantity"] for line in lines), Decimal("0.00"))

        return {
            "session_id": session_id,
            "items": lines,
            "total_items": total_items,
            "total_price": total_price,
        }

    def _current_view(self, session_id: str) -> Dict[str, Any]:
        cart = self.repo.get_cart_by_session(session_id)
        items = self.repo.get_cart_items(cart.id) if cart else []
        return self._cart_view(session_id, items)

    # query (creates the cart lazily)
    @db_retry()
    def get_cart(self, session_id: str) -> Dict[str, Any]:
        try:
            cart = self.repo.get_or_create_cart(session_id)
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise

        return self._cart_view(session_id, self.repo.get_cart_items(cart.id))

    # commands
    @db_retry()
    def add_item(self, session_id: str, service_item_id: str, quantity: int = 1) -> Dict[str, Any]:
        if quantity <= 0:
            raise ValidationError("Quantity must be >= 1")

        service_item = self.catalog.get_item(service_item_id)
        if not service_item:
            raise NotFoundError("Service item not found")

        try:
            cart = self.repo.get_or_create_cart(session_id)
            created = self.repo.increment_or_create_item(cart.id, service_item, quantity)
            self.repo.commit()
        except Exception as e:
            logger.error(f"Failed to add item {service_item_id} to cart '{session_id}': {e}")
            self.repo.rollback()
            raise

        if created:
            logger.info(f"Added item {service_item_id} x{quantity} to cart '{session_id}'")
        else:
            logger.info(f"Item {service_item_id} already in cart '{session_id}', quantity +{quantity}")

        return self._cart_view(session_id, self.repo.get_cart_items(cart.id))

    def update_quantity(self, session_id: str, service_item_id: str, quantity: int) -> Dict[str, Any]:
        if quantity <= 0:
            raise ValidationError("Quantity must be a positive integer")

        cart = self.repo.get_cart_by_session(session_id)
        if not cart:
            raise NotFoundError("Cart not found")

        try:
            updated = self.repo.set_item_quantity(cart.id, service_item_id, quantity)
            if not updated:
                raise NotFoundError("Item not found in cart")
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise

        logger.info(f"Set quantity of {service_item_id} in cart '{session_id}' to {quantity}")
        return self._cart_view(session_id, self.repo.get_cart_items(cart.id))

    def remove_item(self, session_id: str, service_item_id: str) -> Dict[str, Any]:
        cart = self.repo.get_cart_by_session(session_id)
        if cart:
            try:
                removed = self.repo.delete_cart_item(cart.id, service_item_id)
                self.repo.commit()
            except Exception:
                self.repo.rollback()
                raise
            logger.info(f"Removed {removed} line(s) of {service_item_id} from cart '{session_id}'")

        return self._current_view(session_id)

    def clear_cart(self, session_id: str) -> Dict[str, Any]:
        cart = self.repo.get_cart_by_session(session_id)
        if cart:
            try:
                self.repo.clear_items(cart.id)
                self.repo.commit()
            except Exception:
                self.repo.rollback()
                raise
            logger.info(f"Cleared cart '{session_id}'")

        return self._current_view(session_id)
