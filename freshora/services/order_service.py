# freshora/services/order_service.py
import secrets
import string
import time
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Sequence

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from freshora.data.models.order import OrderModel, ORDER_STATUSES
from freshora.data.models.order_item import OrderItemModel
from freshora.data.models.service_item import ServiceItemModel
from freshora.domain.errors import InternalError, NotFoundError, ValidationError
from freshora.repos.catalog_repo import CatalogRepo
from freshora.repos.order_repo import OrderRepo
from freshora.services.notification_service import NotificationService, order_summary
from freshora.services.tracking import build_tracking_steps
from freshora.utils.logging import get_logger
from freshora.utils.settings import ORDER_LIST_DEFAULT_LIMIT, ORDER_LIST_MAX_LIMIT

logger = get_logger(__name__)

_BASE36 = string.digits + string.ascii_uppercase


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_order_id() -> str:
    """Public tracking token, e.g. ORD-LZ4K2M1Q-8F3KQ0."""
    timestamp = to_base36(int(time.time() * 1000))
    suffix = "".join(secrets.choice(_BASE36) for _ in range(6))
    return f"ORD-{timestamp}-{suffix}"


def normalize_status(status: str) -> str:
    normalized = status.strip().lower().replace(" ", "_").replace("-", "_")
    if normalized not in ORDER_STATUSES:
        raise ValidationError(
            f"Invalid status '{status}'",
            errors=[{"field": "status", "message": f"Status must be one of: {', '.join(ORDER_STATUSES)}"}],
        )
    return normalized


class OrderService:
    """
    Order lifecycle: create, read, list, status updates, tracking.
    Totals are always computed from catalog prices at creation time.
    """

    def __init__(self, db: Session, notifier: NotificationService | None = None):
        self.repo = OrderRepo(db)
        self.catalog = CatalogRepo(db)
        self.notifier = notifier or NotificationService()

    # ------------------------------------------------------------ helpers

    def _resolve_items(self, refs: Sequence[str]) -> Dict[str, ServiceItemModel]:
        """
        Map every requested reference to a ServiceItem. Composite references
        such as "<serviceId>-<serviceItemId>" fall back to their last segment.
        Raises ValidationError listing all unknown references.
        """
        found = {i.id: i for i in self.catalog.get_items_by_ids(refs)}

        fallbacks = {ref: ref.rsplit("-", 1)[-1] for ref in refs if ref not in found and "-" in ref}
        if fallbacks:
            for item in self.catalog.get_items_by_ids(fallbacks.values()):
                found[item.id] = item

        resolved = {}
        invalid = []
        for ref in refs:
            item = found.get(ref) or found.get(fallbacks.get(ref, ""))
            if item is None:
                if ref not in invalid:
                    invalid.append(ref)
            else:
                resolved[ref] = item

        if invalid:
            raise ValidationError(
                f"Invalid serviceItemIds: {', '.join(invalid)}",
                errors=[{"field": "items", "message": f"Unknown service item '{ref}'"} for ref in invalid],
            )
        return resolved

    def _find(self, ref: str | int) -> OrderModel:
        ref = str(ref).strip()
        if ref.isdigit():
            order = self.repo.get_order(int(ref))
        else:
            order = self.repo.get_order_by_public_id(ref.upper())

        if not order:
            raise NotFoundError("Order not found")
        return order

    def _notify(self, send, *args) -> bool:
        # notifier failures never fail the order operation
        try:
            result = send(*args)
        except Exception as e:
            logger.warning(f"Notifier raised: {e}")
            return False

        if not isinstance(result, dict):
            logger.warning(f"Notifier returned {result!r}, expected a result dict")
            return False
        if not result.get("success"):
            logger.warning(f"Notification not sent: {result.get('error')}")
            return False
        return True

    @staticmethod
    def _order_view(order: OrderModel) -> Dict[str, Any]:
        return {
            "id": order.id,
            "order_id": order.order_id,
            "customer_name": order.customer_name,
            "customer_email": order.customer_email,
            "customer_phone": order.customer_phone,
            "customer_address": order.customer_address,
            "total_amount": order.total_amount,
            "status": order.status,
            "notes": order.notes,
            "special_instructions": order.special_instructions,
            "pickup_date": order.pickup_date,
            "delivery_date": order.delivery_date,
            "created_at": order.created_at,
            "updated_at": order.updated_at,
            "items": [
                {
                    "id": i.id,
                    "service_id": i.service_id,
                    "service_item_id": i.service_item_id,
                    "name": i.service_item.name,
                    "category": i.service_item.category,
                    "service_type": i.service.title,
                    "quantity": i.quantity,
                    "price": i.price,
                    "total_price": i.total_price,
                }
                for i in order.items
            ],
        }

    # ----------------------------------------------------------- commands

    def create_order(
        self,
        items: List[Dict[str, Any]],
        customer_info: Dict[str, Any],
        pickup_date: datetime | None = None,
        delivery_date: datetime | None = None,
        special_instructions: str | None = None,
        notes: str | None = None,
        client_total: Decimal | None = None,
    ) -> Dict[str, Any]:
        """
        Use case: place an order.

        1. validate customer and items (all unknown ids reported at once)
        2. compute the total from catalog prices
        3. persist order + items in one transaction
        4. notify (failures only logged)
        """
        name = (customer_info.get("name") or "").strip()
        email = (customer_info.get("email") or "").strip()
        phone = (customer_info.get("phone") or "").strip()

        errors = []
        if not name:
            errors.append({"field": "customerInfo.name", "message": "Customer name is required"})
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            errors.append({"field": "customerInfo.email", "message": "Valid email is required"})
        if not phone:
            errors.append({"field": "customerInfo.phone", "message": "Customer phone is required"})
        if not items:
            errors.append({"field": "items", "message": "At least one item is required"})
        for item in items:
            if int(item.get("quantity", 1)) <= 0:
                errors.append({"field": "items", "message": f"Quantity for '{item['id']}' must be >= 1"})
        if errors:
            raise ValidationError("Validation failed", errors=errors)

        resolved = self._resolve_items([str(i["id"]) for i in items])

        order_items = []
        total = Decimal("0.00")
        for item in items:
            service_item = resolved[str(item["id"])]
            quantity = int(item.get("quantity", 1))
            line_total = service_item.price * quantity
            total += line_total
            order_items.append(
                OrderItemModel(
                    service_id=service_item.service_id,
                    service_item_id=service_item.id,
                    quantity=quantity,
                    price=service_item.price,
                    total_price=line_total,
                )
            )

        if client_total is not None and Decimal(str(client_total)) != total:
            logger.warning(f"Ignoring client totalAmount {client_total}, computed {total}")

        order = OrderModel(
            order_id=generate_order_id(),
            customer_name=name,
            customer_email=email,
            customer_phone=phone,
            customer_address=customer_info.get("address"),
            total_amount=total,
            status="pending",
            notes=notes,
            special_instructions=special_instructions,
            pickup_date=pickup_date,
            delivery_date=delivery_date,
            items=order_items,
        )

        try:
            created = self.repo.create_order(order)
        except SQLAlchemyError as e:
            logger.error(f"Failed to create order: {e}")
            raise InternalError("Failed to create order") from e
        logger.info(f"Order {created.order_id} (id={created.id}) created, total {total}")

        email_sent = self._notify(self.notifier.send_order_confirmation, order_summary(created))

        view = self._order_view(created)
        view["email_sent"] = email_sent
        return view

    def update_status(
        self,
        ref: str | int,
        new_status: str,
        pickup_date: datetime | None = None,
        delivery_date: datetime | None = None,
    ) -> Dict[str, Any]:
        status = normalize_status(new_status)
        order = self._find(ref)
        previous = order.status

        order.status = status
        if pickup_date is not None:
            order.pickup_date = pickup_date
        if delivery_date is not None:
            order.delivery_date = delivery_date

        updated = self.repo.save(order)

        email_sent = False
        if previous != status:
            logger.info(f"Order {updated.order_id} status {previous} -> {status}")
            email_sent = self._notify(self.notifier.send_status_update, order_summary(updated), status)

        view = self._order_view(updated)
        view["email_sent"] = email_sent
        return view

    # ------------------------------------------------------------ queries

    def get_order(self, ref: str | int) -> Dict[str, Any]:
        return self._order_view(self._find(ref))

    def list_orders(
        self,
        status: str | None = None,
        customer_email: str | None = None,
        limit: int | None = None,
    ) -> List[Dict[str, Any]]:
        if status:
            status = normalize_status(status)

        limit = limit or ORDER_LIST_DEFAULT_LIMIT
        if not 1 <= limit <= ORDER_LIST_MAX_LIMIT:
            raise ValidationError(f"limit must be between 1 and {ORDER_LIST_MAX_LIMIT}")

        orders = self.repo.list_orders(status=status, customer_email=customer_email, limit=limit)
        return [self._order_view(o) for o in orders]

    def track_order(self, ref: str | int) -> Dict[str, Any]:
        order = self._find(ref)

        return {
            "id": order.id,
            "order_id": order.order_id,
            "current_status": order.status,
            "customer_info": {
                "name": order.customer_name,
                "email": order.customer_email,
                "phone": order.customer_phone,
                "address": order.customer_address,
            },
            "order_details": {
                "total_amount": order.total_amount,
                "pickup_date": order.pickup_date,
                "delivery_date": order.delivery_date,
                "special_instructions": order.special_instructions,
                "created_at": order.created_at,
                "updated_at": order.updated_at,
            },
            "items": [
                {
                    "name": i.service_item.name,
                    "category": i.service_item.category,
                    "service_type": i.service.title,
                    "quantity": i.quantity,
                    "price": i.price,
                }
                for i in order.items
            ],
            "tracking_steps": build_tracking_steps(order.status, order.created_at),
        }
