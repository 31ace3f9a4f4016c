# importing every model registers it on Base.metadata

from freshora.data.models.service import ServiceModel
from freshora.data.models.service_item import ServiceItemModel
from freshora.data.models.cart import CartModel
from freshora.data.models.cart_item import CartItemModel
from freshora.data.models.order import OrderModel, ORDER_STATUSES
from freshora.data.models.order_item import OrderItemModel

__all__ = [
    "ServiceModel",
    "ServiceItemModel",
    "CartModel",
    "CartItemModel",
    "OrderModel",
    "OrderItemModel",
    "ORDER_STATUSES",
]
