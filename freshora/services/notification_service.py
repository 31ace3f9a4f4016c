# freshora/services/notification_service.py
from typing import Any, Dict

from freshora.celery_worker import celery_app
from freshora.data.models.order import OrderModel
from freshora.services.email_service import (
    render_order_confirmation,
    render_status_update,
    send_email,
)
from freshora.utils.logging import get_logger

logger = get_logger(__name__)


def _iso(value) -> str | None:
    return value.isoformat() if value else None


def order_summary(order: OrderModel) -> Dict[str, Any]:
    """JSON-safe snapshot of an order, passed to the email tasks."""
    return {
        "id": order.id,
        "orderId": order.order_id,
        "customerName": order.customer_name,
        "customerEmail": order.customer_email,
        "totalAmount": str(order.total_amount),
        "status": order.status,
        "pickupDate": _iso(order.pickup_date),
        "deliveryDate": _iso(order.delivery_date),
        "items": [
            {
                "name": i.service_item.name,
                "quantity": i.quantity,
                "price": str(i.price),
                "totalPrice": str(i.total_price),
            }
            for i in order.items
        ],
    }


class NotificationService:
    """
    Order notifications. Emails are rendered and sent by Celery tasks;
    both methods only enqueue and report {success, messageId?, error?}.
    Nothing is retried.
    """

    def send_order_confirmation(self, summary: Dict[str, Any]) -> Dict[str, Any]:
        return self._enqueue(send_order_confirmation_task, summary)

    def send_status_update(self, summary: Dict[str, Any], new_status: str) -> Dict[str, Any]:
        return self._enqueue(send_status_update_task, summary, new_status)

    @staticmethod
    def _enqueue(task, *args) -> Dict[str, Any]:
        try:
            result = task.delay(*args)
        except Exception as e:
            # broker errors surface as several kombu/redis types
            logger.error(f"Could not enqueue {task.name}: {e}")
            return {"success": False, "error": str(e)}

        logger.info(f"Enqueued {task.name} as {result.id}")
        return {"success": True, "messageId": result.id}


@celery_app.task(name="freshora.services.notification_service.send_order_confirmation_task")
def send_order_confirmation_task(summary: Dict[str, Any]) -> Dict[str, Any]:
    subject, html, text = render_order_confirmation(summary)
    result = send_email(summary["customerEmail"], subject, html, text)
    logger.info(f"[NOTIFICATION] Order {summary['orderId']} confirmation: {result}")
    return result


@celery_app.task(name="freshora.services.notification_service.send_status_update_task")
def send_status_update_task(summary: Dict[str, Any], new_status: str) -> Dict[str, Any]:
    subject, html, text = render_status_update(summary, new_status)
    result = send_email(summary["customerEmail"], subject, html, text)
    logger.info(f"[NOTIFICATION] Order {summary['orderId']} status {new_status}: {result}")
    return result
