"""
Tests for order emails and the Celery-backed notifier.
"""
import pytest

from freshora.celery_worker import celery_app
from freshora.services import email_service
from freshora.services.email_service import (
    render_order_confirmation,
    render_status_update,
    send_email,
)
from freshora.services.notification_service import (
    NotificationService,
    send_order_confirmation_task,
    send_status_update_task,
)
from freshora.services.order_service import OrderService


@pytest.fixture
def summary():
    return {
        "id": 1,
        "orderId": "ORD-ABC-123456",
        "customerName": "Alice <Smith>",
        "customerEmail": "alice@example.com",
        "totalAmount": "35.00",
        "status": "pending",
        "pickupDate": None,
        "deliveryDate": None,
        "items": [{"name": "Suit", "quantity": 2, "price": "10.00", "totalPrice": "20.00"}],
    }


@pytest.fixture
def mock_smtp(monkeypatch):
    monkeypatch.setattr(email_service.settings, "SMTP_HOST", None)
    monkeypatch.setattr(email_service.settings, "SMTP_USERNAME", None)
    monkeypatch.setattr(email_service.settings, "SMTP_PASSWORD", None)


@pytest.fixture
def eager_celery():
    previous = celery_app.conf.task_always_eager
    celery_app.conf.task_always_eager = True
    yield celery_app
    celery_app.conf.task_always_eager = previous


def test_confirmation_template(summary):
    subject, html, text = render_order_confirmation(summary)

    assert subject == "Order Confirmation #ORD-ABC-123456 - Freshora Laundry"
    assert "Alice &lt;Smith&gt;" in html
    assert "$35.00" in html
    assert "To be scheduled" in text
    assert "2x Suit - $20.00" in text


def test_status_update_template(summary):
    subject, html, text = render_status_update(summary, "out_for_delivery")

    assert subject == "Order Update #ORD-ABC-123456 - OUT FOR DELIVERY"
    assert "Your order is out for delivery." in text
    assert "<strong>OUT FOR DELIVERY</strong>" in html


def test_status_update_template_unknown_status(summary):
    _, _, text = render_status_update(summary, "pending")

    assert "Your order status has been updated." in text


def test_send_email_mock_mode(mock_smtp):
    result = send_email("alice@example.com", "Hi", "<p>Hi</p>", "Hi")

    assert result["success"] is True
    assert result["mock"] is True
    assert result["messageId"]


def test_tasks_send_in_mock_mode(mock_smtp, summary):
    assert send_order_confirmation_task.run(summary)["success"] is True
    assert send_status_update_task.run(summary, "completed")["success"] is True


def test_notifier_reports_task_id(mock_smtp, eager_celery, summary):
    result = NotificationService().send_order_confirmation(summary)

    assert result["success"] is True
    assert result["messageId"]


def test_notifier_reports_broker_failure(monkeypatch, summary):
    def unreachable(*args, **kwargs):
        raise ConnectionError("broker unreachable")

    monkeypatch.setattr(send_status_update_task, "delay", unreachable)

    result = NotificationService().send_status_update(summary, "confirmed")

    assert result == {"success": False, "error": "broker unreachable"}


def test_order_summary_is_json_safe(db_session, notifier, customer_info):
    OrderService(db_session, notifier).create_order(
        items=[{"id": "suit-10", "quantity": 2}],
        customer_info=customer_info,
    )

    [sent] = notifier.confirmations
    assert sent["customerEmail"] == "alice@example.com"
    assert sent["totalAmount"] == "20.00"
    assert sent["items"] == [{"name": "Suit", "quantity": 2, "price": "10.00", "totalPrice": "20.00"}]
    assert sent["pickupDate"] is None
