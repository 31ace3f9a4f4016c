# freshora/services/email_service.py
"""
Transactional email for order events.

Sends real email via SMTP when SMTP_HOST, SMTP_USERNAME and SMTP_PASSWORD are
set, otherwise logs the message (mock mode). Every send returns a dict with
"success" plus "messageId" or "error"; callers only log it.
"""
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, make_msgid
from html import escape
from typing import Any, Dict, Tuple

from freshora.utils import settings
from freshora.utils.logging import get_logger

logger = get_logger(__name__)

BRAND = "Freshora Laundry"

STATUS_MESSAGES = {
    "confirmed": "Your order has been confirmed and is being prepared.",
    "processing": "Your order is currently being processed by our team.",
    "ready_for_pickup": "Your order is ready for pickup!",
    "out_for_delivery": "Your order is out for delivery.",
    "completed": f"Your order has been completed. Thank you for choosing {BRAND}!",
    "cancelled": "Your order has been cancelled. Contact us if this is unexpected.",
}


def is_email_configured() -> bool:
    return all([settings.SMTP_HOST, settings.SMTP_USERNAME, settings.SMTP_PASSWORD])


def status_title(status: str) -> str:
    return status.replace("_", " ").upper()


def render_order_confirmation(summary: Dict[str, Any]) -> Tuple[str, str, str]:
    """Returns (subject, html, text) for a newly placed order."""
    order_ref = summary["orderId"]
    name = escape(summary["customerName"])
    pickup = summary.get("pickupDate") or "To be scheduled"
    delivery = summary.get("deliveryDate") or "To be scheduled"

    subject = f"Order Confirmation #{order_ref} - {BRAND}"

    rows_html = ""
    rows_text = ""
    for item in summary.get("items", []):
        rows_html += (
            "<tr>"
            f"<td style='padding: 6px 8px;'>{item['quantity']}x {escape(item['name'])}</td>"
            f"<td style='padding: 6px 8px; text-align: right;'>${item['totalPrice']}</td>"
            "</tr>"
        )
        rows_text += f"  {item['quantity']}x {item['name']} - ${item['totalPrice']}\n"

    html = f"""<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Order Confirmation - {BRAND}</title></head>
<body style="margin: 0; padding: 20px; font-family: 'Segoe UI', Tahoma, sans-serif; background-color: #f8fafc;">
  <table width="600" cellpadding="0" cellspacing="0" style="background-color: white; border-radius: 12px; margin: 0 auto;">
    <tr>
      <td style="background: #667eea; padding: 40px 30px; text-align: center;">
        <h1 style="color: white; margin: 0;">Order Confirmed!</h1>
        <p style="color: white; margin: 10px 0 0 0;">Your laundry order has been received</p>
      </td>
    </tr>
    <tr>
      <td style="padding: 40px 30px;">
        <h2 style="color: #1f2937;">Hello {name}!</h2>
        <p>Thank you for choosing {BRAND}! Your order has been placed with tracking ID
        <strong>#{order_ref}</strong>.</p>
        <table width="100%" cellpadding="8" cellspacing="0">
          <tr><td>Order ID:</td><td><strong>#{order_ref}</strong></td></tr>
          <tr><td>Total Amount:</td><td><strong>${summary['totalAmount']}</strong></td></tr>
          <tr><td>Status:</td><td><strong>{summary['status']}</strong></td></tr>
          <tr><td>Pickup Date:</td><td>{pickup}</td></tr>
          <tr><td>Delivery Date:</td><td>{delivery}</td></tr>
        </table>
        <h3>Items</h3>
        <table width="100%" cellspacing="0">{rows_html}</table>
        <p>Use your Order ID <strong>#{order_ref}</strong> to track your order at any time.
        We'll keep you updated via email as your order progresses.</p>
      </td>
    </tr>
  </table>
</body>
</html>"""

    text = (
        f"Hello {summary['customerName']}!\n\n"
        f"Thank you for choosing {BRAND}! Your order #{order_ref} has been placed.\n\n"
        f"Total Amount: ${summary['totalAmount']}\n"
        f"Status: {summary['status']}\n"
        f"Pickup Date: {pickup}\n"
        f"Delivery Date: {delivery}\n\n"
        f"Items:\n{rows_text}\n"
        f"Use your Order ID #{order_ref} to track your order at any time.\n"
    )
    return subject, html, text


def render_status_update(summary: Dict[str, Any], new_status: str) -> Tuple[str, str, str]:
    order_ref = summary["orderId"]
    title = status_title(new_status)
    message = STATUS_MESSAGES.get(new_status, "Your order status has been updated.")

    subject = f"Order Update #{order_ref} - {title}"
    html = f"""
<h2>Order Status Update</h2>
<p>Hello {escape(summary['customerName'])},</p>
<p>Your order #{order_ref} status has been updated to: <strong>{title}</strong></p>
<p>{escape(message)}</p>
<p>Track your order anytime using Order ID: <strong>#{order_ref}</strong></p>
<p>Thank you for choosing {BRAND}!</p>
"""
    text = (
        f"Hello {summary['customerName']},\n\n"
        f"Your order #{order_ref} status has been updated to: {title}\n"
        f"{message}\n\n"
        f"Track your order anytime using Order ID: #{order_ref}\n"
    )
    return subject, html, text


def send_email(to_email: str, subject: str, html: str, text: str) -> Dict[str, Any]:
    message_id = make_msgid(domain="freshora.com")

    if not is_email_configured():
        logger.info(f"MOCK EMAIL to {to_email}: Subject: {subject} | Body: {text[:200]}...")
        return {"success": True, "messageId": message_id, "mock": True}

    try:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = formataddr((settings.SMTP_FROM_NAME, settings.SMTP_FROM_EMAIL))
        msg["To"] = to_email
        msg["Message-ID"] = message_id
        msg.attach(MIMEText(text, "plain"))
        msg.attach(MIMEText(html, "html"))

        context = ssl.create_default_context()
        with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=10) as server:
            server.starttls(context=context)
            server.login(settings.SMTP_USERNAME, settings.SMTP_PASSWORD)
            server.sendmail(settings.SMTP_FROM_EMAIL, to_email, msg.as_string())
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"Failed to send email to {to_email}: {e}")
        return {"success": False, "error": str(e), "mock": False}

    logger.info(f"Email sent to {to_email}: {subject}")
    return {"success": True, "messageId": message_id, "mock": False}
