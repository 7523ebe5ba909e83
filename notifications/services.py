# notifications/services.py

from __future__ import annotations

import logging
import re
import smtplib
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils import timezone
from django.utils.html import strip_tags

from electgo.exceptions import Misconfigured, SendFailure

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
SMTP_BACKEND = 'django.core.mail.backends.smtp.EmailBackend'

INVENTORY_ALERT_SUBJECT = 'Inventory Alert - Low Stock Items'
SALES_REPORT_SUBJECT = 'Sales Report'


def stock_status(quantity, threshold):
    """Return (css class, label) for an alert row."""
    if quantity == 0:
        return 'status-out', 'OUT OF STOCK'
    if quantity <= threshold:
        return 'status-low', 'LOW STOCK'
    return 'status-ok', 'IN STOCK'


@dataclass
class AlertEntry:
    item_name: str
    current_quantity: int
    threshold: int
    category: Optional[str] = None

    @property
    def status_class(self):
        return stock_status(self.current_quantity, self.threshold)[0]

    @property
    def status_text(self):
        return stock_status(self.current_quantity, self.threshold)[1]

    def as_dict(self):
        return {
            'itemName': self.item_name,
            'currentQuantity': self.current_quantity,
            'threshold': self.threshold,
            'category': self.category,
        }


@dataclass
class ReportRow:
    date: str
    item: str
    price: Decimal
    quantity: int

    @property
    def total(self):
        return self.price * self.quantity


def is_valid_email(email):
    return bool(email) and EMAIL_PATTERN.match(email) is not None


def email_configuration():
    """Report which transport settings are present without leaking them."""
    user = settings.EMAIL_HOST_USER
    password = settings.EMAIL_HOST_PASSWORD
    return {
        'emailUser': 'SET' if user else 'NOT SET',
        'emailPassword': 'SET' if password else 'NOT SET',
        'emailBackend': settings.EMAIL_BACKEND,
        'emailFrom': settings.DEFAULT_FROM_EMAIL or 'NOT SET',
        'configured': _transport_ready(),
    }


def _transport_ready():
    if settings.EMAIL_BACKEND != SMTP_BACKEND:
        return True
    return bool(settings.EMAIL_HOST_USER and settings.EMAIL_HOST_PASSWORD)


def check_transport():
    if not _transport_ready():
        raise Misconfigured()


def render_inventory_alert(alerts: Iterable[AlertEntry], generated_at=None) -> str:
    return render_to_string('notifications/inventory_alert.html', {
        'alerts': list(alerts),
        'company_name': settings.ELECTGO_COMPANY_NAME,
        'generated_at': generated_at or timezone.localtime(),
    })


def render_sales_report(rows: Iterable[ReportRow]) -> str:
    rows = list(rows)
    return render_to_string('notifications/sales_report.html', {
        'rows': rows,
        'total_revenue': sum((row.total for row in rows), Decimal('0')),
        'currency': settings.ELECTGO_CURRENCY,
        'company_name': settings.ELECTGO_COMPANY_NAME,
    })


def _send(to: str, subject: str, html: str):
    """Single delivery attempt; transport errors surface as SendFailure."""
    check_transport()

    message = EmailMultiAlternatives(
        subject=subject,
        body=strip_tags(html),
        from_email=settings.DEFAULT_FROM_EMAIL,
        to=[to],
    )
    message.attach_alternative(html, 'text/html')

    try:
        message.send(fail_silently=False)
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"[EMAIL] '{subject}' to {to} failed: {e}")
        raise SendFailure(f"Failed to send email: {e}") from e

    logger.info(f"[EMAIL] '{subject}' sent to {to}")


def send_inventory_alert(email: str, alerts: List[AlertEntry]):
    html = render_inventory_alert(alerts)
    _send(email, INVENTORY_ALERT_SUBJECT, html)


def send_sales_report(email: str, rows: List[ReportRow]):
    html = render_sales_report(rows)
    _send(email, SALES_REPORT_SUBJECT, html)
