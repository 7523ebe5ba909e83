"""
Notification sender: rendering, validation and transport failures.
"""

import smtplib
from decimal import Decimal

import pytest
from django.core import mail
from django.urls import reverse

from electgo.exceptions import Misconfigured, SendFailure
from notifications import services
from notifications.services import AlertEntry, ReportRow

SMTP_BACKEND = 'django.core.mail.backends.smtp.EmailBackend'

ALERTS_PAYLOAD = [
    {'itemName': "Mouse", 'currentQuantity': 0, 'threshold': 5, 'category': "Accessories"},
    {'itemName': "Keyboard", 'currentQuantity': 3, 'threshold': 5},
]

REPORT_PAYLOAD = [
    {'date': "2024-03-01", 'item': "Mouse", 'price': "450.00", 'quantity': 2},
    {'date': "2024-03-02", 'item': "KRA iTax", 'price': "50.00", 'quantity': 1},
]


@pytest.fixture
def unconfigured_smtp(settings):
    settings.EMAIL_BACKEND = SMTP_BACKEND
    settings.EMAIL_HOST_USER = ''
    settings.EMAIL_HOST_PASSWORD = ''


class TestStockStatus:

    @pytest.mark.parametrize('quantity, label', [
        (0, 'OUT OF STOCK'),
        (1, 'LOW STOCK'),
        (5, 'LOW STOCK'),
        (6, 'IN STOCK'),
    ])
    def test_labels(self, quantity, label):
        assert services.stock_status(quantity, 5)[1] == label

    @pytest.mark.parametrize('email, valid', [
        ('owner@shop.co.ke', True),
        ('owner@shop', False),
        ('owner shop@x.com', False),
        ('', False),
    ])
    def test_email_pattern(self, email, valid):
        assert services.is_valid_email(email) is valid


class TestRendering:

    def test_inventory_alert(self, settings):
        html = services.render_inventory_alert([
            AlertEntry(item_name="Mouse", current_quantity=0, threshold=5, category=None),
            AlertEntry(item_name="Keyboard", current_quantity=3, threshold=5, category="Accessories"),
        ])

        assert "Mouse" in html
        assert "OUT OF STOCK" in html
        assert "status-out" in html
        assert "LOW STOCK" in html
        assert "N/A" in html
        assert "Accessories" in html
        assert settings.ELECTGO_COMPANY_NAME in html

    def test_sales_report(self):
        html = services.render_sales_report([
            ReportRow(date="2024-03-01", item="Mouse", price=Decimal("450.00"), quantity=2),
            ReportRow(date="2024-03-02", item="KRA iTax", price=Decimal("50.00"), quantity=1),
        ])

        assert "Mouse" in html
        assert "KES 900.00" in html
        assert "Total Revenue: KES 950.00" in html


class TestSending:

    def test_inventory_alert_goes_out(self, settings):
        services.send_inventory_alert("owner@shop.co.ke", [AlertEntry("Mouse", 0, 5)])

        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.subject == "Inventory Alert - Low Stock Items"
        assert message.to == ["owner@shop.co.ke"]
        assert message.from_email == settings.DEFAULT_FROM_EMAIL
        html, mimetype = message.alternatives[0]
        assert mimetype == "text/html"
        assert "Mouse" in html
        assert "Mouse" in message.body
        assert "<td>" not in message.body

    def test_missing_credentials(self, unconfigured_smtp):
        with pytest.raises(Misconfigured):
            services.send_sales_report("owner@shop.co.ke", [])

        assert services.email_configuration()['configured'] is False

    def test_transport_error_is_send_failure(self, monkeypatch):
        def refuse(self, fail_silently=False):
            raise smtplib.SMTPServerDisconnected("Connection unexpectedly closed")

        monkeypatch.setattr('django.core.mail.EmailMultiAlternatives.send', refuse)

        with pytest.raises(SendFailure) as excinfo:
            services.send_sales_report("owner@shop.co.ke", [])

        assert "Connection unexpectedly closed" in excinfo.value.message


@pytest.mark.django_db
class TestEmailEndpoints:

    def test_inventory_alert(self, api_client):
        response = api_client.post(
            reverse('notifications:inventory-alert'),
            {'email': "owner@shop.co.ke", 'alerts': ALERTS_PAYLOAD},
            format='json',
        )

        assert response.status_code == 200
        assert response.json() == {'message': "Inventory alert sent successfully", 'alertCount': 2}
        assert "Keyboard" in mail.outbox[0].alternatives[0][0]

    def test_sales_report(self, api_client):
        response = api_client.post(
            reverse('notifications:sales-report'),
            {'email': "owner@shop.co.ke", 'reportData': REPORT_PAYLOAD},
            format='json',
        )

        assert response.status_code == 200
        assert response.json() == {'message': "Report sent successfully", 'rowCount': 2}
        assert mail.outbox[0].subject == "Sales Report"

    @pytest.mark.parametrize('payload, subject', [
        ({'email': "owner@shop.co.ke", 'alerts': ALERTS_PAYLOAD}, "Inventory Alert - Low Stock Items"),
        ({'email': "owner@shop.co.ke", 'reportData': REPORT_PAYLOAD}, "Sales Report"),
    ])
    def test_dispatch_by_payload_shape(self, api_client, payload, subject):
        response = api_client.post(reverse('notifications:email-dispatch'), payload, format='json')

        assert response.status_code == 200
        assert mail.outbox[0].subject == subject

    def test_dispatch_without_data(self, api_client):
        response = api_client.post(
            reverse('notifications:email-dispatch'), {'email': "owner@shop.co.ke"}, format='json',
        )

        assert response.status_code == 400
        assert response.json()['error'] == "Provide either alerts or reportData"
        assert mail.outbox == []

    def test_invalid_email(self, api_client):
        response = api_client.post(
            reverse('notifications:inventory-alert'),
            {'email': "not-an-email", 'alerts': ALERTS_PAYLOAD},
            format='json',
        )

        assert response.status_code == 400
        assert response.json()['error'] == "email: Invalid email format"
        assert mail.outbox == []

    def test_invalid_alert_after_valid_one(self, api_client):
        alerts = [ALERTS_PAYLOAD[0], {'currentQuantity': 1, 'threshold': 5}]

        response = api_client.post(
            reverse('notifications:inventory-alert'),
            {'email': "owner@shop.co.ke", 'alerts': alerts},
            format='json',
        )

        assert response.status_code == 400
        error = response.json()['error']
        assert error.startswith("alerts: ")
        assert error.endswith("itemName: This field is required.")
        assert mail.outbox == []

    def test_misconfigured_transport(self, api_client, unconfigured_smtp):
        response = api_client.post(
            reverse('notifications:sales-report'),
            {'email': "owner@shop.co.ke", 'reportData': REPORT_PAYLOAD},
            format='json',
        )

        assert response.status_code == 500
        assert response.json()['error'].startswith("Email service not configured")

    def test_send_failure_is_bad_gateway(self, api_client, monkeypatch):
        def refuse(self, fail_silently=False):
            raise ConnectionRefusedError("Connection refused")

        monkeypatch.setattr('django.core.mail.EmailMultiAlternatives.send', refuse)

        response = api_client.post(
            reverse('notifications:sales-report'),
            {'email': "owner@shop.co.ke", 'reportData': REPORT_PAYLOAD},
            format='json',
        )

        assert response.status_code == 502
        assert "Connection refused" in response.json()['error']

    def test_config_hides_secrets(self, api_client, settings):
        settings.EMAIL_HOST_USER = "owner@shop.co.ke"
        settings.EMAIL_HOST_PASSWORD = "hunter2"

        response = api_client.get(reverse('notifications:email-config'))

        body = response.json()
        assert body['emailUser'] == "SET"
        assert body['emailPassword'] == "SET"
        assert "hunter2" not in response.content.decode()
