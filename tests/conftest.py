"""
Pytest fixtures for the electgo test suite.

Provides:
- A DRF APIClient
- Factories for products, services, sales and expenses

Every test runs against the SQLite test database pytest-django creates; mail
goes to django.core.mail.outbox.
"""

from datetime import date
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from expenses.models import Expense
from inventory.models import Product
from sales.models import Transaction


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def create_product(db):
    """Factory for physical catalog items."""

    def _create(name="Mouse", quantity=10, unit_price="500.00", category="Accessories", **extra):
        return Product.objects.create(
            name=name,
            category=category,
            quantity=quantity,
            unit_price=Decimal(unit_price),
            **extra,
        )

    return _create


@pytest.fixture
def create_service(db):
    """Factory for service products (category "Service")."""

    def _create(name="KRA iTax", unit_price="250.00"):
        return Product.objects.create(
            name=name,
            category="Service",
            quantity=0,
            unit_price=Decimal(unit_price),
        )

    return _create


@pytest.fixture
def create_sale(db):
    """Factory for raw SALE transactions, bypassing the sale workflow."""

    def _create(product, quantity=1, charged_price="100.00", timestamp=date(2024, 1, 15)):
        return Transaction.objects.create(
            product=product,
            quantity=quantity,
            charged_price=None if charged_price is None else Decimal(charged_price),
            type=Transaction.TYPE_SALE,
            timestamp=timestamp,
        )

    return _create


@pytest.fixture
def create_expense(db):
    def _create(item="Shop rent", amount="1000.00", quantity=1, category="Rent", expense_date=date(2024, 1, 1)):
        return Expense.objects.create(
            item=item,
            amount=Decimal(amount),
            quantity=quantity,
            category=category,
            date=expense_date,
        )

    return _create
