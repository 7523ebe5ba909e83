"""
Revenue aggregation: gross from sales, minus expenses.
"""

from datetime import date
from decimal import Decimal

import pytest
from django.urls import reverse

from electgo.outcomes import DeleteOutcome
from expenses.services import delete_expense
from revenue.services import compute_revenue, effective_price
from sales.models import Transaction
from sales.services import delete_sale, record_sale, update_sale

SALE_DATE = date(2024, 3, 1)


def assert_balanced(snapshot):
    assert snapshot.net_revenue == snapshot.gross_revenue - snapshot.total_expenses


class TestEffectivePrice:

    def test_charged_price_wins(self):
        assert effective_price(Decimal("450"), Decimal("500")) == Decimal("450")

    def test_zero_charged_price_is_kept(self):
        assert effective_price(Decimal("0"), Decimal("500")) == Decimal("0")

    def test_falls_back_to_unit_price_then_zero(self):
        assert effective_price(None, Decimal("500")) == Decimal("500")
        assert effective_price(None, None) == Decimal("0")


@pytest.mark.django_db
class TestComputeRevenue:

    def test_empty(self):
        snapshot = compute_revenue()

        assert snapshot.gross_revenue == 0
        assert snapshot.total_expenses == 0
        assert snapshot.net_revenue == 0

    def test_gross_total_and_net(self, create_product, create_sale, create_expense):
        mouse = create_product(name="Mouse", unit_price="500.00")
        create_sale(mouse, quantity=3, charged_price="450.00")
        create_sale(mouse, quantity=2, charged_price=None)
        create_sale(None, quantity=4, charged_price=None)
        create_expense(amount="100.00", quantity=2)
        create_expense(amount="50.00")

        snapshot = compute_revenue()

        assert snapshot.gross_revenue == Decimal("2350.00")
        assert snapshot.total_expenses == Decimal("250.00")
        assert snapshot.net_revenue == Decimal("2100.00")

    def test_only_sales_count(self, create_product, create_sale):
        sale = create_sale(create_product(), quantity=1, charged_price="100.00")
        Transaction.objects.filter(pk=sale.pk).update(type=Transaction.TYPE_PURCHASE)

        assert compute_revenue().gross_revenue == 0

    def test_endpoint(self, api_client, create_product, create_sale, create_expense):
        create_sale(create_product(), quantity=2, charged_price="300.00")
        create_expense(amount="100.00")

        response = api_client.get(reverse('revenue:revenue'))

        assert response.status_code == 200
        assert response.json() == {'grossRevenue': 600.0, 'totalExpenses': 100.0, 'netRevenue': 500.0}

    def test_net_balances_after_every_write(self, api_client, create_product, create_expense):
        create_product(name="Mouse", quantity=10, unit_price="500.00")

        mouse_sale = record_sale("Mouse", Decimal("450.00"), 3, SALE_DATE)
        assert_balanced(mouse_sale.revenue)

        service_sale = record_sale("KRA iTax", Decimal("250.00"), 1, SALE_DATE).transaction
        edited = update_sale(service_sale.pk, "KRA iTax", Decimal("300.00"), 2, SALE_DATE)
        assert_balanced(edited.revenue)

        orphan = Transaction.objects.create(quantity=2, charged_price=None, timestamp=SALE_DATE)
        removed = delete_sale(orphan.pk)
        assert removed.outcome == DeleteOutcome.AUTO_DELETED
        assert_balanced(removed.revenue)

        response = api_client.post(
            reverse('expenses:expense-list'),
            {'item': "Toner", 'amount': "100.00", 'quantity': 2, 'date': "2024-03-01", 'category': "Supplies"},
            format='json',
        )
        revenue = response.json()['revenue']
        assert revenue['netRevenue'] == revenue['grossRevenue'] - revenue['totalExpenses']

        create_expense(amount="50.00")
        dropped = delete_expense(response.json()['expense']['id'])
        assert_balanced(dropped.revenue)

        Transaction.objects.create(
            product=mouse_sale.transaction.product, quantity=1, charged_price=None, timestamp=SALE_DATE,
        )

        first = compute_revenue()
        second = compute_revenue()

        assert first == second
        assert first.gross_revenue == Decimal("2450.00")
        assert first.total_expenses == Decimal("50.00")
        assert first.net_revenue == Decimal("2400.00")


@pytest.mark.django_db
class TestTransactionPrice:

    def test_orphan_without_charged_price_is_decimal_zero(self, create_sale):
        sale = create_sale(None, charged_price=None)

        assert isinstance(sale.price, Decimal)
        assert sale.price == Decimal("0.00")
        assert sale.line_total == Decimal("0.00")

    def test_matches_revenue_fallback(self, create_product, create_sale):
        product = create_product(unit_price="500.00")
        discounted = create_sale(product, charged_price="450.00")
        list_price = create_sale(product, charged_price=None)

        assert discounted.price == effective_price(Decimal("450.00"), Decimal("500.00"))
        assert list_price.price == Decimal("500.00")
