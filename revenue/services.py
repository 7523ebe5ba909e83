# revenue/services.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from expenses.models import Expense
from sales.models import ZERO, Transaction, effective_price

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RevenueSnapshot:
    gross_revenue: Decimal
    total_expenses: Decimal
    net_revenue: Decimal

    def as_dict(self):
        return {
            'grossRevenue': self.gross_revenue,
            'totalExpenses': self.total_expenses,
            'netRevenue': self.net_revenue,
        }


def gross_revenue() -> Decimal:
    rows = Transaction.objects.sales().values_list('charged_price', 'product__unit_price', 'quantity')
    total = ZERO
    for charged_price, unit_price, quantity in rows:
        total += effective_price(charged_price, unit_price) * quantity
    return total


def total_expenses() -> Decimal:
    total = ZERO
    for amount, quantity in Expense.objects.values_list('amount', 'quantity'):
        total += (amount or ZERO) * quantity
    return total


def compute_revenue() -> RevenueSnapshot:
    """
    Full scan over sales and expenses.

    Nothing is cached: every mutation re-reads both tables so callers always
    get a consistent snapshot.
    """
    gross = gross_revenue()
    expenses = total_expenses()
    snapshot = RevenueSnapshot(gross_revenue=gross, total_expenses=expenses, net_revenue=gross - expenses)
    logger.debug(f"[REVENUE] gross={gross} expenses={expenses} net={snapshot.net_revenue}")
    return snapshot
