# expenses/services.py

from __future__ import annotations

import logging
from decimal import Decimal

from django.conf import settings
from django.db import transaction
from django.db.models import DecimalField, ExpressionWrapper, F, Sum

from electgo.exceptions import NotFound
from electgo.outcomes import DeleteOutcome, DeleteResult
from revenue.services import compute_revenue

from .models import Expense

logger = logging.getLogger(__name__)

LINE_TOTAL = ExpressionWrapper(F('amount') * F('quantity'), output_field=DecimalField(max_digits=14, decimal_places=2))


@transaction.atomic
def delete_expense(expense_id) -> DeleteResult:
    expense = Expense.objects.filter(pk=expense_id).first()
    if expense is None:
        raise NotFound("Expense not found")

    expense.delete()
    logger.info(f"[EXPENSE] Deleted #{expense_id} {expense.item} ({expense.category}) {expense.total}")
    return DeleteResult(DeleteOutcome.DELETED, "Expense deleted successfully", compute_revenue())


def category_summary() -> dict:
    """Spend per category, largest first."""
    rows = (
        Expense.objects.values('category')
        .annotate(total=Sum(LINE_TOTAL))
        .order_by('-total', 'category')
    )
    categories = [
        {'category': row['category'], 'total': row['total'] or Decimal('0.00')}
        for row in rows
    ]
    return {
        'categories': categories,
        'categoryCount': len(categories),
        'totalExpenses': sum((row['total'] for row in categories), Decimal('0.00')),
        'recommendedCategories': list(settings.EXPENSE_CATEGORIES),
    }
