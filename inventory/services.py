# inventory/services.py

from __future__ import annotations

import logging
from typing import List, Optional

from django.conf import settings
from django.db import transaction
from django.db.models import Case, F, Value, When
from django.utils import timezone

from electgo.exceptions import InsufficientStock, NotFound
from electgo.outcomes import DeleteOutcome, DeleteResult
from notifications.services import AlertEntry

from .models import Product

logger = logging.getLogger(__name__)


def low_stock_threshold(threshold: Optional[int] = None) -> int:
    if threshold is None:
        return settings.INVENTORY_CONFIG['LOW_STOCK_THRESHOLD']
    return threshold


def list_inventory():
    return Product.objects.inventory_items()


def find_by_name(name: str) -> Optional[Product]:
    return Product.objects.filter(name=name).first()


def deduct_stock(product: Product, quantity: int) -> Product:
    """
    Take ``quantity`` units off ``product`` in a single conditional UPDATE.

    The WHERE clause only matches while enough stock remains, so two
    concurrent sales of the last unit cannot both succeed. Status is set by
    the same statement from the pre-update quantity.
    """
    updated = Product.objects.filter(pk=product.pk, quantity__gte=quantity).update(
        quantity=F('quantity') - quantity,
        status=Case(
            When(quantity__lte=quantity, then=Value(Product.STATUS_OUT_OF_STOCK)),
            default=Value(Product.STATUS_IN_STOCK),
        ),
        updated_at=timezone.now(),
    )

    product.refresh_from_db(fields=['quantity', 'status', 'updated_at'])

    if not updated:
        logger.warning(
            f"[STOCK] Rejected deduction for {product.name}: "
            f"available {product.quantity}, requested {quantity}"
        )
        raise InsufficientStock(available=product.quantity, requested=quantity)

    logger.info(
        f"[STOCK OUT] {product.name} | Qty: -{quantity} | "
        f"Remaining: {product.quantity} | Status: {product.status}"
    )
    return product


@transaction.atomic
def delete_product(product_id) -> DeleteResult:
    product = Product.objects.filter(pk=product_id).first()
    if product is None:
        raise NotFound("Product not found")

    if not product.is_valid:
        product.delete()
        logger.warning(
            f"[AUTO-DELETE] Invalid product #{product_id} removed "
            f"(name={product.name!r}, quantity={product.quantity})"
        )
        return DeleteResult(DeleteOutcome.AUTO_DELETED, "Invalid product auto-deleted")

    product.delete()
    logger.info(f"Product deleted: #{product_id} {product.name}")
    return DeleteResult(DeleteOutcome.DELETED, "Product deleted successfully")


def stock_levels(threshold: Optional[int] = None) -> dict:
    threshold = low_stock_threshold(threshold)
    items = list_inventory()
    return {
        'outOfStock': items.filter(quantity__lte=0).count(),
        'lowStock': items.filter(quantity__gt=0, quantity__lte=threshold).count(),
        'inStock': items.filter(quantity__gt=threshold).count(),
        'threshold': threshold,
    }


def low_stock_alerts(threshold: Optional[int] = None) -> List[AlertEntry]:
    threshold = low_stock_threshold(threshold)
    return [
        AlertEntry(
            item_name=product.name,
            current_quantity=product.quantity,
            threshold=threshold,
            category=product.category or None,
        )
        for product in list_inventory().filter(quantity__lte=threshold).order_by('quantity', 'name')
    ]
