# sales/services.py - record / edit / remove sales and keep stock honest

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Optional

from django.conf import settings
from django.db import transaction
from django.db.models import Sum

from electgo.exceptions import NotFound
from electgo.outcomes import DeleteOutcome, DeleteResult
from inventory.models import Product, service_category
from inventory.services import deduct_stock, find_by_name
from revenue.services import RevenueSnapshot, compute_revenue

from .models import Transaction

logger = logging.getLogger(__name__)


# ============================================
# SERVICE CATALOG
# ============================================

def get_service_items() -> List[str]:
    return list(settings.SALES_CONFIG['SERVICE_ITEMS'])


def is_service_item(name: str) -> bool:
    return name in settings.SALES_CONFIG['SERVICE_ITEMS']


def _find_or_create_service(name: str, price: Decimal, track_price: bool = True) -> Product:
    """
    Look a service product up by exact name, creating it on first use.

    With ``track_price`` an existing product takes the newest charged price
    as its reference price.
    """
    product, created = Product.objects.get_or_create(
        name=name,
        defaults={
            'category': service_category(),
            'quantity': 0,
            'unit_price': price,
        },
    )
    if created:
        logger.info(f"[SERVICE] Created service product {name!r} at {price}")
    elif track_price and product.unit_price != price:
        logger.info(f"[SERVICE] {name!r} reference price {product.unit_price} -> {price}")
        product.unit_price = price
        product.save(update_fields=['unit_price'])
    return product


# ============================================
# SALE WORKFLOW
# ============================================

@dataclass
class SaleResult:
    transaction: Transaction
    revenue: RevenueSnapshot


@transaction.atomic
def record_sale(item: str, price: Decimal, quantity: int, sale_date: date) -> SaleResult:
    """
    Record one sale.

    Services never touch stock. Physical items must already exist in the
    catalog and are deducted atomically; an oversell raises
    InsufficientStock and leaves the product untouched.
    """
    if is_service_item(item):
        product = _find_or_create_service(item, price)
    else:
        product = find_by_name(item)
        if product is None:
            raise NotFound("Item not found in inventory")
        deduct_stock(product, quantity)

    sale = Transaction.objects.create(
        product=product,
        quantity=quantity,
        charged_price=price,
        type=Transaction.TYPE_SALE,
        timestamp=sale_date,
    )

    return SaleResult(transaction=sale, revenue=compute_revenue())


@transaction.atomic
def update_sale(transaction_id, item: str, price: Decimal, quantity: int, sale_date: date) -> SaleResult:
    """
    Edit a recorded sale in place.

    Stock is not re-balanced when the quantity changes. Renaming the item
    repoints the sale to the product with that name, creating a service
    product when none exists.
    """
    sale = Transaction.objects.select_related('product').filter(pk=transaction_id).first()
    if sale is None:
        raise NotFound("Sale not found")

    product = sale.product
    if product is None or product.name != item:
        product = find_by_name(item) or _find_or_create_service(item, price, track_price=False)
        logger.info(f"[SALE EDIT] Sale #{sale.pk} repointed to {product.name!r}")
    elif product.unit_price != price:
        product.unit_price = price
        product.save(update_fields=['unit_price'])

    sale.product = product
    sale.charged_price = price
    sale.quantity = quantity
    sale.timestamp = sale_date
    sale.save()

    logger.info(f"[SALE EDIT] Sale #{sale.pk} | {product.name} x{quantity} @ {price} | {sale_date}")
    return SaleResult(transaction=sale, revenue=compute_revenue())


@transaction.atomic
def delete_sale(transaction_id) -> DeleteResult:
    """Remove a sale. Sold stock is not returned to the product."""
    sale = Transaction.objects.filter(pk=transaction_id).first()
    if sale is None:
        raise NotFound("Sale not found")

    if not sale.is_valid:
        sale.delete()
        logger.warning(
            f"[AUTO-DELETE] Invalid sale #{transaction_id} removed "
            f"(quantity={sale.quantity}, product_id={sale.product_id})"
        )
        return DeleteResult(DeleteOutcome.AUTO_DELETED, "Invalid sale auto-deleted", compute_revenue())

    sale.delete()
    return DeleteResult(DeleteOutcome.DELETED, "Sale deleted successfully", compute_revenue())


# ============================================
# READ SIDE
# ============================================

def sale_view(sale: Transaction) -> dict:
    """Flat row the sales table renders."""
    return {
        'id': sale.pk,
        'item': sale.item_name,
        'price': sale.price,
        'quantity': sale.quantity,
        'date': sale.timestamp,
    }


def list_sales() -> List[dict]:
    sales = Transaction.objects.sales().select_related('product').order_by('-timestamp', '-id')
    return [sale_view(sale) for sale in sales]


def best_sellers(limit: Optional[int] = None) -> List[dict]:
    """Top items by quantity sold."""
    if limit is None:
        limit = settings.SALES_CONFIG['BEST_SELLERS_LIMIT']

    rows = (
        Transaction.objects.sales()
        .filter(product__isnull=False)
        .values('product__name')
        .annotate(total_quantity=Sum('quantity'))
        .order_by('-total_quantity', 'product__name')[:limit]
    )
    return [{'item': row['product__name'], 'quantitySold': row['total_quantity']} for row in rows]
