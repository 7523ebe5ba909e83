from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from inventory.models import Product

ZERO = Decimal("0.00")


def effective_price(charged_price, unit_price):
    """Charged price, else the product's reference price, else zero."""
    if charged_price is not None:
        return charged_price
    if unit_price is not None:
        return unit_price
    return ZERO


class TransactionQuerySet(models.QuerySet):

    def sales(self):
        return self.filter(type=Transaction.TYPE_SALE)


class Transaction(models.Model):
    """
    One stock movement against a product. Only SALE is written today.

    ``charged_price`` is what the customer actually paid per unit and may be
    below the product's reference ``unit_price`` (discounts).
    """

    TYPE_SALE = 'SALE'
    TYPE_PURCHASE = 'PURCHASE'
    TYPE_CHOICES = [
        (TYPE_SALE, 'Sale'),
        (TYPE_PURCHASE, 'Purchase'),
    ]

    # Sales outlive their product; a removed product leaves a broken reference
    product = models.ForeignKey(
        Product,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='transactions',
    )
    quantity = models.IntegerField()
    charged_price = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default=TYPE_SALE, db_index=True)
    timestamp = models.DateField(db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TransactionQuerySet.as_manager()

    class Meta:
        ordering = ['-timestamp', '-id']

    def __str__(self):
        return f"{self.get_type_display()} #{self.pk} - {self.item_name} x{self.quantity}"

    @property
    def item_name(self):
        if self.product is None:
            return settings.SALES_CONFIG['UNKNOWN_ITEM_LABEL']
        return self.product.name

    @property
    def price(self):
        """Per-unit price used for reporting."""
        return effective_price(self.charged_price, self.product.unit_price if self.product else None)

    @property
    def line_total(self):
        return self.price * self.quantity

    @property
    def is_valid(self):
        return self.quantity > 0 and self.product_id is not None

    def save(self, *args, **kwargs):
        if self._state.adding and (self.quantity is None or self.quantity <= 0):
            raise ValidationError("Quantity must be positive")
        super().save(*args, **kwargs)
