from django.conf import settings
from django.db import models


def service_category():
    return settings.INVENTORY_CONFIG['SERVICE_CATEGORY']


class ProductQuerySet(models.QuerySet):

    def services(self):
        return self.filter(category=service_category())

    def inventory_items(self):
        """Physical stock only - services are sellable but never listed as inventory."""
        return self.exclude(category=service_category())


class Product(models.Model):
    """
    A catalog entry.

    Physical items carry stock in ``quantity``. Services (category "Service")
    are fixed-price offerings whose quantity is pinned at 0.
    """

    STATUS_IN_STOCK = 'IN_STOCK'
    STATUS_OUT_OF_STOCK = 'OUT_OF_STOCK'
    STATUS_CHOICES = [
        (STATUS_IN_STOCK, 'In Stock'),
        (STATUS_OUT_OF_STOCK, 'Out of Stock'),
    ]

    name = models.CharField(max_length=200, unique=True)
    category = models.CharField(max_length=100, db_index=True)
    quantity = models.IntegerField(default=0)
    unit_price = models.DecimalField(max_digits=12, decimal_places=2)
    buying_price = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_IN_STOCK)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ProductQuerySet.as_manager()

    class Meta:
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.category})"

    @property
    def is_service(self):
        return self.category == service_category()

    @property
    def is_valid(self):
        """Records with negative stock or no name are leftovers and get auto-deleted."""
        return self.quantity >= 0 and bool((self.name or '').strip())

    @staticmethod
    def status_for(quantity):
        return Product.STATUS_OUT_OF_STOCK if quantity <= 0 else Product.STATUS_IN_STOCK

    def _update_status(self):
        if self.is_service:
            self.quantity = 0
            self.status = self.STATUS_IN_STOCK
        else:
            self.status = self.status_for(self.quantity)

    def save(self, *args, **kwargs):
        self._update_status()
        update_fields = kwargs.get('update_fields')
        if update_fields is not None:
            kwargs['update_fields'] = set(update_fields) | {'quantity', 'status', 'updated_at'}
        super().save(*args, **kwargs)
