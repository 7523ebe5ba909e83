from django.db import models


class Expense(models.Model):
    """
    A running cost. ``amount`` is per unit; the expense is worth
    ``amount * quantity``.

    ``category`` is free-form; settings.EXPENSE_CATEGORIES is the set the UI
    offers.
    """

    item = models.CharField(max_length=200)
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    quantity = models.IntegerField(default=1)
    date = models.DateField(db_index=True)
    category = models.CharField(max_length=100, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-date', '-id']

    def __str__(self):
        return f"{self.item} ({self.category}) - {self.date}"

    @property
    def total(self):
        return self.amount * self.quantity
