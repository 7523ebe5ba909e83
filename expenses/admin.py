from django.conf import settings
from django.contrib import admin

from inventory.admin import export_to_csv
from .models import Expense


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['item', 'category', 'amount', 'quantity', 'total_display', 'date']
    list_filter = ['category', 'date']
    search_fields = ['item', 'category']
    date_hierarchy = 'date'
    readonly_fields = ['created_at', 'updated_at']
    actions = [export_to_csv]
    list_per_page = 50

    def total_display(self, obj):
        return '{} {:,.2f}'.format(settings.ELECTGO_CURRENCY, obj.total)
    total_display.short_description = 'Total'
