# sales/admin.py - sale transactions

from django.conf import settings
from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from inventory.admin import export_to_csv
from .models import Transaction


# ============================================
# TRANSACTION ADMIN
# ============================================

@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = [
        'id',
        'product_link',
        'type',
        'quantity',
        'charged_price',
        'line_total_display',
        'timestamp',
    ]
    list_filter = ['type', 'timestamp', 'product__category']
    search_fields = ['product__name']
    date_hierarchy = 'timestamp'
    list_select_related = ['product']
    raw_id_fields = ['product']
    readonly_fields = ['created_at', 'updated_at', 'line_total_display']

    fieldsets = (
        ('Transaction Info', {'fields': ('product', 'type', 'timestamp')}),
        ('Amounts', {'fields': ('quantity', 'charged_price', 'line_total_display')}),
        ('Timestamps', {'fields': ('created_at', 'updated_at'), 'classes': ('collapse',)}),
    )

    actions = [export_to_csv]
    list_per_page = 50

    def product_link(self, obj):
        if obj.product_id is None:
            return format_html('<span style="color: {};">{}</span>', '#dc3545', obj.item_name)
        url = reverse('admin:inventory_product_change', args=[obj.product_id])
        return format_html('<a href="{}">{}</a>', url, obj.product.name)
    product_link.short_description = 'Product'
    product_link.admin_order_field = 'product__name'

    def line_total_display(self, obj):
        if obj.quantity is None:
            return '-'
        return '{} {:,.2f}'.format(settings.ELECTGO_CURRENCY, obj.line_total)
    line_total_display.short_description = 'Line Total'
