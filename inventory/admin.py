from django.conf import settings
from django.contrib import admin
from django.utils.html import format_html
from django.http import HttpResponse
from decimal import Decimal
import csv

from .models import Product

# ============================================
# CUSTOM ACTIONS
# ============================================

def export_to_csv(modeladmin, request, queryset):
    """Export selected items to CSV"""
    opts = modeladmin.model._meta
    response = HttpResponse(content_type='text/csv')
    response['Content-Disposition'] = f'attachment; filename={opts.verbose_name_plural}.csv'

    writer = csv.writer(response)
    fields = [field for field in opts.get_fields() if not field.many_to_many and not field.one_to_many]

    # Write headers
    writer.writerow([field.verbose_name for field in fields])

    # Write data
    for obj in queryset:
        writer.writerow([getattr(obj, field.name) for field in fields])

    return response
export_to_csv.short_description = "Export to CSV"


class ProductKindFilter(admin.SimpleListFilter):
    title = 'kind'
    parameter_name = 'kind'

    def lookups(self, request, model_admin):
        return [('stock', 'Physical stock'), ('service', 'Services')]

    def queryset(self, request, queryset):
        if self.value() == 'stock':
            return queryset.inventory_items()
        if self.value() == 'service':
            return queryset.services()
        return queryset


# ============================================
# PRODUCT ADMIN
# ============================================

@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = [
        'name',
        'category_badge',
        'quantity_display',
        'status_badge',
        'pricing_info',
        'updated_at',
    ]
    list_filter = [ProductKindFilter, 'status', 'category', 'created_at']
    search_fields = ['name', 'category']
    readonly_fields = ['status', 'created_at', 'updated_at', 'stock_value']

    fieldsets = (
        ('Basic Information', {'fields': ('name', 'category')}),
        ('Inventory', {'fields': ('quantity', 'status')}),
        ('Pricing', {'fields': ('unit_price', 'buying_price', 'stock_value')}),
        ('Timestamps', {'fields': ('created_at', 'updated_at'), 'classes': ('collapse',)}),
    )

    actions = [export_to_csv]
    list_per_page = 50

    def category_badge(self, obj):
        color = '#6f42c1' if obj.is_service else '#007bff'
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 10px; border-radius: 3px;">{}</span>',
            color,
            obj.category
        )
    category_badge.short_description = 'Category'
    category_badge.admin_order_field = 'category'

    def quantity_display(self, obj):
        if obj.is_service:
            return format_html('<span style="color: {};">{}</span>', '#6c757d', 'n/a')
        qty = obj.quantity or 0
        threshold = settings.INVENTORY_CONFIG['LOW_STOCK_THRESHOLD']
        if qty > threshold:
            color = '#28a745'
        elif qty > 0:
            color = '#ffc107'
        else:
            color = '#dc3545'
        return format_html('<span style="color: {}; font-weight: bold;">{}</span>', color, qty)
    quantity_display.short_description = 'Quantity'
    quantity_display.admin_order_field = 'quantity'

    def status_badge(self, obj):
        colors = {
            Product.STATUS_IN_STOCK: '#28a745',
            Product.STATUS_OUT_OF_STOCK: '#dc3545',
        }
        color = colors.get(obj.status, '#6c757d')
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 10px; border-radius: 3px; font-size: 11px;">{}</span>',
            color,
            (obj.get_status_display() or '').upper()
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'

    def pricing_info(self, obj):
        currency = settings.ELECTGO_CURRENCY
        formatted_sell = '{} {:,.2f}'.format(currency, Decimal(obj.unit_price or 0))
        formatted_buy = '{} {:,.2f}'.format(currency, Decimal(obj.buying_price or 0))
        return format_html(
            'Sell: <strong>{}</strong><br>Buy: <strong>{}</strong>',
            formatted_sell,
            formatted_buy
        )
    pricing_info.short_description = 'Pricing'

    def stock_value(self, obj):
        value = Decimal(obj.buying_price or obj.unit_price or 0) * Decimal(obj.quantity or 0)
        return '{} {:,.2f}'.format(settings.ELECTGO_CURRENCY, value)
    stock_value.short_description = 'Stock Value'
