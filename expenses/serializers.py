from decimal import Decimal

from rest_framework import serializers

from .models import Expense


class ExpenseSerializer(serializers.ModelSerializer):
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))
    quantity = serializers.IntegerField(min_value=1, default=1)
    total = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Expense
        fields = [
            'id',
            'item',
            'amount',
            'quantity',
            'date',
            'category',
            'total',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = ['id']

    def validate_item(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Item is required')
        return value

    def validate_category(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Category is required')
        return value
