from decimal import Decimal

from rest_framework import serializers


class SaleInputSerializer(serializers.Serializer):
    """Body of POST / PUT on the sales endpoint."""

    item = serializers.CharField(max_length=200)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))
    quantity = serializers.IntegerField(min_value=1)
    date = serializers.DateField()

    def validate_item(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Item name is required')
        return value

    def workflow_kwargs(self):
        data = self.validated_data
        return {
            'item': data['item'],
            'price': data['price'],
            'quantity': data['quantity'],
            'sale_date': data['date'],
        }


class SaleSerializer(serializers.Serializer):
    """Flat sale row: {id, item, price, quantity, date}"""

    id = serializers.IntegerField(read_only=True)
    item = serializers.CharField(read_only=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    date = serializers.DateField(read_only=True)


class BestSellersSerializer(serializers.Serializer):
    limit = serializers.IntegerField(min_value=1, required=False)
