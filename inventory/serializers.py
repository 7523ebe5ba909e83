from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for catalog products (camelCase keys as the UI expects)"""

    name = serializers.CharField(
        max_length=200,
        validators=[UniqueValidator(queryset=Product.objects.all(), message='A product with this name already exists')],
    )
    unitPrice = serializers.DecimalField(source='unit_price', max_digits=12, decimal_places=2, min_value=0)
    buyingPrice = serializers.DecimalField(
        source='buying_price',
        max_digits=12,
        decimal_places=2,
        min_value=0,
        required=False,
        allow_null=True,
    )
    quantity = serializers.IntegerField(min_value=0, required=False)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'category',
            'quantity',
            'unitPrice',
            'buyingPrice',
            'status',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = ['id', 'status', 'createdAt', 'updatedAt']

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Product name is required')
        return value

    def validate_category(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Category is required')
        return value


class StockLevelsSerializer(serializers.Serializer):
    threshold = serializers.IntegerField(min_value=0, required=False)
