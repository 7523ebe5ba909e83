from rest_framework import serializers

from .services import EMAIL_PATTERN, AlertEntry, ReportRow


class RecipientField(serializers.RegexField):

    def __init__(self, **kwargs):
        kwargs.setdefault('error_messages', {'invalid': 'Invalid email format'})
        super().__init__(EMAIL_PATTERN, **kwargs)


class AlertEntrySerializer(serializers.Serializer):
    itemName = serializers.CharField(source='item_name')
    currentQuantity = serializers.IntegerField(source='current_quantity')
    threshold = serializers.IntegerField(min_value=0)
    category = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ReportRowSerializer(serializers.Serializer):
    date = serializers.CharField()
    item = serializers.CharField()
    price = serializers.DecimalField(max_digits=14, decimal_places=2)
    quantity = serializers.IntegerField(min_value=0)


class InventoryAlertRequestSerializer(serializers.Serializer):
    email = RecipientField()
    alerts = AlertEntrySerializer(many=True)

    def entries(self):
        return [AlertEntry(**alert) for alert in self.validated_data['alerts']]


class SalesReportRequestSerializer(serializers.Serializer):
    email = RecipientField()
    reportData = ReportRowSerializer(many=True)

    def rows(self):
        return [ReportRow(**row) for row in self.validated_data['reportData']]
