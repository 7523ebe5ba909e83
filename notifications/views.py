from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import InventoryAlertRequestSerializer, SalesReportRequestSerializer
from . import services


def _send_inventory_alert(data):
    serializer = InventoryAlertRequestSerializer(data=data)
    serializer.is_valid(raise_exception=True)
    entries = serializer.entries()
    services.send_inventory_alert(serializer.validated_data['email'], entries)
    return Response({'message': 'Inventory alert sent successfully', 'alertCount': len(entries)})


def _send_sales_report(data):
    serializer = SalesReportRequestSerializer(data=data)
    serializer.is_valid(raise_exception=True)
    rows = serializer.rows()
    services.send_sales_report(serializer.validated_data['email'], rows)
    return Response({'message': 'Report sent successfully', 'rowCount': len(rows)})


class InventoryAlertView(APIView):
    """POST {email, alerts: [{itemName, currentQuantity, threshold, category}]}"""

    def post(self, request):
        return _send_inventory_alert(request.data)


class SalesReportView(APIView):
    """POST {email, reportData: [{date, item, price, quantity}]}"""

    def post(self, request):
        return _send_sales_report(request.data)


class EmailDispatchView(APIView):
    """Single entry point: the payload shape decides which email goes out."""

    def post(self, request):
        if 'alerts' in request.data:
            return _send_inventory_alert(request.data)
        if 'reportData' in request.data:
            return _send_sales_report(request.data)
        raise ValidationError({'non_field_errors': ['Provide either alerts or reportData']})


class EmailConfigView(APIView):

    def get(self, request):
        return Response(services.email_configuration())
