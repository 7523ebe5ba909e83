from django.db import transaction
from django.db.models import Q
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
import logging

from electgo.exceptions import NotFound
from electgo.outcomes import DeleteOutcome, DeleteResult
from .models import Product
from .serializers import ProductSerializer, StockLevelsSerializer
from . import services


logger = logging.getLogger(__name__)

# ====================================
# REST API VIEWSETS
# ====================================

class ProductViewSet(viewsets.ModelViewSet):
    """
    API endpoint for the product catalog.

    The list only shows physical inventory; service products stay reachable
    by id so their reference price can still be edited.
    """
    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        """Filter products based on query parameters"""
        if self.action != 'list':
            return Product.objects.all()

        queryset = services.list_inventory()

        # Filter by category
        category = self.request.query_params.get('category', None)
        if category:
            queryset = queryset.filter(category=category)

        # Filter by status
        product_status = self.request.query_params.get('status', None)
        if product_status:
            queryset = queryset.filter(status=product_status)

        # Search by name or category
        search = self.request.query_params.get('search', None)
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search) |
                Q(category__icontains=search)
            )

        return queryset

    def perform_create(self, serializer):
        with transaction.atomic():
            product = serializer.save()
        logger.info(f"[INVENTORY] Added {product.name} | Qty: {product.quantity} | Price: {product.unit_price}")

    def update(self, request, *args, **kwargs):
        # Edits from the inventory table only send the changed columns
        kwargs['partial'] = True
        return super().update(request, *args, **kwargs)

    def perform_update(self, serializer):
        with transaction.atomic():
            product = serializer.save()
        logger.info(f"[INVENTORY] Updated {product.name} | Qty: {product.quantity} | Status: {product.status}")

    def destroy(self, request, *args, **kwargs):
        try:
            result = services.delete_product(kwargs[self.lookup_field])
        except NotFound:
            result = DeleteResult(DeleteOutcome.ALREADY_REMOVED, "Product not found or already deleted")
        return Response(result.as_payload(), status=status.HTTP_200_OK)

    @action(detail=False, methods=['get'], url_path='stock-levels')
    def stock_levels(self, request):
        params = StockLevelsSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        return Response(services.stock_levels(params.validated_data.get('threshold')))

    @action(detail=False, methods=['get'], url_path='low-stock')
    def low_stock(self, request):
        params = StockLevelsSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        alerts = services.low_stock_alerts(params.validated_data.get('threshold'))
        return Response([alert.as_dict() for alert in alerts])
