from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from electgo.exceptions import NotFound
from electgo.outcomes import DeleteOutcome, DeleteResult
from revenue.services import compute_revenue
from .serializers import BestSellersSerializer, SaleInputSerializer, SaleSerializer
from . import services


# ====================================
# REST API VIEWSETS
# ====================================

class SaleViewSet(viewsets.ViewSet):
    """
    Sales recorded through the sale workflow.

    Every write answers with the fresh revenue snapshot so the dashboard
    totals never need a second request.
    """
    lookup_value_regex = r'\d+'

    def list(self, request):
        return Response(SaleSerializer(services.list_sales(), many=True).data)

    def create(self, request):
        serializer = SaleInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = services.record_sale(**serializer.workflow_kwargs())

        return Response(
            {
                'sale': SaleSerializer(services.sale_view(result.transaction)).data,
                'revenue': result.revenue.as_dict(),
            },
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, pk=None):
        serializer = SaleInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = services.update_sale(pk, **serializer.workflow_kwargs())

        return Response({
            'message': 'Sale updated successfully',
            'sale': SaleSerializer(services.sale_view(result.transaction)).data,
            'revenue': result.revenue.as_dict(),
        })

    def destroy(self, request, pk=None):
        try:
            result = services.delete_sale(pk)
        except NotFound:
            result = DeleteResult(
                DeleteOutcome.ALREADY_REMOVED,
                "Sale not found or already deleted",
                compute_revenue(),
            )
        return Response(result.as_payload(), status=status.HTTP_200_OK)

    @action(detail=False, methods=['get'], url_path='services', url_name='services')
    def service_items(self, request):
        return Response({'services': services.get_service_items()})

    @action(detail=False, methods=['get'], url_path='best-sellers')
    def best_sellers(self, request):
        params = BestSellersSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        return Response(services.best_sellers(params.validated_data.get('limit')))
