from django.db import transaction
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
import logging

from electgo.exceptions import NotFound
from electgo.outcomes import DeleteOutcome, DeleteResult
from revenue.services import compute_revenue
from .models import Expense
from .serializers import ExpenseSerializer
from . import services


logger = logging.getLogger(__name__)

# ====================================
# REST API VIEWSETS
# ====================================

class ExpenseViewSet(viewsets.ModelViewSet):
    """
    Expenses, newest date first. Writes answer with the expense and the
    recomputed revenue snapshot.
    """
    queryset = Expense.objects.all()
    serializer_class = ExpenseSerializer
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        queryset = Expense.objects.all()

        category = self.request.query_params.get('category', None)
        if category:
            queryset = queryset.filter(category=category)

        return queryset

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            expense = serializer.save()
        logger.info(f"[EXPENSE] Added {expense.item} | {expense.category} | Total: {expense.total}")
        return Response(
            {'expense': self.get_serializer(expense).data, 'revenue': compute_revenue().as_dict()},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            expense = serializer.save()
        logger.info(f"[EXPENSE] Updated #{expense.pk} {expense.item} | Total: {expense.total}")
        return Response({'expense': self.get_serializer(expense).data, 'revenue': compute_revenue().as_dict()})

    def destroy(self, request, *args, **kwargs):
        try:
            result = services.delete_expense(kwargs[self.lookup_field])
        except NotFound:
            result = DeleteResult(
                DeleteOutcome.ALREADY_REMOVED,
                "Expense not found or already deleted",
                compute_revenue(),
            )
        return Response(result.as_payload(), status=status.HTTP_200_OK)

    @action(detail=False, methods=['get'])
    def summary(self, request):
        return Response(services.category_summary())
