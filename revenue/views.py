from rest_framework.response import Response
from rest_framework.views import APIView

from .services import compute_revenue


class RevenueView(APIView):
    """GET {grossRevenue, totalExpenses, netRevenue}"""

    def get(self, request):
        return Response(compute_revenue().as_dict())
