from rest_framework.routers import SimpleRouter
from . import views

# REST API Router
router = SimpleRouter()
router.register(r'', views.SaleViewSet, basename='sale')

app_name = 'sales'

urlpatterns = router.urls
