from rest_framework.routers import SimpleRouter
from . import views

# REST API Router
router = SimpleRouter()
router.register(r'', views.ProductViewSet, basename='product')

app_name = 'inventory'

urlpatterns = router.urls
