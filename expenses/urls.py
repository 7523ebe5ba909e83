from rest_framework.routers import SimpleRouter
from . import views

# REST API Router
router = SimpleRouter()
router.register(r'', views.ExpenseViewSet, basename='expense')

app_name = 'expenses'

urlpatterns = router.urls
