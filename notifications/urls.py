from django.urls import path
from . import views

app_name = 'notifications'

urlpatterns = [
    path('', views.EmailDispatchView.as_view(), name='email-dispatch'),
    path('inventory-alert/', views.InventoryAlertView.as_view(), name='inventory-alert'),
    path('sales-report/', views.SalesReportView.as_view(), name='sales-report'),
    path('config/', views.EmailConfigView.as_view(), name='email-config'),
]
