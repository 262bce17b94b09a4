from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import TaxConfigViewSet, RevenueEventViewSet

router = DefaultRouter()
router.register(r'revenue-events', RevenueEventViewSet, basename='revenue-event')

urlpatterns = [
    path('config/', TaxConfigViewSet.as_view({'get': 'status'}), name='tax_config'),
    path('', include(router.urls)),
]
