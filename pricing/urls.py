from django.urls import path

from .views import PricingViewSet

urlpatterns = [
    path('quote/', PricingViewSet.as_view({'post': 'quote'}), name='pricing_quote'),
    path('tax/', PricingViewSet.as_view({'post': 'tax'}), name='pricing_tax'),
]
