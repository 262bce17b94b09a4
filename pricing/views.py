# ==================== PRICING/VIEWS.PY ====================
from rest_framework import viewsets, status, permissions
from rest_framework.decorators import action
from rest_framework.response import Response

from .config import get_policy
from .engine import RateSchedule, compute_tax, duration_hours, price_booking
from .serializers import QuoteRequestSerializer, TaxRequestSerializer


def money(amount):
    """Two-place string, same shape as DecimalField output but without a digit cap"""
    return f'{amount:.2f}'


class PricingViewSet(viewsets.ViewSet):
    """Price quotes and standalone tax lookups"""
    permission_classes = [permissions.AllowAny]

    @action(detail=False, methods=['post'])
    def quote(self, request):
        """Quote a booking

        Body: { "hourly_rate": "10.00", "province": "NS",
                "start_time": "2025-01-01T10:00:00Z", "end_time": "2025-01-01T12:00:00Z" }
        """
        serializer = QuoteRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        schedule = RateSchedule.from_mapping(data)
        start_time = data['start_time']
        end_time = data['end_time']

        # PricingNotConfigured / InvalidBookingWindow are rendered by DRF
        breakdown = price_booking(schedule, start_time, end_time)

        response = {name: money(value) for name, value in breakdown.as_dict().items()}
        response['total_hours'] = float(duration_hours(start_time, end_time))
        return Response(response)

    @action(detail=False, methods=['post'])
    def tax(self, request):
        """Tax on a base amount for a province (earnings and statistics displays)"""
        serializer = TaxRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        province = serializer.validated_data.get('province')
        tax_amount = compute_tax(serializer.validated_data['base_amount'], province)
        return Response({
            'tax_amount': money(tax_amount),
            'taxable': get_policy().is_taxable(province),
        })
