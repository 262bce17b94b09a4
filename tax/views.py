# ==================== TAX/VIEWS.PY ====================
from rest_framework import viewsets, permissions, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from pricing.config import get_policy
from .models import RevenueEvent
from .serializers import RevenueEventSerializer
from .services import TaxLedgerService


class TaxConfigViewSet(viewsets.ViewSet):
    """Admin view of the small-supplier tax state"""
    permission_classes = [permissions.IsAdminUser]

    @action(detail=False, methods=['get'])
    def status(self, request):
        config = TaxLedgerService.get_config()
        policy = get_policy()
        return Response({
            'tax_mode': config.tax_mode,
            'tax_enabled': TaxLedgerService.is_tax_enabled(config),
            'tax_effective_at': config.tax_effective_at,
            'revenue_cad_cents': config.revenue_cad_cents,
            'revenue_cad': config.revenue_cad_cents / 100,
            'threshold_cad': float(TaxLedgerService.threshold_cad()),
            'threshold_cad_cents': TaxLedgerService.threshold_cad_cents(),
            'revenue_last_synced_at': config.revenue_last_synced_at,
            'tax_rate': str(policy.tax_rate),
            'taxable_jurisdictions': sorted(policy.taxable_jurisdictions),
        })


class RevenueEventViewSet(viewsets.ReadOnlyModelViewSet):
    """Charge and refund ledger"""
    queryset = RevenueEvent.objects.all()
    serializer_class = RevenueEventSerializer
    permission_classes = [permissions.IsAdminUser]
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_fields = ['event_type', 'currency', 'charge_id']
    ordering_fields = ['created_at', 'amount_cents']
    ordering = ['-created_at']
