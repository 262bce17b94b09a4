# ==================== TAX/SERIALIZERS.PY ====================
from rest_framework import serializers
from .models import RevenueEvent


class RevenueEventSerializer(serializers.ModelSerializer):
    class Meta:
        model = RevenueEvent
        fields = ['id', 'event_id', 'charge_id', 'event_type', 'amount_cents', 'currency', 'created_at']
        read_only_fields = fields
