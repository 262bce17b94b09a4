# ==================== PRICING/SERIALIZERS.PY ====================
from rest_framework import serializers


def rate_field():
    return serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True
    )


class QuoteRequestSerializer(serializers.Serializer):
    hourly_rate = rate_field()
    daily_rate = rate_field()
    weekly_rate = rate_field()
    monthly_rate = rate_field()
    service_fee_percentage = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=0, max_value=100, required=False, allow_null=True
    )
    province = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=50)
    start_time = serializers.DateTimeField()
    end_time = serializers.DateTimeField()


class TaxRequestSerializer(serializers.Serializer):
    base_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    province = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=50)
