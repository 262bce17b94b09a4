# ==================== TAX/MODELS.PY ====================
from django.db import models

DEFAULT_TAX_CONFIG_ID = 'default'


class TaxConfig(models.Model):
    """Small-supplier tax state: no tax is charged until revenue crosses the threshold"""
    TAX_MODE_CHOICES = (
        ('off', 'Off'),
        ('on', 'On'),
    )

    id = models.CharField(primary_key=True, max_length=20, default=DEFAULT_TAX_CONFIG_ID)
    tax_mode = models.CharField(max_length=3, choices=TAX_MODE_CHOICES, default='off')
    tax_effective_at = models.DateTimeField(null=True, blank=True)

    # Revenue in CAD cents
    revenue_cad_cents = models.BigIntegerField(default=0)
    revenue_last_synced_at = models.DateTimeField(null=True, blank=True)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Tax Configuration"
        verbose_name_plural = "Tax Configuration"

    def __str__(self):
        return f"Tax {self.tax_mode.upper()} | Revenue: ${self.revenue_cad_cents / 100:.2f} CAD"


class RevenueEvent(models.Model):
    """One processed charge or refund; event_id makes processing idempotent"""
    EVENT_TYPE_CHOICES = (
        ('charge', 'Charge'),
        ('refund', 'Refund'),
    )

    event_id = models.CharField(max_length=255, unique=True)
    charge_id = models.CharField(max_length=255, db_index=True)
    event_type = models.CharField(max_length=10, choices=EVENT_TYPE_CHOICES)
    amount_cents = models.BigIntegerField()  # Negative for refunds
    currency = models.CharField(max_length=3)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['event_type', 'created_at'], name='tax_revenue_type_created_idx'),
        ]

    def __str__(self):
        return f"{self.event_type} {self.event_id} ({self.amount_cents} {self.currency})"


class ChargeRefund(models.Model):
    """Cumulative refunded amount per charge, so each refund event applies only its delta"""
    charge_id = models.CharField(max_length=255, unique=True)
    amount_refunded_cents = models.BigIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Refunds for {self.charge_id}: {self.amount_refunded_cents}"
