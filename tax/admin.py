from django.contrib import admin
from .models import TaxConfig, RevenueEvent, ChargeRefund


@admin.register(TaxConfig)
class TaxConfigAdmin(admin.ModelAdmin):
    list_display = ['id', 'tax_mode', 'revenue_cad_cents', 'tax_effective_at', 'revenue_last_synced_at']
    readonly_fields = ['revenue_cad_cents', 'tax_effective_at', 'revenue_last_synced_at', 'updated_at']


@admin.register(RevenueEvent)
class RevenueEventAdmin(admin.ModelAdmin):
    list_display = ['event_id', 'charge_id', 'event_type', 'amount_cents', 'currency', 'created_at']
    list_filter = ['event_type', 'currency']
    search_fields = ['event_id', 'charge_id']


@admin.register(ChargeRefund)
class ChargeRefundAdmin(admin.ModelAdmin):
    list_display = ['charge_id', 'amount_refunded_cents', 'updated_at']
    search_fields = ['charge_id']
