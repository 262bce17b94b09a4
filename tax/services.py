# ==================== TAX/SERVICES.PY ====================
import logging
from decimal import Decimal

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from pricing.config import parse_positive_decimal
from .models import DEFAULT_TAX_CONFIG_ID, ChargeRefund, RevenueEvent, TaxConfig

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD_CAD = Decimal('30000')
LEDGER_CURRENCY = 'cad'


class TaxLedgerService:
    """Track CAD revenue and flip tax on once the small-supplier threshold is crossed"""

    @staticmethod
    def threshold_cad_cents():
        threshold = parse_positive_decimal(
            getattr(settings, 'SMALL_SUPPLIER_THRESHOLD_CAD', None),
            DEFAULT_THRESHOLD_CAD,
            'SMALL_SUPPLIER_THRESHOLD_CAD',
        )
        return int((threshold * 100).to_integral_value())

    @staticmethod
    def threshold_cad():
        return Decimal(TaxLedgerService.threshold_cad_cents()) / 100

    @staticmethod
    def get_config():
        """Get the tax config row, creating it with defaults if missing"""
        config, created = TaxConfig.objects.get_or_create(id=DEFAULT_TAX_CONFIG_ID)
        if created:
            logger.info("Tax config row created with tax_mode=off")
        return config

    @staticmethod
    def _locked_config():
        TaxLedgerService.get_config()
        return TaxConfig.objects.select_for_update().get(id=DEFAULT_TAX_CONFIG_ID)

    @staticmethod
    def is_tax_enabled(config):
        return config is not None and config.tax_mode == 'on'

    @staticmethod
    @transaction.atomic
    def add_revenue_cents(cents):
        if cents <= 0:
            return
        config = TaxLedgerService._locked_config()
        config.revenue_cad_cents += cents
        config.save(update_fields=['revenue_cad_cents', 'updated_at'])
        logger.info(f"Revenue +{cents} cents -> {config.revenue_cad_cents} cents")
        TaxLedgerService.check_threshold()

    @staticmethod
    @transaction.atomic
    def subtract_revenue_cents(cents):
        if cents <= 0:
            return
        config = TaxLedgerService._locked_config()
        config.revenue_cad_cents = max(0, config.revenue_cad_cents - cents)
        config.save(update_fields=['revenue_cad_cents', 'updated_at'])
        logger.info(f"Revenue -{cents} cents -> {config.revenue_cad_cents} cents")

    @staticmethod
    @transaction.atomic
    def check_threshold():
        """Turn tax on if revenue reached the threshold. Tax never turns back off."""
        config = TaxLedgerService._locked_config()
        if config.tax_mode != 'off':
            return False

        threshold_cents = TaxLedgerService.threshold_cad_cents()
        if config.revenue_cad_cents < threshold_cents:
            return False

        config.tax_mode = 'on'
        config.tax_effective_at = timezone.now()
        config.save(update_fields=['tax_mode', 'tax_effective_at', 'updated_at'])
        logger.info(
            f"Small-supplier threshold crossed; tax_mode set to on "
            f"(revenue={config.revenue_cad_cents} threshold={threshold_cents} cents)"
        )
        return True

    @staticmethod
    @transaction.atomic
    def process_charge_succeeded(event_id, charge_id, amount_cents, currency):
        """Record a succeeded charge once. Returns False for non-CAD or already-seen events."""
        if currency.lower() != LEDGER_CURRENCY:
            return False
        # serializes deliveries of the same event behind the ledger row
        TaxLedgerService._locked_config()
        if RevenueEvent.objects.filter(event_id=event_id).exists():
            logger.info(f"Revenue event {event_id} already processed")
            return False

        RevenueEvent.objects.create(
            event_id=event_id,
            charge_id=charge_id,
            event_type='charge',
            amount_cents=amount_cents,
            currency=currency.lower(),
        )
        TaxLedgerService.add_revenue_cents(amount_cents)
        return True

    @staticmethod
    @transaction.atomic
    def process_charge_refunded(event_id, charge_id, amount_refunded_cents, currency):
        """
        Record a refund once, applying only the increase over what was
        already refunded on the charge (amount_refunded_cents is cumulative).
        """
        if currency.lower() != LEDGER_CURRENCY or amount_refunded_cents <= 0:
            return False
        # serializes deliveries of the same event behind the ledger row
        TaxLedgerService._locked_config()
        if RevenueEvent.objects.filter(event_id=event_id).exists():
            logger.info(f"Revenue event {event_id} already processed")
            return False

        refund = ChargeRefund.objects.select_for_update().filter(charge_id=charge_id).first()
        previous_refunded = refund.amount_refunded_cents if refund else 0
        delta = amount_refunded_cents - previous_refunded
        if delta <= 0:
            return False

        RevenueEvent.objects.create(
            event_id=event_id,
            charge_id=charge_id,
            event_type='refund',
            amount_cents=-delta,
            currency=currency.lower(),
        )
        ChargeRefund.objects.update_or_create(
            charge_id=charge_id,
            defaults={'amount_refunded_cents': amount_refunded_cents},
        )
        TaxLedgerService.subtract_revenue_cents(delta)
        return True

    @staticmethod
    def mark_synced():
        config = TaxLedgerService.get_config()
        config.revenue_last_synced_at = timezone.now()
        config.save(update_fields=['revenue_last_synced_at', 'updated_at'])
        return config
