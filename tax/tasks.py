# ==================== TAX/TASKS.PY (CELERY TASKS) ====================
from celery import shared_task
import logging

logger = logging.getLogger(__name__)


@shared_task
def recheck_tax_threshold():
    """Re-evaluate the small-supplier threshold against recorded revenue"""
    from .services import TaxLedgerService

    flipped = TaxLedgerService.check_threshold()
    config = TaxLedgerService.mark_synced()
    logger.info(
        f"Tax threshold recheck: mode={config.tax_mode} "
        f"revenue={config.revenue_cad_cents} cents flipped={flipped}"
    )
    return flipped
