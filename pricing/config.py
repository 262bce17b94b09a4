# ==================== PRICING/CONFIG.PY ====================
"""
Builds the process-wide JurisdictionPolicy from settings.

All fallbacks live here. The active policy is a single module-level
reference that is replaced whole, never mutated.
"""
import logging
from decimal import Decimal, InvalidOperation

from decouple import Csv, strtobool
from django.conf import settings

from .policy import (
    DEFAULT_ALLOWED_JURISDICTION,
    DEFAULT_TAX_RATE,
    DEFAULT_TAXABLE_JURISDICTION,
    JurisdictionPolicy,
    normalize_jurisdiction,
)

logger = logging.getLogger(__name__)

_active_policy = None


def parse_positive_decimal(raw, default, name):
    """Positive finite decimal, else the default (blank, garbage, NaN, 0 and negatives all fall back)."""
    if raw is None or str(raw).strip() == '':
        return default
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        logger.warning(f"Malformed {name}={raw!r}; using default {default}")
        return default
    if not value.is_finite() or value <= 0:
        logger.warning(f"Unusable {name}={raw!r}; using default {default}")
        return default
    return value


def parse_flag(raw, name):
    if raw is None or isinstance(raw, bool):
        return bool(raw)
    if str(raw).strip() == '':
        return False
    try:
        return bool(strtobool(str(raw).strip()))
    except ValueError:
        logger.warning(f"Malformed {name}={raw!r}; treating as disabled")
        return False


def parse_jurisdiction_list(raw, default):
    codes = [normalize_jurisdiction(code) for code in Csv()(raw or '')]
    codes = [code for code in codes if code]
    return frozenset(codes) if codes else frozenset({default})


def load_policy():
    """Read NS_TAX_RATE, TAX_PROVINCES, BETA_REGION_* once and build the policy"""
    allowed = normalize_jurisdiction(getattr(settings, 'BETA_REGION_PROVINCE', None))
    return JurisdictionPolicy(
        taxable_jurisdictions=parse_jurisdiction_list(
            getattr(settings, 'TAX_PROVINCES', None), DEFAULT_TAXABLE_JURISDICTION
        ),
        tax_rate=parse_positive_decimal(
            getattr(settings, 'NS_TAX_RATE', None), DEFAULT_TAX_RATE, 'NS_TAX_RATE'
        ),
        allowed_jurisdiction=allowed or DEFAULT_ALLOWED_JURISDICTION,
        gate_enabled=parse_flag(getattr(settings, 'BETA_REGION_ENABLED', None), 'BETA_REGION_ENABLED'),
    )


def get_policy():
    global _active_policy
    policy = _active_policy
    if policy is None:
        policy = load_policy()
        _active_policy = policy
        logger.info(
            f"Jurisdiction policy loaded: taxable={sorted(policy.taxable_jurisdictions)} "
            f"rate={policy.tax_rate} gate={'on' if policy.gate_enabled else 'off'} "
            f"allowed={policy.allowed_jurisdiction}"
        )
    return policy


def set_policy(policy):
    global _active_policy
    _active_policy = policy


def reset_policy():
    """Drop the cached policy; the next get_policy() rebuilds it from settings."""
    set_policy(None)
