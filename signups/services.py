# ==================== SIGNUPS/SERVICES.PY ====================
import logging

from pricing.config import get_policy
from pricing.policy import normalize_jurisdiction
from .models import WaitlistEntry

logger = logging.getLogger(__name__)

FULL_ACCOUNT = 'full_account'
WAITLIST = 'waitlist'


def route_signup(jurisdiction, policy=None):
    """Decide whether a new signup gets a full account or goes on the waitlist"""
    policy = policy or get_policy()
    return FULL_ACCOUNT if policy.admits_signup(jurisdiction) else WAITLIST


def join_waitlist(email, jurisdiction):
    """Add an email to the waitlist. Joining twice returns the existing entry."""
    entry, created = WaitlistEntry.objects.get_or_create(
        email=email.strip().lower(),
        defaults={'jurisdiction': normalize_jurisdiction(jurisdiction)},
    )
    if created:
        logger.info(f"Waitlist entry {entry.id} added for province {entry.jurisdiction}")
    return entry, created
