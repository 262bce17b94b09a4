# ==================== PRICING/ENGINE.PY ====================
"""
Booking pricing: base amount, service fees and provincial tax.

Every caller that needs a booking total goes through price_booking(),
so the same inputs always give the same figures.
"""
import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta, timezone
from decimal import ROUND_CEILING, ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal
from typing import Optional

from utils.exceptions import InvalidBookingWindow, PricingNotConfigured
from .config import get_policy

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')
ZERO = Decimal('0.00')
DEFAULT_SERVICE_FEE_PERCENTAGE = Decimal('10')
MS_PER_HOUR = Decimal(1000 * 60 * 60)
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_decimal(value):
    if value is None or isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round2(amount):
    """Round to cents, halves toward positive infinity (1.575 -> 1.58, -1.005 -> -1.00)"""
    amount = to_decimal(amount)
    rounding = ROUND_HALF_UP if amount >= 0 else ROUND_HALF_DOWN
    return amount.quantize(CENT, rounding=rounding)


def ceil_int(value):
    return value.to_integral_value(rounding=ROUND_CEILING)


def epoch_ms(moment):
    """Whole milliseconds since the epoch; sub-millisecond parts are dropped"""
    epoch = EPOCH if moment.tzinfo is not None else EPOCH.replace(tzinfo=None)
    return (moment - epoch) // timedelta(milliseconds=1)


def duration_hours(start, end):
    """Fractional hours between two instants, at millisecond resolution. Negative if end < start."""
    return Decimal(epoch_ms(end) - epoch_ms(start)) / MS_PER_HOUR


@dataclass(frozen=True)
class RateSchedule:
    hourly_rate: Optional[Decimal] = None
    daily_rate: Optional[Decimal] = None
    weekly_rate: Optional[Decimal] = None
    monthly_rate: Optional[Decimal] = None
    service_fee_percentage: Optional[Decimal] = None
    jurisdiction: Optional[str] = None

    def __post_init__(self):
        for name in ('hourly_rate', 'daily_rate', 'weekly_rate', 'monthly_rate', 'service_fee_percentage'):
            object.__setattr__(self, name, to_decimal(getattr(self, name)))

    @classmethod
    def from_mapping(cls, data):
        """Build from a listing row; the province may be stored as 'state', 'province' or 'jurisdiction'."""
        jurisdiction = data.get('jurisdiction')
        if jurisdiction is None:
            jurisdiction = data.get('province', data.get('state'))
        return cls(
            hourly_rate=data.get('hourly_rate'),
            daily_rate=data.get('daily_rate'),
            weekly_rate=data.get('weekly_rate'),
            monthly_rate=data.get('monthly_rate'),
            service_fee_percentage=data.get('service_fee_percentage'),
            jurisdiction=jurisdiction,
        )


@dataclass(frozen=True)
class PricingBreakdown:
    base_amount: Decimal
    booker_service_fee: Decimal
    host_service_fee: Decimal
    tax_amount: Decimal
    total_amount: Decimal

    def as_dict(self):
        return asdict(self)


def select_base_amount(schedule, total_hours):
    """
    Pick the rate tier, first match wins:
    hourly under 24h, daily, weekly (7+ days), monthly (30+ days), hourly fallback.
    Returns (tier, unrounded base amount).
    """
    total_days = ceil_int(total_hours / 24)

    if schedule.hourly_rate is not None and total_hours < 24:
        return 'hourly', schedule.hourly_rate * total_hours
    if schedule.daily_rate is not None and total_days >= 1:
        return 'daily', schedule.daily_rate * total_days
    if schedule.weekly_rate is not None and total_days >= 7:
        weeks = ceil_int(total_days / 7)
        return 'weekly', schedule.weekly_rate * weeks
    if schedule.monthly_rate is not None and total_days >= 30:
        months = ceil_int(total_days / 30)
        return 'monthly', schedule.monthly_rate * months
    if schedule.hourly_rate is not None:
        return 'hourly', schedule.hourly_rate * total_hours

    logger.warning(f"No pricing tier applies to a {total_hours}h booking: {schedule}")
    raise PricingNotConfigured()


def compute_tax(base_amount, jurisdiction, policy=None):
    """Tax on the base amount; zero when there is no base or the province is not taxed"""
    policy = policy or get_policy()
    base_amount = to_decimal(base_amount)
    if not base_amount or not policy.is_taxable(jurisdiction):
        return ZERO
    return round2(base_amount * policy.tax_rate)


def price_booking(schedule, start, end, policy=None):
    if isinstance(schedule, dict):
        schedule = RateSchedule.from_mapping(schedule)
    if end < start:
        raise InvalidBookingWindow()

    policy = policy or get_policy()
    total_hours = duration_hours(start, end)
    tier, base_amount = select_base_amount(schedule, total_hours)
    base_amount = round2(base_amount)

    total_fee_percentage = schedule.service_fee_percentage
    if total_fee_percentage is None:
        total_fee_percentage = DEFAULT_SERVICE_FEE_PERCENTAGE
    host_fee_percentage = total_fee_percentage / 2
    booker_fee_percentage = total_fee_percentage / 2

    host_service_fee = round2(base_amount * host_fee_percentage / 100)
    booker_service_fee = round2(base_amount * booker_fee_percentage / 100)
    tax_amount = compute_tax(base_amount, schedule.jurisdiction, policy=policy)

    # host fee comes out of the payout, not the booker's charge
    total_amount = round2(base_amount + booker_service_fee + tax_amount)

    logger.debug(f"Priced {total_hours}h on {tier} tier: base={base_amount} total={total_amount}")
    return PricingBreakdown(
        base_amount=base_amount,
        booker_service_fee=booker_service_fee,
        host_service_fee=host_service_fee,
        tax_amount=tax_amount,
        total_amount=total_amount,
    )
