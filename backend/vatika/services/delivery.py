"""
Delivery-time pricing.

Longer lead times ship direct from the manufacturer and are cheaper. The
published table has five anchor points; ``multiplier_for_days`` blends
linearly between them so any day value on the slider gets a smooth price,
while ``tier_for_days`` returns the stepped anchor used for labels.
"""

import math

from vatika.config import DELIVERY_TIERS as _DELIVERY_TIER_ROWS
from vatika.models.pricing import DeliveryQuote, DeliveryTier

DELIVERY_TIERS: tuple[DeliveryTier, ...] = tuple(
    DeliveryTier(
        days=row["days"],
        label=row["label"],
        discount_percent=row["discount_percent"],
        multiplier=round(1 - row["discount_percent"] / 100, 4),
        description=row["description"],
    )
    for row in _DELIVERY_TIER_ROWS
)

# Interpolation divides by the gap between neighbouring anchors.
assert all(
    lo.days < hi.days and lo.discount_percent < hi.discount_percent
    for lo, hi in zip(DELIVERY_TIERS, DELIVERY_TIERS[1:])
), "delivery tiers must be strictly increasing in days and discount"

MIN_DAYS = DELIVERY_TIERS[0].days
MAX_DAYS = DELIVERY_TIERS[-1].days


def multiplier_for_days(days: float) -> float:
    """Price multiplier for *days*, linearly interpolated between anchors.

    Values outside ``[MIN_DAYS, MAX_DAYS]`` clamp to the end anchors.
    """
    first, last = DELIVERY_TIERS[0], DELIVERY_TIERS[-1]
    if days <= first.days:
        return first.multiplier
    if days >= last.days:
        return last.multiplier

    for lo, hi in zip(DELIVERY_TIERS, DELIVERY_TIERS[1:]):
        if lo.days <= days <= hi.days:
            t = (days - lo.days) / (hi.days - lo.days)
            return lo.multiplier + t * (hi.multiplier - lo.multiplier)

    return first.multiplier


def tier_for_days(days: float) -> DeliveryTier:
    """The highest anchor whose ``days`` does not exceed *days* (or the first)."""
    for tier in reversed(DELIVERY_TIERS):
        if days >= tier.days:
            return tier
    return DELIVERY_TIERS[0]


def _round_half_up(value: float) -> int:
    # Halves round up, matching the storefront price display.
    return math.floor(value + 0.5)


def discount_percent_for_days(days: float) -> int:
    return _round_half_up((1 - multiplier_for_days(days)) * 100)


def discounted_total(total: int, days: float) -> int:
    return _round_half_up(total * multiplier_for_days(days))


def quote_delivery(total: int, days: float) -> DeliveryQuote:
    """Price *total* for a *days* lead time."""
    price = discounted_total(total, days)
    return DeliveryQuote(
        days=days,
        multiplier=multiplier_for_days(days),
        discount_percent=discount_percent_for_days(days),
        original_total=total,
        discounted_total=price,
        savings=total - price,
        tier=tier_for_days(days),
    )
