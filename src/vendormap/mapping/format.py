"""
Display string helpers (distance + price).

Used by the CLI, the API view model and the map legend. Rounding is half-up so that
e.g. 26.5 km reads "27km" (Python's built-in `round` would give "26km").
"""

from __future__ import annotations

import math

from vendormap.domain.models import Vendor

CONTACT_FOR_PRICING = "Contact for pricing"

_PRICE_TIERS = (("hourly", "hr"), ("daily", "day"), ("project", "project"))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (towards +inf)."""
    return int(math.floor(value + 0.5))


def format_distance(km: float) -> str:
    """Human-friendly distance: meters below 1 km, one decimal below 10 km, whole km above."""
    if km < 1:
        return f"{round_half_up(km * 1000)}m"
    if km < 10:
        return f"{km:.1f}km"
    return f"{round_half_up(km)}km"


def _format_amount(amount: float) -> str:
    return str(int(amount)) if float(amount).is_integer() else str(amount)


def format_pricing(vendor: Vendor, *, fallback: str = CONTACT_FOR_PRICING) -> str:
    """First available tier of hourly -> daily -> project, e.g. "EUR75/hr"."""
    pricing = vendor.pricing
    for field, unit in _PRICE_TIERS:
        amount = getattr(pricing, field)
        if amount is not None:
            return f"{pricing.currency}{_format_amount(amount)}/{unit}"
    return fallback
