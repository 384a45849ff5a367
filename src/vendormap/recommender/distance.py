from __future__ import annotations

# Distance service: turns raw catalog vendors into vendors annotated relative to one user,
# and derives the "recommended" subset from the user's distance + budget preferences.
#
# Every function here is pure:
# - inputs are never mutated (annotation builds new VendorWithDistance records),
# - output order is deterministic (stable sorts only).
#
# Policy notes (kept deliberately permissive, see DESIGN.md "Open questions"):
# - A vendor with an unknown distance (user has no coordinates) counts as distance 0.
# - A vendor without an hourly rate always passes the budget gate.

import logging
from typing import Iterable, Sequence

from vendormap.core.geo import as_point, bearing_deg, distance_km
from vendormap.domain.models import BudgetRange, User, Vendor, VendorWithDistance

logger = logging.getLogger(__name__)


def _with_distance(vendor: Vendor, *, distance: float | None, bearing: float | None) -> VendorWithDistance:
    # Rebuild from a plain dump so re-annotating an already annotated vendor replaces its values.
    payload = vendor.model_dump(mode="python")
    payload.update(distance=distance, bearing=bearing)
    return VendorWithDistance.model_validate(payload)


def effective_distance(vendor: VendorWithDistance) -> float:
    """Distance used for filtering/sorting; unknown distance counts as 0."""
    return vendor.distance if vendor.distance is not None else 0.0


def annotate(user: User, vendors: Iterable[Vendor]) -> list[VendorWithDistance]:
    """Attach distance (km) and bearing (degrees) from the user to every vendor, in input order."""
    if user.coordinates is None:
        return [_with_distance(v, distance=None, bearing=None) for v in vendors]

    origin = as_point(user.coordinates)
    out: list[VendorWithDistance] = []
    for vendor in vendors:
        target = as_point(vendor.location.coordinates)
        out.append(
            _with_distance(
                vendor,
                distance=distance_km(origin, target),
                bearing=bearing_deg(origin, target),
            )
        )
    return out


def filter_by_distance(vendors: Iterable[VendorWithDistance], max_km: float) -> list[VendorWithDistance]:
    """Keep vendors within `max_km` (inclusive); unknown distances always pass."""
    return [v for v in vendors if effective_distance(v) <= max_km]


def sort_by_distance(vendors: Iterable[VendorWithDistance]) -> list[VendorWithDistance]:
    """Closest first; ties keep their input order."""
    return sorted(vendors, key=effective_distance)


def passes_budget(vendor: Vendor, budget: BudgetRange) -> bool:
    """True when the vendor's hourly rate fits the budget, or when there is no hourly rate to judge."""
    hourly = vendor.pricing.hourly
    if hourly is None:
        return True
    return budget.min <= hourly <= budget.max


def is_within_range(vendor: VendorWithDistance, max_distance: float) -> bool:
    return effective_distance(vendor) <= max_distance


def recommend(user: User, vendors: Sequence[Vendor]) -> list[VendorWithDistance]:
    """Vendors within the user's max distance AND hourly budget, closest first.

    Always annotates from `vendors` as given, so pass the full catalog rather than an
    already filtered list. Returns an empty list when nothing qualifies.
    """
    prefs = user.preferences
    annotated = annotate(user, vendors)
    within = filter_by_distance(annotated, prefs.max_distance)
    affordable = [v for v in within if passes_budget(v, prefs.budget_range)]
    result = sort_by_distance(affordable)
    logger.debug(
        "recommend user=%s vendors=%d within_distance=%d within_budget=%d",
        user.id,
        len(annotated),
        len(within),
        len(result),
    )
    return result
