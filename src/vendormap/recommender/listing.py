"""
Vendor directory listing: search, filter and sort an annotated vendor list.

This is the list view counterpart of the map. It works on vendors that were already
annotated (`recommender.distance.annotate`) and takes the recommended subset as an
argument, so it never re-runs the recommendation filters itself.
"""

from __future__ import annotations

from typing import Iterable, Literal, Sequence

from vendormap.domain.models import VendorWithDistance
from vendormap.recommender.distance import effective_distance

SortBy = Literal["distance", "rating", "price"]
FilterBy = Literal["all", "recommended", "available", "verified"]

AVAILABILITY_LABELS = {
    "available": "Available",
    "busy": "Busy",
    "unavailable": "Unavailable",
}


def availability_label(availability: str) -> str:
    return AVAILABILITY_LABELS.get(availability, "Unknown")


def _matches_search(vendor: VendorWithDistance, term: str) -> bool:
    if not term:
        return True
    if term in vendor.name.lower():
        return True
    return any(term in service.lower() for service in vendor.services)


def _matches_filter(vendor: VendorWithDistance, filter_by: FilterBy, recommended_ids: set[str]) -> bool:
    if filter_by == "recommended":
        return vendor.id in recommended_ids
    if filter_by == "available":
        return vendor.availability == "available"
    if filter_by == "verified":
        return vendor.verified
    return True


def _sort_key(sort_by: SortBy):
    if sort_by == "rating":
        # Highest rated first; unrated counts as 0.
        return lambda v: -(v.rating or 0.0)
    if sort_by == "price":
        return lambda v: v.pricing.hourly or 0.0
    return effective_distance


def query_vendors(
    vendors: Iterable[VendorWithDistance],
    *,
    recommended: Sequence[VendorWithDistance] = (),
    search: str | None = None,
    filter_by: FilterBy = "all",
    sort_by: SortBy = "distance",
) -> list[VendorWithDistance]:
    """Case-insensitive search over name + services, then filter, then a stable sort."""
    term = (search or "").strip().lower()
    recommended_ids = {v.id for v in recommended}
    matched = [
        v
        for v in vendors
        if _matches_search(v, term) and _matches_filter(v, filter_by, recommended_ids)
    ]
    return sorted(matched, key=_sort_key(sort_by))
