from __future__ import annotations
from dataclasses import dataclass
from math import atan2, cos, degrees, radians, sin, sqrt
from typing import Protocol

"""
Geospatial helpers.

We keep a tiny geometry layer here so the distance and map modules can do
great-circle math without pulling in heavier GIS dependencies.

Inputs are NOT range-checked: a latitude of 120 still yields a number, it just
means nothing. Validation belongs to the data source (see `vendormap.domain.models`).
"""

EARTH_RADIUS_KM = 6371.0


class LatLng(Protocol):
    lat: float
    lng: float


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lng: float


def haversine_km(a: LatLng, b: LatLng) -> float:
    """Compute the unrounded great-circle distance in kilometers between two points."""
    lat1 = radians(a.lat)
    lat2 = radians(b.lat)

    dlat = radians(b.lat - a.lat)
    dlng = radians(b.lng - a.lng)

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlng / 2) ** 2
    return EARTH_RADIUS_KM * 2 * atan2(sqrt(h), sqrt(1 - h))


def distance_km(a: LatLng, b: LatLng) -> float:
    """Great-circle distance in kilometers, rounded to 2 decimal places."""
    return round(haversine_km(a, b), 2)


def bearing_deg(origin: LatLng, target: LatLng) -> float:
    """Initial compass bearing from `origin` to `target` in degrees, within [0, 360).

    0 is North, 90 is East. Identical points have no direction; we return 0.0
    for them instead of whatever sign the floating point noise happens to give.
    """
    if origin.lat == target.lat and origin.lng == target.lng:
        return 0.0

    lat1 = radians(origin.lat)
    lat2 = radians(target.lat)
    dlng = radians(target.lng - origin.lng)

    y = sin(dlng) * cos(lat2)
    x = cos(lat1) * sin(lat2) - sin(lat1) * cos(lat2) * cos(dlng)

    bearing = (degrees(atan2(y, x)) + 360) % 360
    # (-tiny + 360) % 360 can round up to exactly 360.0.
    return 0.0 if bearing >= 360 else bearing


def as_point(coords: LatLng) -> GeoPoint:
    """Copy any lat/lng-shaped object into an immutable `GeoPoint`."""
    return GeoPoint(lat=float(coords.lat), lng=float(coords.lng))
