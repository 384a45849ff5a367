"""
Radial map projection.

Places vendors on a disc around the user:
- the angle encodes the bearing (North straight up, clockwise like a compass),
- the radius encodes the distance relative to the farthest vendor in the set.

Plot units are pixel-equivalent with the user at (0, 0) and y growing downwards, so a
vendor due North gets a negative y. Zoom/pan belong to the renderer: multiply
`plot_radius` by the zoom level before calling, and add the pan offset afterwards.
"""

from __future__ import annotations

import logging
from math import cos, radians, sin
from typing import Sequence

from vendormap.core.geo import as_point, bearing_deg, distance_km
from vendormap.domain.models import MapPosition, ProximityBand, User, VendorWithDistance
from vendormap.mapping.format import round_half_up
from vendormap.recommender.distance import effective_distance

logger = logging.getLogger(__name__)

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

DEFAULT_PLOT_RADIUS = 300.0
DEFAULT_EDGE_MARGIN = 0.8
DEFAULT_MAX_DISTANCE_FALLBACK = 1.0


def max_distance_of(vendors: Sequence[VendorWithDistance], *, fallback: float = DEFAULT_MAX_DISTANCE_FALLBACK) -> float:
    """Largest distance in the set; `fallback` when the set is empty or every distance is 0."""
    largest = max((effective_distance(v) for v in vendors), default=0.0)
    return largest if largest > 0 else fallback


def project(
    user: User,
    vendors: Sequence[VendorWithDistance],
    plot_radius: float = DEFAULT_PLOT_RADIUS,
    *,
    edge_margin: float = DEFAULT_EDGE_MARGIN,
    max_distance_fallback: float = DEFAULT_MAX_DISTANCE_FALLBACK,
) -> list[MapPosition]:
    """Map each annotated vendor to (x, y) on a disc of radius `plot_radius`.

    The farthest vendor lands at `plot_radius * edge_margin`. Bearing is recomputed from
    the coordinates; distance is taken from the annotation (computed if missing).
    Without user coordinates every vendor collapses onto the origin.
    """
    if user.coordinates is None:
        return [MapPosition(vendor=v, x=0.0, y=0.0) for v in vendors]

    origin = as_point(user.coordinates)
    distances = [
        v.distance if v.distance is not None else distance_km(origin, as_point(v.location.coordinates))
        for v in vendors
    ]
    largest = max(distances, default=0.0)
    max_distance = largest if largest > 0 else max_distance_fallback

    positions: list[MapPosition] = []
    for vendor, distance in zip(vendors, distances):
        bearing = bearing_deg(origin, as_point(vendor.location.coordinates))
        scaled = (distance / max_distance) * plot_radius * edge_margin
        # Rotate by -90 degrees so bearing 0 (North) points up the screen.
        angle = radians(bearing - 90)
        positions.append(
            MapPosition(
                vendor=vendor,
                x=cos(angle) * scaled,
                y=sin(angle) * scaled,
                bearing=bearing,
                distance=distance,
            )
        )
    logger.debug("projected %d vendors (max_distance=%.2f km, plot_radius=%s)", len(positions), max_distance, plot_radius)
    return positions


def compass_label(bearing: float) -> str:
    """8-point compass label for a bearing in degrees (0 and 360 are both "N")."""
    return COMPASS_POINTS[round_half_up(bearing / 45) % 8]


def distance_scale_ticks(max_distance: float) -> list[int]:
    """Four evenly spaced legend values up to `max_distance` (km, whole numbers)."""
    step = max_distance / 4
    return [round_half_up(step * i) for i in range(1, 5)]


def proximity_band(
    vendor: VendorWithDistance,
    max_distance: float,
    *,
    very_close: float = 0.3,
    close: float = 0.6,
) -> ProximityBand:
    """Bucket a vendor by its distance as a share of the user's max distance."""
    distance = effective_distance(vendor)
    if distance <= max_distance * very_close:
        return "very_close"
    if distance <= max_distance * close:
        return "close"
    if distance <= max_distance:
        return "within_range"
    return "out_of_range"
