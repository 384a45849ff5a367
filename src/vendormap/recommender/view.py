from __future__ import annotations

# View-model assembly: composes the distance service and the projection into the one
# structure the CLI/API hand to a renderer. No math lives here, only composition order:
# 1) annotate the ORIGINAL vendor list,
# 2) recommend from the ORIGINAL vendor list too (never from a filtered one, so filters
#    do not compound),
# 3) project the annotated list and tag each position with its proximity band and the
#    user's range/budget verdicts,
# 4) derive legend ticks from the same max distance the projection used.

import logging
from typing import Sequence

from vendormap.config.settings import Settings, get_settings
from vendormap.domain.models import MapPosition, User, Vendor, VendorMapView
from vendormap.mapping.projection import distance_scale_ticks, max_distance_of, project, proximity_band
from vendormap.recommender.distance import annotate, is_within_range, passes_budget, recommend

logger = logging.getLogger(__name__)


def _judge(position: MapPosition, user: User, settings: Settings) -> MapPosition:
    prefs = user.preferences
    bands = settings.display.proximity_bands
    vendor = position.vendor
    return position.model_copy(
        update={
            "band": proximity_band(vendor, prefs.max_distance, very_close=bands.very_close, close=bands.close),
            "in_range": is_within_range(vendor, prefs.max_distance),
            "in_budget": passes_budget(vendor, prefs.budget_range),
        }
    )


def build_vendor_map(
    user: User,
    vendors: Sequence[Vendor],
    *,
    plot_radius: float | None = None,
    settings: Settings | None = None,
) -> VendorMapView:
    settings = settings or get_settings()
    map_cfg = settings.map
    radius = float(plot_radius if plot_radius is not None else map_cfg.plot_radius)

    annotated = annotate(user, vendors)
    recommended = recommend(user, vendors)
    positions = project(
        user,
        annotated,
        radius,
        edge_margin=map_cfg.edge_margin,
        max_distance_fallback=map_cfg.max_distance_fallback,
    )
    positions = [_judge(p, user, settings) for p in positions]

    # No distances without a location, so the legend keeps its default scale.
    if annotated and user.coordinates is not None:
        legend_max = max_distance_of(annotated, fallback=map_cfg.max_distance_fallback)
    else:
        legend_max = map_cfg.legend_default_max_km

    in_range = sum(1 for p in positions if p.in_range)
    logger.debug(
        "vendor map user=%s vendors=%d recommended=%d in_range=%d",
        user.id,
        len(annotated),
        len(recommended),
        in_range,
    )
    return VendorMapView(
        user_id=user.id,
        has_location=user.coordinates is not None,
        plot_radius=radius,
        max_distance=legend_max,
        scale_ticks=distance_scale_ticks(legend_max),
        in_range_count=in_range,
        vendors=annotated,
        recommended=recommended,
        positions=positions,
    )
