"""
API routes.

Endpoints:
- POST `/api/vendor-map`: assembled list + map view model for a user.
- POST `/api/recommendations`: recommended vendors for a user, closest first.
- GET  `/api/vendors`: directory listing for the catalog user (search/filter/sort).
- GET  `/api/settings`: public settings for a frontend.

Request bodies may omit `vendors`, in which case the configured catalog is used.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Literal

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from vendormap.catalog.loader import load_user, load_vendors
from vendormap.config.overrides import apply_settings_overrides
from vendormap.config.settings import get_settings
from vendormap.domain.models import User, Vendor, VendorMapView, VendorWithDistance
from vendormap.recommender.distance import annotate, recommend
from vendormap.recommender.listing import query_vendors
from vendormap.recommender.view import build_vendor_map

logger = logging.getLogger(__name__)

router = APIRouter()


class RecommendationRequest(BaseModel):
    user: User
    vendors: list[Vendor] | None = None


class VendorMapRequest(BaseModel):
    user: User
    vendors: list[Vendor] | None = None
    plot_radius: float | None = Field(default=None, gt=0)
    settings_overrides: dict[str, Any] | None = None


@lru_cache
def _catalog_vendors() -> list[Vendor]:
    return load_vendors(get_settings().catalog.vendors_path)


@lru_cache
def _catalog_user() -> User:
    return load_user(get_settings().catalog.user_path)


def _vendors_or_catalog(vendors: list[Vendor] | None) -> list[Vendor]:
    return vendors if vendors is not None else _catalog_vendors()


def _bad_request(e: Exception) -> HTTPException:
    return HTTPException(status_code=400, detail={"code": "VALIDATION_ERROR", "message": str(e)})


def _internal_error(e: Exception) -> HTTPException:
    logger.exception("Request failed")
    return HTTPException(status_code=500, detail={"code": "INTERNAL_ERROR", "message": str(e)})


@router.post("/api/vendor-map", response_model=VendorMapView)
def post_vendor_map(request: VendorMapRequest) -> VendorMapView:
    """Annotate, recommend and project vendors around the requesting user."""
    try:
        settings = apply_settings_overrides(get_settings(), request.settings_overrides)
        return build_vendor_map(
            request.user,
            _vendors_or_catalog(request.vendors),
            plot_radius=request.plot_radius,
            settings=settings,
        )
    except ValueError as e:
        raise _bad_request(e) from e
    except Exception as e:
        raise _internal_error(e) from e


@router.post("/api/recommendations", response_model=list[VendorWithDistance])
def post_recommendations(request: RecommendationRequest) -> list[VendorWithDistance]:
    """Vendors within the user's max distance and hourly budget."""
    try:
        return recommend(request.user, _vendors_or_catalog(request.vendors))
    except ValueError as e:
        raise _bad_request(e) from e
    except Exception as e:
        raise _internal_error(e) from e


@router.get("/api/vendors", response_model=list[VendorWithDistance])
def get_vendors(
    search: str | None = None,
    filter_by: Literal["all", "recommended", "available", "verified"] | None = None,
    sort_by: Literal["distance", "rating", "price"] | None = None,
) -> list[VendorWithDistance]:
    """Directory listing for the catalog user."""
    settings = get_settings()
    try:
        user = _catalog_user()
        vendors = _catalog_vendors()
        return query_vendors(
            annotate(user, vendors),
            recommended=recommend(user, vendors),
            search=search,
            filter_by=filter_by or settings.listing.default_filter,
            sort_by=sort_by or settings.listing.default_sort,
        )
    except ValueError as e:
        raise _bad_request(e) from e
    except Exception as e:
        raise _internal_error(e) from e


@router.get("/api/settings")
def get_public_settings() -> dict:
    """Return safe-to-expose settings for frontend defaults (catalog paths removed)."""
    data = get_settings().model_dump(mode="json")
    return {
        "app": {"name": data["app"]["name"]},
        "map": data["map"],
        "display": data["display"],
        "listing": data["listing"],
    }
