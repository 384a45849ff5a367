from __future__ import annotations

import pytest

from vendormap.config.settings import get_settings
from vendormap.domain.models import User, Vendor

DARMSTADT = {"lat": 49.8728, "lng": 8.6512}
FRANKFURT = {"lat": 50.1109, "lng": 8.6821}


def build_vendor(
    vendor_id: str,
    *,
    lat: float,
    lng: float,
    hourly: float | None = None,
    daily: float | None = None,
    project: float | None = None,
    currency: str = "EUR",
    **extra,
) -> Vendor:
    payload = {
        "id": vendor_id,
        "name": extra.pop("name", f"Vendor {vendor_id}"),
        "pricing": {"hourly": hourly, "daily": daily, "project": project, "currency": currency},
        "location": {"city": extra.pop("city", None), "coordinates": {"lat": lat, "lng": lng}},
        **extra,
    }
    return Vendor.model_validate(payload)


def build_user(
    *,
    coordinates: dict | None = DARMSTADT,
    max_distance: float = 50,
    budget: tuple[float, float] = (50, 200),
) -> User:
    return User.model_validate(
        {
            "id": "user_test",
            "location": {"city": "Darmstadt", "coordinates": coordinates},
            "preferences": {
                "max_distance": max_distance,
                "budget_range": {"min": budget[0], "max": budget[1], "currency": "EUR"},
            },
        }
    )


@pytest.fixture
def make_vendor():
    return build_vendor


@pytest.fixture
def make_user():
    return build_user


@pytest.fixture
def fresh_settings():
    # Settings are lru_cached; tests that touch env vars must rebuild them before and after.
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()
