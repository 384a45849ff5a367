"""
Domain models (Pydantic).

These types represent the stable "contract" between layers:
- data-source records (`User`, `Vendor`), validated when a catalog is loaded
- derived records (`VendorWithDistance`, `MapPosition`) produced by the pure core
- the assembled view model (`VendorMapView`) consumed by the CLI and API

Validation boundary:
Coordinate ranges, budget order and price signs are checked HERE, when records enter
the system. The geo/recommender/mapping functions trust what they are given and never
raise on odd numbers.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

Availability = Literal["available", "busy", "unavailable"]
ProximityBand = Literal["very_close", "close", "within_range", "out_of_range"]


class Coordinates(BaseModel):
    """A geographic point in decimal degrees (immutable)."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class UserLocation(BaseModel):
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None
    coordinates: Coordinates | None = None


class BudgetRange(BaseModel):
    """Inclusive hourly budget range."""

    min: float = Field(..., ge=0)
    max: float = Field(..., ge=0)
    currency: str

    @model_validator(mode="after")
    def _validate_order(self) -> "BudgetRange":
        if self.max < self.min:
            raise ValueError("budget_range.max must be >= budget_range.min")
        return self


class UserPreferences(BaseModel):
    max_distance: float = Field(..., ge=0)
    budget_range: BudgetRange
    preferred_services: list[str] = Field(default_factory=list)
    language: str | None = None
    timezone: str | None = None


class User(BaseModel):
    """The person the map is centred on."""

    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    location: UserLocation = Field(default_factory=UserLocation)
    preferences: UserPreferences

    @property
    def coordinates(self) -> Coordinates | None:
        return self.location.coordinates


class Pricing(BaseModel):
    """Price tiers; any of them may be missing ("contact for pricing")."""

    hourly: float | None = Field(default=None, gt=0)
    daily: float | None = Field(default=None, gt=0)
    project: float | None = Field(default=None, gt=0)
    currency: str


class VendorLocation(BaseModel):
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None
    coordinates: Coordinates


class Contact(BaseModel):
    email: str | None = None
    phone: str | None = None
    website: str | None = None


class Vendor(BaseModel):
    """A service provider from the catalog."""

    id: str
    name: str
    description: str | None = None
    services: list[str] = Field(default_factory=list)
    pricing: Pricing
    location: VendorLocation
    contact: Contact = Field(default_factory=Contact)
    rating: float | None = Field(default=None, ge=0, le=5)
    review_count: int = Field(default=0, ge=0)
    availability: Availability = "available"
    specialties: list[str] = Field(default_factory=list)
    experience: int = Field(default=0, ge=0)
    verified: bool = False


class VendorWithDistance(Vendor):
    """A vendor annotated relative to one user; `None` means "could not be computed"."""

    distance: float | None = Field(default=None, ge=0)
    bearing: float | None = Field(default=None, ge=0, lt=360)


class MapPosition(BaseModel):
    """Where one vendor lands on the circular map (plot units, origin = user, y grows downwards)."""

    vendor: VendorWithDistance
    x: float
    y: float
    bearing: float | None = None
    distance: float | None = None
    # Judged against the user's preferences during view assembly.
    band: ProximityBand | None = None
    in_range: bool = True
    in_budget: bool = True


class VendorMapView(BaseModel):
    """Everything the presentation layer needs to draw the list and the map."""

    user_id: str
    has_location: bool
    plot_radius: float
    max_distance: float
    scale_ticks: list[int]
    in_range_count: int
    vendors: list[VendorWithDistance]
    recommended: list[VendorWithDistance]
    positions: list[MapPosition]
