"""
VendorMap CLI entrypoint.

Intended for quick local demos and debugging against the JSON catalog.
All distance/map logic is delegated to `vendormap.recommender` and `vendormap.mapping`.
"""

from __future__ import annotations

import argparse
import json
from typing import Any

from vendormap.catalog.loader import load_user, load_vendors
from vendormap.config.settings import Settings, get_settings
from vendormap.core.logging import configure_logging
from vendormap.domain.models import Coordinates, User, VendorWithDistance
from vendormap.mapping.format import format_distance, format_pricing
from vendormap.mapping.projection import compass_label
from vendormap.recommender.distance import annotate, recommend
from vendormap.recommender.listing import availability_label, query_vendors
from vendormap.recommender.view import build_vendor_map


def _load_user(args: argparse.Namespace, settings: Settings) -> User:
    """Load the catalog user and apply `--lat/--lng/--max-distance` on a copy."""
    user = load_user(args.user or settings.catalog.user_path)
    lat = getattr(args, "lat", None)
    lng = getattr(args, "lng", None)
    if (lat is None) != (lng is None):
        raise ValueError("--lat and --lng must be given together")
    if lat is not None:
        location = user.location.model_copy(update={"coordinates": Coordinates(lat=lat, lng=lng)})
        user = user.model_copy(update={"location": location})
    max_distance = getattr(args, "max_distance", None)
    if max_distance is not None:
        prefs = user.preferences.model_copy(update={"max_distance": float(max_distance)})
        user = user.model_copy(update={"preferences": prefs})
    return user


def _describe(vendor: VendorWithDistance, settings: Settings) -> str:
    price = format_pricing(vendor, fallback=settings.display.contact_for_pricing)
    if vendor.distance is None:
        where = "distance unknown"
    else:
        where = f"{format_distance(vendor.distance)} {compass_label(vendor.bearing or 0.0)}"
    rating = f"{vendor.rating:.1f}" if vendor.rating is not None else "-"
    return f"{vendor.name} ({vendor.location.city or '?'})  {where}  {price}  rating={rating}"


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _cmd_recommend(args: argparse.Namespace) -> int:
    """Handle the `recommend` subcommand."""
    settings = get_settings()
    user = _load_user(args, settings)
    vendors = load_vendors(args.vendors or settings.catalog.vendors_path)

    results = recommend(user, vendors)
    if args.json:
        _print_json([v.model_dump(mode="json") for v in results])
        return 0

    budget = user.preferences.budget_range
    print(
        f"Recommended for {user.id}: within {user.preferences.max_distance:g}km, "
        f"{budget.currency}{budget.min:g}-{budget.max:g}/hr"
    )
    if not results:
        print("  (no vendors match)")
    for i, vendor in enumerate(results, start=1):
        print(f"{i:>2}. {_describe(vendor, settings)}")
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    settings = get_settings()
    user = _load_user(args, settings)
    vendors = load_vendors(args.vendors or settings.catalog.vendors_path)

    annotated = annotate(user, vendors)
    rows = query_vendors(
        annotated,
        recommended=recommend(user, vendors),
        search=args.search,
        filter_by=args.filter or settings.listing.default_filter,
        sort_by=args.sort or settings.listing.default_sort,
    )
    if args.json:
        _print_json([v.model_dump(mode="json") for v in rows])
        return 0

    print(f"Showing {len(rows)} of {len(annotated)} vendors")
    for vendor in rows:
        print(f"  - {_describe(vendor, settings)}  [{availability_label(vendor.availability)}]")
    return 0


def _cmd_map(args: argparse.Namespace) -> int:
    settings = get_settings()
    user = _load_user(args, settings)
    vendors = load_vendors(args.vendors or settings.catalog.vendors_path)

    view = build_vendor_map(user, vendors, plot_radius=args.plot_radius, settings=settings)
    _print_json(view.model_dump(mode="json"))
    return 0


def _add_catalog_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--user", type=str, default=None, help="User profile JSON (default: catalog.user_path)")
    p.add_argument("--vendors", type=str, default=None, help="Vendor catalog JSON (default: catalog.vendors_path)")
    p.add_argument("--lat", type=float, default=None, help="Override the user's latitude")
    p.add_argument("--lng", type=float, default=None, help="Override the user's longitude")
    p.add_argument("--max-distance", dest="max_distance", type=float, default=None, help="km")


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the VendorMap CLI."""
    parser = argparse.ArgumentParser(prog="vendormap")
    parser.add_argument("--log-level", dest="log_level", type=str, default=None)
    sub = parser.add_subparsers(dest="command", required=True)

    rec = sub.add_parser("recommend", help="Vendors within the user's distance and budget, closest first.")
    _add_catalog_args(rec)
    rec.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    rec.set_defaults(func=_cmd_recommend)

    lst = sub.add_parser("list", help="Search/filter/sort the full vendor directory.")
    _add_catalog_args(lst)
    lst.add_argument("--search", type=str, default=None, help="Match vendor name or service (case-insensitive)")
    lst.add_argument("--filter", choices=["all", "recommended", "available", "verified"], default=None)
    lst.add_argument("--sort", choices=["distance", "rating", "price"], default=None)
    lst.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    lst.set_defaults(func=_cmd_list)

    mp = sub.add_parser("map", help="Print the radial map view model as JSON.")
    _add_catalog_args(mp)
    mp.add_argument("--plot-radius", dest="plot_radius", type=float, default=None)
    mp.set_defaults(func=_cmd_map)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m vendormap.cli`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    func: Any = getattr(args, "func")
    return int(func(args))


if __name__ == "__main__":
    raise SystemExit(main())
