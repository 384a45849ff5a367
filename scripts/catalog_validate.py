from __future__ import annotations

import argparse
import json
from collections import Counter
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from vendormap.core.env import resolve_project_path
from vendormap.domain.models import Vendor


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Validate a VendorMap vendor catalog file (offline).")
    p.add_argument("--vendors", type=str, default="data/catalogs/vendors.json")
    args = p.parse_args(argv)

    vendors_path = resolve_project_path(args.vendors)
    if not vendors_path.exists():
        print("Vendor catalog not found:", vendors_path)
        return 2

    payload = _read_json(vendors_path)
    if not isinstance(payload, list):
        print("Invalid catalog shape: expected a list of vendor objects.")
        return 2

    valid: list[Vendor] = []
    bad_rows: list[str] = []
    for i, row in enumerate(payload):
        try:
            valid.append(Vendor.model_validate(row))
        except ValidationError as e:
            row_id = row.get("id") if isinstance(row, dict) else None
            first = e.errors()[0]
            loc = ".".join(str(part) for part in first.get("loc", ()))
            bad_rows.append(f"#{i} {row_id or '?'} ({loc}: {first.get('msg')})")

    id_counts = Counter(v.id for v in valid)
    duplicate_ids = sorted(vid for vid, n in id_counts.items() if n > 1)
    no_pricing = [v.id for v in valid if v.pricing.hourly is None and v.pricing.daily is None and v.pricing.project is None]
    no_hourly = [v.id for v in valid if v.pricing.hourly is None]
    availability = Counter(v.availability for v in valid)

    print("Catalog:", vendors_path)
    print("Rows:", len(payload))
    print("Valid vendors:", len(valid))
    print("Availability:", ", ".join(f"{k}={n}" for k, n in sorted(availability.items())) or "-")
    print("Verified:", sum(1 for v in valid if v.verified))
    if no_hourly:
        print("Without hourly rate (always pass the budget gate):", len(no_hourly), "example:", ", ".join(no_hourly[:8]))
    if no_pricing:
        print("Contact for pricing:", len(no_pricing), "example:", ", ".join(no_pricing[:8]))
    if duplicate_ids:
        print("Duplicate ids:", len(duplicate_ids), "example:", ", ".join(duplicate_ids[:8]))
    if bad_rows:
        print("Invalid rows:", len(bad_rows), "example:", "; ".join(bad_rows[:8]))

    if bad_rows or duplicate_ids:
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
