"""
Vendor catalog loader.

The catalog is a pair of local JSON files (defaults: `data/catalogs/vendors.json` and
`data/catalogs/user.json`). We validate them into typed Pydantic models so downstream
distance/map code can assume a consistent shape; malformed coordinates fail here with a
`pydantic.ValidationError`, never later in the math.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from vendormap.core.env import resolve_project_path
from vendormap.domain.models import User, Vendor

logger = logging.getLogger(__name__)

_VENDORS_ADAPTER = TypeAdapter(list[Vendor])


def _read_json(path: str | Path) -> tuple[Path, Any]:
    resolved = resolve_project_path(path)
    return resolved, json.loads(resolved.read_text(encoding="utf-8"))


def load_vendors(path: str | Path) -> list[Vendor]:
    """Load and validate a vendor catalog JSON file (a list of vendor objects)."""
    resolved, payload = _read_json(path)
    if not isinstance(payload, list):
        raise ValueError(f"Invalid vendor catalog root in {resolved}; expected a list.")
    vendors = _VENDORS_ADAPTER.validate_python(payload)
    logger.info("Loaded %d vendors from %s", len(vendors), resolved)
    return vendors


def load_user(path: str | Path) -> User:
    """Load and validate a single user profile JSON file."""
    resolved, payload = _read_json(path)
    if not isinstance(payload, dict):
        raise ValueError(f"Invalid user profile root in {resolved}; expected an object.")
    return User.model_validate(payload)
