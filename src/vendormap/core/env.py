"""
Project root and `.env` handling.

Catalog paths in settings are relative (`data/catalogs/...`). They resolve against the
repo root wherever the CLI, the API or pytest is started from. Set
`VENDORMAP_PROJECT_ROOT` to point an installed copy at a different data tree.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

_ROOT_MARKERS = ("pyproject.toml", ".env")


def _find_root(start: Path) -> Path | None:
    for candidate in (start, *start.parents):
        if any((candidate / marker).is_file() for marker in _ROOT_MARKERS):
            return candidate
    return None


@lru_cache
def get_project_root() -> Path:
    override = os.getenv("VENDORMAP_PROJECT_ROOT")
    if override:
        return Path(override).expanduser().resolve()
    return (
        _find_root(Path.cwd().resolve())
        or _find_root(Path(__file__).resolve().parent)
        or Path.cwd().resolve()
    )


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load `<root>/.env` once; variables already in the environment win."""
    env_path = get_project_root() / ".env"
    if not env_path.is_file():
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path


def resolve_project_path(path: str | Path) -> Path:
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    return (get_project_root() / p).resolve()
