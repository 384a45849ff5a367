from __future__ import annotations

import os
from pathlib import Path

import pytest

from vendormap.core.env import get_project_root, load_dotenv_if_present, resolve_project_path


@pytest.fixture
def fresh_env():
    get_project_root.cache_clear()
    load_dotenv_if_present.cache_clear()
    yield
    get_project_root.cache_clear()
    load_dotenv_if_present.cache_clear()


def test_project_root_found_from_a_subdirectory(fresh_env, tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text("[project]\n", encoding="utf-8")
    nested = tmp_path / "data" / "catalogs"
    nested.mkdir(parents=True)
    monkeypatch.delenv("VENDORMAP_PROJECT_ROOT", raising=False)
    monkeypatch.chdir(nested)

    assert get_project_root() == tmp_path.resolve()
    assert resolve_project_path("data/catalogs/vendors.json") == (nested / "vendors.json").resolve()


def test_project_root_env_override(fresh_env, tmp_path, monkeypatch):
    monkeypatch.setenv("VENDORMAP_PROJECT_ROOT", str(tmp_path))

    assert get_project_root() == tmp_path.resolve()
    assert resolve_project_path("/abs/vendors.json") == Path("/abs/vendors.json")
    assert resolve_project_path("vendors.json") == tmp_path.resolve() / "vendors.json"


def test_dotenv_does_not_override_existing_vars(fresh_env, tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("VENDORMAP_TEST_A=from_file\nVENDORMAP_TEST_B=from_file\n", encoding="utf-8")
    monkeypatch.setenv("VENDORMAP_PROJECT_ROOT", str(tmp_path))
    monkeypatch.setenv("VENDORMAP_TEST_A", "from_env")
    monkeypatch.delenv("VENDORMAP_TEST_B", raising=False)

    assert load_dotenv_if_present() == tmp_path.resolve() / ".env"
    assert os.environ["VENDORMAP_TEST_A"] == "from_env"
    assert os.environ["VENDORMAP_TEST_B"] == "from_file"


def test_dotenv_missing_returns_none(fresh_env, tmp_path, monkeypatch):
    monkeypatch.setenv("VENDORMAP_PROJECT_ROOT", str(tmp_path))

    assert load_dotenv_if_present() is None
