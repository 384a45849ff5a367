import json

import pytest

from vendormap.cli import main


def test_cli_recommend_json(capsys):
    assert main(["recommend", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)

    assert [v["id"] for v in data] == ["vendor_001", "vendor_002", "vendor_003"]
    assert data[0]["distance"] == 0
    assert data[0]["bearing"] == 0


def test_cli_recommend_text(capsys):
    assert main(["recommend", "--max-distance", "30"]) == 0
    out = capsys.readouterr().out

    assert "TechSolutions GmbH (Darmstadt)  0m N  EUR75/hr" in out
    assert "Digital Marketing Pro (Frankfurt)  27km N  EUR65/hr" in out
    assert "Creative Design Studio" not in out


def test_cli_list_filters_and_sorts(capsys):
    assert main(["list", "--filter", "verified", "--sort", "rating", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)

    assert [v["id"] for v in data] == ["vendor_003", "vendor_001", "vendor_004", "vendor_002", "vendor_005"]


def test_cli_list_text_shows_availability(capsys):
    assert main(["list", "--search", "design"]) == 0
    out = capsys.readouterr().out

    assert "Showing 1 of 5 vendors" in out
    assert "[Busy]" in out


def test_cli_map_uses_plot_radius(capsys):
    assert main(["map", "--plot-radius", "100"]) == 0
    data = json.loads(capsys.readouterr().out)

    assert data["plot_radius"] == 100
    assert len(data["positions"]) == 5
    radii = [(p["x"] ** 2 + p["y"] ** 2) ** 0.5 for p in data["positions"]]
    assert max(radii) == pytest.approx(80)


def test_cli_position_override_requires_both_coordinates():
    with pytest.raises(ValueError, match="--lat and --lng"):
        main(["recommend", "--lat", "50.0"])
