"""
Shared fixtures for the geoanalysis tool tests.
"""
from pathlib import Path
from typing import List

import pytest

from geoanalysis_tool.config import settings_manager
from geoanalysis_tool.config.settings_manager import SettingsManager


def write_grid(path: Path, rows: List[List[float]], cellsize: float = 10.0,
               nodata: float = -9999.0) -> Path:
    """Write a small Esri ASCII grid for tests."""
    lines = [
        f"ncols {len(rows[0])}",
        f"nrows {len(rows)}",
        "xllcorner 0.0",
        "yllcorner 0.0",
        f"cellsize {cellsize}",
        f"NODATA_value {nodata}",
    ]
    lines.extend(" ".join(str(v) for v in row) for row in rows)
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep the user's real settings file out of every test."""
    manager = SettingsManager(tmp_path / "settings" / "settings.json")
    monkeypatch.setattr(settings_manager, "_settings_manager_instance", manager)
    return manager


@pytest.fixture(autouse=True)
def no_browser(monkeypatch):
    """Record browser launches instead of opening anything."""
    opened = []
    monkeypatch.setattr("webbrowser.open", lambda uri: opened.append(uri))
    return opened


@pytest.fixture
def east_slope_dem(tmp_path) -> Path:
    """3x4 DEM rising 10 units per 10 m cell to the east (45 degree slope)."""
    rows = [[0, 10, 20, 30] for _ in range(3)]
    return write_grid(tmp_path / "dem.asc", rows)
