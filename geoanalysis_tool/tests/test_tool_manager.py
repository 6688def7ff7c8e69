"""
Tests for the tool registry backend.
"""
import json
import os

import pytest

from geoanalysis_tool.tools import (
    ToolManager, ConstructionError, DispatchError, ToolArgumentError,
    RasterSummaryStats, Slope, normalize_tool_name
)


@pytest.fixture
def manager(tmp_path):
    return ToolManager(str(tmp_path) + os.sep, verbose=False)


def test_missing_working_dir_fails_construction(tmp_path):
    with pytest.raises(ConstructionError, match="does not exist"):
        ToolManager(str(tmp_path / "missing") + os.sep, False)


def test_empty_working_dir_is_accepted():
    manager = ToolManager("", False)
    assert manager.working_dir == ""


@pytest.mark.parametrize("name", ["Slope", "slope", "SLOPE"])
def test_tool_lookup_ignores_case(manager, name):
    assert isinstance(manager.get_tool(name), Slope)


def test_tool_lookup_ignores_underscores(manager):
    assert isinstance(manager.get_tool("raster_summary_stats"), RasterSummaryStats)
    assert normalize_tool_name("Raster-Summary_Stats") == "rastersummarystats"


def test_unknown_tool_is_a_dispatch_error(manager):
    with pytest.raises(DispatchError, match="Unrecognized tool name Hillshade"):
        manager.tool_help("Hillshade")


def test_empty_tool_name_is_a_dispatch_error(manager):
    with pytest.raises(DispatchError, match="No tool name"):
        manager.run_tool("", [])


def test_list_tools(manager):
    lines = manager.list_tools().splitlines()
    assert lines[0] == "All 3 Available Tools:"
    assert [line.split(":")[0] for line in lines[1:]] == ["Aspect", "RasterSummaryStats", "Slope"]


def test_list_tools_with_keywords(manager):
    lines = manager.list_tools_with_keywords(["DEM"]).splitlines()
    assert lines[0] == "2 Tools containing keywords:"
    assert [line.split(":")[0] for line in lines[1:]] == ["Aspect", "Slope"]


def test_list_tools_with_unmatched_keywords(manager):
    assert manager.list_tools_with_keywords(["hydrology"]) == "0 Tools containing keywords:"


def test_toolbox_of_tool_and_all_toolboxes(manager):
    assert manager.toolbox("Aspect") == "Geomorphometric Analysis"
    assert manager.toolbox("") == "Geomorphometric Analysis\nMath and Stats Tools"


def test_tool_help(manager):
    text = manager.tool_help("Slope")
    assert text.startswith("Slope\nDescription:")
    assert "Toolbox: Geomorphometric Analysis" in text
    assert "-i, --dem" in text
    assert "Example usage:" in text
    assert "-r=Slope" in text


def test_tool_parameters_json(manager):
    params = json.loads(manager.tool_parameters("Slope"))["parameters"]
    assert [p["flags"] for p in params] == [["-i", "--dem"], ["-o", "--output"], ["--zfactor"]]
    assert params[0]["parameter_type"] == "ExistingFile"
    assert params[2]["optional"] is True
    assert params[2]["default_value"] == "1.0"


def test_view_code_opens_source(manager, no_browser):
    uri = manager.get_tool_source_code("Slope")
    assert uri.startswith("file://")
    assert uri.endswith("terrain.py")
    assert no_browser == [uri]


def test_view_code_without_browser(no_browser):
    manager = ToolManager("", False, open_browser=False)
    uri = manager.get_tool_source_code("RasterSummaryStats")
    assert uri.endswith("statistics.py")
    assert no_browser == []


def test_run_tool_missing_input_file(manager):
    with pytest.raises(DispatchError, match="Slope failed"):
        manager.run_tool("Slope", ["--dem=nothing.asc", "-o=out.asc"])


def test_run_tool_missing_parameter(manager):
    with pytest.raises(ToolArgumentError, match="Output File"):
        manager.run_tool("Slope", ["--dem=dem.asc"])


def test_run_tool_uses_working_dir(east_slope_dem, tmp_path):
    manager = ToolManager(str(tmp_path) + os.sep, False)
    assert manager.run_tool("slope", ["--dem", "dem.asc", "-o", "slope.asc"]) is None
    assert (tmp_path / "slope.asc").exists()
