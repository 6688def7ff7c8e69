"""
Tests for tool argument parsing and the built-in tools.
"""
import os

import numpy as np
import pandas as pd
import pytest

from geoanalysis_tool.raster import read_ascii_grid
from geoanalysis_tool.tools import (
    Slope, Aspect, RasterSummaryStats, ToolArgumentError,
    ToolParameter, ParameterType, parse_tool_args, compute_slope, compute_aspect
)
from geoanalysis_tool.tools.terrain import FLAT_ASPECT, _DemTool

from conftest import write_grid


SLOPE_PARAMS = Slope().get_parameters()


def test_parse_equals_and_separate_values():
    values = parse_tool_args(SLOPE_PARAMS, ["-i=dem.asc", "--output", "out.asc"], "/data/")
    assert values == {
        "dem": os.path.join("/data/", "dem.asc"),
        "output": os.path.join("/data/", "out.asc"),
        "zfactor": 1.0,
    }


def test_parse_strips_quotes():
    values = parse_tool_args(SLOPE_PARAMS, ['--dem="my dem.asc"', "-o='o.asc'"])
    assert values["dem"] == "my dem.asc"
    assert values["output"] == "o.asc"


def test_parse_single_dash_long_flag():
    values = parse_tool_args(SLOPE_PARAMS, ["-dem=d.asc", "-output=o.asc", "-zfactor=2"])
    assert values["zfactor"] == 2.0


def test_parse_negative_number_as_separate_value():
    values = parse_tool_args(SLOPE_PARAMS, ["--dem=d.asc", "-o=o.asc", "--zfactor", "-2.5"])
    assert values["zfactor"] == -2.5


def test_parse_skips_omitted_sentinel():
    values = parse_tool_args(
        SLOPE_PARAMS, ["--dem=d.asc", "-o=o.asc", "--zfactor=-17976931348623157"]
    )
    assert values["zfactor"] == 1.0


def test_parse_keeps_paths_with_directories():
    values = parse_tool_args(SLOPE_PARAMS, ["--dem=/abs/d.asc", "-o=o.asc"], "/data/")
    assert values["dem"] == "/abs/d.asc"


def test_parse_ignores_unknown_flags():
    values = parse_tool_args(SLOPE_PARAMS, ["--dem=d.asc", "-o=o.asc", "--colour=red"])
    assert "colour" not in values


def test_parse_missing_required_parameter():
    with pytest.raises(ToolArgumentError, match="Input DEM File"):
        parse_tool_args(SLOPE_PARAMS, ["-o=o.asc"])


def test_parse_bad_float():
    with pytest.raises(ToolArgumentError, match="expected a number"):
        parse_tool_args(SLOPE_PARAMS, ["--dem=d.asc", "-o=o.asc", "--zfactor=steep"])


def test_parse_boolean_flag():
    params = [ToolParameter("Fill Holes", ["--fill"], "Fill holes.", ParameterType.BOOLEAN,
                            default_value="false", optional=True)]
    assert parse_tool_args(params, ["--fill"]) == {"fill": True}
    assert parse_tool_args(params, ["--fill=False"]) == {"fill": False}
    assert parse_tool_args(params, []) == {"fill": False}


def test_value_parameter_without_value():
    with pytest.raises(ToolArgumentError, match="requires a value"):
        parse_tool_args(SLOPE_PARAMS, ["--dem", "-o=o.asc"])


def test_slope_of_inclined_plane():
    z = np.tile(np.arange(4) * 10.0, (3, 1))
    assert np.allclose(compute_slope(z, 10.0), 45.0)


def test_slope_of_flat_surface():
    assert np.allclose(compute_slope(np.full((3, 3), 5.0), 1.0), 0.0)


def test_aspect_faces_downslope():
    rising_east = np.tile(np.arange(4) * 10.0, (3, 1))
    assert np.allclose(compute_aspect(rising_east, 10.0), 270.0)

    rising_south = np.tile((np.arange(3) * 10.0)[:, None], (1, 4))
    assert np.allclose(compute_aspect(rising_south, 10.0), 0.0)


def test_aspect_of_flat_cells():
    assert np.all(compute_aspect(np.zeros((3, 3)), 1.0) == FLAT_ASPECT)


def test_gradient_needs_two_rows_and_columns():
    with pytest.raises(ValueError, match="at least 2"):
        compute_slope(np.zeros((1, 5)), 1.0)


def test_dem_tool_requires_compute():
    with pytest.raises(TypeError):
        _DemTool()


def test_slope_tool_writes_output(east_slope_dem, tmp_path, capsys):
    out = tmp_path / "slope.asc"
    Slope().run(["--dem", str(east_slope_dem), "-o", str(out)], verbose=True)

    result = read_ascii_grid(str(out))
    assert result.data.shape == (3, 4)
    assert np.allclose(result.data, 45.0)
    assert "Saving data..." in capsys.readouterr().out


def test_slope_tool_is_quiet_without_verbose(east_slope_dem, tmp_path, capsys):
    Slope().run([f"--dem={east_slope_dem}", f"-o={tmp_path / 'slope.asc'}"])
    assert capsys.readouterr().out == ""


def test_slope_zfactor(east_slope_dem, tmp_path):
    out = tmp_path / "steep.asc"
    Slope().run([f"--dem={east_slope_dem}", f"-o={out}", "--zfactor=2"])
    expected = np.degrees(np.arctan(2.0))
    assert np.allclose(read_ascii_grid(str(out)).data, expected)


def test_nodata_propagates_to_output(tmp_path):
    dem = write_grid(tmp_path / "holes.asc", [[0, 10, 20], [0, -9999, 20], [0, 10, 20]])
    out = tmp_path / "aspect.asc"
    Aspect().run([f"--dem={dem}", f"-o={out}"])

    result = read_ascii_grid(str(out))
    assert result.data[1, 1] == -9999
    assert result.data[0, 0] != -9999


def test_raster_summary_stats(tmp_path):
    grid = write_grid(tmp_path / "values.asc", [[1, 2, 3], [4, 5, -9999]])
    csv_path = tmp_path / "stats.csv"

    report = RasterSummaryStats().run(["-i", str(grid), "--output", str(csv_path)])

    assert report.startswith("Summary statistics for 2x3 raster:")
    assert "mean" in report
    stats = pd.read_csv(csv_path, index_col="statistic")
    assert stats.loc["count", "value"] == 5
    assert stats.loc["mean", "value"] == pytest.approx(3.0)
    assert stats.loc["total", "value"] == pytest.approx(15.0)


def test_raster_summary_stats_without_csv(tmp_path):
    grid = write_grid(tmp_path / "values.asc", [[1, 2], [3, 4]])
    report = RasterSummaryStats().run([f"-i={grid}"])
    assert "max" in report
    assert not list(tmp_path.glob("*.csv"))
