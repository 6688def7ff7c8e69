"""
Geomorphometric Analysis Tools

Slope and aspect of a DEM, computed with finite differences:

    dz/dx, dz/dy = numpy.gradient(z, cellsize)   (central differences,
                                                  one-sided at the edges)
    slope  = atan(sqrt(dz/dx^2 + dz/dy^2))       degrees
    aspect = azimuth of the downslope direction, clockwise from north

Rows run north to south, so the northward gradient is -dz/drow.
"""
from abc import abstractmethod
from typing import List, Optional
import logging
import time

import numpy as np

from ..raster import read_ascii_grid, write_ascii_grid
from .base_tool import Tool, ToolParameter, ParameterType


logger = logging.getLogger(__name__)

TOOLBOX = "Geomorphometric Analysis"

# Aspect assigned to cells with no gradient
FLAT_ASPECT = -1.0


def _dem_parameters() -> List[ToolParameter]:
    return [
        ToolParameter(
            name="Input DEM File",
            flags=["-i", "--dem"],
            description="Input raster DEM file.",
            parameter_type=ParameterType.EXISTING_FILE,
        ),
        ToolParameter(
            name="Output File",
            flags=["-o", "--output"],
            description="Output raster file.",
            parameter_type=ParameterType.NEW_FILE,
        ),
        ToolParameter(
            name="Z Conversion Factor",
            flags=["--zfactor"],
            description="Optional multiplier for when the vertical and horizontal units are not the same.",
            parameter_type=ParameterType.FLOAT,
            default_value="1.0",
            optional=True,
        ),
    ]


def compute_gradients(z: np.ndarray, cellsize: float):
    """
    East and north components of the surface gradient.

    Args:
        z: Elevation grid, NaN for nodata
        cellsize: Grid resolution in map units

    Returns:
        Tuple (dz_deast, dz_dnorth)
    """
    if min(z.shape) < 2:
        raise ValueError("Grid must have at least 2 rows and 2 columns")
    dz_drow, dz_dcol = np.gradient(z, cellsize)
    return dz_dcol, -dz_drow


def compute_slope(z: np.ndarray, cellsize: float) -> np.ndarray:
    """Slope in degrees; NaN where any neighbour is nodata."""
    gx, gy = compute_gradients(z, cellsize)
    return np.degrees(np.arctan(np.hypot(gx, gy)))


def compute_aspect(z: np.ndarray, cellsize: float) -> np.ndarray:
    """Aspect in degrees clockwise from north; FLAT_ASPECT on flat cells."""
    gx, gy = compute_gradients(z, cellsize)
    aspect = np.mod(np.degrees(np.arctan2(-gx, -gy)), 360.0)
    flat = (gx == 0) & (gy == 0)
    aspect[flat] = FLAT_ASPECT
    return aspect


class _DemTool(Tool):
    """Shared read/compute/write flow for DEM derivative tools."""

    toolbox = TOOLBOX
    example_args = "--dem=DEM.asc -o=output.asc --zfactor=1.0"

    def get_parameters(self) -> List[ToolParameter]:
        return _dem_parameters()

    @abstractmethod
    def compute(self, z: np.ndarray, cellsize: float) -> np.ndarray:
        """
        Derive the output grid from elevations.

        Args:
            z: Elevation grid scaled by the z-factor, NaN for nodata
            cellsize: Grid resolution in map units

        Returns:
            Output grid with the same shape as z
        """
        pass

    def run(self, args: List[str], working_dir: str = "", verbose: bool = False) -> Optional[str]:
        values = self.parse_args(args, working_dir)
        start = time.time()

        self.report("Reading data...", verbose)
        dem = read_ascii_grid(values['dem'])

        z = dem.masked() * values['zfactor']
        result = self.compute(z, dem.cellsize)
        result[np.isnan(z)] = np.nan

        self.report("Saving data...", verbose)
        write_ascii_grid(values['output'], dem.with_data(result))

        elapsed = time.time() - start
        self.report(f"Elapsed Time: {elapsed:.3f}s", verbose)
        logger.info(f"{self.name} wrote {values['output']}")
        return None


class Slope(_DemTool):
    name = "Slope"
    description = "Calculates slope gradient (i.e., slope steepness in degrees) for each grid cell in an input digital elevation model (DEM)."

    def compute(self, z: np.ndarray, cellsize: float) -> np.ndarray:
        return compute_slope(z, cellsize)


class Aspect(_DemTool):
    name = "Aspect"
    description = "Calculates an aspect raster (degrees clockwise from north) from an input DEM."

    def compute(self, z: np.ndarray, cellsize: float) -> np.ndarray:
        return compute_aspect(z, cellsize)
