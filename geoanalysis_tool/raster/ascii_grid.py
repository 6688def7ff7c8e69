"""
Esri ASCII Grid Reader/Writer

File Format:
    ncols         4
    nrows         3
    xllcorner     500000.0
    yllcorner     4100000.0
    cellsize      10.0
    NODATA_value  -9999
    z z z z          (nrows lines of ncols values, north row first)

xllcenter/yllcenter are accepted in place of the corner keys and converted
to corner coordinates.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple
import logging

import numpy as np

from ..config.settings import get_settings


logger = logging.getLogger(__name__)

REQUIRED_KEYS = ('ncols', 'nrows', 'cellsize')
HEADER_KEYS = (
    'ncols', 'nrows', 'xllcorner', 'yllcorner', 'xllcenter', 'yllcenter',
    'cellsize', 'nodata_value'
)


@dataclass
class Raster:
    """In-memory raster with Esri ASCII grid georeferencing."""
    data: np.ndarray
    cellsize: float
    xllcorner: float = 0.0
    yllcorner: float = 0.0
    nodata: float = -9999.0

    @property
    def rows(self) -> int:
        return self.data.shape[0]

    @property
    def columns(self) -> int:
        return self.data.shape[1]

    def masked(self) -> np.ndarray:
        """Return values as float64 with nodata cells set to NaN."""
        values = self.data.astype(np.float64)
        values[values == self.nodata] = np.nan
        return values

    def valid_values(self) -> np.ndarray:
        """Flat array of all cells that are not nodata."""
        values = self.masked()
        return values[~np.isnan(values)]

    def with_data(self, values: np.ndarray) -> 'Raster':
        """New raster on the same grid; NaN cells become nodata."""
        out = np.where(np.isnan(values), self.nodata, values)
        return Raster(out, self.cellsize, self.xllcorner, self.yllcorner, self.nodata)


def _read_header(lines: List[str]) -> Tuple[Dict[str, float], int]:
    """Parse header key/value lines; returns the header and its line count."""
    header = {}
    count = 0
    for line in lines:
        parts = line.split()
        if len(parts) != 2 or parts[0].lower() not in HEADER_KEYS:
            break
        header[parts[0].lower()] = float(parts[1])
        count += 1

    missing = [key for key in REQUIRED_KEYS if key not in header]
    if missing:
        raise ValueError(f"ASCII grid header missing {', '.join(missing)}")
    return header, count


def _lower_left(header: Dict[str, float], axis: str, cellsize: float) -> float:
    """Lower-left corner coordinate from either corner or center keys."""
    if f'{axis}llcorner' in header:
        return header[f'{axis}llcorner']
    if f'{axis}llcenter' in header:
        return header[f'{axis}llcenter'] - cellsize / 2
    return 0.0


def read_ascii_grid(filepath: str) -> Raster:
    """
    Read an Esri ASCII grid.

    Args:
        filepath: Path to the .asc file

    Returns:
        Raster with the grid values

    Raises:
        OSError: file cannot be read
        ValueError: malformed header or data block
    """
    with open(filepath, 'r', encoding='latin-1') as f:
        lines = f.readlines()

    header, header_len = _read_header(lines[:len(HEADER_KEYS)])
    nrows = int(header['nrows'])
    ncols = int(header['ncols'])
    cellsize = header['cellsize']

    data = np.loadtxt(lines[header_len:], dtype=np.float64, ndmin=2)
    if data.shape != (nrows, ncols):
        raise ValueError(
            f"{Path(filepath).name}: expected {nrows}x{ncols} cells, "
            f"found {data.shape[0]}x{data.shape[1]}"
        )

    xll = _lower_left(header, 'x', cellsize)
    yll = _lower_left(header, 'y', cellsize)
    nodata = header.get('nodata_value', get_settings().backend.default_nodata)

    logger.debug(f"Read {nrows}x{ncols} grid from {filepath}")
    return Raster(data, cellsize, xll, yll, nodata)


def write_ascii_grid(filepath: str, raster: Raster, decimal_places: int = None):
    """
    Write a raster as an Esri ASCII grid.

    Args:
        filepath: Output file path
        raster: Raster to write
        decimal_places: Digits after the decimal point, defaults to settings
    """
    if decimal_places is None:
        decimal_places = get_settings().backend.decimal_places

    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(f"ncols         {raster.columns}\n")
        f.write(f"nrows         {raster.rows}\n")
        f.write(f"xllcorner     {raster.xllcorner}\n")
        f.write(f"yllcorner     {raster.yllcorner}\n")
        f.write(f"cellsize      {raster.cellsize}\n")
        f.write(f"NODATA_value  {raster.nodata}\n")
        np.savetxt(f, raster.data, fmt=f"%.{decimal_places}f")

    logger.debug(f"Wrote {raster.rows}x{raster.columns} grid to {filepath}")
