"""
Math and Stats Tools
"""
from typing import List, Optional
import logging

import pandas as pd

from ..raster import read_ascii_grid
from .base_tool import Tool, ToolParameter, ParameterType


logger = logging.getLogger(__name__)


def summarize_values(values) -> pd.Series:
    """Count, mean, std, min, quartiles and max of the valid cells."""
    return pd.Series(values, name='value', dtype='float64').describe()


class RasterSummaryStats(Tool):
    """Summary statistics of all valid cells in a raster."""

    name = "RasterSummaryStats"
    description = "Measures a rasters min, max, average, standard deviation, num. non-nodata cells, and total."
    toolbox = "Math and Stats Tools"
    example_args = "-i=DEM.asc --output=stats.csv"

    def get_parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="Input File",
                flags=["-i", "--input"],
                description="Input raster file.",
                parameter_type=ParameterType.EXISTING_FILE,
            ),
            ToolParameter(
                name="Output CSV File",
                flags=["-o", "--output"],
                description="Optional CSV file receiving the statistics.",
                parameter_type=ParameterType.NEW_FILE,
                optional=True,
            ),
        ]

    def run(self, args: List[str], working_dir: str = "", verbose: bool = False) -> Optional[str]:
        values = self.parse_args(args, working_dir)

        self.report("Reading data...", verbose)
        raster = read_ascii_grid(values['input'])
        valid = raster.valid_values()

        stats = summarize_values(valid)
        stats['total'] = float(valid.sum())

        if values['output']:
            stats.to_frame().to_csv(values['output'], index_label='statistic')
            logger.info(f"Statistics written to {values['output']}")

        lines = [f"{key:<8}{value:>16.5f}" for key, value in stats.items()]
        return "\n".join([f"Summary statistics for {raster.rows}x{raster.columns} raster:"] + lines)
