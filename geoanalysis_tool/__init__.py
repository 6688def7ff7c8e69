"""
GeoAnalysis Tool
================
Command-line front end for running geospatial analysis tools.

Features:
- Argument resolution into a single command (run, help, listing, ...)
- Tool registry with per-tool help, parameter JSON and toolbox lookup
- Built-in raster tools on Esri ASCII grids (Slope, Aspect, RasterSummaryStats)
"""

__version__ = "1.0.0"
__author__ = "GeoAnalysis Tools"
