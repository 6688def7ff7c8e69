#!/usr/bin/env python3
"""
Launch the GeoAnalysis Tool CLI
Usage:
    python run_cli.py --listtools
    python run_cli.py --toolhelp=Slope
    python run_cli.py --wd=./data --run=Slope --dem=DEM.asc -o=slope.asc -v
"""
import sys
import os

# Add the package to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from geoanalysis_tool.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
