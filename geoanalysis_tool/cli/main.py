"""
GeoAnalysis Tool - Main Entry Point

Command-line interface for the geoanalysis tool.

Examples:
  # Run a tool
  geoanalysis-tool --wd="/data/" --run=Slope --dem=DEM.asc -o=slope.asc -v

  # List tools matching keywords
  geoanalysis-tool --listtools slope aspect

  # Show the parameters of a tool as JSON
  geoanalysis-tool --toolparameters=Slope
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config.settings import get_settings
from ..config.settings_manager import get_settings_manager
from ..tools.errors import ToolBackendError
from .resolver import InvocationResolver, dispatch


logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False):
    """Configure root logging; -v lowers the threshold to the verbose level."""
    cfg = get_settings().logging
    level_name = cfg.verbose_level if verbose else cfg.level
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=cfg.format
    )


def main(argv: Optional[List[str]] = None, program_name: Optional[str] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Arguments following the program name; defaults to sys.argv[1:]
        program_name: Invocation name; defaults to sys.argv[0]

    Returns:
        Process exit status: 0 on success, 1 when the backend fails
    """
    if argv is None:
        argv = sys.argv[1:]
    if program_name is None:
        program_name = Path(sys.argv[0]).name if sys.argv else None

    get_settings_manager().apply_to(get_settings())

    resolver = InvocationResolver(program_name)
    resolution = resolver.resolve(argv)
    configure_logging(resolution.state.verbose)
    logger.debug(f"Resolved {resolution.command}")

    try:
        result = dispatch(resolution)
    except ToolBackendError as e:
        logger.debug(f"{type(e).__name__} while dispatching", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if isinstance(result, str) and result:
        print(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
