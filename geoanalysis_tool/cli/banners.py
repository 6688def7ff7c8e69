"""
Help, license and version text printed by the command-line front end.
"""
import os
import sys

from .. import __version__, __author__


def executable_name() -> str:
    """Name of the installed console script on this platform."""
    ext = ".exe" if sys.platform.startswith("win") else ""
    return f"geoanalysis-tool{ext}"


def help_text() -> str:
    sep = os.sep
    example_dir = f"{sep}path{sep}to{sep}data{sep}"
    return f"""GeoAnalysis Tool Help

The following commands are recognized:
--cd, --wd       Changes the working directory; used in conjunction with --run flag.
-h, --help       Prints help information.
-l, --license    Prints the license.
--listtools      Lists all available tools. Keywords may also be used, --listtools slope.
-r, --run        Runs a tool; used in conjunction with --wd flag; -r="Slope".
--toolbox        Prints the toolbox associated with a tool; --toolbox=Slope.
--toolhelp       Prints the help associated with a tool; --toolhelp="Slope".
--toolparameters Prints the parameters (in json form) for a specific tool; --toolparameters="Slope".
-v               Verbose mode. Without this flag, tool outputs will not be printed.
--viewcode       Opens the source code of a tool in a web browser; --viewcode="Slope".
--version        Prints the version information.

Example Usage:
>> {executable_name()} -r=Slope --cd="{example_dir}" --dem=DEM.asc -o=slope.asc -v
"""


def license_text() -> str:
    return f"""GeoAnalysis Tool License
Copyright {__author__}

Permission is hereby granted, free of charge, to any person obtaining a copy of this software and
associated documentation files (the "Software"), to deal in the Software without restriction,
including without limitation the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the Software is furnished to do so,
subject to the following conditions:

The above copyright notice and this permission notice shall be included in all copies or substantial
portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT
NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES
OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE."""


def version_text() -> str:
    return f"""GeoAnalysis Tool v{__version__} by {__author__}

GeoAnalysis Tool is a command-line geospatial analysis platform. Tools are
run by name with tool-specific arguments; use --listtools to see them."""
