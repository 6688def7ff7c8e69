"""
Tool Manager

Registry of available tools and the operations the command-line front end
dispatches to: run a tool, print its help, parameters or toolbox, list
tools, and locate a tool's source code.
"""
from pathlib import Path
from typing import Dict, Iterable, List, Optional
import inspect
import logging
import webbrowser

from ..config.settings import get_settings
from .base_tool import Tool
from .errors import ConstructionError, DispatchError


logger = logging.getLogger(__name__)


def normalize_tool_name(name: str) -> str:
    """Tool names compare case-insensitively, ignoring '_' and '-'."""
    return name.replace('_', '').replace('-', '').lower()


def get_default_tools() -> List[Tool]:
    """Instances of every built-in tool."""
    from .terrain import Slope, Aspect
    from .statistics import RasterSummaryStats
    return [Slope(), Aspect(), RasterSummaryStats()]


class ToolManager:
    """Tool registry bound to one working directory and verbosity."""

    def __init__(
        self,
        working_dir: str = "",
        verbose: bool = False,
        tools: Optional[Iterable[Tool]] = None,
        open_browser: Optional[bool] = None
    ):
        """
        Initialize the manager.

        Args:
            working_dir: Directory for bare file names; empty means the
                current directory
            verbose: Let tools print progress messages
            tools: Tools to register, defaults to the built-in set
            open_browser: Open --viewcode targets in a browser, defaults to
                settings

        Raises:
            ConstructionError: working_dir is set but is not a directory
        """
        if working_dir and not Path(working_dir).is_dir():
            raise ConstructionError(f"Working directory does not exist: {working_dir}")

        self.working_dir = working_dir
        self.verbose = verbose
        if open_browser is None:
            open_browser = get_settings().backend.open_browser
        self.open_browser = open_browser

        self.tools: Dict[str, Tool] = {}
        for tool in (get_default_tools() if tools is None else tools):
            self.tools[normalize_tool_name(tool.name)] = tool
        logger.debug(f"Registered {len(self.tools)} tools, working dir {working_dir!r}")

    def get_tool(self, name: str) -> Tool:
        """
        Look up a tool by name.

        Raises:
            DispatchError: no name given or no such tool
        """
        if not name:
            raise DispatchError("No tool name specified")
        tool = self.tools.get(normalize_tool_name(name))
        if tool is None:
            raise DispatchError(f"Unrecognized tool name {name}")
        return tool

    def _sorted_tools(self) -> List[Tool]:
        return sorted(self.tools.values(), key=lambda t: t.name)

    def run_tool(self, name: str, args: List[str]) -> Optional[str]:
        """
        Run a tool with forwarded arguments.

        Raises:
            DispatchError: unknown tool, bad arguments, or the tool failed
        """
        tool = self.get_tool(name)
        logger.info(f"Running {tool.name} with {args}")
        try:
            return tool.run(list(args), self.working_dir, self.verbose)
        except (OSError, ValueError) as e:
            raise DispatchError(f"{tool.name} failed: {e}") from e

    def tool_help(self, name: str) -> str:
        return self.get_tool(name).get_help()

    def tool_parameters(self, name: str) -> str:
        return self.get_tool(name).get_parameters_json()

    def toolbox(self, name: str = "") -> str:
        """Toolbox of one tool, or every toolbox name when name is empty."""
        if not name:
            return "\n".join(sorted({tool.toolbox for tool in self.tools.values()}))
        return self.get_tool(name).toolbox

    def list_tools(self) -> str:
        tools = self._sorted_tools()
        lines = [f"All {len(tools)} Available Tools:"]
        lines.extend(f"{tool.name}: {tool.description}" for tool in tools)
        return "\n".join(lines)

    def list_tools_with_keywords(self, keywords: List[str]) -> str:
        """List tools whose name or description contains any keyword."""
        wanted = [kw.lower() for kw in keywords if kw]
        matches = [
            tool for tool in self._sorted_tools()
            if any(kw in tool.name.lower() or kw in tool.description.lower() for kw in wanted)
        ]
        lines = [f"{len(matches)} Tools containing keywords:"]
        lines.extend(f"{tool.name}: {tool.description}" for tool in matches)
        return "\n".join(lines)

    def get_tool_source_code(self, name: str) -> str:
        """
        Locate a tool's source file and open it in a browser if enabled.

        Returns:
            file:// URI of the source file
        """
        tool = self.get_tool(name)
        source = inspect.getsourcefile(type(tool))
        if source is None:
            raise DispatchError(f"Source code for {tool.name} is not available")

        uri = Path(source).resolve().as_uri()
        if self.open_browser:
            logger.info(f"Opening {uri}")
            webbrowser.open(uri)
        return uri
