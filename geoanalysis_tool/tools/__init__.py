"""
Tools Package

Tool registry (the backend the command-line front end dispatches to) and
the built-in tools.
"""
from .errors import (
    ToolBackendError,
    ConstructionError,
    DispatchError,
    ToolArgumentError
)

from .base_tool import (
    Tool,
    ToolParameter,
    ParameterType,
    parse_tool_args
)

from .manager import (
    ToolManager,
    get_default_tools,
    normalize_tool_name
)

from .terrain import Slope, Aspect, compute_slope, compute_aspect
from .statistics import RasterSummaryStats, summarize_values

__all__ = [
    # Errors
    'ToolBackendError',
    'ConstructionError',
    'DispatchError',
    'ToolArgumentError',

    # Base
    'Tool',
    'ToolParameter',
    'ParameterType',
    'parse_tool_args',

    # Registry
    'ToolManager',
    'get_default_tools',
    'normalize_tool_name',

    # Built-in tools
    'Slope',
    'Aspect',
    'compute_slope',
    'compute_aspect',
    'RasterSummaryStats',
    'summarize_values',
]
