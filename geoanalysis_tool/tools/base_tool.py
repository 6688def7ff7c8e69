"""
Base Tool Module

Abstract base class for all tools in the registry, plus the parsing of
forwarded tool arguments.

Accepted argument forms:
    -i=DEM.asc      --dem=DEM.asc      --dem DEM.asc      --dem="DEM.asc"
    --flag          (boolean parameters)
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence
import json
import logging
import os
import re

from ..config.settings import is_omitted_value, strip_quotes
from .errors import ToolArgumentError


logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r'^-?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$')


class ParameterType(Enum):
    """Kinds of tool parameter values."""
    EXISTING_FILE = "ExistingFile"
    NEW_FILE = "NewFile"
    FLOAT = "Float"
    INTEGER = "Integer"
    BOOLEAN = "Boolean"
    STRING = "String"


@dataclass
class ToolParameter:
    """Description of one tool parameter."""
    name: str
    flags: List[str]
    description: str
    parameter_type: ParameterType
    default_value: Optional[str] = None
    optional: bool = False

    @property
    def key(self) -> str:
        """Keyword used for the parsed value, from the last (long) flag."""
        return self.flags[-1].lstrip('-')

    def matches(self, flag: str) -> bool:
        """Flags compare case-insensitively with '--' treated as '-'."""
        wanted = flag.lower().replace('--', '-')
        return any(f.lower().replace('--', '-') == wanted for f in self.flags)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'flags': list(self.flags),
            'description': self.description,
            'parameter_type': self.parameter_type.value,
            'default_value': self.default_value,
            'optional': self.optional,
        }


def _looks_like_value(token: str) -> bool:
    return not token.startswith('-') or bool(NUMBER_PATTERN.match(token))


def _convert(param: ToolParameter, value: Any, working_dir: str) -> Any:
    """Convert a raw string value to the parameter's type."""
    ptype = param.parameter_type

    if ptype == ParameterType.BOOLEAN:
        if isinstance(value, bool):
            return value
        lowered = str(value).lower()
        if lowered in ('true', 't', 'yes', '1'):
            return True
        if lowered in ('false', 'f', 'no', '0'):
            return False
        raise ToolArgumentError(f"{param.name}: expected true/false, got {value!r}")

    if isinstance(value, bool):
        raise ToolArgumentError(f"{param.name} ({param.flags[-1]}) requires a value")

    if ptype == ParameterType.FLOAT:
        try:
            return float(value)
        except ValueError:
            raise ToolArgumentError(f"{param.name}: expected a number, got {value!r}")

    if ptype == ParameterType.INTEGER:
        try:
            return int(value)
        except ValueError:
            raise ToolArgumentError(f"{param.name}: expected an integer, got {value!r}")

    if ptype in (ParameterType.EXISTING_FILE, ParameterType.NEW_FILE):
        # Bare file names live in the working directory
        if working_dir and not os.path.dirname(value):
            return os.path.join(working_dir, value)
        return value

    return value


def parse_tool_args(
    parameters: Sequence[ToolParameter],
    args: Sequence[str],
    working_dir: str = ""
) -> Dict[str, Any]:
    """
    Map forwarded arguments onto tool parameters.

    Args:
        parameters: Parameters the tool accepts
        args: Forwarded argument tokens
        working_dir: Directory prepended to bare file names

    Returns:
        Dictionary of parameter key -> converted value

    Raises:
        ToolArgumentError: unknown value types or missing required parameters
    """
    raw_values: Dict[str, Any] = {}
    i = 0
    while i < len(args):
        token = args[i].strip()
        i += 1

        if is_omitted_value(token):
            continue
        if not token.startswith('-'):
            logger.warning(f"Ignoring stray tool argument {token!r}")
            continue

        if '=' in token:
            flag, value = token.split('=', 1)
        elif i < len(args) and _looks_like_value(args[i].strip()):
            flag, value = token, args[i].strip()
            i += 1
        else:
            flag, value = token, True

        param = next((p for p in parameters if p.matches(flag)), None)
        if param is None:
            logger.warning(f"Ignoring unrecognized tool flag {flag!r}")
            continue

        if isinstance(value, str):
            value = strip_quotes(value).strip()
            if is_omitted_value(value):
                continue
        raw_values[param.key] = value

    values: Dict[str, Any] = {}
    for param in parameters:
        if param.key in raw_values:
            values[param.key] = _convert(param, raw_values[param.key], working_dir)
        elif param.default_value is not None:
            values[param.key] = _convert(param, param.default_value, working_dir)
        elif param.optional:
            values[param.key] = None
        else:
            raise ToolArgumentError(
                f"Missing required parameter {param.name} ({', '.join(param.flags)})"
            )
    return values


class Tool(ABC):
    """Abstract base class for tools."""

    name: str = ""
    description: str = ""
    toolbox: str = ""
    example_args: str = ""

    @abstractmethod
    def get_parameters(self) -> List[ToolParameter]:
        """
        Describe the parameters this tool accepts.

        Returns:
            List of ToolParameter objects
        """
        pass

    @abstractmethod
    def run(self, args: List[str], working_dir: str = "", verbose: bool = False) -> Optional[str]:
        """
        Run the tool.

        Args:
            args: Forwarded tool arguments
            working_dir: Working directory ending with a separator, or empty
            verbose: Print progress messages

        Returns:
            Optional text report for the caller to print
        """
        pass

    def parse_args(self, args: Sequence[str], working_dir: str = "") -> Dict[str, Any]:
        return parse_tool_args(self.get_parameters(), args, working_dir)

    def get_parameters_json(self) -> str:
        """Parameters as JSON: {"parameters": [...]}"""
        return json.dumps(
            {'parameters': [p.to_dict() for p in self.get_parameters()]},
            indent=2
        )

    def get_example_usage(self) -> str:
        from ..cli.banners import executable_name
        sep = os.sep
        return (
            f">> {executable_name()} -r={self.name} -v "
            f"--wd=\"{sep}path{sep}to{sep}data{sep}\" {self.example_args}"
        ).rstrip()

    def get_help(self) -> str:
        """Formatted help: description, toolbox, parameter table, example."""
        rows = [(', '.join(p.flags), p.description) for p in self.get_parameters()]
        width = max([len('Flag')] + [len(flags) for flags, _ in rows]) + 2

        lines = [
            self.name,
            "Description:",
            self.description,
            f"Toolbox: {self.toolbox}",
            "Parameters:",
            "",
            f"{'Flag':<{width}}Description",
            f"{'-' * (width - 2):<{width}}{'-' * len('Description')}",
        ]
        lines.extend(f"{flags:<{width}}{desc}" for flags, desc in rows)
        lines.extend(["", "Example usage:", self.get_example_usage()])
        return "\n".join(lines)

    def report(self, message: str, verbose: bool):
        """Print a progress message in verbose mode."""
        if verbose:
            print(message)
        logger.debug(f"{self.name}: {message}")
