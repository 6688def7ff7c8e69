"""
Data Models for Command Resolution

Core data structures passed between the tokenizer, the resolver and the
tool backend.
"""
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Set, Tuple


class ActionKind(Enum):
    """Actions that select a backend operation."""
    RUN_TOOL = "run_tool"
    TOOL_HELP = "tool_help"
    TOOL_PARAMETERS = "tool_parameters"
    TOOLBOX = "toolbox"
    LIST_TOOLS = "list_tools"
    VIEW_CODE = "view_code"


# Highest priority first; used when several action flags were given
ACTION_PRIORITY: Tuple[ActionKind, ...] = (
    ActionKind.RUN_TOOL,
    ActionKind.TOOL_HELP,
    ActionKind.TOOL_PARAMETERS,
    ActionKind.TOOLBOX,
    ActionKind.LIST_TOOLS,
    ActionKind.VIEW_CODE,
)


class Command:
    """Base class of the single resolved action for one invocation."""

    # Help, license and version end resolution without a backend
    terminal = False


@dataclass(frozen=True)
class ShowHelp(Command):
    terminal = True


@dataclass(frozen=True)
class ShowLicense(Command):
    terminal = True


@dataclass(frozen=True)
class ShowVersion(Command):
    terminal = True


@dataclass(frozen=True)
class RunTool(Command):
    name: str
    forwarded_args: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ToolHelp(Command):
    name: str


@dataclass(frozen=True)
class ToolParameters(Command):
    name: str


@dataclass(frozen=True)
class Toolbox(Command):
    """Toolbox lookup; an empty name lists every toolbox."""
    name: str = ""


@dataclass(frozen=True)
class ListTools(Command):
    """Tool listing; empty keywords list every tool."""
    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ViewCode(Command):
    name: str


@dataclass(frozen=True)
class DefaultListing(Command):
    """No arguments at all: version, help and the full tool listing."""


@dataclass(frozen=True)
class NoAction(Command):
    """
    Fall-through for arguments that carry flags but select no action.

    Only -v, a working directory or bare words were given. Dispatch still
    builds the backend, so a bad working directory is reported, but makes
    no backend call.
    """


@dataclass
class InvocationState:
    """Mutable accumulator filled while scanning argument tokens."""
    working_dir: str = ""
    verbose: bool = False
    pending_tool_name: str = ""
    forwarded_args: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    awaiting_working_dir_value: bool = False
    pending_actions: Set[ActionKind] = field(default_factory=set)

    def mark_action(self, action: ActionKind):
        """Record an action flag; the resolver picks one by priority."""
        self.pending_actions.add(action)

    def selected_action(self):
        """Highest-priority pending action, or None."""
        for action in ACTION_PRIORITY:
            if action in self.pending_actions:
                return action
        return None

    def tool_name_or_first_keyword(self) -> str:
        """Pending tool name, falling back to the first keyword."""
        if not self.pending_tool_name and self.keywords:
            return self.keywords[0]
        return self.pending_tool_name

    def normalize_working_dir(self, sep: str = os.sep):
        """Make a non-empty working directory end with exactly one separator."""
        if not self.working_dir:
            return
        trailing = sep + (os.altsep or '') if sep == os.sep else sep
        self.working_dir = self.working_dir.rstrip(trailing) + sep


@dataclass(frozen=True)
class Resolution:
    """Resolved command plus the state it was resolved from."""
    command: Command
    state: InvocationState
