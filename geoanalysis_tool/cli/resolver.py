"""
Invocation Resolver

Folds classified argument tokens into a single Command and dispatches it to
the tool backend.

Resolution rules:
    - help, license and version end the scan immediately
    - no arguments at all resolve to DefaultListing
    - several action flags: run > toolhelp > toolparameters > toolbox
      > listtools > viewcode
    - a missing tool name falls back to the first keyword
    - working directory and tool name: last occurrence wins
"""
from enum import Enum
from typing import Any, Callable, Optional, Sequence
import logging

from ..config.models import (
    ActionKind,
    Command,
    DefaultListing,
    InvocationState,
    ListTools,
    NoAction,
    Resolution,
    RunTool,
    ShowHelp,
    ShowLicense,
    ShowVersion,
    ToolHelp,
    ToolParameters,
    Toolbox,
    ViewCode,
)
from ..config.settings import is_omitted_value
from .tokenizer import Token, TokenKind, Tokenizer
from . import banners


logger = logging.getLogger(__name__)


class BareTokenRole(Enum):
    """What a bare (non-flag) token becomes in the current state."""
    WORKING_DIR_VALUE = "working_dir_value"
    KEYWORD = "keyword"
    KEYWORD_AND_TOOL_ARG = "keyword_and_tool_arg"


TERMINAL_COMMANDS = {
    TokenKind.HELP: ShowHelp,
    TokenKind.LICENSE: ShowLicense,
    TokenKind.VERSION: ShowVersion,
}

NAMED_ACTIONS = {
    TokenKind.RUN_TOOL: ActionKind.RUN_TOOL,
    TokenKind.TOOL_HELP: ActionKind.TOOL_HELP,
    TokenKind.TOOL_PARAMETERS: ActionKind.TOOL_PARAMETERS,
    TokenKind.TOOLBOX: ActionKind.TOOLBOX,
    TokenKind.VIEW_CODE: ActionKind.VIEW_CODE,
}


def bare_token_role(state: InvocationState) -> BareTokenRole:
    """Decide the role of the next bare token from the accumulated state."""
    if state.awaiting_working_dir_value:
        return BareTokenRole.WORKING_DIR_VALUE
    if state.forwarded_args:
        return BareTokenRole.KEYWORD_AND_TOOL_ARG
    return BareTokenRole.KEYWORD


class InvocationResolver:
    """
    Resolves an argument list into one Command.

    Resolution is a pure function of the tokens: a fresh InvocationState is
    built on every call.
    """

    def __init__(self, program_name: Optional[str] = None):
        self.tokenizer = Tokenizer(program_name)

    def resolve(self, args: Sequence[str]) -> Resolution:
        """
        Resolve arguments (without argv[0]) into a Command.

        Args:
            args: Raw argument tokens following the program name

        Returns:
            Resolution with the command and the final invocation state
        """
        state = InvocationState()

        if not args:
            return Resolution(DefaultListing(), state)

        for raw in args:
            token = self.tokenizer.classify(raw)
            logger.debug(f"Token {raw!r} -> {token.kind.value}")

            if token.kind in TERMINAL_COMMANDS:
                return Resolution(TERMINAL_COMMANDS[token.kind](), state)

            self._apply(state, token)

        state.normalize_working_dir()
        return Resolution(self._select_command(state), state)

    def _apply(self, state: InvocationState, token: Token):
        """Apply one non-terminal token to the state."""
        kind = token.kind

        if kind == TokenKind.WORKING_DIR:
            if token.value:
                state.working_dir = token.value
            else:
                state.awaiting_working_dir_value = True

        elif kind in NAMED_ACTIONS:
            state.pending_tool_name = token.value
            state.mark_action(NAMED_ACTIONS[kind])

        elif kind == TokenKind.LIST_TOOLS:
            state.mark_action(ActionKind.LIST_TOOLS)

        elif kind == TokenKind.VERBOSE:
            state.verbose = True

        elif kind == TokenKind.TOOL_ARG:
            state.forwarded_args.append(token.value)

        elif kind == TokenKind.OMITTED_TOOL_ARG:
            logger.debug(f"Dropping omitted-value argument {token.raw!r}")

        elif kind == TokenKind.BARE:
            self._apply_bare(state, token)

    def _apply_bare(self, state: InvocationState, token: Token):
        role = bare_token_role(state)

        if role == BareTokenRole.WORKING_DIR_VALUE:
            state.working_dir = token.value
            state.awaiting_working_dir_value = False
            return

        if self.tokenizer.is_program_name(token.raw):
            logger.debug(f"Not collecting program name {token.raw!r} as a keyword")
        else:
            state.keywords.append(token.value)
        if role == BareTokenRole.KEYWORD_AND_TOOL_ARG and not is_omitted_value(token.raw):
            state.forwarded_args.append(token.raw)

    def _select_command(self, state: InvocationState) -> Command:
        """Pick the command for the highest-priority pending action."""
        action = state.selected_action()

        if action is None:
            return NoAction()
        if action == ActionKind.LIST_TOOLS:
            return ListTools(tuple(state.keywords))

        name = state.tool_name_or_first_keyword()
        if action == ActionKind.RUN_TOOL:
            return RunTool(name, tuple(state.forwarded_args))
        if action == ActionKind.TOOL_HELP:
            return ToolHelp(name)
        if action == ActionKind.TOOL_PARAMETERS:
            return ToolParameters(name)
        if action == ActionKind.TOOLBOX:
            return Toolbox(name)
        return ViewCode(name)


def dispatch(
    resolution: Resolution,
    backend_factory: Optional[Callable[..., Any]] = None
) -> Any:
    """
    Carry out a resolved command.

    Terminal commands print their banner. Every other command constructs the
    backend once from the working directory and verbosity, then makes exactly
    one backend call whose result is returned unchanged.

    Raises:
        ConstructionError: backend could not be built
        DispatchError: backend operation failed
    """
    command = resolution.command
    state = resolution.state

    if isinstance(command, ShowHelp):
        print(banners.help_text())
        return None
    if isinstance(command, ShowLicense):
        print(banners.license_text())
        return None
    if isinstance(command, ShowVersion):
        print(banners.version_text())
        return None

    if backend_factory is None:
        from ..tools.manager import ToolManager
        backend_factory = ToolManager

    if isinstance(command, DefaultListing):
        print(banners.version_text())
        print(banners.help_text())

    backend = backend_factory(state.working_dir, state.verbose)

    if isinstance(command, DefaultListing):
        return backend.list_tools()
    elif isinstance(command, RunTool):
        return backend.run_tool(command.name, list(command.forwarded_args))
    elif isinstance(command, ToolHelp):
        return backend.tool_help(command.name)
    elif isinstance(command, ToolParameters):
        return backend.tool_parameters(command.name)
    elif isinstance(command, Toolbox):
        return backend.toolbox(command.name)
    elif isinstance(command, ListTools):
        if command.keywords:
            return backend.list_tools_with_keywords(list(command.keywords))
        return backend.list_tools()
    elif isinstance(command, ViewCode):
        return backend.get_tool_source_code(command.name)

    logger.info("No action requested; see --help for usage")
    return None
