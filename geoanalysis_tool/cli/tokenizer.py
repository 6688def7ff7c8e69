"""
Argument Tokenizer

Classifies one raw command-line token at a time and extracts its inline
value. The tokenizer holds no per-invocation state; the resolver decides
what a classified token means in context.

Token rules, checked in order:
    -h / --help            any case, '--' treated as '-'
    --cd / --wd            working directory, '=value' or next bare token
    -r / --run             run tool, '=name' or inline ('-rSlope')
    --toolhelp, --toolparameters, --toolbox, --viewcode   '=name'
    --listtools            list tools
    -l / --license         license text
    -V / --version         version text
    -v                     verbose
    -anything-else         forwarded to the tool
    bare                   keyword (or working directory / tool value)
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple
import logging

from ..config.settings import get_settings, is_omitted_value, strip_quotes


logger = logging.getLogger(__name__)


class TokenKind(Enum):
    """Classification of a single argument token."""
    HELP = "help"
    LICENSE = "license"
    VERSION = "version"
    WORKING_DIR = "working_dir"
    RUN_TOOL = "run_tool"
    TOOL_HELP = "tool_help"
    TOOL_PARAMETERS = "tool_parameters"
    TOOLBOX = "toolbox"
    LIST_TOOLS = "list_tools"
    VIEW_CODE = "view_code"
    VERBOSE = "verbose"
    TOOL_ARG = "tool_arg"
    OMITTED_TOOL_ARG = "omitted_tool_arg"
    BARE = "bare"


@dataclass(frozen=True)
class Token:
    """
    A classified token.

    value holds the extracted inline value for flags that carry one, the
    trimmed token for TOOL_ARG, and the quote-stripped text for BARE.
    raw is the trimmed original token.
    """
    kind: TokenKind
    raw: str
    value: str = ""


def extract_value(remainder: str) -> str:
    """Strip quote characters, then a leading '=', from the text after an alias."""
    value = strip_quotes(remainder)
    if value.startswith('='):
        value = value[1:]
    return value.strip()


def match_alias(
    token: str,
    aliases: Iterable[str] = (),
    short_aliases: Iterable[str] = ()
) -> Optional[str]:
    """
    Match a token against flag aliases.

    Long aliases match as a prefix of the token. Short aliases match only
    the whole token or the alias followed by '='.

    Returns:
        Text following the matched alias, or None if nothing matched
    """
    for alias in aliases:
        if token.startswith(alias):
            return token[len(alias):]
    for alias in short_aliases:
        if token == alias or token.startswith(alias + '='):
            return token[len(alias):]
    return None


class Tokenizer:
    """Classifier for raw argument tokens."""

    def __init__(self, program_name: Optional[str] = None):
        """
        Initialize the tokenizer.

        Args:
            program_name: Name the process was invoked as. Bare tokens
                equal to it are not collected as keywords.
        """
        self.config = get_settings().cli
        self.program_name = program_name or ""

        # (kind, prefix aliases, short aliases) for flags carrying a tool name
        self._named_actions: Tuple[Tuple[TokenKind, Tuple[str, ...], Tuple[str, ...]], ...] = (
            (TokenKind.RUN_TOOL, self.config.run_aliases, ()),
            (TokenKind.TOOL_HELP, self.config.tool_help_aliases, ()),
            (TokenKind.TOOL_PARAMETERS, self.config.tool_parameters_aliases, ()),
            (TokenKind.TOOLBOX, self.config.toolbox_aliases, ()),
        )

    def is_help(self, token: str) -> bool:
        """Help is the only case-insensitive flag."""
        folded = token.lower().replace('--', '-')
        return folded in self.config.help_aliases

    def is_program_name(self, token: str) -> bool:
        return bool(self.program_name) and token == self.program_name

    def classify(self, raw: str) -> Token:
        """
        Classify a single raw token.

        Args:
            raw: Token as received from the command line

        Returns:
            Token with its kind and extracted value
        """
        token = raw.strip()
        cfg = self.config

        if self.is_help(token):
            return Token(TokenKind.HELP, token)

        remainder = match_alias(token, cfg.working_dir_aliases)
        if remainder is not None:
            return Token(TokenKind.WORKING_DIR, token, extract_value(remainder))

        for kind, aliases, short_aliases in self._named_actions:
            remainder = match_alias(token, aliases, short_aliases)
            if remainder is not None:
                return Token(kind, token, extract_value(remainder))

        if match_alias(token, cfg.list_tools_aliases) is not None:
            return Token(TokenKind.LIST_TOOLS, token)

        remainder = match_alias(token, cfg.view_code_aliases)
        if remainder is not None:
            return Token(TokenKind.VIEW_CODE, token, extract_value(remainder))

        if match_alias(token, cfg.license_aliases, cfg.license_short_aliases) is not None:
            return Token(TokenKind.LICENSE, token)

        if match_alias(token, cfg.version_aliases, cfg.version_short_aliases) is not None:
            return Token(TokenKind.VERSION, token)

        if token == cfg.verbose_flag:
            return Token(TokenKind.VERBOSE, token)

        if token.startswith('-'):
            if is_omitted_value(token):
                return Token(TokenKind.OMITTED_TOOL_ARG, token)
            return Token(TokenKind.TOOL_ARG, token, token)

        return Token(TokenKind.BARE, token, strip_quotes(token))
