"""
GeoAnalysis Tool Configuration Settings
"""
from dataclasses import dataclass, field
from typing import Tuple


# Upstream GIS plugins pass a huge negative float as the default of
# numeric parameters the user left blank.
OMITTED_VALUE_SENTINEL = '-17976931348623157'


@dataclass
class CliConfig:
    """Command-line flag aliases and token conventions."""
    # Compared against the lower-cased token with '--' collapsed to '-'
    help_aliases: Tuple[str, ...] = ('-h', '-help')

    # Long aliases (and '-r') match by prefix; short aliases only exactly or before '='
    working_dir_aliases: Tuple[str, ...] = ('--cd', '--wd', '-cd', '-wd')
    run_aliases: Tuple[str, ...] = ('--run', '-run', '-r')
    tool_help_aliases: Tuple[str, ...] = ('--toolhelp', '-toolhelp')
    tool_parameters_aliases: Tuple[str, ...] = ('--toolparameters', '-toolparameters')
    toolbox_aliases: Tuple[str, ...] = ('--toolbox', '-toolbox')
    list_tools_aliases: Tuple[str, ...] = (
        '--listtools', '-listtools', '--list_tools', '-list_tools'
    )
    view_code_aliases: Tuple[str, ...] = ('--viewcode', '-viewcode')
    license_aliases: Tuple[str, ...] = ('--license', '--licence', '-license', '-licence')
    license_short_aliases: Tuple[str, ...] = ('-l',)
    version_aliases: Tuple[str, ...] = ('--version', '-version')
    version_short_aliases: Tuple[str, ...] = ('-V',)
    verbose_flag: str = '-v'

    quote_chars: str = '"\''

    omitted_value_sentinel: str = OMITTED_VALUE_SENTINEL


@dataclass
class LoggingConfig:
    """Logging configuration."""
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    level: str = 'WARNING'
    verbose_level: str = 'INFO'


@dataclass
class BackendConfig:
    """Tool backend configuration."""
    open_browser: bool = True
    decimal_places: int = 5
    default_nodata: float = -9999.0


@dataclass
class Settings:
    """Main settings container."""
    cli: CliConfig = field(default_factory=CliConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    backend: BackendConfig = field(default_factory=BackendConfig)


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings


def strip_quotes(value: str) -> str:
    """Remove every quote character from a value."""
    for quote in settings.cli.quote_chars:
        value = value.replace(quote, '')
    return value


def is_omitted_value(token: str) -> bool:
    """Check if a token carries the 'no value supplied' sentinel."""
    return settings.cli.omitted_value_sentinel in token
