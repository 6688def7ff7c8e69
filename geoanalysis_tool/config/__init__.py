"""
Config Package

Configuration and data models for the geoanalysis tool.
"""
from .settings import (
    get_settings,
    Settings,
    CliConfig,
    LoggingConfig,
    BackendConfig,
    OMITTED_VALUE_SENTINEL,
    is_omitted_value,
    strip_quotes
)

from .settings_manager import (
    SettingsManager,
    get_settings_manager
)

from .models import (
    ActionKind,
    ACTION_PRIORITY,
    Command,
    ShowHelp,
    ShowLicense,
    ShowVersion,
    RunTool,
    ToolHelp,
    ToolParameters,
    Toolbox,
    ListTools,
    ViewCode,
    DefaultListing,
    NoAction,
    InvocationState,
    Resolution
)

__all__ = [
    # Settings
    'get_settings',
    'Settings',
    'CliConfig',
    'LoggingConfig',
    'BackendConfig',
    'OMITTED_VALUE_SENTINEL',
    'is_omitted_value',
    'strip_quotes',
    'SettingsManager',
    'get_settings_manager',

    # Models
    'ActionKind',
    'ACTION_PRIORITY',
    'Command',
    'ShowHelp',
    'ShowLicense',
    'ShowVersion',
    'RunTool',
    'ToolHelp',
    'ToolParameters',
    'Toolbox',
    'ListTools',
    'ViewCode',
    'DefaultListing',
    'NoAction',
    'InvocationState',
    'Resolution',
]
