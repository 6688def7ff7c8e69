"""
Tool backend exceptions.
"""


class ToolBackendError(Exception):
    """Base class for failures surfaced by the tool backend."""


class ConstructionError(ToolBackendError):
    """The backend could not be built for the given working directory."""


class DispatchError(ToolBackendError):
    """A backend operation failed, e.g. an unknown tool name."""


class ToolArgumentError(DispatchError):
    """A tool received a missing or malformed parameter."""
