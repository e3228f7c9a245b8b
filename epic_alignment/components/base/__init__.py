from .component import BaseComponent
from .config import Settings, get_settings
from .exceptions import (
    ComponentError,
    ConfigurationError,
    MalformedResponseError,
    UnhandledError,
    UpstreamError,
)
from .logging import configure_logging, get_logger

__all__ = [
    "BaseComponent",
    "Settings",
    "get_settings",
    "ComponentError",
    "ConfigurationError",
    "MalformedResponseError",
    "UnhandledError",
    "UpstreamError",
    "configure_logging",
    "get_logger",
]
