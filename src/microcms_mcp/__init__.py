"""microcms_mcp package exports."""

from .core import (
    ConfigurationError,
    MicroCMSClient,
    MicroCMSClientError,
    MicroCMSConfig,
    MicroCMSHTTPError,
    MicroCMSParseError,
    MissingApiKeyError,
    discover_tool_modules,
    load_config,
    register_discovered_tools,
    register_resources,
)
from .server import main as run_server

__all__ = [
    # Client
    "MicroCMSClient",
    "MicroCMSConfig",
    "load_config",
    # Exceptions
    "MicroCMSClientError",
    "MicroCMSHTTPError",
    "MicroCMSParseError",
    "ConfigurationError",
    "MissingApiKeyError",
    # Server utilities
    "run_server",
    "discover_tool_modules",
    "register_discovered_tools",
    "register_resources",
]
