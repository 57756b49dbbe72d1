"""Core domain surface for microcms-mcp (transport-agnostic)."""

from .client import (
    API_KEY_HEADER,
    MicroCMSClient,
    MicroCMSClientError,
    MicroCMSHTTPError,
    MicroCMSParseError,
)
from .config import DEFAULT_BASE_URL, MicroCMSConfig, load_config, load_env_config
from .errors import ConfigurationError, MissingApiKeyError
from .models import ContentQuery
from .registry import (
    discover_tool_modules,
    iter_tool_functions,
    register_discovered_tools,
    register_resources,
)
from .resources import RESOURCES, URI_SCHEME, read_content, read_contents

__all__ = [
    # Client
    "MicroCMSClient",
    "API_KEY_HEADER",
    # Exceptions
    "MicroCMSClientError",
    "MicroCMSHTTPError",
    "MicroCMSParseError",
    "ConfigurationError",
    "MissingApiKeyError",
    # Config helpers
    "DEFAULT_BASE_URL",
    "MicroCMSConfig",
    "load_config",
    "load_env_config",
    # Query model
    "ContentQuery",
    # Registry helpers
    "discover_tool_modules",
    "iter_tool_functions",
    "register_discovered_tools",
    "register_resources",
    # Resources
    "RESOURCES",
    "URI_SCHEME",
    "read_content",
    "read_contents",
]
