class ConfigurationError(ValueError):
    """Startup configuration is unusable; the server must not start."""


class MissingApiKeyError(ConfigurationError):
    """Raised when the microCMS API key is required but missing."""


__all__ = ["ConfigurationError", "MissingApiKeyError"]
