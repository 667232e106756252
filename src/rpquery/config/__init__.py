"""Connection configuration handed to the API client."""

from .loader import ConfigError, load_connection_config, load_yaml, validate_config
from .models import ConnectionConfig

__all__ = [
    "ConfigError",
    "ConnectionConfig",
    "load_connection_config",
    "load_yaml",
    "validate_config",
]
