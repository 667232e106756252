"""YAML configuration file loading with Pydantic validation."""

from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from .models import ConnectionConfig

T = TypeVar("T", bound=BaseModel)


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""


def load_yaml(path: Path) -> dict:
    """Load a YAML file and return its contents as a dict.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML contents.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
            if data is None:
                return {}
            if not isinstance(data, dict):
                raise ConfigError(f"Expected a mapping at the top of {path}")
            return data
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e


def validate_config(data: dict, model_class: type[T], source: str = "<input>") -> T:
    """Validate raw settings against a Pydantic model.

    Raises:
        ConfigError: If validation fails.
    """
    try:
        return model_class(**data)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed for {source}: {e}") from e


def load_connection_config(path: Path, overrides: dict | None = None) -> ConnectionConfig:
    """Load a connection configuration file.

    Args:
        path: YAML file with ``url``, ``project`` and ``token`` keys.
        overrides: Values that replace the file's entries when not None.

    Returns:
        Validated ConnectionConfig instance.
    """
    data = load_yaml(path)
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return validate_config(data, ConnectionConfig, str(path))
