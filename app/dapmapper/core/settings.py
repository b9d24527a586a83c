"""dapmapper configuration and settings.

This module provides the configuration model and I/O functions that
control how docker is called and which pathMappings representation
each debug adapter receives.

Configuration is stored in ~/.config/dapmapper/config.toml, e.g.:

    timeout_seconds = 5

    [adapter_options.debugpy]
    path_mapping_type = "list"
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dapmapper.core.paths import get_config_path
from dapmapper.models.mapping import PathMappingType

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0

# Adapters that need a non-default representation out of the box
DEFAULT_ADAPTER_TYPES: dict[str, PathMappingType] = {
    "php": PathMappingType.MAP,
}

# Representation for adapters with no configured type
FALLBACK_MAPPING_TYPE = PathMappingType.LIST


class AdapterOptions(BaseModel):
    """Per-adapter options.

    Attributes:
        path_mapping_type: Representation of pathMappings for this adapter.
            None falls back to the built-in default.
    """

    model_config = ConfigDict(extra="forbid")

    path_mapping_type: Annotated[
        PathMappingType | None,
        Field(description="pathMappings representation: 'map' or 'list'"),
    ] = None


class MapperConfig(BaseModel):
    """Configuration for dapmapper.

    Attributes:
        docker_command: Name or path of the docker executable.
        timeout_seconds: Maximum time for a single docker call.
        adapter_options: Options keyed by debug adapter name.
    """

    model_config = ConfigDict(extra="forbid")

    docker_command: Annotated[
        str,
        Field(min_length=1, description="docker executable"),
    ] = "docker"
    timeout_seconds: Annotated[
        float,
        Field(ge=1, le=300, description="Timeout per docker call in seconds (1-300)"),
    ] = DEFAULT_TIMEOUT_SECONDS
    adapter_options: Annotated[
        dict[str, AdapterOptions],
        Field(default_factory=dict, description="Per-adapter options"),
    ]

    def strategy_for(self, adapter_name: str) -> PathMappingType:
        """Get the pathMappings representation for an adapter.

        Configured values override the built-in defaults, which in turn
        override the list fallback.

        Args:
            adapter_name: Debug adapter name (e.g., 'php', 'debugpy').

        Returns:
            PathMappingType to merge with.
        """
        options = self.adapter_options.get(adapter_name)
        if options is not None and options.path_mapping_type is not None:
            return options.path_mapping_type
        return DEFAULT_ADAPTER_TYPES.get(adapter_name, FALLBACK_MAPPING_TYPE)

    def effective_strategies(self) -> dict[str, PathMappingType]:
        """Get the strategy of every adapter that is configured or has a default."""
        names = sorted({*DEFAULT_ADAPTER_TYPES, *self.adapter_options})
        return {name: self.strategy_for(name) for name in names}


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> MapperConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses default config path.

    Returns:
        Validated MapperConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return MapperConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> MapperConfig:
    """Load configuration, falling back to defaults if no file exists.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return get_default_config()


def save_config(config: MapperConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The MapperConfig object to save.
        path: Path to save the config. If None, uses default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: MapperConfig) -> dict[str, object]:
    """Convert MapperConfig to a dictionary for TOML serialization.

    Adapters without an explicit type are omitted, TOML has no null.
    """
    adapters: dict[str, dict[str, str]] = {}
    for name, options in config.adapter_options.items():
        if options.path_mapping_type is not None:
            adapters[name] = {"path_mapping_type": options.path_mapping_type.value}

    result: dict[str, object] = {
        "docker_command": config.docker_command,
        "timeout_seconds": config.timeout_seconds,
    }
    if adapters:
        result["adapter_options"] = adapters
    return result


def get_default_config() -> MapperConfig:
    """Create a default MapperConfig.

    The built-in adapter types are written out explicitly so a saved
    default config documents them.
    """
    return MapperConfig(
        adapter_options={
            name: AdapterOptions(path_mapping_type=mapping_type)
            for name, mapping_type in DEFAULT_ADAPTER_TYPES.items()
        }
    )
