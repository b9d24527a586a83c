"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

import typer

from dapmapper.core.settings import ConfigError, MapperConfig, load_config_or_default
from dapmapper.inspectors.docker import DockerComposeInspector
from dapmapper.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def load_settings() -> MapperConfig:
    """Load settings for a command, exiting with an error if they are invalid.

    Raises:
        typer.Exit: If the config file exists but cannot be used.
    """
    try:
        return load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def get_inspector(config: MapperConfig) -> DockerComposeInspector:
    """Create a Docker Compose inspector from settings."""
    return DockerComposeInspector(
        docker_command=config.docker_command,
        timeout=config.timeout_seconds,
    )


def require_inspector(config: MapperConfig) -> DockerComposeInspector:
    """Create an inspector, exiting with an error if docker is unavailable.

    Raises:
        typer.Exit: If the docker executable cannot be found.
    """
    inspector = get_inspector(config)
    if not inspector.is_available():
        print_error(f"'{config.docker_command}' is not available on this system.")
        raise typer.Exit(code=1)
    return inspector
