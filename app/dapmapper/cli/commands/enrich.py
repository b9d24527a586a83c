"""Enrich command implementation.

Merges Docker-derived path mappings into a launch configuration file.
"""

import json
import sys
from pathlib import Path
from typing import Annotated, Any

import typer

from dapmapper.cli.types import get_inspector, load_settings
from dapmapper.hooks.enrich import wrap_enrich_config
from dapmapper.models.mapping import PathMappingType
from dapmapper.utils.formatting import print_error, print_success, print_warning

STDIN_MARKER = "-"


def _read_launch_config(source: str) -> dict[str, Any]:
    """Read a launch configuration from a file or stdin.

    Raises:
        typer.Exit: If the input cannot be read or is not a JSON object.
    """
    try:
        text = sys.stdin.read() if source == STDIN_MARKER else Path(source).read_text()
    except OSError as e:
        print_error(f"Cannot read {source}: {e}")
        raise typer.Exit(code=1) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON in {source}: {e}")
        raise typer.Exit(code=1) from e

    if not isinstance(data, dict):
        print_error(f"Launch configuration must be a JSON object, got {type(data).__name__}")
        raise typer.Exit(code=1)
    return data


def enrich(
    config_file: Annotated[
        str,
        typer.Argument(help="Launch configuration JSON file, or '-' for stdin."),
    ],
    adapter: Annotated[
        str | None,
        typer.Option(
            "--adapter",
            "-a",
            help="Debug adapter name used to look up the configured strategy.",
        ),
    ] = None,
    strategy: Annotated[
        PathMappingType | None,
        typer.Option(
            "--strategy",
            "-s",
            help="Override the pathMappings representation: map or list.",
            case_sensitive=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the enriched configuration to a file instead of stdout.",
        ),
    ] = None,
) -> None:
    """Merge path mappings for the configuration's program into pathMappings.

    Existing pathMappings entries are never overwritten.

    Examples:
        dapmapper enrich launch.json --adapter php
        dapmapper enrich launch.json --strategy list -o enriched.json
        cat launch.json | dapmapper enrich -
    """
    settings = load_settings()
    launch_config = _read_launch_config(config_file)

    if strategy is None:
        strategy = settings.strategy_for(adapter or "")

    inspector = get_inspector(settings)
    if not inspector.is_available():
        print_warning(f"'{settings.docker_command}' is not available; no mappings added.")

    enriched: list[dict[str, Any]] = []
    hook = wrap_enrich_config(None, strategy, inspector)
    hook(launch_config, enriched.append)

    text = json.dumps(enriched[0], indent=2)
    if output is None:
        typer.echo(text)
        return

    try:
        output.write_text(text + "\n")
    except OSError as e:
        print_error(f"Cannot write {output}: {e}")
        raise typer.Exit(code=1) from e
    print_success(f"Enriched configuration written to {output}")
