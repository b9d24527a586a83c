"""Mounts command implementation.

Lists the Docker bind mounts of the compose project at a path.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from dapmapper.cli.types import OutputFormat, load_settings, require_inspector
from dapmapper.core.paths import normalize_to_dir
from dapmapper.utils.formatting import console, create_mount_table, format_mount_row, print_info


def list_mounts(
    path: Annotated[
        Path,
        typer.Argument(help="File or directory inside a compose project."),
    ] = Path("."),
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the bind mounts of the compose containers for PATH.

    Examples:
        dapmapper mounts                    # Current directory
        dapmapper mounts src/app/main.py    # Project containing a file
        dapmapper mounts --format json      # Output as JSON
    """
    inspector = require_inspector(load_settings())
    mounts = inspector.list_bind_mounts(path)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([mount.to_dict() for mount in mounts]))
        return

    if not mounts:
        print_info(f"No bind mounts found for {normalize_to_dir(path)}.")
        return

    table = create_mount_table(title=f"Bind Mounts ({normalize_to_dir(path)})")
    for mount in mounts:
        table.add_row(*format_mount_row(mount))
    console.print(table)
