"""Mappings command implementation.

Shows the path mappings derived from Docker bind mounts.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from dapmapper.cli.types import OutputFormat, load_settings, require_inspector
from dapmapper.core.merger import mappings_to_list, mappings_to_map
from dapmapper.core.paths import normalize_to_dir
from dapmapper.models.mapping import PathMappingType
from dapmapper.utils.formatting import (
    console,
    create_mapping_table,
    format_mapping_row,
    print_info,
)


def list_mappings(
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
    mapping_type: Annotated[
        PathMappingType,
        typer.Option(
            "--type",
            "-t",
            help="JSON shape: list of {localRoot, remoteRoot} or map keyed by remote root.",
            case_sensitive=False,
        ),
    ] = PathMappingType.LIST,
) -> None:
    """Show local/remote path mappings for PATH.

    Examples:
        dapmapper mappings                          # Table for current directory
        dapmapper mappings --format json            # pathMappings list
        dapmapper mappings --format json --type map # pathMappings object
    """
    inspector = require_inspector(load_settings())
    mappings = inspector.list_mappings(path)

    if output_format == OutputFormat.JSON:
        if mapping_type == PathMappingType.MAP:
            data: object = mappings_to_map(mappings)
        else:
            data = mappings_to_list(mappings)
        console.print_json(json.dumps(data))
        return

    if not mappings:
        print_info(f"No path mappings found for {normalize_to_dir(path)}.")
        return

    table = create_mapping_table()
    for mapping in mappings:
        table.add_row(*format_mapping_row(mapping))
    console.print(table)
