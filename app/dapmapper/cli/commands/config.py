"""Config commands.

Show the effective settings and create a default config file.
"""

from typing import Annotated

import typer
from rich.table import Table

from dapmapper.cli.types import load_settings
from dapmapper.core.paths import get_config_path
from dapmapper.core.settings import ConfigError, get_default_config, save_config
from dapmapper.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize dapmapper settings.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show effective settings and per-adapter strategies."""
    settings = load_settings()
    config_path = get_config_path()

    source = str(config_path) if config_path.exists() else "defaults (no config file)"
    console.print(f"[muted]Source:[/] {source}")
    console.print(f"[muted]Docker command:[/] {settings.docker_command}")
    console.print(f"[muted]Timeout:[/] {settings.timeout_seconds:g}s")

    table = Table(
        title="Adapter Strategies",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Adapter", no_wrap=True)
    table.add_column("pathMappings", style="info")
    for name, strategy in settings.effective_strategies().items():
        table.add_row(name, strategy.value)
    console.print(table)
    console.print("[muted]Other adapters use 'list'.[/]")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a default config file."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_info(f"Config already exists: {config_path} (use --force to overwrite)")
        return

    try:
        saved = save_config(get_default_config(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_success(f"Config written to {saved}")
