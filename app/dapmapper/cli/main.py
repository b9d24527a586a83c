"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer

from dapmapper import __version__
from dapmapper.cli.commands import config, enrich, mappings, mounts

# Create main Typer app
app = typer.Typer(
    name="dapmapper",
    help="Docker bind mount path mappings for DAP debuggers.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dapmapper version {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool, quiet: bool) -> None:
    """Configure logging level."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only log errors.",
        ),
    ] = False,
) -> None:
    """dapmapper - Docker bind mount path mappings for DAP debuggers.

    Inspect the containers of a compose project and translate their
    bind mounts into debugger pathMappings.
    """
    _setup_logging(verbose, quiet)


# Register commands
app.command(name="mounts")(mounts.list_mounts)
app.command(name="mappings")(mappings.list_mappings)
app.command(name="enrich")(enrich.enrich)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
