"""CLI package for dapmapper.

This package contains the Typer application and all subcommands.
"""

from dapmapper.cli.main import app

__all__ = ["app"]
