"""CLI commands for dapmapper.

This package contains all subcommand implementations.
"""

from dapmapper.cli.commands import config, enrich, mappings, mounts

__all__ = ["config", "enrich", "mappings", "mounts"]
