"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from dapmapper.models.mapping import PathMapping
    from dapmapper.models.mount import BindMount

THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "#f53263",
        "info": "#0ec1c8",
        "local": "#69B9A1",
        "remote": "#0e8ac8",
    }
)

# Shared console instances
console = Console(theme=THEME)
err_console = Console(theme=THEME, stderr=True)


def create_mount_table(title: str = "Bind Mounts") -> Table:
    """Create a pre-configured table for displaying bind mounts.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for mount display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("Source", style="local", no_wrap=True)
    table.add_column("Destination", style="remote", no_wrap=True)
    table.add_column("Mode", style="muted")
    table.add_column("RW", justify="center")
    table.add_column("Propagation", style="muted")
    return table


def format_mount_row(mount: BindMount) -> tuple[str, str, str, str, str]:
    """Format a bind mount as a table row.

    Args:
        mount: The bind mount to format.

    Returns:
        Tuple of (source, destination, mode, rw, propagation).
    """
    rw = "[success]✓[/]" if mount.read_write else "[muted]ro[/]"
    return (mount.source, mount.destination, mount.mode or "-", rw, mount.propagation or "-")


def create_mapping_table(title: str = "Path Mappings") -> Table:
    """Create a pre-configured table for displaying path mappings.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for mapping display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Local Root", style="local", no_wrap=True)
    table.add_column("", width=2, justify="center")
    table.add_column("Remote Root", style="remote", no_wrap=True)
    return table


def format_mapping_row(mapping: PathMapping) -> tuple[str, str, str]:
    """Format a path mapping as a table row."""
    return (mapping.local_root, "[muted]→[/]", mapping.remote_root)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
