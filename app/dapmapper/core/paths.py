"""Filesystem path helpers for dapmapper.

Covers the XDG configuration location and normalization of debug targets
to the directory docker commands are run from.

XDG defaults:
- Config: ~/.config/dapmapper/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "dapmapper"

ROOT_DIR = "/"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/dapmapper/ (or XDG_CONFIG_HOME/dapmapper/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/dapmapper/config.toml.
    """
    return get_config_dir() / "config.toml"


def normalize_to_dir(file_or_dir: str | os.PathLike[str]) -> str:
    """Normalize a debug target to the directory that contains it.

    A path ending in a separator or naming an existing directory is kept
    (without the trailing separator). Anything else is treated as a file
    and replaced by its parent directory. Relative paths are resolved
    against the current working directory.

    Examples:
        >>> normalize_to_dir("/a/b/file.txt")
        '/a/b'
        >>> normalize_to_dir("/a/b/")
        '/a/b'
        >>> normalize_to_dir("")
        '/'

    Args:
        file_or_dir: File or directory path.

    Returns:
        Absolute directory path, or "/" if nothing is left.
    """
    path = os.fspath(file_or_dir)
    if not path:
        return ROOT_DIR

    path = os.path.expanduser(path)
    is_dir = path.endswith(os.sep) or os.path.isdir(path)
    path = os.path.abspath(path)

    directory = path if is_dir else os.path.dirname(path)
    return directory.rstrip(os.sep) or ROOT_DIR
