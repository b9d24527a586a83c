"""Abstract base class for mount inspectors.

This module defines the MountInspector interface that container runtime
integrations implement.
"""

import os
from abc import ABC, abstractmethod

from dapmapper.core.merger import derive_mappings
from dapmapper.models.mapping import PathMapping
from dapmapper.models.mount import BindMount


class MountInspector(ABC):
    """Abstract base class for all mount inspectors.

    Inspectors find the containers associated with a source location
    and report the bind mounts those containers use.

    Example:
        >>> inspector = DockerComposeInspector()
        >>> for mapping in inspector.list_mappings("/srv/app/src/main.py"):
        ...     print(f"{mapping.remote_root} -> {mapping.local_root}")
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a short identifier for the container runtime."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the runtime's CLI can be used on this system."""

    @abstractmethod
    def list_bind_mounts(self, path: str | os.PathLike[str]) -> list[BindMount]:
        """List the bind mounts of the containers local to a path.

        Implementations never raise for runtime failures; an unreachable
        runtime simply yields no mounts.

        Args:
            path: File or directory the containers are looked up for.

        Returns:
            Bind mounts in container discovery order, then mount order.
        """

    def list_mappings(self, path: str | os.PathLike[str]) -> list[PathMapping]:
        """List deduplicated path mappings for a path.

        Args:
            path: File or directory the containers are looked up for.

        Returns:
            One PathMapping per distinct remote root, first mount wins.
        """
        return derive_mappings(self.list_bind_mounts(path))
