"""Docker mount models.

This module defines the data structure for a single Docker bind mount
as reported by ``docker inspect``.
"""

from dataclasses import dataclass, field
from typing import Any

# Docker mount type tag for bind mounts; volumes and tmpfs use other tags
BIND_MOUNT_TYPE = "bind"


@dataclass(frozen=True, slots=True)
class BindMount:
    """Represents one Docker bind mount of a container.

    Instances are built fresh from each inspection and never persisted.

    Attributes:
        source: Absolute host path being mounted.
        destination: Absolute path inside the container.
        mode: Mount mode string (e.g., 'rw', 'ro', 'z').
        read_write: Whether the mount is writable from the container.
        propagation: Bind propagation setting (e.g., 'rprivate').
        type: Docker mount type tag, always 'bind' for retained mounts.
    """

    source: str
    destination: str
    mode: str = field(default="")
    read_write: bool = field(default=True)
    propagation: str = field(default="")
    type: str = field(default=BIND_MOUNT_TYPE)

    def __post_init__(self) -> None:
        """Validate mount data after initialization."""
        if not self.source:
            msg = "Bind mount source cannot be empty"
            raise ValueError(msg)
        if not self.destination:
            msg = "Bind mount destination cannot be empty"
            raise ValueError(msg)

    @classmethod
    def from_docker(cls, record: dict[str, Any]) -> "BindMount":
        """Create a BindMount from a ``docker inspect`` mount record.

        Args:
            record: One element of the container's ``.Mounts`` JSON array.

        Returns:
            BindMount populated from the record.

        Raises:
            ValueError: If Source or Destination is missing or empty.
        """
        mode = str(record.get("Mode") or "")
        read_write = record.get("RW")
        if not isinstance(read_write, bool):
            # Fall back to the mount options, e.g. "ro,z"
            read_write = "ro" not in mode.split(",")

        return cls(
            source=str(record.get("Source") or ""),
            destination=str(record.get("Destination") or ""),
            mode=mode,
            read_write=read_write,
            propagation=str(record.get("Propagation") or ""),
            type=str(record.get("Type") or BIND_MOUNT_TYPE),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary using Docker's field names."""
        return {
            "Type": self.type,
            "Source": self.source,
            "Destination": self.destination,
            "Mode": self.mode,
            "RW": self.read_write,
            "Propagation": self.propagation,
        }
