"""Path mapping models.

A path mapping pairs a local (host) root with the remote (container) root
it is visible under, so a debugger can translate source locations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

# A pathMappings value: list of {localRoot, remoteRoot} dicts, or remoteRoot -> localRoot
MappingCollection = list[dict[str, str]] | dict[str, str]


class PathMappingType(str, Enum):
    """Representation used when writing pathMappings into a configuration.

    Attributes:
        MAP: Dict keyed by remote root (e.g., PHP Xdebug adapters).
        LIST: Ordered list of {localRoot, remoteRoot} entries, append-only.
    """

    MAP = "map"
    LIST = "list"


@dataclass(frozen=True, slots=True)
class PathMapping:
    """A local/remote root pair derived from one bind mount.

    Attributes:
        local_root: Host-side path (the bind mount source).
        remote_root: Container-side path (the bind mount destination).
    """

    local_root: str
    remote_root: str

    def to_dict(self) -> dict[str, str]:
        """Convert to the DAP ``{localRoot, remoteRoot}`` shape."""
        return {"localRoot": self.local_root, "remoteRoot": self.remote_root}

    @classmethod
    def from_dict(cls, data: Any) -> "PathMapping":
        """Create a PathMapping from a ``{localRoot, remoteRoot}`` dict.

        Raises:
            ValueError: If data is not a dict with string localRoot/remoteRoot.
        """
        if not isinstance(data, dict):
            msg = f"Path mapping must be an object, got {type(data).__name__}"
            raise ValueError(msg)
        local_root = data.get("localRoot")
        remote_root = data.get("remoteRoot")
        if not isinstance(local_root, str) or not isinstance(remote_root, str):
            msg = "Path mapping requires string 'localRoot' and 'remoteRoot'"
            raise ValueError(msg)
        return cls(local_root=local_root, remote_root=remote_root)
