"""Mount inspectors for container runtimes.

This module exports the inspector classes for discovering bind mounts.
"""

from dapmapper.inspectors.base import MountInspector
from dapmapper.inspectors.docker import DockerComposeInspector

__all__ = ["DockerComposeInspector", "MountInspector"]
