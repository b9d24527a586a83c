"""Data models for dapmapper.

This module exports the core data structures used throughout the application.
"""

from dapmapper.models.mapping import MappingCollection, PathMapping, PathMappingType
from dapmapper.models.mount import BIND_MOUNT_TYPE, BindMount

__all__ = [
    "BIND_MOUNT_TYPE",
    "BindMount",
    "MappingCollection",
    "PathMapping",
    "PathMappingType",
]
