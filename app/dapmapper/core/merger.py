"""Path mapping derivation and merging.

Turns bind mounts into path mappings and folds them into a debug adapter
configuration. Mappings already present in the configuration always take
precedence over ones inferred from Docker.
"""

import copy
import logging
from collections.abc import Iterable
from typing import Any

from dapmapper.models.mapping import MappingCollection, PathMapping, PathMappingType
from dapmapper.models.mount import BindMount

logger = logging.getLogger(__name__)

PATH_MAPPINGS_KEY = "pathMappings"


def derive_mappings(mounts: Iterable[BindMount]) -> list[PathMapping]:
    """Derive one path mapping per distinct container destination.

    The first mount for a destination wins; later mounts onto the same
    destination are dropped.

    Args:
        mounts: Bind mounts in discovery order.

    Returns:
        PathMappings in first-seen order.
    """
    mappings: dict[str, PathMapping] = {}
    for mount in mounts:
        if mount.destination in mappings:
            logger.debug(
                "Ignoring duplicate mount onto %s from %s", mount.destination, mount.source
            )
            continue
        mappings[mount.destination] = PathMapping(
            local_root=mount.source,
            remote_root=mount.destination,
        )
    return list(mappings.values())


def mappings_to_map(mappings: Iterable[PathMapping]) -> dict[str, str]:
    """Convert path mappings to a remote root -> local root dict.

    The first mapping for a remote root is kept.
    """
    result: dict[str, str] = {}
    for mapping in mappings:
        result.setdefault(mapping.remote_root, mapping.local_root)
    return result


def mappings_to_list(mappings: Iterable[PathMapping]) -> list[dict[str, str]]:
    """Convert path mappings to a list of ``{localRoot, remoteRoot}`` dicts."""
    return [mapping.to_dict() for mapping in mappings]


def _list_entries_to_map(entries: list[Any]) -> dict[str, str]:
    """Convert existing list-form entries to map form, dropping malformed ones."""
    mappings: list[PathMapping] = []
    for entry in entries:
        try:
            mappings.append(PathMapping.from_dict(entry))
        except ValueError as e:
            logger.warning("Dropping malformed path mapping %r: %s", entry, e)
    return mappings_to_map(mappings)


def read_existing_mappings(config: dict[str, Any]) -> MappingCollection | None:
    """Read the pathMappings field of a configuration.

    Args:
        config: Debug adapter configuration.

    Returns:
        The list or dict stored under pathMappings, or None when the field
        is absent or holds anything else.
    """
    existing = config.get(PATH_MAPPINGS_KEY)
    if existing is None or isinstance(existing, list | dict):
        return existing

    logger.warning(
        "Ignoring %s of unsupported type %s", PATH_MAPPINGS_KEY, type(existing).__name__
    )
    return None


def merge_configuration(
    config: dict[str, Any],
    new_mappings: Iterable[PathMapping],
    strategy: PathMappingType = PathMappingType.LIST,
) -> dict[str, Any]:
    """Merge derived path mappings into a copy of a configuration.

    Map form is used when the existing mappings are not a list (a dict, or
    absent) or when the strategy is MAP; existing keys win on collision.
    Otherwise the existing list is extended with the new mappings, without
    deduplication.

    Args:
        config: Debug adapter configuration. Never modified.
        new_mappings: Mappings derived from bind mounts.
        strategy: Representation configured for the adapter.

    Returns:
        Deep copy of config with pathMappings merged.
    """
    result = copy.deepcopy(config)
    existing = read_existing_mappings(result)
    new_mappings = list(new_mappings)

    merged: MappingCollection
    if not isinstance(existing, list) or strategy == PathMappingType.MAP:
        if isinstance(existing, list):
            existing_map = _list_entries_to_map(existing)
        else:
            existing_map = existing or {}
        merged = {**mappings_to_map(new_mappings), **existing_map}
    else:
        merged = [*existing, *mappings_to_list(new_mappings)]

    result[PATH_MAPPINGS_KEY] = merged
    return result
