"""Configuration enrichment hook.

Builds the ``enrich_config`` hook installed on debug adapters: it runs
any enrichment the adapter already had, then layers Docker-derived path
mappings on top and hands the result to the host's completion callback.
"""

import copy
import logging
from collections.abc import Callable
from typing import Any

from dapmapper.core.merger import merge_configuration
from dapmapper.hooks.producer import HookError, ResultProducer, as_producer
from dapmapper.inspectors.base import MountInspector
from dapmapper.models.mapping import PathMappingType

logger = logging.getLogger(__name__)

PROGRAM_KEY = "program"

OnConfig = Callable[[dict[str, Any]], None]
EnrichConfig = Callable[[dict[str, Any], OnConfig], None]


def wrap_enrich_config(
    existing_enrich_config: ResultProducer | Callable[..., Any] | None,
    strategy: PathMappingType,
    inspector: MountInspector,
) -> EnrichConfig:
    """Create an enrich_config hook that adds path mappings.

    Args:
        existing_enrich_config: The adapter's own hook, called as
            ``hook(config, on_config)``; may also return its result, or be None.
        strategy: pathMappings representation for the adapter.
        inspector: Inspector used to find bind mounts for the program.

    Returns:
        Hook called as ``enrich_config(config, on_config)``.
    """
    producer = as_producer(existing_enrich_config, callback_first=False)

    def enrich_config(config: dict[str, Any], on_config: OnConfig) -> None:
        final_config = copy.deepcopy(config)

        if producer is not None:
            final_config = producer.produce(final_config)
            if not isinstance(final_config, dict):
                msg = f"enrich_config produced {type(final_config).__name__}, expected a dict"
                raise HookError(msg)

        program = final_config.get(PROGRAM_KEY)
        if not isinstance(program, str) or not program:
            logger.debug("Configuration has no program, skipping path mappings")
            on_config(final_config)
            return

        mappings = inspector.list_mappings(program)
        logger.debug("Merging %d path mapping(s) for %s", len(mappings), program)
        on_config(merge_configuration(final_config, mappings, strategy))

    return enrich_config
