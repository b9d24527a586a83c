"""Debug adapter integration hooks.

This module exports the registry wrapping and enrichment entry points.
"""

from dapmapper.hooks.enrich import EnrichConfig, wrap_enrich_config
from dapmapper.hooks.producer import (
    CallbackProducer,
    HookError,
    ResultNotDeliveredError,
    ResultProducer,
    ReturningProducer,
    as_producer,
)
from dapmapper.hooks.registry import (
    AdapterKind,
    AdapterResolutionError,
    resolve_adapter,
    setup,
    wrap_adapter,
    wrap_adapters,
)

__all__ = [
    "AdapterKind",
    "AdapterResolutionError",
    "CallbackProducer",
    "EnrichConfig",
    "HookError",
    "ResultNotDeliveredError",
    "ResultProducer",
    "ReturningProducer",
    "as_producer",
    "resolve_adapter",
    "setup",
    "wrap_adapter",
    "wrap_adapters",
    "wrap_enrich_config",
]
