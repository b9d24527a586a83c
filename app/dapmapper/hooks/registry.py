"""Debug adapter registry wrapping.

An adapter is either a static record (a dict describing how to start the
debug adapter) or a callable ``adapter(on_config, config, parent_session)``
that delivers such a record. ``wrap_adapters`` builds a new registry in
which every adapter installs the path-mapping enrich_config hook.
"""

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from dapmapper.core.settings import MapperConfig, load_config_or_default
from dapmapper.hooks.enrich import wrap_enrich_config
from dapmapper.hooks.producer import CallbackProducer, HookError
from dapmapper.inspectors.base import MountInspector
from dapmapper.inspectors.docker import DockerComposeInspector
from dapmapper.models.mapping import PathMappingType

logger = logging.getLogger(__name__)

ENRICH_CONFIG_KEY = "enrich_config"

Adapter = dict[str, Any] | Callable[..., Any]
AdapterCallable = Callable[..., None]


class AdapterResolutionError(HookError):
    """Raised when an adapter does not resolve to a record."""


class AdapterKind(Enum):
    """How an adapter provides its record."""

    CALLABLE = "callable"
    STATIC = "static"

    @classmethod
    def of(cls, adapter: Adapter) -> "AdapterKind":
        """Classify an adapter entry."""
        return cls.CALLABLE if callable(adapter) else cls.STATIC


def resolve_adapter(
    adapter: Adapter,
    config: dict[str, Any],
    parent_session: Any = None,
) -> dict[str, Any]:
    """Resolve an adapter entry to a fresh adapter record.

    Args:
        adapter: Static record or callable adapter.
        config: Launch configuration the session is started with.
        parent_session: Parent debug session, if any.

    Returns:
        Shallow copy of the adapter record.

    Raises:
        AdapterResolutionError: If the adapter does not yield a dict.
    """
    if AdapterKind.of(adapter) is AdapterKind.CALLABLE:
        record = CallbackProducer(adapter, callback_first=True).produce(config, parent_session)
    else:
        record = adapter

    if not isinstance(record, dict):
        msg = f"Adapter resolved to {type(record).__name__}, expected a dict"
        raise AdapterResolutionError(msg)

    # Static records are shared between sessions
    return dict(record)


def wrap_adapter(
    name: str,
    adapter: Adapter,
    strategy: PathMappingType,
    inspector: MountInspector,
) -> AdapterCallable:
    """Wrap one adapter so its record carries the path-mapping hook.

    Args:
        name: Adapter name, for logging.
        adapter: Static record or callable adapter.
        strategy: pathMappings representation for this adapter.
        inspector: Inspector passed to the enrichment hook.

    Returns:
        Callable adapter ``wrapper(on_config, config, parent_session=None)``.
    """

    def wrapper(
        on_config: Callable[[dict[str, Any]], None],
        config: dict[str, Any],
        parent_session: Any = None,
    ) -> None:
        record = resolve_adapter(adapter, config, parent_session)
        record[ENRICH_CONFIG_KEY] = wrap_enrich_config(
            record.get(ENRICH_CONFIG_KEY), strategy, inspector
        )
        logger.debug("Resolved adapter %s with %s path mappings", name, strategy.value)
        on_config(record)

    return wrapper


def wrap_adapters(
    adapters: Mapping[str, Adapter],
    config: MapperConfig,
    inspector: MountInspector | None = None,
) -> dict[str, AdapterCallable]:
    """Build a new registry with every adapter wrapped.

    The given registry is left untouched.

    Args:
        adapters: Adapter entries keyed by name.
        config: Settings providing per-adapter strategies.
        inspector: Inspector to use; defaults to Docker Compose with the
            configured command and timeout.

    Returns:
        New registry of wrapped callable adapters.
    """
    if inspector is None:
        inspector = DockerComposeInspector(
            docker_command=config.docker_command,
            timeout=config.timeout_seconds,
        )

    return {
        name: wrap_adapter(name, adapter, config.strategy_for(name), inspector)
        for name, adapter in adapters.items()
    }


def setup(
    adapters: Mapping[str, Adapter],
    config: MapperConfig | None = None,
    inspector: MountInspector | None = None,
) -> dict[str, AdapterCallable]:
    """Enrich all adapters of a registry with Docker path mappings.

    Loads settings from the config file when none are given.

    Example:
        >>> registry = setup({"debugpy": {"type": "executable", "command": "python"}})
        >>> registry["debugpy"](on_config, launch_config)

    Returns:
        New registry of wrapped callable adapters.
    """
    if config is None:
        config = load_config_or_default()
    return wrap_adapters(adapters, config, inspector)
