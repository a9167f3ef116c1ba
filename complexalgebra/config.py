"""
Process-wide engine configuration.

The configuration is an immutable pydantic model.  `configure` swaps in a new,
validated instance; values created before the swap keep the reference-count
strategy they were built with.
"""

import logging
import threading

from pydantic import BaseModel, Field

__all__ = ['EngineConfig', 'get_config', 'configure']

logger = logging.getLogger(__name__)


class EngineConfig(BaseModel):
    """Switches for the lifetime discipline and conversion defaults."""

    atomic_refcount: bool = Field(
        False,
        description="Guard reference-count updates with a lock, for hosts"
                    " sharing values across threads",
    )
    eager_singletons: bool = Field(
        False,
        description="Create all fifteen singleton constants when configured"
                    " instead of on first use",
    )
    default_max_denominator: int = Field(
        1_000_000,
        gt=0,
        description="Denominator bound used by FloatComplex.to_rational when"
                    " the caller does not pass one",
    )

    model_config = {"frozen": True}


_config = EngineConfig()
_config_lock = threading.Lock()


def get_config():
    """Return the active `EngineConfig`."""
    return _config


def configure(**changes):
    """
    Install a new configuration built from the active one plus `changes`, and
    return it.  Unknown keys and invalid values raise pydantic's
    `ValidationError`.  Setting `eager_singletons` creates every singleton
    immediately.
    """
    global _config
    with _config_lock:
        data = _config.model_dump()
        unknown = set(changes) - set(data)
        if unknown:
            raise TypeError(
                "unknown configuration keys: {}".format(", ".join(sorted(unknown))))
        data.update(changes)
        _config = EngineConfig(**data)
        new = _config
    logger.debug("engine configuration set to %s", new)
    if new.eager_singletons:
        # Imported here as lifecycle depends on this module.
        from .lifecycle import initialize_singletons
        initialize_singletons()
    return new
