"""
Engine Configuration

Safety caps used by every operation that allocates in proportion to the
size of a set:

- materialize_cap: maximum element count materialize() will collect
- power_set_cap:   maximum number of subsets an eager power set may hold
- product_cap:     maximum number of pairs an eager cartesian product may hold

EngineConfig is immutable. The process-wide default can be swapped at
startup with set_default_config(); individual calls accept an explicit
cap= override instead.
"""

from __future__ import annotations
from dataclasses import dataclass

from .errors import InvalidConstruction


# =============================================================================
# DEFAULT CAPS
# =============================================================================

MATERIALIZE_CAP = 1_000_000
POWER_SET_CAP = 1 << 20      # |A| <= 20
PRODUCT_CAP = 1_000_000


@dataclass(frozen=True)
class EngineConfig:
    """
    Safety caps for the set algebra engine.

    Attributes:
        materialize_cap: Elements materialize() may collect
        power_set_cap: Subsets an eager power set may hold
        product_cap: Pairs an eager cartesian product may hold

    Example:
        >>> config = EngineConfig(materialize_cap=10_000)
        >>> set_default_config(config)
    """
    materialize_cap: int = MATERIALIZE_CAP
    power_set_cap: int = POWER_SET_CAP
    product_cap: int = PRODUCT_CAP

    def __post_init__(self):
        for name in ('materialize_cap', 'power_set_cap', 'product_cap'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidConstruction(f"{name} must be a positive int, got {value!r}")


DEFAULT_ENGINE_CONFIG = EngineConfig()

_default_config: EngineConfig = DEFAULT_ENGINE_CONFIG


def get_default_config() -> EngineConfig:
    """Get the process-wide engine configuration."""
    return _default_config


def set_default_config(config: EngineConfig) -> None:
    """
    Set the process-wide engine configuration.

    WARNING: This affects every later operation that does not pass an
    explicit cap. Use sparingly, typically at application startup.
    """
    global _default_config
    if not isinstance(config, EngineConfig):
        raise InvalidConstruction(f"Expected EngineConfig, got {type(config).__name__}")
    _default_config = config


__all__ = [
    'EngineConfig',
    'DEFAULT_ENGINE_CONFIG',
    'MATERIALIZE_CAP',
    'POWER_SET_CAP',
    'PRODUCT_CAP',
    'get_default_config',
    'set_default_config',
]
