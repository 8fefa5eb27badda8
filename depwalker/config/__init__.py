"""Configuration schema and loading for depwalker."""

from .loader import ConfigSource, load_walker_config
from .schema import WalkerConfig

__all__ = [
    "WalkerConfig",
    "ConfigSource",
    "load_walker_config",
]
