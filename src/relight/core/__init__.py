"""Core relighting engine."""

from .config import (
    RelightConfig,
    load_config,
    default_config,
    relight_config_from,
    lights_from_config,
    load_relight_setup,
)
from .relighter import Relighter

__all__ = [
    "RelightConfig",
    "load_config",
    "default_config",
    "relight_config_from",
    "lights_from_config",
    "load_relight_setup",
    "Relighter",
]
