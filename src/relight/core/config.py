"""Relighting run configuration."""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union
from omegaconf import OmegaConf, DictConfig

from ..shading.config import Light, clamp_intensity, DEFAULT_INTENSITY


@dataclass
class RelightConfig:
    """Configuration for a relighting pass."""
    
    intensity: float = DEFAULT_INTENSITY
    workers: int = 1
    chunk_rows: Optional[int] = None
    backend: str = 'numpy'
    device: Optional[str] = None
    debug: bool = False
    
    def __post_init__(self):
        self.intensity = clamp_intensity(self.intensity)
        self.workers = max(1, int(self.workers))
        if self.chunk_rows is not None:
            self.chunk_rows = max(1, int(self.chunk_rows))


def load_config(config_path: Union[str, Path]) -> DictConfig:
    """
    Load a YAML light-rig configuration.
    
    Expected layout:
        relight:   {intensity, workers, chunk_rows, backend, device, debug}
        lights:    [{direction, color, brightness, softness}, ...]
    
    Args:
        config_path: Path to YAML file
    
    Returns:
        OmegaConf configuration object
    
    Raises:
        FileNotFoundError: If the file does not exist
    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    config = OmegaConf.load(config_path)
    
    if 'relight' not in config:
        config.relight = {}
    if 'lights' not in config:
        config.lights = []
    
    return config


def default_config() -> DictConfig:
    """Empty configuration with the expected sections."""
    return OmegaConf.create({'relight': {}, 'lights': []})


def relight_config_from(config: DictConfig) -> RelightConfig:
    """Build RelightConfig from the relight section."""
    section = config.get('relight')
    section = OmegaConf.to_container(section, resolve=True) if section else {}
    known = {k: v for k, v in section.items() if k in RelightConfig.__dataclass_fields__}
    return RelightConfig(**known)


def lights_from_config(config: DictConfig) -> List[Light]:
    """Build the light list from the lights section."""
    entries = config.get('lights')
    entries = OmegaConf.to_container(entries, resolve=True) if entries else []
    return [Light.from_dict(entry) for entry in entries]


def load_relight_setup(config_path: Union[str, Path]) -> Tuple[List[Light], RelightConfig]:
    """Load lights and run options from one YAML file."""
    config = load_config(config_path)
    return lights_from_config(config), relight_config_from(config)
