"""Light configuration."""

from __future__ import annotations
from typing import Dict, Any, Tuple
from dataclasses import dataclass
import numpy as np

from ..errors import InvalidLightParameterError, DegenerateVectorError
from .vector import Vector3


DEFAULT_LIGHT_DIRECTION = (0.0, 0.0, 1.0)
DEFAULT_LIGHT_COLOR = (255, 255, 255)

DEFAULT_BRIGHTNESS = 1.0
DEFAULT_SOFTNESS = 0.0
DEFAULT_INTENSITY = 1.0


@dataclass(frozen=True)
class Light:
    """
    Directional light used to relight an image.

    Attributes:
        direction: Unit vector toward the light (normalized on construction)
        color: RGB tint, each channel 0-255
        brightness: Non-negative scale on the diffuse factor
        softness: Widens the lit range of normals; floored to 0
    """
    direction: Vector3 = None
    color: Tuple[int, int, int] = DEFAULT_LIGHT_COLOR
    brightness: float = DEFAULT_BRIGHTNESS
    softness: float = DEFAULT_SOFTNESS

    def __post_init__(self):
        """Normalize direction, validate color and brightness, floor softness."""
        direction = self.direction
        if direction is None:
            direction = Vector3(*DEFAULT_LIGHT_DIRECTION)
        elif not isinstance(direction, Vector3):
            direction = Vector3.from_iterable(direction)

        if not np.isfinite(direction.as_array()).all():
            raise InvalidLightParameterError(
                f"Light direction must be finite, got {direction.as_tuple()}"
            )

        try:
            direction = direction.normalize()
        except DegenerateVectorError:
            raise InvalidLightParameterError(
                f"Light direction must be non-zero, got {direction.as_tuple()}"
            ) from None

        color = tuple(int(c) for c in self.color)
        if len(color) != 3:
            raise InvalidLightParameterError(f"Light color must have 3 channels, got {len(color)}")
        if any(c < 0 or c > 255 for c in color):
            raise InvalidLightParameterError(f"Light color channels must be in [0, 255], got {color}")

        brightness = float(self.brightness)
        if not np.isfinite(brightness) or brightness < 0.0:
            raise InvalidLightParameterError(f"Light brightness must be non-negative, got {brightness}")

        softness = float(self.softness)
        if not np.isfinite(softness):
            raise InvalidLightParameterError(f"Light softness must be finite, got {softness}")

        object.__setattr__(self, 'direction', direction)
        object.__setattr__(self, 'color', color)
        object.__setattr__(self, 'brightness', brightness)
        object.__setattr__(self, 'softness', max(0.0, softness))

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> 'Light':
        """Create Light from dictionary."""
        return cls(
            direction=Vector3.from_iterable(cfg.get('direction', DEFAULT_LIGHT_DIRECTION)),
            color=tuple(cfg.get('color', DEFAULT_LIGHT_COLOR)),
            brightness=float(cfg.get('brightness', DEFAULT_BRIGHTNESS)),
            softness=float(cfg.get('softness', DEFAULT_SOFTNESS)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'direction': list(self.direction.as_tuple()),
            'color': list(self.color),
            'brightness': self.brightness,
            'softness': self.softness,
        }


def clamp_intensity(intensity: float) -> float:
    """Clamp the blend factor into [0, 1]."""
    intensity = float(intensity)
    if np.isnan(intensity):
        raise InvalidLightParameterError("Intensity must be a number, got NaN")
    return min(1.0, max(0.0, intensity))
