"""Input validation utilities."""

from __future__ import annotations
from typing import Sequence
import numpy as np

from ..errors import InvalidLightParameterError


def validate_pixel_buffer(buffer: np.ndarray, name: str = "buffer"):
    """
    Validate an 8-bit RGBA pixel buffer.
    
    Args:
        buffer: Pixel buffer
        name: Name used in error messages
    
    Raises:
        ValueError: If buffer is not (H, W, 4) uint8
    """
    if not isinstance(buffer, np.ndarray):
        raise ValueError(f"{name} must be a numpy array, got {type(buffer).__name__}")
    
    if buffer.ndim != 3 or buffer.shape[2] != 4:
        raise ValueError(f"{name} must be (H, W, 4), got {buffer.shape}")
    
    if buffer.dtype != np.uint8:
        raise ValueError(f"{name} must be uint8, got {buffer.dtype}")


def validate_relight_inputs(
    image: np.ndarray,
    normal_map: np.ndarray,
    lights: Sequence,
    intensity: float
):
    """
    Validate compositor inputs.
    
    Args:
        image: Source pixel buffer
        normal_map: Normal-map pixel buffer
        lights: Light list
        intensity: Blend factor
    
    Raises:
        ValueError: If a buffer is malformed
        InvalidLightParameterError: If lights is empty or intensity out of range
    """
    validate_pixel_buffer(image, "image")
    validate_pixel_buffer(normal_map, "normal_map")
    validate_light_params(lights, intensity)


def validate_light_params(lights: Sequence, intensity: float):
    """
    Validate the light list and blend factor.
    
    Raises:
        InvalidLightParameterError: If lights is empty or intensity out of range
    """
    if len(lights) == 0:
        raise InvalidLightParameterError("At least one light is required")
    
    if not (0.0 <= intensity <= 1.0):
        raise InvalidLightParameterError(f"Intensity must be in [0, 1], got {intensity}")
