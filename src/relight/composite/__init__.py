"""Compositing of lit and original pixels."""

from .utils import (
    ensure_rgba_uint8,
    check_dimensions,
    allocate_output,
)
from .blend import apply_light, intensity_blend
from .main import relight_image, relight_pixel

__all__ = [
    # Utils
    "ensure_rgba_uint8",
    "check_dimensions",
    "allocate_output",

    # Blending
    "apply_light",
    "intensity_blend",

    # Compositing
    "relight_image",
    "relight_pixel",
]
