"""Shading system for normal-mapped relighting."""

from .vector import Vector3
from .config import Light, clamp_intensity
from .compute import compute_shading
from .models import (
    compute_light_factor,
    compute_light_contribution,
    accumulate_lights,
    accumulate_lights_at,
)
from .normals import (
    decode_normal,
    decode_normal_map,
    FALLBACK_NORMAL,
)

__all__ = [
    # Types
    "Vector3",
    "Light",
    "clamp_intensity",

    # Main API
    "compute_shading",

    # Models
    "compute_light_factor",
    "compute_light_contribution",
    "accumulate_lights",
    "accumulate_lights_at",

    # Normals
    "decode_normal",
    "decode_normal_map",
    "FALLBACK_NORMAL",
]
