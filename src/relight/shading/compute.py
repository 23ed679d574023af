"""Main shading computation."""

from __future__ import annotations
from typing import Sequence
import numpy as np

from ..errors import InvalidLightParameterError
from ..utils.debug import debug_array_info
from .config import Light
from .normals import decode_normal_map
from .models import accumulate_lights


def compute_shading(
    normal_map: np.ndarray,
    lights: Sequence[Light]
) -> np.ndarray:
    """
    Compute the per-pixel light accumulator for a normal map.

    Args:
        normal_map: Normal-map pixel buffer (H, W, C) with C >= 3
        lights: One or more lights

    Returns:
        Accumulated light (H, W, 3) float64, 1.0 = unchanged channel

    Raises:
        InvalidLightParameterError: If lights is empty

    Examples:
        >>> acc = compute_shading(
        ...     normal_map=normals,
        ...     lights=[Light(direction=(0, 0, 1), color=(255, 200, 160))]
        ... )
    """
    lights = list(lights)
    if not lights:
        raise InvalidLightParameterError("At least one light is required")

    normals = decode_normal_map(normal_map)
    debug_array_info("normals", normals)

    acc = accumulate_lights(normals, lights)
    debug_array_info("light_acc", acc)

    return acc
