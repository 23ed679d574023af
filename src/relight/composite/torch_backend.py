"""PyTorch implementation of the relighting pass."""

from __future__ import annotations
from typing import Optional, Sequence
import numpy as np

from ..shading.config import Light
from ..shading.normals import NORMAL_SCALE, FALLBACK_NORMAL
from ..shading.vector import EPSILON_NORMALIZE
from ..shading.models import COLOR_SCALE, canonical_order
from ..utils.conversion import to_torch_tensor, to_numpy_array
from ..utils.debug import debug_array_info
from .blend import MAX_CHANNEL


def _resolve_device(device: Optional[str]) -> str:
    import torch

    if device:
        return device
    return "cuda" if torch.cuda.is_available() else "cpu"


def relight_image_torch(
    image: np.ndarray,
    normal_map: np.ndarray,
    lights: Sequence[Light],
    intensity: float,
    device: Optional[str] = None
) -> np.ndarray:
    """
    Relight an image on a torch device.

    Evaluates the same formulas as relight_image in float64, in the same
    operation order, so results match the numpy backend.

    Args:
        image: Source pixels (H, W, 4) uint8, already validated
        normal_map: Normal-map pixels (H, W, 4) uint8, already validated
        lights: One or more lights
        intensity: Blend factor in [0, 1]
        device: Torch device (default: cuda if available, else cpu)

    Returns:
        Relit pixels (H, W, 4) uint8
    """
    import torch

    device = _resolve_device(device)

    original = to_torch_tensor(image[..., :3], device=device)
    raw = to_torch_tensor(normal_map[..., :3], device=device) / NORMAL_SCALE - 1.0

    # Normal decoding
    x, y, z = raw[..., 0], raw[..., 1], raw[..., 2]
    magnitude = torch.sqrt(x * x + y * y + z * z)
    degenerate = magnitude < EPSILON_NORMALIZE
    normals = raw / torch.where(degenerate, torch.ones_like(magnitude), magnitude)[..., None]
    if bool(degenerate.any()):
        normals[degenerate] = to_torch_tensor(FALLBACK_NORMAL.as_array(), device=device)
    debug_array_info("normals", normals)

    # Light accumulation
    acc = torch.zeros_like(original)
    for light in canonical_order(lights):
        d = light.direction
        dot = normals[..., 0] * d.x + normals[..., 1] * d.y + normals[..., 2] * d.z
        factor = (dot + light.softness) / (1.0 + light.softness)
        factor = torch.clamp(factor, min=0.0) * light.brightness
        color = to_torch_tensor(light.color, device=device)
        acc += factor[..., None] * color / COLOR_SCALE
    debug_array_info("light_acc", acc)

    # Lit color and blend
    lit = torch.clamp(torch.round(original * acc), max=MAX_CHANNEL)
    blended = torch.round(original * (1.0 - intensity) + lit * intensity)
    blended = torch.clamp(blended, 0.0, MAX_CHANNEL)

    out = np.empty_like(image)
    out[..., :3] = to_numpy_array(blended, dtype=np.uint8)
    out[..., 3] = image[..., 3]
    return out
