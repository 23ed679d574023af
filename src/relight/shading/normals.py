"""Normal map decoding."""

from __future__ import annotations
import numpy as np

from .vector import Vector3, UP, EPSILON_NORMALIZE


NORMAL_SCALE = 127.5

# Used wherever a normal-map pixel decodes to a zero vector.
FALLBACK_NORMAL = UP


def decode_channel(value):
    """Map an 8-bit channel value onto [-1, 1]."""
    return value / NORMAL_SCALE - 1.0


def decode_normal(r: int, g: int, b: int) -> Vector3:
    """
    Decode one normal-map pixel into a unit vector.

    Args:
        r, g, b: Channel values in [0, 255]

    Returns:
        Unit normal, or FALLBACK_NORMAL if the raw vector has zero length
    """
    raw = Vector3(decode_channel(float(r)), decode_channel(float(g)), decode_channel(float(b)))
    return raw.normalize_or(FALLBACK_NORMAL)


def decode_normal_map(
    normal_map: np.ndarray,
    eps: float = EPSILON_NORMALIZE
) -> np.ndarray:
    """
    Decode a whole normal map into unit vectors.

    Args:
        normal_map: Pixel buffer (H, W, C) with C >= 3, values in [0, 255]
        eps: Magnitude below which the fallback normal is used

    Returns:
        Unit normals (H, W, 3) float64

    Notes:
        - Only the first three channels are read; alpha is ignored
        - Operation order matches decode_normal exactly
    """
    rgb = np.asarray(normal_map)[..., :3].astype(np.float64)
    raw = decode_channel(rgb)

    x = raw[..., 0]
    y = raw[..., 1]
    z = raw[..., 2]
    magnitude = np.sqrt(x * x + y * y + z * z)

    degenerate = magnitude < eps
    safe_magnitude = np.where(degenerate, 1.0, magnitude)

    normals = raw / safe_magnitude[..., None]
    if degenerate.any():
        normals[degenerate] = FALLBACK_NORMAL.as_array()

    return normals
