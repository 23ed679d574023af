"""Pixel buffer utilities for compositing."""

from __future__ import annotations
import numpy as np

from ..errors import DimensionMismatchError


OPAQUE_ALPHA = 255


def ensure_rgba_uint8(img: np.ndarray) -> np.ndarray:
    """
    Convert a pixel buffer to RGBA uint8 (H, W, 4).
    
    Args:
        img: Input buffer (H, W), (H, W, 1), (H, W, 3) or (H, W, 4), uint8
    
    Returns:
        RGBA buffer (H, W, 4); alpha is 255 where the input had none
    
    Raises:
        ValueError: If dtype is not uint8 or the layout is unsupported
    """
    img = np.asarray(img)
    
    if img.dtype != np.uint8:
        raise ValueError(f"Pixel buffer must be uint8, got {img.dtype}")
    
    if img.ndim == 2:
        img = img[..., None]
    elif img.ndim != 3:
        raise ValueError(f"Unsupported image dimensions: {img.ndim}")
    
    channels = img.shape[2]
    if channels == 4:
        return img
    
    alpha = np.full(img.shape[:2] + (1,), OPAQUE_ALPHA, dtype=np.uint8)
    if channels == 1:
        # Grayscale -> RGB by repeating
        return np.concatenate([img, img, img, alpha], axis=-1)
    elif channels == 3:
        return np.concatenate([img, alpha], axis=-1)
    else:
        raise ValueError(f"Unsupported number of channels: {channels}")


def check_dimensions(image: np.ndarray, normal_map: np.ndarray):
    """
    Ensure image and normal map share width and height.
    
    Raises:
        DimensionMismatchError: If (H, W) differ
    """
    if image.shape[:2] != normal_map.shape[:2]:
        raise DimensionMismatchError(image.shape[:2], normal_map.shape[:2])


def allocate_output(image: np.ndarray) -> np.ndarray:
    """Allocate a zeroed uint8 buffer shaped like image."""
    return np.zeros(image.shape, dtype=np.uint8)


def to_uint8(values: np.ndarray) -> np.ndarray:
    """Clamp rounded channel values into [0, 255] and cast."""
    return np.clip(values, 0, 255).astype(np.uint8)
