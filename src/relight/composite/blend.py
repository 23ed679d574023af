"""Lit-pixel computation and intensity blending."""

from __future__ import annotations
import numpy as np


MAX_CHANNEL = 255.0


def apply_light(original_rgb: np.ndarray, acc: np.ndarray) -> np.ndarray:
    """
    Apply accumulated light to the original colors.
    
    Formula: lit = min(255, round(original * acc))
    
    Args:
        original_rgb: Source channels (..., 3) in [0, 255]
        acc: Light accumulator (..., 3)
    
    Returns:
        Lit channels (..., 3) float64 in [0, 255]
    """
    lit = np.round(original_rgb * acc)
    return np.minimum(lit, MAX_CHANNEL)


def intensity_blend(
    original_rgb: np.ndarray,
    lit_rgb: np.ndarray,
    intensity: float
) -> np.ndarray:
    """
    Linear blend between original and lit colors.
    
    Formula: out = round(original * (1 - intensity) + lit * intensity)
    
    Args:
        original_rgb: Source channels (..., 3) in [0, 255]
        lit_rgb: Lit channels (..., 3) in [0, 255]
        intensity: Blend factor in [0, 1]
    
    Returns:
        Blended channels (..., 3) float64, clamped to [0, 255]
    """
    out = np.round(original_rgb * (1.0 - intensity) + lit_rgb * intensity)
    return np.clip(out, 0.0, MAX_CHANNEL)
