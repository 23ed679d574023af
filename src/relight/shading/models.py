"""Diffuse lighting model with softness."""

from __future__ import annotations
from typing import Sequence, List
import numpy as np

from .config import Light
from .vector import Vector3


COLOR_SCALE = 255.0


def compute_light_factor(dot, softness: float, brightness: float):
    """
    Compute the softened, clamped and scaled diffuse factor.

    Formula:
        factor = max(0, (N·L + softness) / (1 + softness)) * brightness

    With softness = 0 this is the plain Lambert term. Larger softness lets
    grazing and back-facing normals receive light while a fully lit normal
    (N·L = 1) still maps to 1.

    Args:
        dot: N·L as a float or array
        softness: Non-negative softness
        brightness: Non-negative brightness

    Returns:
        Factor with the same shape as dot
    """
    factor = (dot + softness) / (1.0 + softness)

    if isinstance(factor, np.ndarray):
        factor = np.maximum(factor, 0.0)
    else:
        factor = max(0.0, factor)

    return factor * brightness


def compute_dot_term(normals: np.ndarray, direction: Vector3) -> np.ndarray:
    """
    Dot product of every normal with a light direction.

    Args:
        normals: Unit normals (..., 3)
        direction: Unit light direction

    Returns:
        N·L (...)
    """
    return (
        normals[..., 0] * direction.x
        + normals[..., 1] * direction.y
        + normals[..., 2] * direction.z
    )


def compute_light_contribution(normals: np.ndarray, light: Light) -> np.ndarray:
    """
    Per-channel contribution of a single light.

    Args:
        normals: Unit normals (..., 3)
        light: Light to evaluate

    Returns:
        Contribution (..., 3), channel = factor * color / 255
    """
    dot = compute_dot_term(normals, light.direction)
    factor = compute_light_factor(dot, light.softness, light.brightness)
    color = np.array(light.color, dtype=np.float64)
    return factor[..., None] * color / COLOR_SCALE


def canonical_order(lights: Sequence[Light]) -> List[Light]:
    """
    Sort lights into a fixed evaluation order.

    Floating-point sums depend on operand order; summing in this order makes
    the result independent of how the caller lists the lights.
    """
    return sorted(
        lights,
        key=lambda light: (light.direction.as_tuple(), light.color, light.brightness, light.softness)
    )


def accumulate_lights(normals: np.ndarray, lights: Sequence[Light]) -> np.ndarray:
    """
    Sum the contributions of all lights.

    Args:
        normals: Unit normals (..., 3)
        lights: Lights in any order

    Returns:
        Per-channel accumulator (..., 3)
    """
    acc = np.zeros(normals.shape[:-1] + (3,), dtype=np.float64)
    for light in canonical_order(lights):
        acc += compute_light_contribution(normals, light)
    return acc


def accumulate_lights_at(normal: Vector3, lights: Sequence[Light]) -> List[float]:
    """Scalar version of accumulate_lights for a single normal."""
    acc = [0.0, 0.0, 0.0]
    for light in canonical_order(lights):
        factor = compute_light_factor(normal.dot(light.direction), light.softness, light.brightness)
        for ch in range(3):
            acc[ch] += factor * light.color[ch] / COLOR_SCALE
    return acc
