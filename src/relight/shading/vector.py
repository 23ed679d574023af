"""Minimal immutable 3D vector."""

from __future__ import annotations
from dataclasses import dataclass
import math
import numpy as np

from ..errors import DegenerateVectorError


EPSILON_NORMALIZE = 1e-9


@dataclass(frozen=True)
class Vector3:
    """
    Three-component float vector.

    Instances are immutable; every operation returns a new vector.
    """
    x: float
    y: float
    z: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))
        object.__setattr__(self, 'z', float(self.z))

    @classmethod
    def from_iterable(cls, values) -> 'Vector3':
        """Build a vector from any 3-element sequence or array."""
        values = list(values)
        if len(values) != 3:
            raise ValueError(f"Vector3 needs exactly 3 components, got {len(values)}")
        return cls(values[0], values[1], values[2])

    def dot(self, other: 'Vector3') -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self, eps: float = EPSILON_NORMALIZE) -> 'Vector3':
        """
        Return the unit vector pointing the same way.

        Raises:
            DegenerateVectorError: If the magnitude is below eps
        """
        mag = self.magnitude()
        if mag < eps:
            raise DegenerateVectorError(f"Cannot normalize zero-length vector {self.as_tuple()}")
        return Vector3(self.x / mag, self.y / mag, self.z / mag)

    def normalize_or(self, fallback: 'Vector3', eps: float = EPSILON_NORMALIZE) -> 'Vector3':
        """Normalize, returning fallback instead of raising on a zero vector."""
        mag = self.magnitude()
        if mag < eps:
            return fallback
        return Vector3(self.x / mag, self.y / mag, self.z / mag)

    def as_tuple(self):
        return (self.x, self.y, self.z)

    def as_array(self, dtype=np.float64) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=dtype)


UP = Vector3(0.0, 0.0, 1.0)
