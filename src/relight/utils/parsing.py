"""Parsing of command-line vector and color strings."""

from __future__ import annotations
from typing import Tuple


def _split_triple(text: str, message: str):
    parts = [p.strip() for p in str(text).split(',')]
    if len(parts) != 3:
        raise ValueError(message)
    return parts


def parse_vector(text: str) -> Tuple[float, float, float]:
    """
    Parse "x,y,z" into three floats.
    
    Raises:
        ValueError: If the string is not three comma-separated numbers
    """
    parts = _split_triple(text, "Light direction must be in format: x,y,z")
    try:
        return (float(parts[0]), float(parts[1]), float(parts[2]))
    except ValueError:
        raise ValueError(f"Light direction must be in format: x,y,z (got '{text}')") from None


def parse_color(text: str) -> Tuple[int, int, int]:
    """
    Parse "r,g,b" into three ints in [0, 255].
    
    Raises:
        ValueError: If the string is malformed or a channel is out of range
    """
    parts = _split_triple(text, "Light color must be in format: r,g,b")
    try:
        color = (int(parts[0]), int(parts[1]), int(parts[2]))
    except ValueError:
        raise ValueError(f"Light color must be in format: r,g,b (got '{text}')") from None
    
    if any(c < 0 or c > 255 for c in color):
        raise ValueError(f"Light color channels must be in [0, 255], got {color}")
    
    return color
