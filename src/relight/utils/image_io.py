"""Loading and saving pixel buffers with Pillow."""

from __future__ import annotations
from pathlib import Path
from typing import Union
import numpy as np
from PIL import Image, UnidentifiedImageError

from ..errors import ImageLoadError
from ..composite.utils import ensure_rgba_uint8


def load_image(path: Union[str, Path]) -> np.ndarray:
    """
    Load an image file as an RGBA pixel buffer.
    
    Args:
        path: Image file (PNG, JPG, ...)
    
    Returns:
        Pixel buffer (H, W, 4) uint8
    
    Raises:
        ImageLoadError: If the file is missing or cannot be decoded
    """
    path = Path(path)
    if not path.is_file():
        raise ImageLoadError(f"Image file not found: {path}")
    
    try:
        with Image.open(path) as img:
            rgba = img.convert('RGBA')
            return ensure_rgba_uint8(np.array(rgba))
    except (UnidentifiedImageError, OSError) as e:
        raise ImageLoadError(f"Could not read image {path}: {e}") from e


def save_image(path: Union[str, Path], buffer: np.ndarray) -> Path:
    """
    Save an RGBA pixel buffer; the format follows the file extension.
    
    Formats without alpha (JPEG) are written as RGB.
    
    Returns:
        The written path
    """
    path = Path(path)
    buffer = ensure_rgba_uint8(buffer)
    
    img = Image.fromarray(buffer)
    if path.suffix.lower() in ('.jpg', '.jpeg'):
        img = img.convert('RGB')
    
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    
    img.save(path)
    return path
