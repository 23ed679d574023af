"""
Relighting engine.

This module provides the Relighter class, which binds a light rig and run
options together and applies them to pixel buffers or image files.
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional, Sequence, Union
import time
import numpy as np

from ..composite.main import relight_image
from ..composite.utils import ensure_rgba_uint8
from ..errors import InvalidLightParameterError
from ..shading.config import Light
from ..utils.debug import debug_print, debug_scope
from .config import RelightConfig


class Relighter:
    """
    Normal-map relighting engine.

    Attributes:
        lights: Light rig, evaluated for every pixel
        config: Run options (intensity, workers, backend)
        last_stats: Timing and size of the most recent render

    Example:
        >>> relighter = Relighter(
        ...     lights=[Light(direction=(-1, 1, 1), color=(255, 220, 180))],
        ...     config=RelightConfig(intensity=0.75)
        ... )
        >>> out = relighter.render(image, normal_map)
    """

    def __init__(
        self,
        lights: Sequence[Light],
        config: Optional[RelightConfig] = None
    ):
        """
        Initialize relighter.

        Args:
            lights: One or more lights
            config: Run options (default: RelightConfig())

        Raises:
            InvalidLightParameterError: If lights is empty
        """
        self.lights = tuple(lights)
        if not self.lights:
            raise InvalidLightParameterError("At least one light is required")

        self.config = config if config is not None else RelightConfig()
        self.last_stats: Dict[str, float] = {}

    def render(self, image: np.ndarray, normal_map: np.ndarray) -> np.ndarray:
        """
        Relight a pixel buffer.

        Args:
            image: Source pixels (H, W, 3|4) uint8
            normal_map: Normal-map pixels (H, W, 3|4) uint8

        Returns:
            Relit pixels (H, W, 4) uint8
        """
        image = ensure_rgba_uint8(image)
        normal_map = ensure_rgba_uint8(normal_map)

        with debug_scope(self.config.debug):
            start = time.perf_counter()
            out = relight_image(
                image,
                normal_map,
                self.lights,
                intensity=self.config.intensity,
                workers=self.config.workers,
                chunk_rows=self.config.chunk_rows,
                backend=self.config.backend,
                device=self.config.device,
            )
            elapsed = time.perf_counter() - start
            debug_print(f"[Relight] {image.shape[1]}x{image.shape[0]} with "
                        f"{len(self.lights)} light(s) in {elapsed:.3f}s")

        self.last_stats = {
            'width': float(image.shape[1]),
            'height': float(image.shape[0]),
            'lights': float(len(self.lights)),
            'seconds': elapsed,
        }
        return out

    def render_files(
        self,
        image_path: Union[str, Path],
        normal_map_path: Union[str, Path],
        output_path: Union[str, Path]
    ) -> Path:
        """
        Load image and normal map, relight, and save the result.

        Returns:
            Path of the written image

        Raises:
            ImageLoadError: If an input file is missing or unreadable
            DimensionMismatchError: If the images differ in size
        """
        from ..utils.image_io import load_image, save_image

        image = load_image(image_path)
        normal_map = load_image(normal_map_path)
        out = self.render(image, normal_map)
        return save_image(output_path, out)
