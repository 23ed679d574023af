"""Main relighting compositor."""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence, Tuple
import numpy as np

from ..shading.config import Light
from ..shading.compute import compute_shading
from ..shading.models import accumulate_lights_at
from ..shading.normals import decode_normal
from ..utils.debug import debug_print
from ..utils.validation import validate_relight_inputs, validate_light_params
from .blend import apply_light, intensity_blend, MAX_CHANNEL
from .utils import check_dimensions, allocate_output, to_uint8


DEFAULT_CHUNK_ROWS = 64
BACKENDS = ('numpy', 'torch')


def relight_pixel(
    pixel: Sequence[int],
    normal_pixel: Sequence[int],
    lights: Sequence[Light],
    intensity: float
) -> Tuple[int, int, int, int]:
    """
    Relight a single pixel.

    Reference path over plain Python floats; relight_image produces the
    same values for every pixel.

    Args:
        pixel: Source RGBA
        normal_pixel: Normal-map RGB(A)
        lights: One or more lights
        intensity: Blend factor in [0, 1]

    Returns:
        Relit RGBA with alpha copied from pixel

    Raises:
        InvalidLightParameterError: If lights is empty or intensity out of range
    """
    lights = list(lights)
    intensity = float(intensity)
    validate_light_params(lights, intensity)

    normal = decode_normal(normal_pixel[0], normal_pixel[1], normal_pixel[2])
    acc = accumulate_lights_at(normal, lights)

    out = []
    for ch in range(3):
        original = float(pixel[ch])
        lit = min(MAX_CHANNEL, float(round(original * acc[ch])))
        value = round(original * (1.0 - intensity) + lit * intensity)
        out.append(int(min(MAX_CHANNEL, max(0.0, value))))

    return (out[0], out[1], out[2], int(pixel[3]))


def _relight_rows(
    image: np.ndarray,
    normal_map: np.ndarray,
    lights: Sequence[Light],
    intensity: float,
    out: np.ndarray,
    row_start: int,
    row_end: int
):
    """Relight rows [row_start, row_end) into out."""
    rows = slice(row_start, row_end)
    original = image[rows, :, :3].astype(np.float64)

    acc = compute_shading(normal_map[rows], lights)
    lit = apply_light(original, acc)
    blended = intensity_blend(original, lit, intensity)

    out[rows, :, :3] = to_uint8(blended)
    out[rows, :, 3] = image[rows, :, 3]


def _row_chunks(height: int, chunk_rows: int):
    for row_start in range(0, height, chunk_rows):
        yield row_start, min(height, row_start + chunk_rows)


def relight_image(
    image: np.ndarray,
    normal_map: np.ndarray,
    lights: Sequence[Light],
    intensity: float = 1.0,
    workers: int = 1,
    chunk_rows: Optional[int] = None,
    backend: str = 'numpy',
    device: Optional[str] = None,
    executor: Optional[ThreadPoolExecutor] = None
) -> np.ndarray:
    """
    Relight an image with a normal map and a set of directional lights.

    For every pixel the normal is decoded, all lights are accumulated, the
    lit color min(255, round(original * acc)) is computed and blended with
    the original by intensity. Alpha is copied unchanged.

    Args:
        image: Source pixels (H, W, 4) uint8
        normal_map: Normal-map pixels (H, W, 4) uint8
        lights: One or more lights; order does not affect the result
        intensity: Blend factor in [0, 1] (clamp with clamp_intensity first)
        workers: Threads for row-chunk processing (numpy backend)
        chunk_rows: Rows per chunk (default: 64 when workers > 1)
        backend: 'numpy' or 'torch'
        device: Torch device (torch backend only)
        executor: Existing executor to reuse instead of creating one

    Returns:
        Relit pixels (H, W, 4) uint8, a new buffer

    Raises:
        DimensionMismatchError: If image and normal map differ in size
        InvalidLightParameterError: If lights is empty or intensity out of range
        ValueError: If a buffer is malformed or backend is unknown

    Examples:
        >>> out = relight_image(
        ...     image=rgba,
        ...     normal_map=normals,
        ...     lights=[Light(direction=(1, 1, 1), color=(255, 240, 220), softness=0.3)],
        ...     intensity=0.8
        ... )
    """
    lights = list(lights)
    intensity = float(intensity)

    validate_relight_inputs(image, normal_map, lights, intensity)
    check_dimensions(image, normal_map)

    backend = (backend or 'numpy').lower().strip()
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend: {backend}")

    if backend == 'torch':
        from .torch_backend import relight_image_torch
        return relight_image_torch(image, normal_map, lights, intensity, device=device)

    height = image.shape[0]
    out = allocate_output(image)

    if workers <= 1 and executor is None and chunk_rows is None:
        _relight_rows(image, normal_map, lights, intensity, out, 0, height)
        return out

    chunk_size = max(1, int(chunk_rows or DEFAULT_CHUNK_ROWS))
    chunks = list(_row_chunks(height, chunk_size))
    debug_print(f"[Relight] {len(chunks)} chunk(s) of {chunk_size} rows, workers={workers}")

    if workers <= 1 and executor is None:
        for row_start, row_end in chunks:
            _relight_rows(image, normal_map, lights, intensity, out, row_start, row_end)
        return out

    local_executor = executor
    created_executor = False
    if local_executor is None:
        local_executor = ThreadPoolExecutor(max_workers=workers)
        created_executor = True

    try:
        futures = [
            local_executor.submit(
                _relight_rows, image, normal_map, lights, intensity, out, row_start, row_end
            )
            for row_start, row_end in chunks
        ]
        for future in futures:
            future.result()
    finally:
        if created_executor:
            local_executor.shutdown(wait=True)

    return out
