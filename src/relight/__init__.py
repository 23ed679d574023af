"""
relight - Normal-map image relighting

Relights an 8-bit RGBA image with a normal map and one or more directional
lights, blending the lit result with the original by an intensity factor.

Components:
    - Core: Relighter engine and run configuration
    - Shading: Vector3, Light, normal decoding and the diffuse model
    - Composite: Per-pixel compositor and pixel buffer helpers
    - Utils: Parsing, validation, conversion and debug output

Example:
    >>> from relight import Light, relight_image
    >>> 
    >>> lights = [Light(direction=(0.5, 0.5, 1.0), color=(255, 230, 200), softness=0.2)]
    >>> out = relight_image(image, normal_map, lights, intensity=0.8)
"""

__version__ = "1.0.0"

# Errors
from .errors import (
    RelightError,
    DimensionMismatchError,
    DegenerateVectorError,
    InvalidLightParameterError,
    ImageLoadError,
)

# Core
from .core import Relighter, RelightConfig, load_relight_setup

# Shading
from .shading import (
    Vector3,
    Light,
    clamp_intensity,
    compute_shading,
    compute_light_factor,
    decode_normal,
    decode_normal_map,
)

# Composite
from .composite import (
    relight_image,
    relight_pixel,
    ensure_rgba_uint8,
    check_dimensions,
    allocate_output,
)

# Utils
from .utils import (
    parse_vector,
    parse_color,
    debug_print,
    is_debug_enabled,
)

__all__ = [
    "__version__",

    # Errors
    "RelightError",
    "DimensionMismatchError",
    "DegenerateVectorError",
    "InvalidLightParameterError",
    "ImageLoadError",

    # Core
    "Relighter",
    "RelightConfig",
    "load_relight_setup",

    # Shading
    "Vector3",
    "Light",
    "clamp_intensity",
    "compute_shading",
    "compute_light_factor",
    "decode_normal",
    "decode_normal_map",

    # Composite
    "relight_image",
    "relight_pixel",
    "ensure_rgba_uint8",
    "check_dimensions",
    "allocate_output",

    # Utils
    "parse_vector",
    "parse_color",
    "debug_print",
    "is_debug_enabled",
]
