"""Common utilities for relighting."""

from .conversion import (
    to_torch_tensor,
    to_numpy_array,
)
from .parsing import parse_vector, parse_color
from .validation import (
    validate_pixel_buffer,
    validate_relight_inputs,
    validate_light_params,
)
from .debug import (
    is_debug_enabled,
    debug_scope,
    debug_print,
    debug_array_info,
)

__all__ = [
    # Conversion
    "to_torch_tensor",
    "to_numpy_array",

    # Parsing
    "parse_vector",
    "parse_color",

    # Validation
    "validate_pixel_buffer",
    "validate_relight_inputs",
    "validate_light_params",

    # Debug
    "is_debug_enabled",
    "debug_scope",
    "debug_print",
    "debug_array_info",
]
