"""Debug utilities."""

from __future__ import annotations
from contextlib import contextmanager
from typing import Tuple
import os
import numpy as np

DEBUG_ENV_VAR = "RELIGHT_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


@contextmanager
def debug_scope(enabled: bool = True):
    """Enable the debug channel inside a with-block, restoring it afterwards."""
    if not enabled:
        yield
        return
    previous = os.environ.get(DEBUG_ENV_VAR)
    os.environ[DEBUG_ENV_VAR] = "1"
    try:
        yield
    finally:
        if previous is None:
            os.environ.pop(DEBUG_ENV_VAR, None)
        else:
            os.environ[DEBUG_ENV_VAR] = previous


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def get_array_stats(array) -> Tuple[float, float, float]:
    """
    Get min, max, mean statistics of an array.
    
    Args:
        array: NumPy array or torch tensor
    
    Returns:
        (min, max, mean) as floats
    """
    if hasattr(array, 'detach'):
        array = array.detach().cpu().numpy()
    array = np.asarray(array, dtype=np.float64)
    return (
        float(array.min()),
        float(array.max()),
        float(array.mean())
    )


def debug_array_info(name: str, array):
    """Print debug information about an array."""
    if is_debug_enabled():
        if array.size == 0:
            print(f"[{name}] shape={tuple(array.shape)} dtype={array.dtype} (empty)")
            return
        mn, mx, mean = get_array_stats(array)
        print(f"[{name}] shape={tuple(array.shape)} dtype={array.dtype} "
              f"min={mn:.4f} max={mx:.4f} mean={mean:.4f}")
