"""Type conversion utilities."""

from __future__ import annotations
from typing import Union
import numpy as np


def to_torch_tensor(
    x: Union[np.ndarray, "torch.Tensor", list],
    device: str = "cpu",
    dtype: "torch.dtype" = None
):
    """
    Convert input to PyTorch tensor.
    
    Args:
        x: Input (numpy array, torch tensor, or list)
        device: Target device
        dtype: Target dtype (default: torch.float64)
    
    Returns:
        PyTorch tensor on specified device
    """
    import torch
    
    if dtype is None:
        dtype = torch.float64
    
    if isinstance(x, torch.Tensor):
        tensor = x.to(dtype)
    else:
        tensor = torch.as_tensor(np.asarray(x), dtype=dtype)
    
    if device and tensor.device != torch.device(device):
        tensor = tensor.to(device)
    
    return tensor


def to_numpy_array(
    x: Union[np.ndarray, "torch.Tensor"],
    dtype: np.dtype = np.uint8
) -> np.ndarray:
    """
    Convert input to NumPy array.
    
    Args:
        x: Input (numpy array or torch tensor)
        dtype: Target dtype
    
    Returns:
        NumPy array
    """
    if hasattr(x, 'detach'):  # torch.Tensor
        return x.detach().cpu().numpy().astype(dtype)
    else:
        return np.asarray(x).astype(dtype, copy=False)
