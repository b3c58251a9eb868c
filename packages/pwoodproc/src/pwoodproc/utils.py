from __future__ import annotations
import numbers

import torch

from pwoodcore.errors import InvalidParameterError

def pixel_grid(h: int, w: int, *, device=None, dtype=None):
    """Coordonnées entières des pixels (x = colonne, y = ligne), shape [h,w]."""
    if dtype is None:
        dtype = torch.float64
    yy, xx = torch.meshgrid(
        torch.arange(h, device=device, dtype=dtype),
        torch.arange(w, device=device, dtype=dtype),
        indexing="ij",
    )
    return xx, yy

def positive_int(name: str, v) -> int:
    if isinstance(v, bool) or not isinstance(v, numbers.Integral) or v <= 0:
        raise InvalidParameterError(f"{name} must be a positive integer, got {v!r}")
    return int(v)
