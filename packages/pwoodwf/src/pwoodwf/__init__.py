# packages/pwoodwf/src/pwoodwf/__init__.py
from __future__ import annotations

from .api import atomic_write, texture_name, log_append

__all__ = [
    "atomic_write",
    "texture_name",
    "log_append",
    # pas d'import du sous-module cli ici (torch/PIL chargés à la demande)
]

__version__ = "1.0.0"
