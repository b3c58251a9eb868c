from __future__ import annotations

from .api import to_image, montage

__all__ = ["to_image", "montage"]
