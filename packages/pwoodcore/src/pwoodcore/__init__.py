from __future__ import annotations

from .errors import PWoodError, InvalidParameterError, UnknownProfileError, MissingCudaError

__all__ = [
    "PWoodError",
    "InvalidParameterError",
    "UnknownProfileError",
    "MissingCudaError",
]

__version__ = "1.0.0"
