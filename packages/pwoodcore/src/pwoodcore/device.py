from __future__ import annotations
import os

import torch

from .errors import MissingCudaError

def get_device(strict_gpu: bool = False) -> torch.device:
    """CUDA si dispo, sinon CPU. `PWOOD_FORCE_CPU=1` force le CPU."""
    force_cpu = os.getenv("PWOOD_FORCE_CPU", "0") == "1"
    if torch.cuda.is_available() and not force_cpu:
        return torch.device("cuda")
    if strict_gpu:
        raise MissingCudaError("Manque: GPU CUDA")
    return torch.device("cpu")
