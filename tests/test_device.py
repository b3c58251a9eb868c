import pytest
import torch

from pwoodcore.device import get_device
from pwoodcore.errors import MissingCudaError

def test_force_cpu(monkeypatch):
    monkeypatch.setenv("PWOOD_FORCE_CPU", "1")
    assert get_device().type == "cpu"

def test_strict_gpu_without_cuda(monkeypatch):
    monkeypatch.setattr(torch.cuda, "is_available", lambda: False)
    assert get_device(strict_gpu=False).type == "cpu"
    with pytest.raises(MissingCudaError):
        get_device(strict_gpu=True)
