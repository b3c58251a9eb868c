from __future__ import annotations
import logging, sys, time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import torch

def setup_logging(log_file: Optional[Path], verbose: bool = True) -> None:
    log_fmt = "[%(asctime)s] %(levelname)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=log_fmt, datefmt=datefmt, handlers=handlers)

def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)

@dataclass
class RunMeta:
    cmd: list[str]
    start_ts: float
    torch: Optional[str]
    cuda: Optional[str]
    device: str
    seed: Optional[int]

    @staticmethod
    def collect(seed: Optional[int] = None, device: str = "auto") -> "RunMeta":
        cuda_v = torch.version.cuda if torch.cuda.is_available() else None
        return RunMeta(sys.argv[:], time.time(), torch.__version__, cuda_v, device, seed)

def pick_device(force_cpu: bool = False) -> torch.device:
    if force_cpu:
        return torch.device("cpu")
    from pwoodcore.device import get_device
    return get_device(strict_gpu=False)
