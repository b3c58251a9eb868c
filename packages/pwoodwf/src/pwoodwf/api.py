from __future__ import annotations
import os, time
from pathlib import Path

def atomic_write(path: Path | str, data: bytes) -> None:
    path = Path(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.parent.mkdir(parents=True, exist_ok=True)
    with open(tmp, "wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, path)

def texture_name(profile: str, length_scale: float, index: int, seed: int | None = None) -> str:
    # ex: wood_12_0.png, bright_wood_24_3__s42.png
    scale = f"{length_scale:g}".replace(".", "p")
    suffix = f"__s{seed}" if seed is not None else ""
    return f"{profile}_{scale}_{index}{suffix}.png"

def log_append(path: Path | str, msg: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y-%m-%d %H:%M:%S")
    with open(path, "a", encoding="utf-8") as f:
        f.write(f"[{ts}] {msg}\n")
