from __future__ import annotations
from dataclasses import dataclass
from typing import Any

@dataclass(frozen=True)
class ParamSpec:
    name: str
    type: str
    default: Any
    units: str | None = None
    help: str | None = None

@dataclass(frozen=True)
class GeneratorInfo:
    name: str
    param_specs: tuple[ParamSpec, ...]
