# packages/pwoodproc/src/pwoodproc/__init__.py
from __future__ import annotations

"""pwoodproc - synthèse procédurale de textures bois (surface publique)."""

from .noise import NoiseField, turbulence
from .profiles import (
    ColorProfile, WOOD, BRIGHT_WOOD,
    map_ring_value, brighten,
    register_profile, get_profile, list_profiles,
)
from .wood import (
    INFO, WoodState, generate, synthesize, draw_state, ring_value,
    TURBULENCE_STRENGTH, TURBULENCE_NORMALIZATION, TURBULENCE_INITIAL_SIZE, RING_EXPONENT,
)
from .config import WoodConfig

__all__ = [
    "NoiseField", "turbulence",
    "ColorProfile", "WOOD", "BRIGHT_WOOD", "map_ring_value", "brighten",
    "register_profile", "get_profile", "list_profiles",
    "INFO", "WoodState", "generate", "synthesize", "draw_state", "ring_value",
    "TURBULENCE_STRENGTH", "TURBULENCE_NORMALIZATION", "TURBULENCE_INITIAL_SIZE", "RING_EXPONENT",
    "WoodConfig",
]

__version__ = "1.0.0"
