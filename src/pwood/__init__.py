"""pwood — API unifiée

Un seul namespace pour les sous-paquets :

    import pwood as pw
    raster = pw.generate(584, 668, 40.0, 12.0, pw.BRIGHT_WOOD)   # uint8 [H,W,3]
    pw.to_image(raster).save("bright_wood_12_0.png")

Ou par module :

    from pwood import core, proc, viz, wf
"""

__version__ = "1.0.0"

import pwoodcore as core
import pwoodproc as proc
import pwoodviz as viz
import pwoodwf as wf

from pwoodcore import InvalidParameterError, UnknownProfileError
from pwoodcore.rng import make_generator
from pwoodproc import (
    generate, synthesize, NoiseField, turbulence,
    ColorProfile, WOOD, BRIGHT_WOOD, map_ring_value, get_profile, list_profiles,
    WoodConfig,
)
from pwoodviz import to_image, montage
from pwoodwf import atomic_write, texture_name, log_append

__all__ = [
    # sous-namespaces
    "core", "proc", "viz", "wf",
    # raccourcis
    "InvalidParameterError", "UnknownProfileError", "make_generator",
    "generate", "synthesize", "NoiseField", "turbulence",
    "ColorProfile", "WOOD", "BRIGHT_WOOD", "map_ring_value", "get_profile", "list_profiles",
    "WoodConfig",
    "to_image", "montage",
    "atomic_write", "texture_name", "log_append",
    "__version__",
]
