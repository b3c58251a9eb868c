from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import torch

from pwoodcore.device import get_device
from pwoodcore.errors import InvalidParameterError
from pwoodcore.rng import make_generator

from .api import GeneratorInfo, ParamSpec
from .noise import NoiseField, turbulence
from .profiles import ColorProfile, WOOD, brighten, map_ring_value, resolve_profile
from .utils import pixel_grid, positive_int

log = logging.getLogger(__name__)

# Réglages visuels (pas des valeurs dérivées : les changer change le caractère du bois)
TURBULENCE_STRENGTH = 14.6       # amplitude des torsions du fil
TURBULENCE_NORMALIZATION = 256.0
TURBULENCE_INITIAL_SIZE = 32.0   # px, taille de la première octave
RING_EXPONENT = 0.4              # < 1 : transitions sombre/clair plus franches qu'un sinus brut

INFO = GeneratorInfo(
    name="WOOD",
    param_specs=(
        ParamSpec("width", "int", 584, "px", "largeur de l'image"),
        ParamSpec("height", "int", 668, "px", "hauteur de l'image"),
        ParamSpec("offset_stdev", "float", 40.0, "px",
                  "écart-type du décalage aléatoire du centre des cernes"),
        ParamSpec("length_scale", "float", 12.0, "px",
                  "espacement moyen entre deux cernes"),
    ),
)


@dataclass(frozen=True)
class WoodState:
    """Tirages aléatoires d'un appel, partagés par tous les pixels."""

    offset_x: float
    offset_y: float
    phase: float


def _finite_float(name: str, v) -> float:
    try:
        x = float(v)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name} must be a number, got {v!r}") from exc
    if not math.isfinite(x):
        raise InvalidParameterError(f"{name} must be finite, got {v!r}")
    return x

def validate_params(width, height, offset_stdev, length_scale) -> tuple[int, int, float, float]:
    width = positive_int("width", width)
    height = positive_int("height", height)
    offset_stdev = _finite_float("offset_stdev", offset_stdev)
    if offset_stdev < 0.0:
        raise InvalidParameterError(f"offset_stdev must be >= 0, got {offset_stdev}")
    length_scale = _finite_float("length_scale", length_scale)
    if length_scale <= 0.0:
        raise InvalidParameterError(f"length_scale must be > 0, got {length_scale}")
    return width, height, offset_stdev, length_scale


def draw_state(offset_stdev: float, generator: torch.Generator) -> WoodState:
    """Décalage du centre ~ N(0, offset_stdev) sur chaque axe, phase ~ U[0, pi)."""
    off = torch.randn(2, generator=generator, dtype=torch.float64) * float(offset_stdev)
    # abs() plus loin : [0, pi) suffit
    phase = torch.rand((), generator=generator, dtype=torch.float64) * math.pi
    return WoodState(float(off[0]), float(off[1]), float(phase))


def ring_value(radius, length_scale: float, phase: float) -> torch.Tensor:
    r = torch.as_tensor(radius, dtype=torch.float64)
    return torch.abs(torch.sin(r / length_scale * math.pi + phase)) ** RING_EXPONENT


@torch.no_grad()
def synthesize(field: NoiseField, state: WoodState, length_scale: float,
               profile: ColorProfile) -> torch.Tensor:
    """Rendu déterministe à partir d'un champ de bruit et de tirages déjà matérialisés.

    Tous les pixels sont évalués d'un bloc (chaque pixel ne dépend que du champ,
    de `state` et de ses coordonnées). Retour : uint8 `[height, width, 3]` sur CPU.
    """
    w, h = field.width, field.height
    xx, yy = pixel_grid(h, w, device=field.data.device)

    dx = xx - w / 2.0 + state.offset_x
    dy = yy - h / 2.0 + state.offset_y
    base_radius = torch.hypot(dx, dy)

    turb = turbulence(field, xx, yy, TURBULENCE_INITIAL_SIZE)
    radius = base_radius + TURBULENCE_STRENGTH * turb / TURBULENCE_NORMALIZATION

    rgb = map_ring_value(ring_value(radius, length_scale, state.phase), profile)
    return brighten(rgb, profile.brightness_adjustment).cpu()


def generate(
    width: int,
    height: int,
    offset_stdev: float,
    length_scale: float,
    profile: ColorProfile | str = WOOD,
    *,
    generator: torch.Generator | None = None,
    device=None,
) -> torch.Tensor:
    """Génère une texture bois RGB `[height, width, 3]` (uint8).

    - `offset_stdev` : amplitude du décalage aléatoire du centre des cernes (px)
    - `length_scale` : espacement moyen entre cernes (px)
    - `profile` : `ColorProfile` ou nom d'un preset enregistré
    - `generator` : source d'aléa ; `None` = nouvelle graine à chaque appel

    Lève `InvalidParameterError` avant toute allocation si les paramètres sont invalides.
    """
    width, height, offset_stdev, length_scale = validate_params(width, height, offset_stdev, length_scale)
    profile = resolve_profile(profile)
    if generator is None:
        generator = make_generator()
    if device is None:
        device = get_device(strict_gpu=False)

    field = NoiseField.build(width, height, generator=generator, device=device)
    state = draw_state(offset_stdev, generator)
    log.debug("wood %dx%d offset=(%.3f, %.3f) phase=%.4f length_scale=%.2f device=%s",
              width, height, state.offset_x, state.offset_y, state.phase, length_scale, device)

    return synthesize(field, state, length_scale, profile)
