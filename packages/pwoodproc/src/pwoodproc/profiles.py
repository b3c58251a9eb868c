from __future__ import annotations

from dataclasses import dataclass
import torch

from pwoodcore.errors import InvalidParameterError, UnknownProfileError

__all__ = [
    "ColorProfile", "WOOD", "BRIGHT_WOOD",
    "map_ring_value", "brighten",
    "register_profile", "get_profile", "list_profiles", "resolve_profile",
]

RGB = tuple[int, int, int]


def _as_rgb(name: str, c) -> RGB:
    try:
        t = tuple(int(v) for v in c)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"ColorProfile.{name} must be an RGB triple, got {c!r}") from exc
    if len(t) != 3 or any(not (0 <= v <= 255) for v in t):
        raise InvalidParameterError(f"ColorProfile.{name} must be 3 channels in [0,255], got {c!r}")
    return t  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class ColorProfile:
    """
    Palette d'une texture bois.

    Champs
    ------
    brightness_adjustment : int, default=0
        Décalage additif appliqué à chaque canal *après* l'interpolation,
        puis écrêté dans [0,255].
    dark_color, light_color : (u8,u8,u8)
        Les deux extrémités de l'interpolation (valeur d'anneau 0 -> sombre, 1 -> clair).

    Immuable, réutilisable d'un appel à l'autre.
    """

    brightness_adjustment: int = 0
    dark_color: RGB = (120, 70, 70)
    light_color: RGB = (208, 158, 70)

    def __post_init__(self) -> None:
        if isinstance(self.brightness_adjustment, bool) or not isinstance(self.brightness_adjustment, int):
            raise InvalidParameterError("ColorProfile.brightness_adjustment must be an int")
        object.__setattr__(self, "dark_color", _as_rgb("dark_color", self.dark_color))
        object.__setattr__(self, "light_color", _as_rgb("light_color", self.light_color))


WOOD = ColorProfile(brightness_adjustment=0)
BRIGHT_WOOD = ColorProfile(brightness_adjustment=20)


@torch.no_grad()
def map_ring_value(ring_value, profile: ColorProfile) -> torch.Tensor:
    """Valeur d'anneau dans [0,1] -> couleur RGB u8 (lerp canal par canal).

    Accepte un scalaire ou un tenseur `[...]` ; renvoie `[..., 3]` uint8.
    Arrondi au plus proche (demi vers le haut, les valeurs étant positives).
    """
    t = torch.as_tensor(ring_value, dtype=torch.float64)
    a = torch.tensor(profile.dark_color, dtype=torch.float64, device=t.device)
    b = torch.tensor(profile.light_color, dtype=torch.float64, device=t.device)
    v = a + (b - a) * t.unsqueeze(-1)
    return torch.floor(v + 0.5).clamp(0, 255).to(torch.uint8)


@torch.no_grad()
def brighten(raster: torch.Tensor, adjustment: int) -> torch.Tensor:
    """Ajout uniforme sur tous les canaux, écrêté à la plage u8."""
    if adjustment == 0:
        return raster.clone()
    out = raster.to(torch.int32) + int(adjustment)
    return out.clamp(0, 255).to(torch.uint8)


# ---------------------------------------------------------------------
# Registre des presets
# ---------------------------------------------------------------------

_REG: dict[str, ColorProfile] = {}

def register_profile(name: str, profile: ColorProfile) -> None:
    _REG[name] = profile

def get_profile(name: str) -> ColorProfile:
    try:
        return _REG[name]
    except KeyError as exc:
        raise UnknownProfileError(f"Preset inconnu: {name}") from exc

def list_profiles() -> list[str]:
    return sorted(_REG)

def resolve_profile(profile: ColorProfile | str) -> ColorProfile:
    if isinstance(profile, ColorProfile):
        return profile
    return get_profile(profile)


register_profile("wood", WOOD)
register_profile("bright_wood", BRIGHT_WOOD)
