from __future__ import annotations

import math
from dataclasses import dataclass
import torch

from pwoodcore.errors import InvalidParameterError

from .utils import positive_int

# ---------------------------------------------------------------------
# Value noise sur grille finie, repliée en tore
# (algo: https://lodev.org/cgtutor/randomnoise.html#Wood)
# ---------------------------------------------------------------------


def _check_dims(width, height) -> tuple[int, int]:
    # le repliement torique divise par width/height
    return positive_int("NoiseField.width", width), positive_int("NoiseField.height", height)


@dataclass(frozen=True)
class NoiseField:
    """Grille dense `width x height` de scalaires uniformes dans [0,1).

    Stockée à plat, row-major (`index = y*width + x`), en float64.
    Immuable : le buffer n'est jamais réécrit après construction.
    """

    width: int
    height: int
    data: torch.Tensor  # [height*width] float64

    @classmethod
    def build(cls, width: int, height: int, *, generator: torch.Generator, device=None) -> "NoiseField":
        width, height = _check_dims(width, height)
        data = torch.rand(width * height, generator=generator, dtype=torch.float64)
        if device is not None:
            data = data.to(device)
        return cls(width, height, data)

    @classmethod
    def from_values(cls, width: int, height: int, values, *, device=None) -> "NoiseField":
        """Champ injecté (tests, reproduction d'un bruit connu)."""
        width, height = _check_dims(width, height)
        data = torch.as_tensor(values, dtype=torch.float64, device=device).reshape(-1).clone()
        if data.numel() != width * height:
            raise InvalidParameterError(
                f"NoiseField: {data.numel()} valeurs pour une grille {width}x{height}"
            )
        if not bool(((data >= 0.0) & (data < 1.0)).all()):
            raise InvalidParameterError("NoiseField: valeurs hors de [0,1)")
        return cls(width, height, data)

    def at(self, x: int, y: int) -> float:
        return float(self.data[y * self.width + x])

    @torch.no_grad()
    def sample_smooth(self, x, y) -> torch.Tensor:
        """Échantillon lissé (bilinéaire) en coordonnées continues, avec repli torique.

        `x`, `y` : scalaires ou tenseurs (broadcastables). Le coin (x1,y1) est la
        cellule `floor`, (x2,y2) la cellule voisine un pas *en arrière*.
        L'appariement poids/coins est celui de l'algo d'origine, pas le bilerp
        symétrique des manuels : ne pas "corriger".
        """
        dev = self.data.device
        x = torch.as_tensor(x, dtype=torch.float64, device=dev)
        y = torch.as_tensor(y, dtype=torch.float64, device=dev)
        w, h = self.width, self.height

        x0 = torch.floor(x)
        y0 = torch.floor(y)
        fract_x = x - x0
        fract_y = y - y0

        # repli
        x1 = torch.remainder(x0.to(torch.int64) + w, w)
        y1 = torch.remainder(y0.to(torch.int64) + h, h)

        # voisins
        x2 = torch.remainder(x1 + w - 1, w)
        y2 = torch.remainder(y1 + h - 1, h)

        d = self.data
        value = fract_x * fract_y * d[y1 * w + x1]
        value = value + (1.0 - fract_x) * fract_y * d[y1 * w + x2]
        value = value + fract_x * (1.0 - fract_y) * d[y2 * w + x1]
        value = value + (1.0 - fract_x) * (1.0 - fract_y) * d[y2 * w + x2]
        return value


@torch.no_grad()
def turbulence(field: NoiseField, x, y, initial_size: float) -> torch.Tensor:
    """Turbulence 1/f : somme des échantillons lissés à des tailles divisées par 2.

    `floor(log2(initial_size)) + 1` octaves ; aucune (résultat 0) si `initial_size < 1`
    ou non fini.
    Résultat : `128 * somme / initial_size`.
    """
    dev = field.data.device
    x = torch.as_tensor(x, dtype=torch.float64, device=dev)
    y = torch.as_tensor(y, dtype=torch.float64, device=dev)
    value = torch.zeros(torch.broadcast_shapes(x.shape, y.shape), dtype=torch.float64, device=dev)

    size = float(initial_size)
    if not (size >= 1.0 and math.isfinite(size)):  # NaN, inf : aucune octave
        return value

    while size >= 1.0:
        value = value + field.sample_smooth(x / size, y / size) * size
        size /= 2.0

    return 128.0 * value / float(initial_size)
