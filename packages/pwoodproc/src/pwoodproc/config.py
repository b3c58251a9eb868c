from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pwoodcore.errors import InvalidParameterError

from .profiles import list_profiles
from .wood import validate_params

__all__ = ["WoodConfig"]


@dataclass(frozen=True, slots=True)
class WoodConfig:
    """
    Configuration d'un run de génération (CLI / batch).

    Champs
    ------
    width, height : int, default=584x668
        Dimensions des textures en pixels. Doivent être > 0.
    offset_stdev : float, default=40.0
        Écart-type du décalage aléatoire du centre des cernes. Fini, >= 0.
    length_scale : float, default=12.0
        Espacement moyen entre cernes, en pixels. Fini, > 0.
    profile : str, default="wood"
        Nom d'un preset de couleurs enregistré (`pwoodproc.list_profiles()`).
    count : int, default=1
        Nombre de textures à produire (chacune avec ses propres tirages).
    seed : int | None, default=None
        Graine globale. `None` = textures différentes à chaque run ; sinon une
        graine par image est dérivée de celle-ci (runs rejouables).

    Notes
    -----
    Les validations lèvent `InvalidParameterError` (sous-classe de `ValueError`).
    """

    width: int = 584
    height: int = 668
    offset_stdev: float = 40.0
    length_scale: float = 12.0
    profile: str = "wood"
    count: int = 1
    seed: int | None = None

    def __post_init__(self) -> None:
        validate_params(self.width, self.height, self.offset_stdev, self.length_scale)
        if self.profile not in list_profiles():
            raise InvalidParameterError(
                f"WoodConfig.profile={self.profile!r} not in {list_profiles()}"
            )
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 1:
            raise InvalidParameterError("WoodConfig.count must be an int >= 1")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise InvalidParameterError("WoodConfig.seed must be an int or None")

    def replace(self, **overrides: Any) -> "WoodConfig":
        """Copie avec surcharges ; les valeurs `None` sont ignorées (flags CLI absents)."""
        kw = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **kw)

    @classmethod
    def from_json(cls, path: str | Path) -> "WoodConfig":
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise InvalidParameterError(f"Config illisible ({path}): {exc}") from exc
        if not isinstance(raw, dict):
            raise InvalidParameterError(f"Config {path}: objet JSON attendu")
        names = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(raw) - names)
        if unknown:
            raise InvalidParameterError(f"Config {path}: clés inconnues {unknown}")
        return cls(**raw)

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)
