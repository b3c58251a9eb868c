from __future__ import annotations
import torch

_MASK64 = 0xFFFFFFFFFFFFFFFF
_SIGNBIT = 1 << 63
_MOD64 = 1 << 64

def splitmix64(x: int) -> int:
    x &= _MASK64
    x = (x + 0x9E3779B97F4A7C15) & _MASK64
    z = x
    z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & _MASK64
    z = (z ^ (z >> 27)) * 0x94D049BB133111EB & _MASK64
    z ^= z >> 31
    return z & _MASK64

def derive_seed64(*keys: int) -> int:
    s = 0x1234ABCD9876EF01
    for k in keys:
        s = splitmix64(s ^ (k & _MASK64))
    return s  # unsigned 64-bit range

def child_seeds(seed: int, n: int) -> list[int]:
    """Une graine par image d'un batch, dérivée de la graine globale."""
    return [derive_seed64(seed, i) for i in range(n)]

def make_generator(seed: int | None = None) -> torch.Generator:
    """Fournisseur d'aléa injectable.

    - `seed=None` : graine non déterministe (chaque appel donne une texture différente)
    - sinon : générateur reproductible (tests, runs rejouables)

    Le générateur vit toujours sur CPU ; les tirages sont ensuite copiés sur le device.
    """
    g = torch.Generator(device="cpu")
    if seed is None:
        g.seed()
    else:
        # manual_seed n'accepte pas toute la plage u64 sur toutes les versions
        g.manual_seed(int(seed) & 0x7FFFFFFFFFFFFFFF)
    return g
