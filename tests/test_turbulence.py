import math
import pytest
import torch

from pwoodcore.rng import make_generator
from pwoodproc.noise import NoiseField, turbulence


def _const_field(c=0.5, w=8, h=8):
    return NoiseField.from_values(w, h, [c] * (w * h))

@pytest.mark.parametrize("size", [0.0, 0.5, 0.999, -4.0, float("nan"), float("inf")])
def test_zero_below_one_or_non_finite(size):
    f = NoiseField.build(8, 8, generator=make_generator(1))
    assert float(turbulence(f, 3.0, 4.0, size)) == 0.0

def test_zero_keeps_grid_shape():
    f = _const_field()
    xx = torch.zeros((3, 5), dtype=torch.float64)
    out = turbulence(f, xx, xx, 0.5)
    assert out.shape == (3, 5)
    assert bool((out == 0).all())

def test_default_octaves_constant_field():
    # 32 + 16 + 8 + 4 + 2 + 1 = 63
    f = _const_field(0.5)
    assert float(turbulence(f, 2.5, 3.25, 32.0)) == pytest.approx(128.0 * 0.5 * 63 / 32.0, rel=1e-12)

@pytest.mark.parametrize("size", [1.0, 2.0, 3.0, 5.0, 33.5])
def test_octave_count(size):
    c = 0.25
    f = _const_field(c)
    n = math.floor(math.log2(size)) + 1
    total = size * (2.0 - 2.0 ** (1 - n))  # size + size/2 + ... (n termes)
    assert float(turbulence(f, 1.5, 6.5, size)) == pytest.approx(128.0 * c * total / size, rel=1e-12)

def test_grid_matches_point():
    f = NoiseField.build(16, 16, generator=make_generator(5))
    yy, xx = torch.meshgrid(torch.arange(16, dtype=torch.float64),
                            torch.arange(16, dtype=torch.float64), indexing="ij")
    grid = turbulence(f, xx, yy, 32.0)
    assert grid.shape == (16, 16)
    assert float(grid[3, 11]) == pytest.approx(float(turbulence(f, 11.0, 3.0, 32.0)), rel=1e-12)

def test_range_bounded():
    # chaque échantillon est dans [0,1) => turbulence dans [0, 256)
    f = NoiseField.build(32, 32, generator=make_generator(9))
    xs = torch.rand(500, generator=make_generator(10), dtype=torch.float64) * 64
    ys = torch.rand(500, generator=make_generator(11), dtype=torch.float64) * 64
    t = turbulence(f, xs, ys, 32.0)
    assert bool((t >= 0).all()) and bool((t < 256.0).all())
