import torch
import pwood as pw

def test_umbrella_surface():
    assert pw.__version__ == "1.0.0"
    r = pw.generate(16, 16, 3.0, 5.0, pw.BRIGHT_WOOD, generator=pw.make_generator(1), device=torch.device("cpu"))
    assert r.shape == (16, 16, 3)
    assert pw.to_image(r).size == (16, 16)
    assert set(pw.list_profiles()) >= {"wood", "bright_wood"}
    assert pw.proc.WoodConfig is pw.WoodConfig
