import json
import pytest

from pwoodcore.errors import InvalidParameterError
from pwoodproc.config import WoodConfig


def test_defaults():
    cfg = WoodConfig()
    assert (cfg.width, cfg.height) == (584, 668)
    assert cfg.offset_stdev == 40.0 and cfg.length_scale == 12.0
    assert cfg.profile == "wood" and cfg.count == 1 and cfg.seed is None

@pytest.mark.parametrize("kw", [
    {"width": 0}, {"height": 0}, {"offset_stdev": float("inf")}, {"offset_stdev": -2.0},
    {"length_scale": 0.0}, {"profile": "ebony"}, {"count": 0}, {"count": True}, {"seed": "x"},
])
def test_invalid(kw):
    with pytest.raises(InvalidParameterError):
        WoodConfig(**kw)

def test_replace_ignores_none():
    cfg = WoodConfig().replace(width=64, height=None, profile="bright_wood", seed=None)
    assert cfg.width == 64 and cfg.height == 668
    assert cfg.profile == "bright_wood" and cfg.seed is None

def test_replace_validates():
    with pytest.raises(InvalidParameterError):
        WoodConfig().replace(length_scale=-1.0)

def test_from_json(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"width": 32, "height": 16, "length_scale": 24, "seed": 7}), encoding="utf-8")
    cfg = WoodConfig.from_json(p)
    assert (cfg.width, cfg.height, cfg.length_scale, cfg.seed) == (32, 16, 24, 7)
    assert cfg.to_dict()["profile"] == "wood"

def test_from_json_errors(tmp_path):
    with pytest.raises(InvalidParameterError):
        WoodConfig.from_json(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidParameterError):
        WoodConfig.from_json(bad)
    unknown = tmp_path / "unknown.json"
    unknown.write_text(json.dumps({"widht": 3}), encoding="utf-8")
    with pytest.raises(InvalidParameterError):
        WoodConfig.from_json(unknown)
