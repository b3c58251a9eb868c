from pwoodwf import atomic_write, log_append, texture_name

def test_texture_name():
    assert texture_name("wood", 12.0, 0) == "wood_12_0.png"
    assert texture_name("bright_wood", 2.5, 3, 42) == "bright_wood_2p5_3__s42.png"

def test_atomic_write(tmp_path):
    p = tmp_path / "sub" / "a.png"
    atomic_write(p, b"\x89PNG")
    assert p.read_bytes() == b"\x89PNG"
    assert not (tmp_path / "sub" / "a.png.tmp").exists()

def test_log_append(tmp_path):
    p = tmp_path / "logs" / "run.log"
    log_append(p, "one")
    log_append(p, "two")
    lines = p.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2 and lines[1].endswith("two")
