from __future__ import annotations
import argparse, io, json, logging, sys
from dataclasses import asdict
from pathlib import Path

from .common import setup_logging, ensure_dir, RunMeta, pick_device
from ..api import atomic_write, log_append, texture_name

from pwoodcore.errors import InvalidParameterError
from pwoodcore.rng import child_seeds, make_generator
from pwoodproc import INFO, WoodConfig, generate, list_profiles
from pwoodviz import to_image, montage

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="pwood — Génération de textures bois procédurales (PNG)")
    p.add_argument("--out", help="Dossier de sortie")
    p.add_argument("--config", default=None, help="(Optionnel) JSON cfg (width/height/offset_stdev/length_scale/profile/count/seed)")
    for spec in INFO.param_specs:
        p.add_argument(
            "--" + spec.name.replace("_", "-"), dest=spec.name,
            type=int if spec.type == "int" else float, default=None,
            help=f"{spec.help} [{spec.units}] (défaut: {spec.default})",
        )
    p.add_argument("--profile", default=None, help="Preset de couleurs (voir --list-profiles)")
    p.add_argument("--count", type=int, default=None, help="Nombre de textures")
    p.add_argument("--seed", type=int, default=None, help="Graine globale (runs rejouables)")
    p.add_argument("--montage", type=int, default=0, metavar="COLS",
                   help="(Optionnel) planche montage.png sur COLS colonnes")
    p.add_argument("--list-profiles", action="store_true")
    p.add_argument("--force-cpu", action="store_true")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)

def _merge_cfg(args) -> WoodConfig:
    cfg = WoodConfig.from_json(args.config) if args.config else WoodConfig()
    return cfg.replace(
        width=args.width, height=args.height,
        offset_stdev=args.offset_stdev, length_scale=args.length_scale,
        profile=args.profile, count=args.count, seed=args.seed,
    )

def _png_bytes(raster) -> bytes:
    buf = io.BytesIO()
    to_image(raster).save(buf, format="PNG")
    return buf.getvalue()

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    if args.list_profiles:
        for name in list_profiles():
            print(name)
        return 0
    if not args.out:
        logging.error("--out requis")
        return 2

    try:
        cfg = _merge_cfg(args)
    except InvalidParameterError as e:
        logging.error("Config invalide: %s", e)
        return 2

    device = pick_device(force_cpu=args.force_cpu)
    meta = RunMeta.collect(seed=cfg.seed, device=str(device))
    out_dir = Path(args.out); ensure_dir(out_dir)
    seeds = child_seeds(cfg.seed, cfg.count) if cfg.seed is not None else [None] * cfg.count

    manifest = {"run": asdict(meta), "cfg": cfg.to_dict(), "outputs": []}
    rasters = []
    ok = 0
    for i, seed in enumerate(seeds):
        out_png = out_dir / texture_name(cfg.profile, cfg.length_scale, i, seed)
        try:
            logging.info("[%d/%d] %s %dx%d length_scale=%g", i + 1, cfg.count,
                         cfg.profile, cfg.width, cfg.height, cfg.length_scale)
            raster = generate(cfg.width, cfg.height, cfg.offset_stdev, cfg.length_scale, cfg.profile,
                              generator=make_generator(seed), device=device)
            atomic_write(out_png, _png_bytes(raster))
            manifest["outputs"].append(str(out_png))
            if args.montage:
                rasters.append(raster)
            logging.info("→ OK %s", out_png)
            ok += 1
        except Exception as e:
            logging.exception("Échec génération %s: %s", out_png, e)

    if args.montage and rasters:
        sheet = out_dir / "montage.png"
        montage(rasters, cols=args.montage, pad=4).save(sheet)
        logging.info("Montage: %s", sheet)

    (out_dir / "manifest.json").write_text(json.dumps(manifest, ensure_ascii=False, indent=2), encoding="utf-8")
    log_append(out_dir / "runs.log", f"{ok}/{cfg.count} {cfg.profile} {cfg.width}x{cfg.height} "
                                     f"length_scale={cfg.length_scale:g} seed={cfg.seed} device={device}")
    logging.info("Terminé: %d/%d textures", ok, cfg.count)
    return 0 if ok == cfg.count else 1

if __name__ == "__main__":
    sys.exit(main())
