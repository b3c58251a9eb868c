from __future__ import annotations
from PIL import Image
import numpy as np

def _to_u8(raster) -> np.ndarray:
    try:
        arr = raster.detach().cpu().numpy()
    except AttributeError:
        arr = np.asarray(raster)
    if arr.dtype != np.uint8 or arr.ndim != 3 or arr.shape[-1] != 3:
        raise ValueError(f"Raster RGB uint8 [H,W,3] attendu, reçu {arr.dtype} {arr.shape}")
    return arr

def to_image(raster) -> Image.Image:
    """Raster `[H,W,3]` uint8 (tenseur torch ou ndarray) -> image PIL RGB."""
    return Image.fromarray(np.ascontiguousarray(_to_u8(raster)))

def montage(rasters, cols: int, *, pad: int = 0, background=(0, 0, 0)) -> Image.Image:
    """Planche de prévisualisation : rasters de même taille rangés sur `cols` colonnes."""
    arrs = [_to_u8(r) for r in rasters]
    if not arrs:
        raise ValueError("montage: aucun raster")
    H, W, _ = arrs[0].shape
    if any(a.shape != arrs[0].shape for a in arrs):
        raise ValueError("montage: rasters de tailles différentes")
    cols = max(1, min(cols, len(arrs)))
    rows = (len(arrs) + cols - 1) // cols
    canvas = np.empty((rows * H + (rows - 1) * pad, cols * W + (cols - 1) * pad, 3), dtype=np.uint8)
    canvas[...] = np.asarray(background, dtype=np.uint8)
    for i, a in enumerate(arrs):
        r, c = divmod(i, cols)
        y0, x0 = r * (H + pad), c * (W + pad)
        canvas[y0:y0+H, x0:x0+W] = a
    return Image.fromarray(canvas)
