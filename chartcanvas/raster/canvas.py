from __future__ import annotations

import numpy as np

from chartcanvas.surface import RGBA


TRANSPARENT: RGBA = (0, 0, 0, 0)


def new_canvas(width: int, height: int, color: RGBA = TRANSPARENT) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def clear_region(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int) -> None:
    xa, ya, xb, yb = _clip_box(dst, x0, y0, x1, y1)
    if xa > xb or ya > yb:
        return
    dst[ya : yb + 1, xa : xb + 1] = 0


def blend_box(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
    """Source-over blend of a solid color into an inclusive pixel box."""
    xa, ya, xb, yb = _clip_box(dst, x0, y0, x1, y1)
    if xa > xb or ya > yb:
        return
    patch = dst[ya : yb + 1, xa : xb + 1]
    coverage = np.full(patch.shape[:2], color[3] / 255.0, dtype=np.float32)
    blend_coverage(patch, coverage, color)


def blend_coverage(patch: np.ndarray, coverage: np.ndarray, color: RGBA) -> None:
    src_alpha = coverage.astype(np.float32, copy=False)
    if not np.any(src_alpha > 0):
        return
    dst_rgb = patch[:, :, :3].astype(np.float32)
    dst_alpha = patch[:, :, 3].astype(np.float32) / 255.0
    src_rgb = np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3)
    out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
    out_rgb_num = src_rgb * src_alpha[:, :, None] + dst_rgb * dst_alpha[:, :, None] * (1.0 - src_alpha[:, :, None])
    safe_alpha = np.where(out_alpha > 1e-6, out_alpha, 1.0)
    patch[:, :, :3] = np.clip(np.rint(out_rgb_num / safe_alpha[:, :, None]), 0, 255).astype(np.uint8)
    patch[:, :, 3] = np.clip(np.rint(out_alpha * 255.0), 0, 255).astype(np.uint8)


def _clip_box(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int) -> tuple[int, int, int, int]:
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    return xa, ya, xb, yb
