from __future__ import annotations

import numpy as np

from chartcanvas.raster.canvas import blend_box
from chartcanvas.surface import RGBA


def draw_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int = 1) -> None:
    if x0 == x1 or y0 == y1:
        # Axis-aligned segments are a single box blend.
        lo = (width - 1) // 2
        hi = width - 1 - lo
        if y0 == y1:
            blend_box(dst, min(x0, x1), y0 - lo, max(x0, x1), y0 + hi, color)
        else:
            blend_box(dst, x0 - lo, min(y0, y1), x0 + hi, max(y0, y1), color)
        return

    mask = np.zeros(dst.shape[:2], dtype=bool)
    radius = max(0, width // 2)
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        _stamp(mask, x0, y0, radius)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
    _blend_mask(dst, mask, color)


def _stamp(mask: np.ndarray, x: int, y: int, radius: int) -> None:
    ya = max(0, y - radius)
    yb = min(mask.shape[0], y + radius + 1)
    xa = max(0, x - radius)
    xb = min(mask.shape[1], x + radius + 1)
    if ya < yb and xa < xb:
        mask[ya:yb, xa:xb] = True


def _blend_mask(dst: np.ndarray, mask: np.ndarray, color: RGBA) -> None:
    ys, xs = np.nonzero(mask)
    if ys.size == 0:
        return
    alpha = color[3] / 255.0
    inv = 1.0 - alpha
    rgb = np.asarray(color[:3], dtype=np.float32)
    current = dst[ys, xs, :3].astype(np.float32)
    dst[ys, xs, :3] = np.clip(np.rint(rgb * alpha + current * inv), 0, 255).astype(np.uint8)
    current_alpha = dst[ys, xs, 3].astype(np.float32) / 255.0
    dst[ys, xs, 3] = np.clip(np.rint((alpha + current_alpha * inv) * 255.0), 0, 255).astype(np.uint8)
