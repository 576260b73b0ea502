from __future__ import annotations

import numpy as np

from chartcanvas.raster.canvas import blend_coverage
from chartcanvas.surface import RGBA


def draw_disc(dst: np.ndarray, cx: float, cy: float, radius: float, color: RGBA) -> None:
    if radius <= 0:
        return
    x0 = max(0, int(np.floor(cx - radius)))
    x1 = min(dst.shape[1], int(np.ceil(cx + radius)) + 1)
    y0 = max(0, int(np.floor(cy - radius)))
    y1 = min(dst.shape[0], int(np.ceil(cy + radius)) + 1)
    if x0 >= x1 or y0 >= y1:
        return
    yy, xx = np.mgrid[y0:y1, x0:x1]
    inside = (xx - cx) ** 2 + (yy - cy) ** 2 <= radius * radius
    coverage = inside.astype(np.float32) * (color[3] / 255.0)
    blend_coverage(dst[y0:y1, x0:x1], coverage, color)
