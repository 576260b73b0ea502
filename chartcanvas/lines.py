from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from chartcanvas.errors import ChartDataError
from chartcanvas.scales import LinearScale


Point = tuple[float, float]


@dataclass(frozen=True)
class LinePath:
    points: tuple[Point, ...]

    @property
    def segments(self) -> tuple[tuple[Point, Point], ...]:
        return tuple(zip(self.points[:-1], self.points[1:]))


def compute_line_path(x: np.ndarray, y: np.ndarray, x_scale: LinearScale, y_scale: LinearScale) -> LinePath:
    """Map samples to pixels keeping input order; x is never sorted."""
    if x.shape != y.shape:
        raise ChartDataError(f"x and y length mismatch: {x.size} != {y.size}")
    if y.size == 0:
        raise ChartDataError("line chart needs at least one point")
    px = x_scale(x)
    py = y_scale(y)
    return LinePath(points=tuple((float(a), float(b)) for a, b in zip(px.tolist(), py.tolist(), strict=True)))
