from __future__ import annotations

from dataclasses import dataclass

from chartcanvas.errors import ChartLayoutError


@dataclass(frozen=True)
class PlotArea:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width * 0.5

    @property
    def center_y(self) -> float:
        return self.y + self.height * 0.5


def compute_plot_area(surface_width: float, surface_height: float, padding: float) -> PlotArea:
    """Shrink the surface bounds by `padding` on every side.

    Raises `ChartLayoutError` when the padding leaves no drawable area.
    """
    width = float(surface_width) - 2.0 * float(padding)
    height = float(surface_height) - 2.0 * float(padding)
    if width <= 0 or height <= 0:
        raise ChartLayoutError(
            f"padding {padding} leaves no plot area on a {surface_width}x{surface_height} surface"
        )
    return PlotArea(x=float(padding), y=float(padding), width=width, height=height)
