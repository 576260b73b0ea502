from chartcanvas.errors import ChartDataError, ChartError, ChartLayoutError, ChartOptionsError, SurfaceNotFoundError
from chartcanvas.raster import RasterSurface
from chartcanvas.registry import DEFAULT_REGISTRY, SurfaceRegistry
from chartcanvas.render import plot_bar_graph, plot_line_graph
from chartcanvas.surface import DrawingSurface, FontSpec

__all__ = [
    "ChartDataError",
    "ChartError",
    "ChartLayoutError",
    "ChartOptionsError",
    "DEFAULT_REGISTRY",
    "DrawingSurface",
    "FontSpec",
    "RasterSurface",
    "SurfaceNotFoundError",
    "SurfaceRegistry",
    "plot_bar_graph",
    "plot_line_graph",
]
