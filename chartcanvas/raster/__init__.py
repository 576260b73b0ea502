from .canvas import blend_box, blend_coverage, clear_region, new_canvas
from .draw_lines import draw_segment
from .draw_markers import draw_disc
from .draw_text import draw_text, text_width
from .surface import RasterSurface

__all__ = [
    "RasterSurface",
    "blend_box",
    "blend_coverage",
    "clear_region",
    "draw_disc",
    "draw_segment",
    "draw_text",
    "new_canvas",
    "text_width",
]
