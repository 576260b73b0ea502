from __future__ import annotations

import numpy as np
from PIL import Image

from chartcanvas.raster.canvas import TRANSPARENT, blend_box, clear_region, new_canvas
from chartcanvas.raster.draw_lines import draw_segment
from chartcanvas.raster.draw_markers import draw_disc
from chartcanvas.raster.draw_text import draw_text, text_width
from chartcanvas.surface import BLACK, RGBA, FontSpec, TextAlign


class RasterSurface:
    """In-memory RGBA drawing surface backed by a numpy array."""

    def __init__(self, width: int, height: int, *, background: RGBA = TRANSPARENT) -> None:
        self._rgba = new_canvas(int(width), int(height), color=background)
        self.fill_color: RGBA = BLACK
        self.stroke_color: RGBA = BLACK
        self.line_width: float = 1.0
        self.font = FontSpec()
        self.text_align: TextAlign = "left"

    @property
    def width(self) -> int:
        return int(self._rgba.shape[1])

    @property
    def height(self) -> int:
        return int(self._rgba.shape[0])

    def set_fill_color(self, color: RGBA) -> None:
        self.fill_color = color

    def set_stroke_color(self, color: RGBA) -> None:
        self.stroke_color = color

    def set_line_width(self, width: float) -> None:
        if width <= 0:
            raise ValueError("line width must be > 0")
        self.line_width = float(width)

    def set_font(self, font: FontSpec) -> None:
        self.font = font

    def set_text_align(self, align: TextAlign) -> None:
        if align not in ("left", "center", "right"):
            raise ValueError(f"unsupported text alignment: {align}")
        self.text_align = align

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        box = _pixel_box(x, y, width, height)
        if box is not None:
            clear_region(self._rgba, *box)

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        box = _pixel_box(x, y, width, height)
        if box is not None:
            blend_box(self._rgba, *box, self.fill_color)

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        left, right = sorted((x, x + width))
        top, bottom = sorted((y, y + height))
        self.line(left, top, right, top)
        self.line(left, bottom, right, bottom)
        self.line(left, top, left, bottom)
        self.line(right, top, right, bottom)

    def line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        draw_segment(
            self._rgba,
            int(round(x0)),
            int(round(y0)),
            int(round(x1)),
            int(round(y1)),
            self.stroke_color,
            width=max(1, int(round(self.line_width))),
        )

    def fill_arc(self, cx: float, cy: float, radius: float) -> None:
        draw_disc(self._rgba, cx, cy, radius, self.fill_color)

    def fill_text(self, text: str, x: float, y: float, *, rotate_deg: int = 0) -> None:
        draw_text(
            self._rgba,
            x,
            y,
            text,
            self.fill_color,
            font=self.font,
            align=self.text_align,
            rotate_deg=rotate_deg,
        )

    def measure_text(self, text: str) -> float:
        return text_width(text, self.font)

    def to_rgba(self) -> np.ndarray:
        return self._rgba.copy()

    def to_image(self) -> Image.Image:
        return Image.fromarray(self._rgba)


def _pixel_box(x: float, y: float, width: float, height: float) -> tuple[int, int, int, int] | None:
    """Inclusive pixel box covering the half-open rectangle, or None when empty."""
    left, right = sorted((x, x + width))
    top, bottom = sorted((y, y + height))
    x0 = int(round(left))
    x1 = int(round(right)) - 1
    y0 = int(round(top))
    y1 = int(round(bottom)) - 1
    if x1 < x0 or y1 < y0:
        return None
    return x0, y0, x1, y1
