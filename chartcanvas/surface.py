from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

from PIL import ImageColor


RGBA = tuple[int, int, int, int]
ColorLike = tuple[int, int, int] | tuple[int, int, int, int] | str
TextAlign = Literal["left", "center", "right"]

BLACK: RGBA = (0, 0, 0, 255)
WHITE: RGBA = (255, 255, 255, 255)


@dataclass(frozen=True)
class FontSpec:
    """Font request handed to the surface; families resolve against system fonts."""

    family: str = "Sans-Serif"
    size_px: float = 12.0

    def __post_init__(self) -> None:
        if self.size_px <= 0:
            raise ValueError("FontSpec `size_px` must be > 0")


def coerce_color(color: ColorLike) -> RGBA:
    if isinstance(color, str):
        rgb = ImageColor.getrgb(color)
        if len(rgb) == 3:
            return (int(rgb[0]), int(rgb[1]), int(rgb[2]), 255)
        return (int(rgb[0]), int(rgb[1]), int(rgb[2]), int(rgb[3]))
    if len(color) == 3:
        r, g, b = color
        return (int(r), int(g), int(b), 255)
    if len(color) == 4:
        r, g, b, a = color
        return (int(r), int(g), int(b), int(a))
    raise ValueError(f"unsupported color: {color!r}")


class DrawingSurface(Protocol):
    """Drawing target the chart renderer paints on.

    Paint state (fill/stroke color, line width, font, alignment) is global to the
    surface and persists between calls; callers set what they need before use.
    """

    @property
    def width(self) -> int:
        ...

    @property
    def height(self) -> int:
        ...

    def set_fill_color(self, color: RGBA) -> None:
        ...

    def set_stroke_color(self, color: RGBA) -> None:
        ...

    def set_line_width(self, width: float) -> None:
        ...

    def set_font(self, font: FontSpec) -> None:
        ...

    def set_text_align(self, align: TextAlign) -> None:
        ...

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        ...

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        ...

    def line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        ...

    def fill_arc(self, cx: float, cy: float, radius: float) -> None:
        ...

    def fill_text(self, text: str, x: float, y: float, *, rotate_deg: int = 0) -> None:
        ...

    def measure_text(self, text: str) -> float:
        ...
