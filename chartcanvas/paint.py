"""Primitive calls with their paint state applied first.

Surface paint attributes persist between calls, so every helper here sets each
attribute its primitive reads before invoking it.
"""

from __future__ import annotations

from dataclasses import dataclass

from chartcanvas.surface import RGBA, DrawingSurface, FontSpec, TextAlign


@dataclass(frozen=True)
class TextStyle:
    font: FontSpec
    color: RGBA
    align: TextAlign = "left"


def fill_rect(surface: DrawingSurface, x: float, y: float, width: float, height: float, *, color: RGBA) -> None:
    surface.set_fill_color(color)
    surface.fill_rect(x, y, width, height)


def stroke_rect(
    surface: DrawingSurface,
    x: float,
    y: float,
    width: float,
    height: float,
    *,
    color: RGBA,
    line_width: float,
) -> None:
    surface.set_stroke_color(color)
    surface.set_line_width(line_width)
    surface.stroke_rect(x, y, width, height)


def stroke_line(
    surface: DrawingSurface,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    *,
    color: RGBA,
    line_width: float,
) -> None:
    surface.set_stroke_color(color)
    surface.set_line_width(line_width)
    surface.line(x0, y0, x1, y1)


def fill_circle(surface: DrawingSurface, cx: float, cy: float, radius: float, *, color: RGBA) -> None:
    surface.set_fill_color(color)
    surface.fill_arc(cx, cy, radius)


def fill_text(
    surface: DrawingSurface,
    text: str,
    x: float,
    y: float,
    style: TextStyle,
    *,
    rotate_deg: int = 0,
) -> None:
    surface.set_font(style.font)
    surface.set_fill_color(style.color)
    surface.set_text_align(style.align)
    surface.fill_text(text, x, y, rotate_deg=rotate_deg)


def measure_text(surface: DrawingSurface, text: str, font: FontSpec) -> float:
    surface.set_font(font)
    return surface.measure_text(text)
