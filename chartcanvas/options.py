from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping

import numpy as np

from chartcanvas.adapters.normalize import coerce_labels, coerce_values
from chartcanvas.errors import ChartDataError, ChartOptionsError
from chartcanvas.surface import RGBA, WHITE, coerce_color


DEFAULT_BAR_COLORS: tuple[RGBA, ...] = (
    (66, 133, 244, 255),
    (234, 67, 53, 255),
    (251, 188, 5, 255),
)
DEFAULT_GRID_COLOR: RGBA = (204, 204, 204, 255)
DEFAULT_LINE_COLOR: RGBA = (31, 119, 180, 255)


@dataclass(frozen=True)
class BarChartOptions:
    colors: tuple[RGBA, ...] = DEFAULT_BAR_COLORS
    background_color: RGBA = WHITE
    bar_width: float = 0.7
    padding: float = 60.0
    grid_color: RGBA = DEFAULT_GRID_COLOR
    title: str = ""
    x_label: str = ""
    y_label: str = ""
    grid_lines: bool = False
    legend: tuple[str, ...] = ()
    show_legend: bool = False
    show_values: bool = True


@dataclass(frozen=True, eq=False)
class LineChartOptions:
    x_values: np.ndarray | None = None
    color: RGBA = DEFAULT_LINE_COLOR
    background_color: RGBA = WHITE
    line_width: float = 2.0
    point_radius: float = 4.0
    show_points: bool = True
    padding: float = 20.0
    grid_color: RGBA = DEFAULT_GRID_COLOR
    title: str = ""
    x_label: str = ""
    y_label: str = ""


def bar_defaults(series_count: int) -> BarChartOptions:
    """Defaults that depend on the data: one legend label per series, legend only when grouped."""
    return BarChartOptions(
        legend=tuple(f"Series {i + 1}" for i in range(series_count)),
        show_legend=series_count > 1,
    )


def line_defaults(point_count: int) -> LineChartOptions:
    return LineChartOptions(x_values=np.arange(1, point_count + 1, dtype=np.float64))


def resolve_bar_options(overrides: Mapping[str, Any] | None, series_count: int) -> BarChartOptions:
    """Overlay caller values on the bar defaults field by field."""
    values = _check_keys(overrides, BarChartOptions)
    out = bar_defaults(series_count)
    changes: dict[str, Any] = {}
    for key, raw in values.items():
        if key == "colors":
            changes[key] = _palette(raw)
        elif key in {"background_color", "grid_color"}:
            changes[key] = _color(raw, key)
        elif key == "bar_width":
            width = _number(raw, key)
            if not 0 < width <= 1:
                raise ChartOptionsError("bar_width must be in (0, 1]")
            changes[key] = width
        elif key == "padding":
            changes[key] = _non_negative(raw, key)
        elif key in {"title", "x_label", "y_label"}:
            changes[key] = _text(raw, key)
        elif key in {"grid_lines", "show_legend", "show_values"}:
            changes[key] = _flag(raw, key)
        elif key == "legend":
            changes[key] = _labels(raw, key)
    return dataclasses.replace(out, **changes)


def resolve_line_options(overrides: Mapping[str, Any] | None, point_count: int) -> LineChartOptions:
    """Overlay caller values on the line defaults field by field."""
    values = _check_keys(overrides, LineChartOptions)
    out = line_defaults(point_count)
    changes: dict[str, Any] = {}
    for key, raw in values.items():
        if key == "x_values":
            if raw is not None:
                changes[key] = coerce_values(raw, label="x_values")
        elif key in {"color", "background_color", "grid_color"}:
            changes[key] = _color(raw, key)
        elif key == "line_width":
            changes[key] = _positive(raw, key)
        elif key in {"point_radius", "padding"}:
            changes[key] = _non_negative(raw, key)
        elif key == "show_points":
            changes[key] = _flag(raw, key)
        elif key in {"title", "x_label", "y_label"}:
            changes[key] = _text(raw, key)
    return dataclasses.replace(out, **changes)


def _check_keys(overrides: Mapping[str, Any] | None, options_type: type) -> dict[str, Any]:
    if overrides is None:
        return {}
    if not isinstance(overrides, Mapping):
        raise ChartOptionsError(f"options must be a mapping, got {type(overrides)!r}")
    known = {f.name for f in dataclasses.fields(options_type)}
    unknown = sorted(str(key) for key in overrides if key not in known)
    if unknown:
        raise ChartOptionsError(f"unknown option(s): {', '.join(unknown)}")
    return dict(overrides)


def _color(raw: Any, key: str) -> RGBA:
    try:
        return coerce_color(raw)
    except (TypeError, ValueError) as exc:
        raise ChartOptionsError(f"{key}: invalid color {raw!r}") from exc


def _palette(raw: Any) -> tuple[RGBA, ...]:
    if isinstance(raw, str):
        raise ChartOptionsError("colors must be a sequence of colors")
    try:
        palette = tuple(_color(item, "colors") for item in raw)
    except TypeError as exc:
        raise ChartOptionsError("colors must be a sequence of colors") from exc
    if not palette:
        raise ChartOptionsError("colors must not be empty")
    return palette


def _number(raw: Any, key: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, np.integer, np.floating)):
        raise ChartOptionsError(f"{key} must be a number, got {raw!r}")
    value = float(raw)
    if not np.isfinite(value):
        raise ChartOptionsError(f"{key} must be finite")
    return value


def _positive(raw: Any, key: str) -> float:
    value = _number(raw, key)
    if value <= 0:
        raise ChartOptionsError(f"{key} must be > 0")
    return value


def _non_negative(raw: Any, key: str) -> float:
    value = _number(raw, key)
    if value < 0:
        raise ChartOptionsError(f"{key} must be >= 0")
    return value


def _flag(raw: Any, key: str) -> bool:
    if not isinstance(raw, (bool, np.bool_)):
        raise ChartOptionsError(f"{key} must be a bool, got {raw!r}")
    return bool(raw)


def _text(raw: Any, key: str) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise ChartOptionsError(f"{key} must be a string, got {raw!r}")
    return raw


def _labels(raw: Any, key: str) -> tuple[str, ...]:
    if raw is None:
        return ()
    try:
        return coerce_labels(raw, label=key)
    except ChartDataError as exc:
        raise ChartOptionsError(f"{key} must be a sequence of labels") from exc
