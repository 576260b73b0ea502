from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Mapping

from chartcanvas.adapters.normalize import coerce_values
from chartcanvas.bars import BarGrid, ValueLabelPlacement, category_centers, compute_bar_grid, value_label_placement
from chartcanvas.errors import ChartDataError, ChartError, ChartLayoutError, SurfaceNotFoundError
from chartcanvas.layout import PlotArea, compute_plot_area
from chartcanvas.legend import LegendEntry, LegendLayout, build_legend_layout, legend_visible, resolve_legend_labels
from chartcanvas.lines import LinePath, compute_line_path
from chartcanvas.options import BarChartOptions, LineChartOptions, resolve_bar_options, resolve_line_options
from chartcanvas.paint import TextStyle, fill_circle, fill_rect, fill_text, measure_text, stroke_line, stroke_rect
from chartcanvas.registry import DEFAULT_REGISTRY, SurfaceRegistry
from chartcanvas.scales import (
    Domain,
    Tick,
    bar_domain,
    data_domain,
    format_tick,
    generate_ticks,
    horizontal_scale,
    vertical_scale,
)
from chartcanvas.surface import BLACK, RGBA, WHITE, DrawingSurface, FontSpec
from chartcanvas.validation import ValidationFailure, ValidBarData, ValidLineData, validate_bar_data, validate_line_data


LOGGER = logging.getLogger(__name__)

TITLE_FONT = FontSpec("Arial", 16.0)
LABEL_FONT = FontSpec("Sans-Serif", 12.0)
VALUE_FONT = FontSpec("Sans-Serif", 10.0)
LEGEND_FONT = FontSpec("Arial", 12.0)
LINE_TICK_FONT = FontSpec("Arial", 12.0)
LINE_AXIS_LABEL_FONT = FontSpec("Arial", 14.0)

AXIS_COLOR: RGBA = BLACK
TEXT_COLOR: RGBA = BLACK
BAR_BORDER_COLOR: RGBA = (51, 51, 51, 255)
LEGEND_BACKGROUND: RGBA = (255, 255, 255, 204)
LEGEND_BORDER_COLOR: RGBA = (153, 153, 153, 255)

GRID_LINE_WIDTH = 0.5
AXIS_LINE_WIDTH = 1.0
BAR_BORDER_WIDTH = 0.5
LEGEND_BORDER_WIDTH = 1.0
TICK_LABEL_BASELINE_SHIFT = 4.0
CATEGORY_LABEL_OFFSET = 15.0
VALUE_LABEL_GAP = 5.0
VALUE_LABEL_INSIDE_SHIFT = 3.0
BAR_TICK_LABEL_GAP = 10.0
LINE_TICK_LABEL_GAP = 5.0
LINE_Y_LABEL_X = 15.0


@dataclass(frozen=True, eq=False)
class BarChartLayout:
    width: int
    height: int
    plot: PlotArea
    domain: Domain
    ticks: tuple[Tick, ...]
    grid: BarGrid
    category_labels: tuple[str, ...]
    category_centers: tuple[float, ...]
    legend: LegendLayout | None
    options: BarChartOptions


@dataclass(frozen=True, eq=False)
class LineChartLayout:
    width: int
    height: int
    plot: PlotArea
    x_domain: Domain
    y_domain: Domain
    x_ticks: tuple[Tick, ...]
    y_ticks: tuple[Tick, ...]
    path: LinePath
    options: LineChartOptions


def plot_bar_graph(
    surface_id: str,
    categories: Any,
    data: Any,
    options: Mapping[str, Any] | None = None,
    *,
    registry: SurfaceRegistry | None = None,
) -> DrawingSurface | None:
    """Render grouped bars for 1-3 series onto the surface named `surface_id`.

    Returns the surface, or None after logging why nothing was drawn.
    """
    try:
        surface = _resolve_surface(surface_id, registry)
        checked = validate_bar_data(categories, data)
        if isinstance(checked, ValidationFailure):
            raise ChartDataError(checked.reason)
        resolved = resolve_bar_options(options, checked.series_count)
        layout = layout_bar_chart(surface, checked, resolved)
    except ChartError as exc:
        LOGGER.error("bar chart on %r not drawn: %s", surface_id, exc)
        return None
    draw_bar_chart(surface, layout)
    LOGGER.debug(
        "bar chart on %r: %d categories x %d series",
        surface_id,
        checked.category_count,
        checked.series_count,
    )
    return surface


def plot_line_graph(
    surface_id: str,
    y_values: Any,
    options: Mapping[str, Any] | None = None,
    *,
    registry: SurfaceRegistry | None = None,
) -> DrawingSurface | None:
    """Render one y series against x (default 1..N) onto the surface named `surface_id`.

    Returns the surface, or None after logging why nothing was drawn.
    """
    try:
        surface = _resolve_surface(surface_id, registry)
        y = coerce_values(y_values, label="y")
        resolved = resolve_line_options(options, int(y.size))
        assert resolved.x_values is not None
        checked = validate_line_data(resolved.x_values, y)
        if isinstance(checked, ValidationFailure):
            raise ChartDataError(checked.reason)
        layout = layout_line_chart(surface, checked, resolved)
    except ChartError as exc:
        LOGGER.error("line chart on %r not drawn: %s", surface_id, exc)
        return None
    draw_line_chart(surface, layout)
    LOGGER.debug("line chart on %r: %d points", surface_id, checked.y.size)
    return surface


def _resolve_surface(surface_id: str, registry: SurfaceRegistry | None) -> DrawingSurface:
    surface = (registry if registry is not None else DEFAULT_REGISTRY).resolve(surface_id)
    if surface is None:
        raise SurfaceNotFoundError(f"surface {surface_id!r} not found")
    return surface


def layout_bar_chart(surface: DrawingSurface, data: ValidBarData, options: BarChartOptions) -> BarChartLayout:
    width, height = int(surface.width), int(surface.height)
    plot = compute_plot_area(width, height, options.padding)
    domain = bar_domain(data.series)
    y_scale = vertical_scale(domain, plot)
    grid = compute_bar_grid(
        data.series,
        plot=plot,
        y_scale=y_scale,
        bar_width_fraction=options.bar_width,
        colors=options.colors,
    )
    ticks = tuple(generate_ticks(domain, y_scale))
    _require_finite(
        "bar chart",
        [tick.pixel for tick in ticks]
        + [coord for bar in grid.bars for coord in (bar.x, bar.top, bar.height)],
    )

    legend: LegendLayout | None = None
    if legend_visible(data.series_count, options.show_legend):
        labels = resolve_legend_labels(options.legend, data.series_count)
        entries = [
            LegendEntry(color=options.colors[i % len(options.colors)], label=label)
            for i, label in enumerate(labels)
        ]
        legend = build_legend_layout(
            entries,
            measure=lambda text: measure_text(surface, text, LEGEND_FONT),
            surface_width=width,
            padding=options.padding,
        )

    return BarChartLayout(
        width=width,
        height=height,
        plot=plot,
        domain=domain,
        ticks=ticks,
        grid=grid,
        category_labels=data.categories,
        category_centers=tuple(category_centers(data.category_count, plot)),
        legend=legend,
        options=options,
    )


def layout_line_chart(surface: DrawingSurface, data: ValidLineData, options: LineChartOptions) -> LineChartLayout:
    width, height = int(surface.width), int(surface.height)
    plot = compute_plot_area(width, height, options.padding)
    x_domain = data_domain(data.x)
    y_domain = data_domain(data.y)
    x_scale = horizontal_scale(x_domain, plot)
    y_scale = vertical_scale(y_domain, plot)
    x_ticks = tuple(generate_ticks(x_domain, x_scale))
    y_ticks = tuple(generate_ticks(y_domain, y_scale))
    path = compute_line_path(data.x, data.y, x_scale, y_scale)
    _require_finite(
        "line chart",
        [tick.pixel for tick in x_ticks + y_ticks] + [coord for point in path.points for coord in point],
    )
    return LineChartLayout(
        width=width,
        height=height,
        plot=plot,
        x_domain=x_domain,
        y_domain=y_domain,
        x_ticks=x_ticks,
        y_ticks=y_ticks,
        path=path,
        options=options,
    )


def _require_finite(kind: str, coords: list[float]) -> None:
    if not all(math.isfinite(value) for value in coords):
        raise ChartLayoutError(f"{kind} geometry has non-finite coordinates")


def draw_bar_chart(surface: DrawingSurface, layout: BarChartLayout) -> None:
    opts = layout.options
    plot = layout.plot
    _draw_background(surface, layout.width, layout.height, opts.background_color)

    tick_style = TextStyle(font=LABEL_FONT, color=TEXT_COLOR, align="right")
    for tick in layout.ticks:
        if opts.grid_lines:
            stroke_line(surface, plot.x, tick.pixel, plot.right, tick.pixel, color=opts.grid_color, line_width=GRID_LINE_WIDTH)
        fill_text(surface, tick.label, opts.padding - BAR_TICK_LABEL_GAP, tick.pixel + TICK_LABEL_BASELINE_SHIFT, tick_style)

    _draw_axes(surface, plot)

    inside_style = TextStyle(font=VALUE_FONT, color=WHITE, align="center")
    above_style = TextStyle(font=VALUE_FONT, color=TEXT_COLOR, align="center")
    for bar in layout.grid.bars:
        fill_rect(surface, bar.x, bar.rect_top, bar.width, bar.rect_height, color=bar.color)
        stroke_rect(
            surface,
            bar.x,
            bar.rect_top,
            bar.width,
            bar.rect_height,
            color=BAR_BORDER_COLOR,
            line_width=BAR_BORDER_WIDTH,
        )
        if not opts.show_values:
            continue
        placement = value_label_placement(bar.height)
        if placement is ValueLabelPlacement.ABOVE:
            fill_text(surface, format_tick(bar.value), bar.center_x, bar.top - VALUE_LABEL_GAP, above_style)
        elif placement is ValueLabelPlacement.INSIDE:
            y = layout.grid.baseline - bar.height / 2 + VALUE_LABEL_INSIDE_SHIFT
            fill_text(surface, format_tick(bar.value), bar.center_x, y, inside_style)

    category_style = TextStyle(font=LABEL_FONT, color=TEXT_COLOR, align="center")
    for label, center in zip(layout.category_labels, layout.category_centers, strict=True):
        fill_text(surface, label, center, plot.bottom + CATEGORY_LABEL_OFFSET, category_style)

    axis_style = TextStyle(font=LABEL_FONT, color=TEXT_COLOR, align="center")
    if opts.x_label:
        fill_text(surface, opts.x_label, plot.center_x, layout.height - opts.padding / 3, axis_style)
    if opts.y_label:
        fill_text(surface, opts.y_label, opts.padding / 3, plot.center_y, axis_style, rotate_deg=90)

    if layout.legend is not None:
        _draw_legend(surface, layout.legend)

    _draw_title(surface, opts.title, layout.width, opts.padding)


def draw_line_chart(surface: DrawingSurface, layout: LineChartLayout) -> None:
    opts = layout.options
    plot = layout.plot
    _draw_background(surface, layout.width, layout.height, opts.background_color)

    y_tick_style = TextStyle(font=LINE_TICK_FONT, color=TEXT_COLOR, align="right")
    for tick in layout.y_ticks:
        stroke_line(surface, plot.x, tick.pixel, plot.right, tick.pixel, color=opts.grid_color, line_width=GRID_LINE_WIDTH)
        fill_text(surface, tick.label, opts.padding - LINE_TICK_LABEL_GAP, tick.pixel + TICK_LABEL_BASELINE_SHIFT, y_tick_style)
    x_tick_style = TextStyle(font=LINE_TICK_FONT, color=TEXT_COLOR, align="center")
    for tick in layout.x_ticks:
        stroke_line(surface, tick.pixel, plot.bottom, tick.pixel, plot.y, color=opts.grid_color, line_width=GRID_LINE_WIDTH)
        fill_text(surface, tick.label, tick.pixel, plot.bottom + CATEGORY_LABEL_OFFSET, x_tick_style)

    _draw_axes(surface, plot)

    for (x0, y0), (x1, y1) in layout.path.segments:
        stroke_line(surface, x0, y0, x1, y1, color=opts.color, line_width=opts.line_width)
    if opts.show_points and opts.point_radius > 0:
        for x, y in layout.path.points:
            fill_circle(surface, x, y, opts.point_radius, color=opts.color)

    axis_style = TextStyle(font=LINE_AXIS_LABEL_FONT, color=TEXT_COLOR, align="center")
    if opts.x_label:
        fill_text(surface, opts.x_label, plot.center_x, layout.height - opts.padding / 2, axis_style)
    if opts.y_label:
        fill_text(surface, opts.y_label, LINE_Y_LABEL_X, plot.center_y, axis_style, rotate_deg=90)

    _draw_title(surface, opts.title, layout.width, opts.padding)


def _draw_background(surface: DrawingSurface, width: int, height: int, color: RGBA) -> None:
    surface.clear_rect(0, 0, width, height)
    fill_rect(surface, 0, 0, width, height, color=color)


def _draw_axes(surface: DrawingSurface, plot: PlotArea) -> None:
    stroke_line(surface, plot.x, plot.y, plot.x, plot.bottom, color=AXIS_COLOR, line_width=AXIS_LINE_WIDTH)
    stroke_line(surface, plot.x, plot.bottom, plot.right, plot.bottom, color=AXIS_COLOR, line_width=AXIS_LINE_WIDTH)


def _draw_legend(surface: DrawingSurface, legend: LegendLayout) -> None:
    fill_rect(surface, legend.box_x, legend.box_y, legend.box_width, legend.box_height, color=LEGEND_BACKGROUND)
    stroke_rect(
        surface,
        legend.box_x,
        legend.box_y,
        legend.box_width,
        legend.box_height,
        color=LEGEND_BORDER_COLOR,
        line_width=LEGEND_BORDER_WIDTH,
    )
    label_style = TextStyle(font=LEGEND_FONT, color=TEXT_COLOR, align="left")
    for row in legend.rows:
        fill_rect(surface, row.swatch_x, row.swatch_y, legend.swatch_size, legend.swatch_size, color=row.entry.color)
        stroke_rect(
            surface,
            row.swatch_x,
            row.swatch_y,
            legend.swatch_size,
            legend.swatch_size,
            color=BAR_BORDER_COLOR,
            line_width=LEGEND_BORDER_WIDTH,
        )
        fill_text(surface, row.entry.label, row.label_x, row.label_y, label_style)


def _draw_title(surface: DrawingSurface, title: str, width: int, padding: float) -> None:
    if not title:
        return
    fill_text(surface, title, width / 2, padding / 2, TextStyle(font=TITLE_FONT, color=TEXT_COLOR, align="center"))
