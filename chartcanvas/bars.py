from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np

from chartcanvas.errors import ChartDataError
from chartcanvas.layout import PlotArea
from chartcanvas.scales import LinearScale
from chartcanvas.surface import RGBA


MAX_SERIES = 3
VALUE_LABEL_ABOVE_MIN_PX = 20.0
VALUE_LABEL_INSIDE_MIN_PX = 10.0


class ValueLabelPlacement(Enum):
    ABOVE = "above"
    INSIDE = "inside"


@dataclass(frozen=True)
class BarSlot:
    category_index: int
    series_index: int
    value: float
    x: float
    width: float
    top: float
    height: float
    color: RGBA

    @property
    def center_x(self) -> float:
        return self.x + self.width * 0.5

    @property
    def rect_top(self) -> float:
        """Upper edge of the drawn rectangle; bars for negative values hang below the baseline."""
        return min(self.top, self.top + self.height)

    @property
    def rect_height(self) -> float:
        return abs(self.height)


@dataclass(frozen=True)
class BarGrid:
    category_width: float
    group_width: float
    bar_width: float
    baseline: float
    bars: tuple[BarSlot, ...]


def value_label_placement(bar_height: float) -> ValueLabelPlacement | None:
    """Three-band label policy; the comparisons are strict so 20 and 10 fall into the lower band."""
    if bar_height > VALUE_LABEL_ABOVE_MIN_PX:
        return ValueLabelPlacement.ABOVE
    if bar_height > VALUE_LABEL_INSIDE_MIN_PX:
        return ValueLabelPlacement.INSIDE
    return None


def category_centers(category_count: int, plot: PlotArea) -> list[float]:
    slot = plot.width / category_count
    return [plot.x + c * slot + slot * 0.5 for c in range(category_count)]


def compute_bar_grid(
    series: Sequence[np.ndarray],
    *,
    plot: PlotArea,
    y_scale: LinearScale,
    bar_width_fraction: float,
    colors: Sequence[RGBA],
) -> BarGrid:
    """Lay out grouped bars, category-major then series order.

    Each category slot holds a centered group whose width is `bar_width_fraction`
    of the slot, split evenly among the series.
    """
    series_count = len(series)
    if series_count < 1 or series_count > MAX_SERIES:
        raise ChartDataError(f"expected 1-{MAX_SERIES} data series, got {series_count}")
    category_count = int(series[0].size)
    if category_count == 0:
        raise ChartDataError("bar chart needs at least one category")
    if not 0 < bar_width_fraction <= 1:
        raise ChartDataError("bar width fraction must be in (0, 1]")
    if not colors:
        raise ChartDataError("color palette is empty")

    category_width = plot.width / category_count
    group_width = category_width * bar_width_fraction
    bar_width = group_width / series_count
    baseline = y_scale(0.0)

    bars: list[BarSlot] = []
    for c in range(category_count):
        group_x = plot.x + c * category_width + (category_width - group_width) / 2
        for s, values in enumerate(series):
            value = float(values[c])
            height = baseline - y_scale(value)
            bars.append(
                BarSlot(
                    category_index=c,
                    series_index=s,
                    value=value,
                    x=group_x + s * bar_width,
                    width=bar_width,
                    top=baseline - height,
                    height=height,
                    color=colors[s % len(colors)],
                )
            )
    return BarGrid(
        category_width=category_width,
        group_width=group_width,
        bar_width=bar_width,
        baseline=baseline,
        bars=tuple(bars),
    )
