from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from chartcanvas.surface import RGBA


SWATCH_SIZE = 15.0
ROW_SPACING = 20.0
WIDTH_MARGIN = 15.0
HEIGHT_MARGIN = 10.0
TOP_INSET = 10.0
BOX_PAD = 5.0
LABEL_GAP = 5.0
LABEL_BASELINE_LIFT = 3.0


@dataclass(frozen=True)
class LegendEntry:
    color: RGBA
    label: str


@dataclass(frozen=True)
class LegendRow:
    entry: LegendEntry
    swatch_x: float
    swatch_y: float
    label_x: float
    label_y: float


@dataclass(frozen=True)
class LegendLayout:
    x: float
    y: float
    width: float
    height: float
    box_x: float
    box_y: float
    box_width: float
    box_height: float
    swatch_size: float
    rows: tuple[LegendRow, ...]


def legend_visible(series_count: int, show_legend: bool) -> bool:
    return series_count > 1 and show_legend


def resolve_legend_labels(labels: Sequence[str] | None, count: int) -> tuple[str, ...]:
    given = tuple(labels or ())
    return tuple(
        given[i] if i < len(given) and given[i] else f"Series {i + 1}"
        for i in range(count)
    )


def build_legend_layout(
    entries: Sequence[LegendEntry],
    *,
    measure: Callable[[str], float],
    surface_width: float,
    padding: float,
) -> LegendLayout:
    """Size the legend from its widest label and pin it to the plot's top-right corner.

    `measure` must already be configured with the legend font.
    """
    if not entries:
        raise ValueError("legend needs at least one entry")
    widest = max(measure(entry.label) for entry in entries)
    width = widest + SWATCH_SIZE + WIDTH_MARGIN
    height = len(entries) * ROW_SPACING + HEIGHT_MARGIN
    x = surface_width - padding - width
    y = padding + TOP_INSET

    rows: list[LegendRow] = []
    for i, entry in enumerate(entries):
        swatch_y = y + BOX_PAD + i * ROW_SPACING
        rows.append(
            LegendRow(
                entry=entry,
                swatch_x=x,
                swatch_y=swatch_y,
                label_x=x + SWATCH_SIZE + LABEL_GAP,
                label_y=swatch_y + SWATCH_SIZE - LABEL_BASELINE_LIFT,
            )
        )
    return LegendLayout(
        x=x,
        y=y,
        width=width,
        height=height,
        box_x=x - BOX_PAD,
        box_y=y - BOX_PAD,
        box_width=width + 2 * BOX_PAD,
        box_height=height,
        swatch_size=SWATCH_SIZE,
        rows=tuple(rows),
    )
