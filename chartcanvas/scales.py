from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence, overload

import numpy as np

from chartcanvas.layout import PlotArea


BAR_HEADROOM_RATIO = 1.1
TICK_STEPS = 5


@dataclass(frozen=True)
class Domain:
    min: float
    max: float

    @property
    def span(self) -> float:
        # Zero-width domains map through a unit range so constant data stays finite.
        span = self.max - self.min
        return span if span != 0 else 1.0


@dataclass(frozen=True)
class LinearScale:
    domain: Domain
    range_start: float
    range_end: float

    @overload
    def __call__(self, value: float) -> float: ...

    @overload
    def __call__(self, value: np.ndarray) -> np.ndarray: ...

    def __call__(self, value):
        factor = (self.range_end - self.range_start) / self.domain.span
        if isinstance(value, np.ndarray):
            return self.range_start + (value.astype(np.float64, copy=False) - self.domain.min) * factor
        return self.range_start + (float(value) - self.domain.min) * factor


@dataclass(frozen=True)
class Tick:
    value: float
    label: str
    pixel: float


def horizontal_scale(domain: Domain, plot: PlotArea) -> LinearScale:
    return LinearScale(domain=domain, range_start=plot.x, range_end=plot.right)


def vertical_scale(domain: Domain, plot: PlotArea) -> LinearScale:
    # Screen y grows downward, so the domain minimum sits on the plot bottom.
    return LinearScale(domain=domain, range_start=plot.bottom, range_end=plot.y)


def data_domain(values: np.ndarray) -> Domain:
    return Domain(min=float(np.min(values)), max=float(np.max(values)))


def bar_domain(series: Sequence[np.ndarray]) -> Domain:
    """Domain anchored at zero with headroom beyond the observed extremes.

    Positive data gives `[0, 1.1 * max]`. Negative values extend the lower end
    the same way, so the zero baseline stays inside the plot.
    """
    observed_max = max(float(np.max(values)) for values in series)
    observed_min = min(float(np.min(values)) for values in series)
    return Domain(
        min=min(0.0, observed_min * BAR_HEADROOM_RATIO),
        max=max(0.0, observed_max * BAR_HEADROOM_RATIO),
    )


def domain_is_finite(domain: Domain) -> bool:
    return math.isfinite(domain.min) and math.isfinite(domain.max) and math.isfinite(domain.span)


def format_tick(value: float) -> str:
    out = f"{value:.1f}"
    if out == "-0.0":
        out = "0.0"
    return out


def generate_ticks(domain: Domain, scale: LinearScale, steps: int = TICK_STEPS) -> list[Tick]:
    if steps <= 0:
        raise ValueError("steps must be > 0")
    step = (domain.max - domain.min) / steps
    ticks: list[Tick] = []
    for i in range(steps + 1):
        value = domain.min + i * step
        ticks.append(Tick(value=value, label=format_tick(value), pixel=scale(value)))
    return ticks
