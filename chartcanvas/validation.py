from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from chartcanvas.adapters.normalize import coerce_labels, coerce_values
from chartcanvas.bars import MAX_SERIES
from chartcanvas.errors import ChartDataError
from chartcanvas.scales import bar_domain, data_domain, domain_is_finite


@dataclass(frozen=True)
class ValidationFailure:
    reason: str


@dataclass(frozen=True, eq=False)
class ValidBarData:
    categories: tuple[str, ...]
    series: tuple[np.ndarray, ...]

    @property
    def category_count(self) -> int:
        return len(self.categories)

    @property
    def series_count(self) -> int:
        return len(self.series)


@dataclass(frozen=True, eq=False)
class ValidLineData:
    x: np.ndarray
    y: np.ndarray


def validate_bar_data(categories: Any, data: Any) -> ValidBarData | ValidationFailure:
    """Check bar chart shapes before any geometry is computed."""
    try:
        labels = coerce_labels(categories, label="categories")
    except ChartDataError as exc:
        return ValidationFailure(str(exc))
    if not labels:
        return ValidationFailure("categories must not be empty")

    if isinstance(data, np.ndarray) and data.ndim == 2:
        raw_series: Sequence[Any] = list(data)
    elif isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
        raw_series = data
    else:
        return ValidationFailure(f"data must be a sequence of 1-{MAX_SERIES} data series")
    if len(raw_series) == 0 or len(raw_series) > MAX_SERIES:
        return ValidationFailure(f"data must hold 1-{MAX_SERIES} data series, got {len(raw_series)}")

    series: list[np.ndarray] = []
    for i, raw in enumerate(raw_series):
        try:
            values = coerce_values(raw, label=f"series {i + 1}")
        except ChartDataError as exc:
            return ValidationFailure(str(exc))
        if values.size != len(labels):
            return ValidationFailure(
                f"series {i + 1} has {values.size} values for {len(labels)} categories"
            )
        if not np.all(np.isfinite(values)):
            return ValidationFailure(f"series {i + 1} contains non-finite values")
        series.append(values)
    if not domain_is_finite(bar_domain(series)):
        return ValidationFailure("bar values are too large to scale")
    return ValidBarData(categories=labels, series=tuple(series))


def validate_line_data(x: np.ndarray, y: Any) -> ValidLineData | ValidationFailure:
    try:
        y_values = coerce_values(y, label="y")
    except ChartDataError as exc:
        return ValidationFailure(str(exc))
    if y_values.size == 0:
        return ValidationFailure("y must hold at least one value")
    if x.size != y_values.size:
        return ValidationFailure(f"x and y length mismatch: {x.size} != {y_values.size}")
    if not np.all(np.isfinite(x)) or not np.all(np.isfinite(y_values)):
        return ValidationFailure("line data contains non-finite values")
    if not domain_is_finite(data_domain(x)) or not domain_is_finite(data_domain(y_values)):
        return ValidationFailure("line data range is too large to scale")
    return ValidLineData(x=x, y=y_values)
