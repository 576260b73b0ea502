from __future__ import annotations


class ChartError(Exception):
    """Base class for every failure a chart render can report."""


class SurfaceNotFoundError(ChartError):
    pass


class ChartDataError(ChartError):
    pass


class ChartOptionsError(ChartError):
    pass


class ChartLayoutError(ChartError):
    pass
