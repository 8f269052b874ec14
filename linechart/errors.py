from __future__ import annotations


class ChartError(Exception):
    pass


class ChartDataError(ChartError, ValueError):
    pass


class DegenerateBoundaryError(ChartDataError):
    pass


class FlatSeriesError(ChartDataError):
    pass


class MissingColorError(ChartDataError):
    pass


class ChartConfigError(ChartError, ValueError):
    pass


class SurfaceError(ChartConfigError):
    pass
