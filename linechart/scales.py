from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from linechart.config import ViewportConfig
from linechart.dataset import Dataset, Series
from linechart.errors import ChartDataError, DegenerateBoundaryError, FlatSeriesError


@dataclass(frozen=True)
class Boundary:
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min


@dataclass(frozen=True)
class Scale:
    x_ratio: float
    y_ratio: float


@dataclass(frozen=True)
class PixelPath:
    name: str
    points: tuple[tuple[int, int], ...]

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class GridTick:
    y: float
    value: int
    label: str


def compute_boundaries(dataset: Dataset) -> Boundary:
    lo: float | None = None
    hi: float | None = None
    for series in dataset.line_series:
        if series.values.size == 0:
            continue
        smin = float(np.min(series.values))
        smax = float(np.max(series.values))
        # First scanned series seeds both ends.
        if lo is None or hi is None:
            lo, hi = smin, smax
            continue
        lo = min(lo, smin)
        hi = max(hi, smax)
    if lo is None or hi is None:
        raise DegenerateBoundaryError("dataset has no line series values to bound")
    return Boundary(min=lo, max=hi)


def build_scale(boundary: Boundary, series_length: int, viewport: ViewportConfig) -> Scale:
    if series_length <= 0:
        raise ChartDataError("series_length must be > 0")
    if boundary.max == boundary.min:
        raise FlatSeriesError(f"all line values equal {boundary.min:g}; vertical scale is undefined")
    return Scale(
        x_ratio=viewport.view_width / series_length,
        y_ratio=viewport.view_height / boundary.span,
    )


def to_pixel_coords(series: Series, scale: Scale, viewport: ViewportConfig) -> PixelPath:
    idx = np.arange(series.values.size, dtype=np.float64)
    px = np.floor(idx * scale.x_ratio).astype(np.int64)
    py = np.floor(viewport.dpi_height - viewport.padding - series.values * scale.y_ratio).astype(np.int64)
    return PixelPath(
        name=series.name,
        points=tuple(zip(px.tolist(), py.tolist(), strict=True)),
    )


def grid_ticks(boundary: Boundary, viewport: ViewportConfig) -> list[GridTick]:
    rows = viewport.rows_count
    step = viewport.view_height / rows
    text_step = boundary.span / rows
    ticks: list[GridTick] = []
    for i in range(1, rows + 1):
        value = round_half_up(boundary.max - text_step * i)
        ticks.append(GridTick(y=step * i + viewport.padding, value=value, label=str(value)))
    return ticks


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going toward +inf (``Math.round``)."""
    whole = math.floor(value)
    return int(whole) + (1 if value - whole >= 0.5 else 0)
