from linechart.config import DEFAULT_VIEWPORT, ViewportConfig, load_viewport_config
from linechart.dataset import Dataset, Series
from linechart.errors import (
    ChartConfigError,
    ChartDataError,
    ChartError,
    DegenerateBoundaryError,
    FlatSeriesError,
    MissingColorError,
    SurfaceError,
)
from linechart.render import render_axis, render_chart, render_series
from linechart.scales import Boundary, Scale, build_scale, compute_boundaries, to_pixel_coords
from linechart.surface import RecordingSurface, StrokeStyle, Surface, TextStyle

__all__ = [
    "Boundary",
    "ChartConfigError",
    "ChartDataError",
    "ChartError",
    "DEFAULT_VIEWPORT",
    "Dataset",
    "DegenerateBoundaryError",
    "FlatSeriesError",
    "MissingColorError",
    "RecordingSurface",
    "Scale",
    "Series",
    "StrokeStyle",
    "Surface",
    "SurfaceError",
    "TextStyle",
    "ViewportConfig",
    "build_scale",
    "compute_boundaries",
    "load_viewport_config",
    "render_axis",
    "render_chart",
    "render_series",
    "to_pixel_coords",
]
