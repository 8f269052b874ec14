from __future__ import annotations

import logging

from linechart.config import DEFAULT_VIEWPORT, ViewportConfig
from linechart.dataset import Dataset
from linechart.errors import SurfaceError
from linechart.scales import Boundary, Scale, build_scale, compute_boundaries, grid_ticks, to_pixel_coords
from linechart.surface import StrokeStyle, Surface, TextStyle


LOGGER = logging.getLogger(__name__)


def render_axis(surface: Surface, boundary: Boundary, viewport: ViewportConfig = DEFAULT_VIEWPORT) -> None:
    grid_style = StrokeStyle(color=viewport.grid_color, width=viewport.grid_line_width)
    text_style = TextStyle(
        color=viewport.text_color,
        font_family=viewport.font_family,
        font_size_px=viewport.font_size_px,
    )

    surface.begin_path()
    for tick in grid_ticks(boundary, viewport):
        surface.fill_text(tick.label, viewport.label_x, tick.y - viewport.label_offset, text_style)
        surface.move_to(0, tick.y)
        surface.line_to(viewport.dpi_width, tick.y)
    surface.stroke(grid_style)
    surface.close_path()


def render_series(
    surface: Surface,
    dataset: Dataset,
    scale: Scale,
    viewport: ViewportConfig = DEFAULT_VIEWPORT,
) -> None:
    for series in dataset.line_series:
        path = to_pixel_coords(series, scale, viewport)
        if not path.points:
            continue
        surface.begin_path()
        (x0, y0), *rest = path.points
        surface.move_to(x0, y0)
        for x, y in rest:
            surface.line_to(x, y)
        surface.stroke(StrokeStyle(color=dataset.color_of(path.name), width=viewport.line_width))
        surface.close_path()


def render_chart(surface: Surface | None, dataset: Dataset, viewport: ViewportConfig = DEFAULT_VIEWPORT) -> None:
    """Draw the y-axis grid and every line series of ``dataset`` onto ``surface``.

    Boundary and scale are computed once and shared by the axis and the
    series. Raises a ``ChartError`` subclass before touching the surface when
    the dataset cannot be scaled.
    """
    if surface is None:
        raise SurfaceError("render_chart requires a drawing surface")

    boundary = compute_boundaries(dataset)
    scale = build_scale(boundary, dataset.column_length, viewport)
    LOGGER.debug(
        "rendering %d line series: boundary=(%g, %g) scale=(%g, %g)",
        len(dataset.line_series),
        boundary.min,
        boundary.max,
        scale.x_ratio,
        scale.y_ratio,
    )

    surface.set_size(viewport.width, viewport.height, viewport.dpi_width, viewport.dpi_height)
    render_axis(surface, boundary, viewport)
    render_series(surface, dataset, scale, viewport)
