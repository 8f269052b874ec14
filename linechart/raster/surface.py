from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
from PIL import Image

from linechart.raster.canvas import new_canvas, parse_color
from linechart.raster.draw_lines import draw_polyline
from linechart.raster.draw_text import draw_text, text_size
from linechart.surface import StrokeStyle, TextStyle


@dataclass
class RasterSurface:
    """Numpy RGBA surface (``H x W x 4`` uint8).

    Coordinates are physical pixels. ``set_size`` reallocates the canvas and
    clears it to ``background``. Paths are kept as subpaths of integer points
    and rasterised when stroked.
    """

    background: str = "#ffffff"
    logical_size: tuple[int, int] | None = None
    canvas: np.ndarray = field(default_factory=lambda: new_canvas(1, 1))
    _subpaths: list[list[tuple[int, int]]] = field(default_factory=list)

    @property
    def width(self) -> int:
        return int(self.canvas.shape[1])

    @property
    def height(self) -> int:
        return int(self.canvas.shape[0])

    def set_size(self, width: int, height: int, physical_width: int, physical_height: int) -> None:
        if physical_width <= 0 or physical_height <= 0:
            raise ValueError("physical size must be > 0")
        self.logical_size = (width, height)
        self.canvas = new_canvas(physical_width, physical_height, parse_color(self.background))
        self._subpaths = []

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([_pt(x, y)])

    def line_to(self, x: float, y: float) -> None:
        # A line_to with no current point starts a subpath, as on an HTML canvas.
        if not self._subpaths:
            self._subpaths.append([])
        self._subpaths[-1].append(_pt(x, y))

    def stroke(self, style: StrokeStyle) -> None:
        color = parse_color(style.color)
        width = max(1, int(round(style.width)))
        for points in self._subpaths:
            if len(points) < 2:
                continue
            draw_polyline(self.canvas, points, color, width=width)

    def close_path(self) -> None:
        self._subpaths = []

    def fill_text(self, text: str, x: float, y: float, style: TextStyle) -> None:
        # y is the alphabetic baseline.
        _, h = text_size(text, font_family=style.font_family, font_size_px=style.font_size_px)
        draw_text(
            self.canvas,
            int(round(x)),
            int(round(y)) - h,
            text,
            parse_color(style.color),
            font_family=style.font_family,
            font_size_px=style.font_size_px,
        )

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self.canvas))

    def save_png(self, path: str | Path) -> Path:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        self.to_image().save(out, format="PNG")
        return out


def _pt(x: float, y: float) -> tuple[int, int]:
    return (int(round(x)), int(round(y)))
