from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any
import tomllib

from linechart.errors import ChartConfigError


@dataclass(frozen=True)
class ViewportConfig:
    """Fixed chart geometry plus the drawing constants shared by every render.

    ``width``/``height`` are logical units; the physical surface is
    ``dpi_scale`` times larger. ``padding`` is reserved above and below the
    plotting area for the y-axis labels.
    """

    width: int = 600
    height: int = 200
    dpi_scale: int = 2
    padding: int = 40
    rows_count: int = 5

    line_width: int = 4
    grid_line_width: int = 1
    grid_color: str = "#bbb"
    text_color: str = "#96a2aa"
    font_family: str = "Helvetica"
    font_size_px: float = 20.0
    label_x: int = 5
    label_offset: int = 10
    background: str = "#ffffff"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ChartConfigError("width/height must be > 0")
        if self.dpi_scale <= 0:
            raise ChartConfigError("dpi_scale must be > 0")
        if self.padding < 0:
            raise ChartConfigError("padding must be >= 0")
        if self.view_height <= 0:
            raise ChartConfigError("padding leaves no vertical room for the plot")
        if self.rows_count <= 0:
            raise ChartConfigError("rows_count must be > 0")
        if self.line_width <= 0 or self.grid_line_width <= 0:
            raise ChartConfigError("line widths must be > 0")
        if self.font_size_px <= 0:
            raise ChartConfigError("font_size_px must be > 0")

    @property
    def dpi_width(self) -> int:
        return self.width * self.dpi_scale

    @property
    def dpi_height(self) -> int:
        return self.height * self.dpi_scale

    @property
    def view_height(self) -> int:
        return self.dpi_height - self.padding * 2

    @property
    def view_width(self) -> int:
        return self.dpi_width


DEFAULT_VIEWPORT = ViewportConfig()


def viewport_from_dict(raw: dict[str, Any]) -> ViewportConfig:
    known = {f.name for f in fields(ViewportConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ChartConfigError(f"unknown viewport keys: {', '.join(unknown)}")
    try:
        return ViewportConfig(**raw)
    except TypeError as exc:
        raise ChartConfigError(f"invalid viewport config: {exc}") from exc


def load_viewport_config(path: str | Path) -> ViewportConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise ChartConfigError(f"missing config file: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ChartConfigError(f"invalid TOML in {config_path}: {exc}") from exc
    section = raw.get("viewport", raw)
    if not isinstance(section, dict):
        raise ChartConfigError("viewport must be a table")
    return viewport_from_dict(section)
