from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class StrokeStyle:
    color: str
    width: float = 1.0


@dataclass(frozen=True)
class TextStyle:
    color: str
    font_family: str
    font_size_px: float


class Surface(Protocol):
    """2-D drawing target written to by the renderers.

    Styles travel with each ``stroke``/``fill_text`` call; a surface must not
    carry stroke or fill state over from one call to the next.
    """

    def set_size(self, width: int, height: int, physical_width: int, physical_height: int) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def stroke(self, style: StrokeStyle) -> None: ...

    def close_path(self) -> None: ...

    def fill_text(self, text: str, x: float, y: float, style: TextStyle) -> None: ...


@dataclass(frozen=True)
class SurfaceOp:
    name: str
    args: tuple[Any, ...] = ()


@dataclass
class RecordingSurface:
    ops: list[SurfaceOp] = field(default_factory=list)
    size: tuple[int, int, int, int] | None = None

    def set_size(self, width: int, height: int, physical_width: int, physical_height: int) -> None:
        self.size = (width, height, physical_width, physical_height)
        self.ops.append(SurfaceOp("set_size", (width, height, physical_width, physical_height)))

    def begin_path(self) -> None:
        self.ops.append(SurfaceOp("begin_path"))

    def move_to(self, x: float, y: float) -> None:
        self.ops.append(SurfaceOp("move_to", (x, y)))

    def line_to(self, x: float, y: float) -> None:
        self.ops.append(SurfaceOp("line_to", (x, y)))

    def stroke(self, style: StrokeStyle) -> None:
        self.ops.append(SurfaceOp("stroke", (style,)))

    def close_path(self) -> None:
        self.ops.append(SurfaceOp("close_path"))

    def fill_text(self, text: str, x: float, y: float, style: TextStyle) -> None:
        self.ops.append(SurfaceOp("fill_text", (text, x, y, style)))

    def named(self, name: str) -> list[SurfaceOp]:
        return [op for op in self.ops if op.name == name]
