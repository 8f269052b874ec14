from __future__ import annotations

from functools import lru_cache

import numpy as np
from PIL import ImageColor

from linechart.errors import ChartConfigError


RGBA = tuple[int, int, int, int]


@lru_cache(maxsize=64)
def parse_color(color: str) -> RGBA:
    try:
        rgba = ImageColor.getcolor(color, "RGBA")
    except ValueError as exc:
        raise ChartConfigError(f"unrecognised color: {color!r}") from exc
    r, g, b, a = rgba  # type: ignore[misc]
    return (int(r), int(g), int(b), int(a))


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def fill_rect(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
    """Blend ``color`` over the inclusive pixel rectangle, clipped to ``dst``."""
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if xa > xb or ya > yb:
        return
    block = dst[ya : yb + 1, xa : xb + 1]
    a = color[3] / 255.0
    inv = 1.0 - a
    block[:, :, :3] = (np.asarray(color[0:3], dtype=np.float32) * a + block[:, :, :3].astype(np.float32) * inv).astype(np.uint8)
    block[:, :, 3] = 255


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    fill_rect(dst, x, y, x, y, color)


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    fill_rect(dst, x0, y, x1, y, color)
