from .canvas import draw_hline, fill_rect, new_canvas, parse_color
from .draw_lines import draw_polyline
from .draw_text import draw_text, text_size
from .surface import RasterSurface

__all__ = [
    "RasterSurface",
    "draw_hline",
    "draw_polyline",
    "draw_text",
    "fill_rect",
    "new_canvas",
    "parse_color",
    "text_size",
]
