from .canvas import blend_mask, draw_hline, draw_vline, fill_rect, fill_rounded_rect, new_canvas
from .draw_lines import draw_polyline
from .draw_markers import draw_markers
from .draw_text import draw_text, text_size
from .draw_wedges import draw_wedge

__all__ = [
    "blend_mask",
    "draw_hline",
    "draw_markers",
    "draw_polyline",
    "draw_text",
    "draw_vline",
    "draw_wedge",
    "fill_rect",
    "fill_rounded_rect",
    "new_canvas",
    "text_size",
]
