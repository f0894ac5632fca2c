from .bar import draw_bar_chart
from .line import draw_line_chart
from .pie import draw_pie_chart

__all__ = ["draw_bar_chart", "draw_line_chart", "draw_pie_chart"]
