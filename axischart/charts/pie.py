from __future__ import annotations

import math

import numpy as np

from axischart.config import ChartConfig
from axischart.raster import draw_wedge
from axischart.series import DataSeries


def draw_pie_chart(
    canvas: np.ndarray,
    rect: tuple[int, int, int, int],
    series: DataSeries,
    config: ChartConfig,
) -> None:
    """Slices sized by ``|y|``, clockwise from 12 o'clock in data order."""
    x0, y0, w, h = rect
    values = np.abs(series.finite_y())
    total = float(values.sum())
    if total <= 0 or w <= 2 or h <= 2:
        return
    radius = min(w, h) / 2.0 - 1.0
    cx = x0 + w / 2.0
    cy = y0 + h / 2.0
    inner = radius * config.pie_center_ratio
    start = 0.0
    for i, value in enumerate(values.tolist()):
        sweep = 2 * math.pi * value / total
        color = config.slice_colors[i % len(config.slice_colors)]
        draw_wedge(canvas, cx, cy, radius, start, start + sweep, color, inner_radius=inner)
        start += sweep
