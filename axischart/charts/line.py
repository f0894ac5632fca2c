from __future__ import annotations

import numpy as np

from axischart.bounds import Bounds
from axischart.config import ChartConfig
from axischart.raster import draw_markers, draw_polyline
from axischart.scales import build_value_transform, column_centers
from axischart.series import DataSeries


def draw_line_chart(
    canvas: np.ndarray,
    rect: tuple[int, int, int, int],
    series: DataSeries,
    bounds: Bounds,
    config: ChartConfig,
) -> None:
    x0, y0, w, h = rect
    if series.is_empty or bounds.is_empty or w <= 1 or h <= 1:
        return
    transform = build_value_transform(bounds, h)
    px = column_centers(len(series), w) + x0
    py = transform.rows(np.nan_to_num(series.y, nan=0.0, posinf=0.0, neginf=0.0)) + y0

    # Non-finite points break the line instead of bridging across the gap.
    for start, stop in _finite_runs(series.mask):
        draw_polyline(canvas, px[start:stop], py[start:stop], config.color, width=config.line_width)
    if config.show_data_point:
        draw_markers(
            canvas,
            px[series.mask],
            py[series.mask],
            config.data_point_color,
            radius=config.data_point_radius,
            fill_color=config.data_point_fill_color,
        )


def _finite_runs(mask: np.ndarray) -> list[tuple[int, int]]:
    runs: list[tuple[int, int]] = []
    start: int | None = None
    for i, ok in enumerate(mask.tolist()):
        if ok and start is None:
            start = i
        elif not ok and start is not None:
            runs.append((start, i))
            start = None
    if start is not None:
        runs.append((start, mask.size))
    return runs
