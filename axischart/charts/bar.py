from __future__ import annotations

import numpy as np

from axischart.bounds import Bounds
from axischart.config import ChartConfig
from axischart.raster import fill_rounded_rect
from axischart.scales import build_value_transform
from axischart.series import DataSeries


def draw_bar_chart(
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
    baseline = transform.row(min(max(0.0, bounds.min), bounds.max))
    col_w = w / len(series)
    bar_w = max(1, int(round(col_w * config.width_percent)))
    for i, (value, ok) in enumerate(zip(series.y.tolist(), series.mask.tolist(), strict=True)):
        if not ok:
            continue
        left = x0 + int(round(i * col_w + (col_w - bar_w) / 2))
        top = transform.row(value)
        fill_rounded_rect(
            canvas,
            left,
            y0 + top,
            left + bar_w - 1,
            y0 + baseline,
            config.corner_radius,
            config.color,
        )
