from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from axischart.adapters import normalize_series
from axischart.bounds import Bounds
from axischart.nice import check_grid_step


@dataclass(frozen=True)
class GridLayout:
    horizontal_count: int
    vertical_count: int
    horizontal_offsets: tuple[int, ...]
    vertical_offsets: tuple[int, ...]


def count_distinct_values(series: Any) -> int:
    values = normalize_series(series).finite_y()
    return int(np.unique(values).size)


def horizontal_gridline_count(bounds: Bounds, grid_step: int, series: Any) -> int:
    """Never more divisions than requested or than distinct data values."""
    grid_step = check_grid_step(grid_step)
    if bounds.is_empty:
        return 0
    return min(grid_step, count_distinct_values(series))


def vertical_gridline_count(series: Any) -> int:
    return len(normalize_series(series))


def layout_grid(bounds: Bounds, grid_step: int, series: Any, *, width: int, height: int) -> GridLayout:
    """Pixel offsets of gridlines inside a ``width`` x ``height`` plot area.

    Horizontal lines stack down from the top edge one division apart;
    vertical lines close each data column on its right edge.
    """
    if width <= 0 or height <= 0:
        raise ValueError("grid width/height must be > 0")
    grid_step = check_grid_step(grid_step)
    data = normalize_series(series)
    h_count = horizontal_gridline_count(bounds, grid_step, data)
    v_count = vertical_gridline_count(data)
    row_h = height / grid_step
    col_w = width / v_count if v_count > 0 else float(width)
    h_offsets = tuple(int(round(i * row_h)) for i in range(h_count))
    v_offsets = tuple(min(width - 1, int(round((j + 1) * col_w)) - 1) for j in range(v_count))
    return GridLayout(
        horizontal_count=h_count,
        vertical_count=v_count,
        horizontal_offsets=h_offsets,
        vertical_offsets=v_offsets,
    )


def axis_tick_values(bounds: Bounds, grid_step: int) -> tuple[float, ...]:
    grid_step = check_grid_step(grid_step)
    if bounds.is_empty:
        return ()
    if bounds.span == 0:
        return (bounds.min,)
    step = bounds.span / grid_step
    ticks = [bounds.min + i * step for i in range(grid_step)]
    ticks.append(bounds.max)
    # Snap floating-point drift so values like -4.44e-16 read as 0.
    return tuple(0.0 if abs(t) <= step * 1e-9 else t for t in ticks)
