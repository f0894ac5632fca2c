from __future__ import annotations

import numpy as np

from axischart.raster.canvas import RGBA, blend_mask


def draw_polyline(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, width: int = 1) -> None:
    if xs.size < 2:
        return
    stamped = np.zeros(dst.shape[:2], dtype=bool)
    for i in range(xs.size - 1):
        _stamp_segment(stamped, int(xs[i]), int(ys[i]), int(xs[i + 1]), int(ys[i + 1]), width=width)
    blend_mask(dst, 0, 0, stamped, color)


def _stamp_segment(stamped: np.ndarray, x0: int, y0: int, x1: int, y1: int, width: int) -> None:
    # Bresenham with a square brush; stamping into a mask keeps joints from double-blending.
    radius = max(0, width // 2)
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        stamped[max(0, y0 - radius) : max(0, y0 + radius + 1), max(0, x0 - radius) : max(0, x0 + radius + 1)] = True
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
