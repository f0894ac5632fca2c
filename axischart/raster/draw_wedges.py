from __future__ import annotations

import math

import numpy as np

from axischart.raster.canvas import RGBA, blend_mask


def draw_wedge(
    dst: np.ndarray,
    cx: float,
    cy: float,
    radius: float,
    start_rad: float,
    end_rad: float,
    color: RGBA,
    *,
    inner_radius: float = 0.0,
) -> None:
    """Fill an annular sector; angles run clockwise from 12 o'clock."""
    if radius <= 0 or end_rad <= start_rad:
        return
    x0 = int(math.floor(cx - radius))
    y0 = int(math.floor(cy - radius))
    size = int(math.ceil(2 * radius)) + 1
    ys, xs = np.mgrid[y0 : y0 + size, x0 : x0 + size]
    dx = xs + 0.5 - cx
    dy = ys + 0.5 - cy
    dist2 = dx * dx + dy * dy
    angle = np.mod(np.arctan2(dx, -dy), 2 * math.pi)
    mask = (dist2 <= radius * radius) & (dist2 >= inner_radius * inner_radius)
    if end_rad - start_rad < 2 * math.pi:
        start = math.fmod(start_rad, 2 * math.pi)
        end = start + (end_rad - start_rad)
        if end <= 2 * math.pi:
            mask &= (angle >= start) & (angle < end)
        else:
            mask &= (angle >= start) | (angle < end - 2 * math.pi)
    blend_mask(dst, x0, y0, mask, color)
