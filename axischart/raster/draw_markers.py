from __future__ import annotations

import numpy as np

from axischart.raster.canvas import RGBA, blend_mask


def draw_markers(
    dst: np.ndarray,
    xs: np.ndarray,
    ys: np.ndarray,
    color: RGBA,
    radius: int = 3,
    fill_color: RGBA | None = None,
) -> None:
    """Round data-point markers; ``fill_color`` paints the interior inside a one-pixel ring."""
    if radius <= 0:
        return
    disc = _disc(radius)
    inner = _disc(radius - 1) if fill_color is not None and radius > 1 else None
    for x, y in zip(xs.tolist(), ys.tolist(), strict=True):
        blend_mask(dst, int(x) - radius, int(y) - radius, disc, color)
        if inner is not None:
            blend_mask(dst, int(x) - radius + 1, int(y) - radius + 1, inner, fill_color)


def _disc(radius: int) -> np.ndarray:
    yy, xx = np.mgrid[-radius : radius + 1, -radius : radius + 1]
    return xx * xx + yy * yy <= radius * radius
