from __future__ import annotations

import numpy as np


RGBA = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def blend(region: np.ndarray, color: RGBA, coverage: np.ndarray | None = None) -> None:
    """Source-over ``color`` onto an ``(..., 4)`` view, optionally scaled by a 0..1 coverage mask."""
    a = color[3] / 255.0
    alpha = np.float32(a) if coverage is None else (coverage.astype(np.float32) * a)[..., None]
    src = np.asarray(color[0:3], dtype=np.float32)
    region[..., :3] = (src * alpha + region[..., :3].astype(np.float32) * (1.0 - alpha)).astype(np.uint8)
    region[..., 3] = 255


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    blend(dst[y : y + 1, x : x + 1], color)


def fill_rect(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
    """Fill the inclusive rectangle spanned by two corners, clipped to the canvas."""
    left = max(0, min(x0, x1))
    right = min(dst.shape[1] - 1, max(x0, x1))
    top = max(0, min(y0, y1))
    bottom = min(dst.shape[0] - 1, max(y0, y1))
    if right < left or bottom < top:
        return
    blend(dst[top : bottom + 1, left : right + 1], color)


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA, width: int = 1) -> None:
    top = y - (width - 1) // 2
    fill_rect(dst, x0, top, x1, top + width - 1, color)


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA, width: int = 1) -> None:
    left = x - (width - 1) // 2
    fill_rect(dst, left, y0, left + width - 1, y1, color)


def fill_rounded_rect(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, radius: int, color: RGBA) -> None:
    left, right = min(x0, x1), max(x0, x1)
    top, bottom = min(y0, y1), max(y0, y1)
    radius = max(0, min(radius, (right - left) // 2, (bottom - top) // 2))
    if radius == 0:
        fill_rect(dst, left, top, right, bottom, color)
        return
    ys, xs = np.mgrid[top : bottom + 1, left : right + 1]
    cx = np.clip(xs, left + radius, right - radius)
    cy = np.clip(ys, top + radius, bottom - radius)
    inside = (xs - cx) ** 2 + (ys - cy) ** 2 <= radius * radius
    blend_mask(dst, left, top, inside, color)


def blend_mask(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGBA) -> None:
    h, w = mask.shape
    x0, y0 = max(0, x), max(0, y)
    x1, y1 = min(dst.shape[1], x + w), min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return
    sub = mask[y0 - y : y1 - y, x0 - x : x1 - x]
    if not np.any(sub):
        return
    blend(dst[y0:y1, x0:x1], color, coverage=sub)
