from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from axischart.raster.canvas import RGBA, blend_mask


SANS_FONT_PATTERNS = (
    "helvetica",
    "arial",
    "dejavusans",
    "liberationsans",
)
FONT_DIRS = (
    Path("/System/Library/Fonts"),
    Path("/Library/Fonts"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
)


def draw_text(
    dst: np.ndarray,
    x: int,
    y: int,
    text: str,
    color: RGBA,
    *,
    font_size_px: float = 10.0,
    rotate_deg: int = 0,
) -> None:
    if not text:
        return
    mask = _text_mask(text, _font_size(font_size_px))
    turns = _quarter_turns(rotate_deg)
    if turns:
        mask = np.rot90(mask, k=turns)
    blend_mask(dst, x, y, mask.astype(np.float32) / 255.0, color)


def text_size(text: str, *, font_size_px: float = 10.0, rotate_deg: int = 0) -> tuple[int, int]:
    if not text:
        return (0, 0)
    h, w = _text_mask(text, _font_size(font_size_px)).shape
    if _quarter_turns(rotate_deg) % 2 == 1:
        return (h, w)
    return (w, h)


@lru_cache(maxsize=256)
def _text_mask(text: str, size: int) -> np.ndarray:
    font = _load_font(size)
    left, top, right, bottom = font.getbbox(text)
    image = Image.new("L", (max(1, int(right - left)), max(1, int(bottom - top))), 0)
    ImageDraw.Draw(image).text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


@lru_cache(maxsize=32)
def _load_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    path = _find_font_file()
    if path is None:
        return ImageFont.load_default(size=size)
    try:
        return ImageFont.truetype(str(path), size=size)
    except OSError:
        return ImageFont.load_default(size=size)


@lru_cache(maxsize=1)
def _find_font_file() -> Path | None:
    candidates: list[Path] = []
    for base in FONT_DIRS:
        if base.exists():
            candidates.extend(p for p in base.rglob("*") if p.suffix.lower() in {".ttf", ".otf"})
    for pattern in SANS_FONT_PATTERNS:
        for path in sorted(candidates):
            if pattern in path.stem.lower().replace(" ", "").replace("-", ""):
                return path
    return None


def _font_size(font_size_px: float) -> int:
    return max(1, int(round(font_size_px)))


def _quarter_turns(rotate_deg: int) -> int:
    if rotate_deg % 90 != 0:
        raise ValueError("rotate_deg must be a multiple of 90")
    return (rotate_deg // 90) % 4
