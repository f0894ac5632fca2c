from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any

import numpy as np
from PIL import Image

from axischart.adapters import normalize_series
from axischart.bounds import EMPTY_BOUNDS, Bounds, compute_bounds
from axischart.charts import draw_bar_chart, draw_line_chart, draw_pie_chart
from axischart.config import ChartConfig
from axischart.grid import GridLayout, axis_tick_values, layout_grid
from axischart.raster import draw_hline, draw_text, draw_vline, new_canvas, text_size
from axischart.scales import build_value_transform, column_centers, format_axis_labels
from axischart.series import DataSeries, empty_series


LOGGER = logging.getLogger(__name__)

_TEXT_GAP = 4


@dataclass
class Chart:
    """A chart bound to a measured container size.

    The chart owns its axis ``Bounds`` on behalf of the caller and rebuilds
    them wholesale whenever data or configuration changes.
    """

    width: int
    height: int
    config: ChartConfig = field(default_factory=ChartConfig)

    _series: DataSeries = field(default_factory=empty_series, init=False, repr=False)
    _bounds: Bounds = field(default=EMPTY_BOUNDS, init=False)
    _last_plot_rect: tuple[int, int, int, int] | None = field(default=None, init=False, repr=False)
    _last_grid: GridLayout | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be > 0")
        self._recompute_bounds()

    @property
    def series(self) -> DataSeries:
        return self._series

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def set_data(self, data: Any, *, x: str | None = None, y: str | None = None) -> "Chart":
        self._series = normalize_series(data, x=x, y=y)
        if self._series.skipped_points:
            LOGGER.warning("skipping %d non-finite point(s) when computing bounds", self._series.skipped_points)
        self._recompute_bounds()
        return self

    def configure(self, **overrides: Any) -> "Chart":
        self.config = self.config.replace(**overrides)
        self._recompute_bounds()
        return self

    def resize(self, width: int, height: int) -> "Chart":
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.width = int(width)
        self.height = int(height)
        return self

    def last_plot_rect(self) -> tuple[int, int, int, int] | None:
        return self._last_plot_rect

    def last_grid_layout(self) -> GridLayout | None:
        return self._last_grid

    def _recompute_bounds(self) -> None:
        self._bounds = compute_bounds(
            self._series,
            self.config.vertical_grid_step,
            self.config.tight_bounds,
        )
        if self._bounds.is_empty:
            LOGGER.debug("no finite data; bounds left empty")
        else:
            LOGGER.debug("bounds recomputed: min=%s max=%s", self._bounds.min, self._bounds.max)

    def to_rgba(self) -> np.ndarray:
        cfg = self.config
        canvas = new_canvas(self.width, self.height, color=cfg.background)
        self._last_plot_rect = None
        self._last_grid = None
        if self._series.is_empty:
            LOGGER.warning("nothing to render: chart has no data")
            return canvas

        top = self._draw_title(canvas)
        if cfg.chart_type == "pie":
            rect = (0, top, self.width, self.height - top)
            self._last_plot_rect = rect
            draw_pie_chart(canvas, rect, self._series, cfg)
            return canvas

        rect = self._plot_rect(top)
        self._last_plot_rect = rect
        x0, y0, w, h = rect
        if w <= 1 or h <= 1 or self._bounds.is_empty:
            return canvas

        if cfg.show_grid:
            self._draw_grid(canvas, rect)
        if cfg.show_axis:
            self._draw_axes(canvas, rect)
        if cfg.chart_type == "line":
            draw_line_chart(canvas, rect, self._series, self._bounds, cfg)
        else:
            draw_bar_chart(canvas, rect, self._series, self._bounds, cfg)
        return canvas

    def save_png(self, path: str | Path) -> Path:
        out = Path(path)
        Image.fromarray(self.to_rgba()).save(out)
        return out

    def _draw_title(self, canvas: np.ndarray) -> int:
        cfg = self.config
        if not cfg.chart_title:
            return 0
        tw, th = text_size(cfg.chart_title, font_size_px=cfg.chart_font_size)
        draw_text(
            canvas,
            max(0, (self.width - tw) // 2),
            _TEXT_GAP,
            cfg.chart_title,
            cfg.chart_title_color,
            font_size_px=cfg.chart_font_size,
        )
        return min(self.height // 3, th + 2 * _TEXT_GAP)

    def _plot_rect(self, top: int) -> tuple[int, int, int, int]:
        cfg = self.config
        if not cfg.show_axis:
            return (0, top, self.width, self.height - top)
        left = cfg.y_axis_width
        bottom = cfg.x_axis_height
        if cfg.y_axis_title:
            left += text_size(cfg.y_axis_title, font_size_px=cfg.axis_title_font_size, rotate_deg=90)[0] + _TEXT_GAP
        if cfg.x_axis_title:
            bottom += text_size(cfg.x_axis_title, font_size_px=cfg.axis_title_font_size)[1] + _TEXT_GAP
        left = min(left, self.width // 2)
        bottom = min(bottom, max(0, (self.height - top) // 2))
        return (left, top, self.width - left, self.height - top - bottom)

    def _draw_grid(self, canvas: np.ndarray, rect: tuple[int, int, int, int]) -> None:
        cfg = self.config
        x0, y0, w, h = rect
        grid = layout_grid(self._bounds, cfg.vertical_grid_step, self._series, width=w, height=h)
        self._last_grid = grid
        # Sub-pixel widths draw as a one-pixel hairline.
        line_w = max(1, int(round(cfg.grid_line_width)))
        if not cfg.hide_horizontal_grid_lines:
            for offset in grid.horizontal_offsets:
                draw_hline(canvas, x0, x0 + w - 1, y0 + offset, cfg.grid_color, width=line_w)
        if not cfg.hide_vertical_grid_lines:
            for offset in grid.vertical_offsets:
                draw_vline(canvas, x0 + offset, y0, y0 + h - 1, cfg.grid_color, width=line_w)

    def _draw_axes(self, canvas: np.ndarray, rect: tuple[int, int, int, int]) -> None:
        cfg = self.config
        x0, y0, w, h = rect
        axis_w = int(round(cfg.axis_line_width))
        if axis_w > 0:
            draw_vline(canvas, x0, y0, y0 + h - 1, cfg.axis_color, width=axis_w)
            draw_hline(canvas, x0, x0 + w - 1, y0 + h - 1, cfg.axis_color, width=axis_w)

        if cfg.show_y_axis_labels:
            transform = build_value_transform(self._bounds, h)
            ticks = axis_tick_values(self._bounds, cfg.vertical_grid_step)
            labels = format_axis_labels(ticks, cfg.y_axis_transform)
            for value, label in zip(ticks, labels, strict=True):
                lw, lh = text_size(label, font_size_px=cfg.label_font_size)
                ly = y0 + transform.row(value) - lh // 2
                ly = min(max(0, ly), self.height - lh)
                draw_text(canvas, max(0, x0 - lw - _TEXT_GAP), ly, label, cfg.axis_label_color, font_size_px=cfg.label_font_size)

        if cfg.show_x_axis_labels:
            centers = column_centers(len(self._series), w) + x0
            for cx, xv in zip(centers.tolist(), self._series.x, strict=True):
                label = str(xv)
                lw, _ = text_size(label, font_size_px=cfg.label_font_size)
                draw_text(canvas, cx - lw // 2, y0 + h + _TEXT_GAP, label, cfg.axis_label_color, font_size_px=cfg.label_font_size)

        if cfg.y_axis_title:
            _, th = text_size(cfg.y_axis_title, font_size_px=cfg.axis_title_font_size, rotate_deg=90)
            draw_text(
                canvas,
                0,
                y0 + max(0, (h - th) // 2),
                cfg.y_axis_title,
                cfg.axis_title_color,
                font_size_px=cfg.axis_title_font_size,
                rotate_deg=90,
            )
        if cfg.x_axis_title:
            tw, th = text_size(cfg.x_axis_title, font_size_px=cfg.axis_title_font_size)
            draw_text(
                canvas,
                x0 + max(0, (w - tw) // 2),
                self.height - th - 1,
                cfg.x_axis_title,
                cfg.axis_title_color,
                font_size_px=cfg.axis_title_font_size,
            )
