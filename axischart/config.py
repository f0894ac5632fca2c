from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
import re
from typing import Any, Literal

from axischart.errors import ChartConfigError


RGBA = tuple[int, int, int, int]
ChartType = Literal["line", "bar", "pie"]

CHART_TYPES: tuple[str, ...] = ("line", "bar", "pie")

BLACK: RGBA = (0, 0, 0, 255)
GREY: RGBA = (128, 128, 128, 255)
WHITE: RGBA = (255, 255, 255, 255)
BLUE: RGBA = (74, 144, 226, 255)

DEFAULT_SLICE_COLORS: tuple[RGBA, ...] = (
    (74, 144, 226, 255),
    (245, 166, 35, 255),
    (126, 211, 33, 255),
    (208, 2, 27, 255),
    (144, 19, 254, 255),
    (80, 227, 194, 255),
)

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

_COLOR_KEYS = (
    "axis_color",
    "axis_label_color",
    "axis_title_color",
    "chart_title_color",
    "grid_color",
    "color",
    "data_point_color",
    "data_point_fill_color",
    "background",
)
_BOOL_KEYS = (
    "hide_horizontal_grid_lines",
    "hide_vertical_grid_lines",
    "show_axis",
    "show_grid",
    "show_x_axis_labels",
    "show_y_axis_labels",
    "show_data_point",
    "tight_bounds",
)
_POSITIVE_KEYS = (
    "axis_title_font_size",
    "chart_font_size",
    "label_font_size",
    "line_width",
    "width_percent",
)
_NON_NEGATIVE_KEYS = (
    "axis_line_width",
    "grid_line_width",
    "corner_radius",
    "data_point_radius",
    "y_axis_width",
    "x_axis_height",
)
_TEXT_KEYS = ("chart_title", "x_axis_title", "y_axis_title")
_PIXEL_KEYS = ("line_width", "corner_radius", "data_point_radius", "y_axis_width", "x_axis_height")


@dataclass(frozen=True)
class ChartConfig:
    """Enumerated chart options; only the renderer reads anything beyond
    ``tight_bounds`` and ``vertical_grid_step``."""

    chart_type: ChartType = "bar"

    # bounds
    tight_bounds: bool = False
    vertical_grid_step: int = 3

    # axes
    show_axis: bool = True
    axis_color: RGBA = BLACK
    axis_label_color: RGBA = BLACK
    axis_line_width: float = 1.0
    axis_title_color: RGBA = GREY
    axis_title_font_size: float = 16.0
    label_font_size: float = 10.0
    show_x_axis_labels: bool = True
    show_y_axis_labels: bool = True
    x_axis_title: str | None = None
    y_axis_title: str | None = None
    y_axis_transform: Callable[[float], Any] | None = None
    y_axis_width: int = 30
    x_axis_height: int = 20

    # grid
    show_grid: bool = True
    grid_color: RGBA = BLACK
    grid_line_width: float = 0.5
    hide_horizontal_grid_lines: bool = False
    hide_vertical_grid_lines: bool = False

    # title
    chart_title: str | None = None
    chart_title_color: RGBA = BLACK
    chart_font_size: float = 14.0

    # bar
    color: RGBA = BLUE
    width_percent: float = 0.6
    corner_radius: int = 0

    # line
    line_width: int = 1
    show_data_point: bool = True
    data_point_color: RGBA = BLUE
    data_point_fill_color: RGBA = WHITE
    data_point_radius: int = 3

    # pie
    slice_colors: tuple[RGBA, ...] = DEFAULT_SLICE_COLORS
    pie_center_ratio: float = 0.0

    background: RGBA = WHITE

    def replace(self, **overrides: Any) -> "ChartConfig":
        merged = {f.name: getattr(self, f.name) for f in fields(self)}
        for key in overrides:
            if key not in merged:
                raise ChartConfigError(f"Unknown chart option: {key}")
        merged.update(overrides)
        return validate_chart_config(merged)


DEFAULT_CONFIG = ChartConfig()


def validate_chart_config(overrides: Mapping[str, Any] | None = None) -> ChartConfig:
    """Validate and merge option overrides against the defaults."""

    raw: dict[str, Any] = {f.name: getattr(DEFAULT_CONFIG, f.name) for f in fields(ChartConfig)}
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ChartConfigError(f"Unknown chart option: {key}")
            raw[key] = value

    if raw["chart_type"] not in CHART_TYPES:
        raise ChartConfigError(f"Option `chart_type` must be one of {', '.join(CHART_TYPES)}")

    step = raw["vertical_grid_step"]
    if isinstance(step, bool) or not isinstance(step, int) or step < 1:
        raise ChartConfigError("Option `vertical_grid_step` must be an integer >= 1")

    for key in _BOOL_KEYS:
        if not isinstance(raw[key], bool):
            raise ChartConfigError(f"Option `{key}` must be a boolean")

    for key in _POSITIVE_KEYS:
        if not _is_number(raw[key]) or float(raw[key]) <= 0:
            raise ChartConfigError(f"Option `{key}` must be a positive number")

    for key in _NON_NEGATIVE_KEYS:
        if not _is_number(raw[key]) or float(raw[key]) < 0:
            raise ChartConfigError(f"Option `{key}` must be a non-negative number")

    if float(raw["width_percent"]) > 1.0:
        raise ChartConfigError("Option `width_percent` must be <= 1")

    if not _is_number(raw["pie_center_ratio"]) or not 0.0 <= float(raw["pie_center_ratio"]) < 1.0:
        raise ChartConfigError("Option `pie_center_ratio` must be in [0, 1)")

    for key in _TEXT_KEYS:
        if raw[key] is not None and not isinstance(raw[key], str):
            raise ChartConfigError(f"Option `{key}` must be a string or None")

    if raw["y_axis_transform"] is not None and not callable(raw["y_axis_transform"]):
        raise ChartConfigError("Option `y_axis_transform` must be callable")

    for key in _COLOR_KEYS:
        raw[key] = parse_color(raw[key], key=key)

    slice_colors = raw["slice_colors"]
    if isinstance(slice_colors, (str, bytes)) or not slice_colors:
        raise ChartConfigError("Option `slice_colors` must be a non-empty sequence of colors")
    raw["slice_colors"] = tuple(parse_color(c, key="slice_colors") for c in slice_colors)

    for key in _POSITIVE_KEYS + _NON_NEGATIVE_KEYS + ("pie_center_ratio",):
        raw[key] = int(round(raw[key])) if key in _PIXEL_KEYS else float(raw[key])

    return ChartConfig(**raw)


def parse_color(value: Any, *, key: str = "color") -> RGBA:
    """Accept ``#RRGGBB``/``#RRGGBBAA`` strings and RGB/RGBA tuples."""
    if isinstance(value, str):
        if not _HEX_COLOR.match(value):
            raise ChartConfigError(f"Option `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")
        digits = value[1:]
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        if len(channels) == 3:
            channels.append(255)
        return (channels[0], channels[1], channels[2], channels[3])
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        if not all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value):
            raise ChartConfigError(f"Option `{key}` channels must be integers in [0, 255]")
        alpha = value[3] if len(value) == 4 else 255
        return (value[0], value[1], value[2], alpha)
    raise ChartConfigError(f"Option `{key}` must be a hex string or an RGB/RGBA tuple")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
