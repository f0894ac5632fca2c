from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any

from axischart.adapters import normalize_series
from axischart.nice import check_grid_step, nice_round_up


LOGGER = logging.getLogger(__name__)

DEFAULT_GRID_STEP = 3


@dataclass(frozen=True)
class Bounds:
    min: float
    max: float

    @property
    def is_empty(self) -> bool:
        return self.min > self.max

    @property
    def span(self) -> float:
        if self.is_empty:
            return 0.0
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


# Returned for a series with no finite values; renderers must skip bounds-dependent drawing.
EMPTY_BOUNDS = Bounds(min=math.inf, max=-math.inf)


def round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def raw_extent(series: Any) -> tuple[float, float]:
    """Integer-rounded min/max of the finite y values, ``(inf, -inf)`` when there are none."""
    values = normalize_series(series).finite_y()
    if values.size == 0:
        return (math.inf, -math.inf)
    return (round_half_up(float(values.min())), round_half_up(float(values.max())))


def compute_bounds(
    series: Any,
    grid_step: int = DEFAULT_GRID_STEP,
    tight: bool = False,
    *,
    anchor_zero: bool = True,
) -> Bounds:
    """Derive vertical axis bounds for ``series``.

    With ``tight`` the bounds hug the rounded data extent. Otherwise the top
    is rounded up to a nice number that splits into ``grid_step`` intervals;
    non-negative data keeps a zero floor (or its own minimum when
    ``anchor_zero`` is false) and data dipping below zero is laid out in
    ``grid_step`` equal steps around the zero crossing.
    """
    grid_step = check_grid_step(grid_step)

    raw_min, raw_max = raw_extent(series)
    if raw_min > raw_max:
        return EMPTY_BOUNDS
    if tight:
        return Bounds(min=raw_min, max=raw_max)

    upper = nice_round_up(raw_max, grid_step)
    if raw_min >= 0:
        return Bounds(min=0.0 if anchor_zero else raw_min, max=upper)

    lower, upper = _zero_crossing_bounds(raw_min, raw_max, upper, grid_step)
    if upper < lower:
        lower, upper = upper, lower
    return Bounds(min=lower, max=upper)


def _zero_crossing_bounds(raw_min: float, raw_max: float, nice_max: float, grid_step: int) -> tuple[float, float]:
    span = abs(nice_max - raw_min)
    if grid_step > 3:
        step = span / (grid_step - 1)
    else:
        step = max(span / 2, max(abs(raw_min), abs(nice_max)))
    step = nice_round_up(step, grid_step)
    if step <= 0:
        return (raw_min, nice_max)

    # Bounds are kept as whole step counts and scaled at the end.
    if abs(raw_min) > abs(nice_max):
        m = math.ceil(abs(raw_min) / step)
        low = m * _sign(raw_min)
        high = (grid_step - m) * _sign(nice_max)
    else:
        m = math.ceil(abs(nice_max) / step)
        high = m * _sign(nice_max)
        low = (grid_step - m) * _sign(raw_min)

    # Single-step nudges; each only fires when the opposite extreme stays on the axis.
    if step * low > raw_min and step * (high - 1) >= raw_max:
        low -= 1
        high -= 1
    if step * high < raw_max + step and step * (low + 1) <= raw_min:
        low += 1
        high += 1

    if step * low > raw_min:
        LOGGER.debug("widening lower bound %s to contain %s", step * low, raw_min)
        while step * low > raw_min:
            low -= 1
    if step * high < raw_max:
        LOGGER.debug("widening upper bound %s to contain %s", step * high, raw_max)
        while step * high < raw_max:
            high += 1
    return (step * low, step * high)


def _sign(value: float) -> int:
    """Zero counts as negative, so an all-negative series tops out at 0."""
    return 1 if value > 0 else -1
