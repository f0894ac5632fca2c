from __future__ import annotations

import math


QUARTERS_PER_MAGNITUDE = 4


def check_grid_step(grid_step: int) -> int:
    if isinstance(grid_step, bool) or int(grid_step) != grid_step or grid_step < 1:
        raise ValueError("grid_step must be an integer >= 1")
    return int(grid_step)


def nice_round_up(value: float, grid_step: int) -> float:
    """Round ``value`` up to a quarter-of-a-power-of-ten multiple.

    The quarter count is pushed up to the next multiple of ``grid_step`` so
    the result splits into ``grid_step`` equal intervals. Non-positive
    values round to 0.
    """
    grid_step = check_grid_step(grid_step)
    if value <= 0:
        return 0.0
    if not math.isfinite(value):
        return float(value)

    scale = magnitude(value)
    n = math.ceil(value / scale * QUARTERS_PER_MAGNITUDE)
    remainder = n % grid_step
    if remainder != 0:
        n += grid_step - remainder
    result = n * scale / QUARTERS_PER_MAGNITUDE
    # value / scale can land a hair under an integer; keep the ceiling.
    while result < value:
        n += grid_step
        result = n * scale / QUARTERS_PER_MAGNITUDE
    return result


def magnitude(value: float) -> float:
    """Power of ten at or just below a positive ``value``."""
    return math.pow(10.0, math.floor(math.log10(value)))
