from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

import numpy as np

from axischart.bounds import Bounds


@dataclass(frozen=True)
class ValueTransform:
    """Linear map from data values to pixel rows, row 0 at the top."""

    scale: float
    offset: float
    height: int

    def rows(self, values: np.ndarray) -> np.ndarray:
        py = np.rint(np.asarray(values, dtype=np.float64) * self.scale + self.offset).astype(np.int32)
        py = (self.height - 1) - py
        np.clip(py, 0, self.height - 1, out=py)
        return py

    def row(self, value: float) -> int:
        return int(self.rows(np.asarray([value], dtype=np.float64))[0])


def build_value_transform(bounds: Bounds, height: int) -> ValueTransform:
    if height <= 1:
        raise ValueError("plot height must be > 1")
    if bounds.is_empty:
        raise ValueError("cannot map values onto empty bounds")
    lo, hi = bounds.min, bounds.max
    if lo == hi:
        lo -= 1.0
        hi += 1.0
    scale = (height - 1) / (hi - lo)
    return ValueTransform(scale=scale, offset=-lo * scale, height=height)


def column_centers(count: int, width: int) -> np.ndarray:
    if count <= 0:
        return np.zeros(0, dtype=np.int32)
    col_w = width / count
    centers = (np.arange(count, dtype=np.float64) + 0.5) * col_w
    return np.clip(np.floor(centers), 0, width - 1).astype(np.int32)


def format_tick(value: float, *, step: float | None = None) -> str:
    if not np.isfinite(value):
        return str(value)
    if step is not None and step > 0 and abs(value) <= step * 1e-9:
        value = 0.0
    abs_v = abs(value)
    if abs_v != 0 and (abs_v >= 1e6 or abs_v < 1e-6):
        return f"{value:.2e}"

    decimals = _decimals_from_step(step) if step is not None else 6
    d = Decimal(str(value))
    try:
        q = d.quantize(Decimal("1").scaleb(-decimals))
    except InvalidOperation:
        q = d
    out = format(q, "f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def format_axis_labels(
    ticks: Sequence[float],
    transform: Callable[[float], object] | None = None,
) -> list[str]:
    """Tick labels with decimals shared across the axis.

    ``transform`` mirrors a y-axis label hook: its return value is used
    verbatim when it is a string, otherwise formatted as a tick.
    """
    if not ticks:
        return []
    step = abs(ticks[1] - ticks[0]) if len(ticks) > 1 else None
    labels: list[str] = []
    for value in ticks:
        if transform is None:
            labels.append(format_tick(float(value), step=step))
            continue
        shown = transform(float(value))
        if isinstance(shown, str):
            labels.append(shown)
        else:
            labels.append(format_tick(float(shown), step=step))
    return labels


def _decimals_from_step(step: float) -> int:
    if step <= 0 or not np.isfinite(step):
        return 6
    exp = Decimal(str(step)).normalize().as_tuple().exponent
    return min(12, max(0, -int(exp)))
