from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from axischart.errors import ChartDataError
from axischart.series import DataSeries, empty_series


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_series(
    data: Any,
    *,
    x: str | None = None,
    y: str | None = None,
    source_name: str | None = None,
) -> DataSeries:
    """Coerce caller data into a `DataSeries`.

    Accepted shapes: a sequence of ``(x, y)`` pairs or ``{"x": .., "y": ..}``
    mappings, a sequence of bare numbers (x becomes the index), a 1-D or
    ``(N, 2)`` numpy array or torch tensor, and a pandas DataFrame (``x``/``y``
    name columns; otherwise two columns are read as x then y).
    """
    if isinstance(data, DataSeries):
        return data
    if data is None:
        return empty_series(source_name)

    if pd is not None and isinstance(data, pd.DataFrame):
        xs, ys = _columns_from_frame(data, x=x, y=y)
    elif pd is not None and isinstance(data, pd.Series):
        xs, ys = tuple(data.index.tolist()), data.to_numpy()
    elif torch is not None and isinstance(data, torch.Tensor):
        xs, ys = _columns_from_array(_tensor_to_numpy(data))
    elif isinstance(data, np.ndarray):
        xs, ys = _columns_from_array(data)
    elif isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
        xs, ys = _columns_from_items(data)
    else:
        raise ChartDataError(f"unsupported series input type: {type(data)!r}")

    y_arr = _coerce_values(ys)
    if len(xs) != y_arr.size:
        raise ChartDataError(f"x and y length mismatch: {len(xs)} != {y_arr.size}")
    return DataSeries(x=tuple(xs), y=y_arr, mask=np.isfinite(y_arr), source_name=source_name)


def _columns_from_frame(frame: Any, *, x: str | None, y: str | None) -> tuple[tuple[Any, ...], Any]:
    for name in (x, y):
        if name is not None and name not in frame.columns:
            raise ChartDataError(f"column not found: {name}")
    if y is not None:
        xs = tuple(frame[x].tolist()) if x is not None else tuple(frame.index.tolist())
        return xs, frame[y].to_numpy()
    if frame.shape[1] == 2:
        return tuple(frame.iloc[:, 0].tolist()), frame.iloc[:, 1].to_numpy()
    numeric_cols = [c for c in frame.columns if _is_numeric_dtype(frame[c])]
    if len(numeric_cols) != 1:
        raise ChartDataError("DataFrame input needs a `y` column name, two columns, or exactly one numeric column")
    return tuple(frame.index.tolist()), frame[numeric_cols[0]].to_numpy()


def _is_numeric_dtype(column: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(column))
    except Exception:
        return False


def _tensor_to_numpy(tensor: Any) -> np.ndarray:
    out = tensor.detach()
    if out.is_cuda:
        out = out.cpu()
    return out.to(torch.float64).numpy()


def _columns_from_array(arr: np.ndarray) -> tuple[tuple[Any, ...], np.ndarray]:
    if arr.ndim == 1:
        return tuple(range(arr.shape[0])), arr
    if arr.ndim == 2 and arr.shape[1] == 2:
        return tuple(arr[:, 0].tolist()), arr[:, 1]
    raise ChartDataError(f"array input must be 1-D or shaped (N, 2), got {arr.shape}")


def _columns_from_items(items: Sequence[Any]) -> tuple[tuple[Any, ...], list[Any]]:
    xs: list[Any] = []
    ys: list[Any] = []
    for i, item in enumerate(items):
        if isinstance(item, Mapping):
            if "y" not in item:
                raise ChartDataError(f"point at index {i} has no `y` key")
            xs.append(item.get("x", i))
            ys.append(item["y"])
        elif isinstance(item, Sequence) and not isinstance(item, (str, bytes, bytearray)):
            if len(item) != 2:
                raise ChartDataError(f"point at index {i} must be an (x, y) pair")
            xs.append(item[0])
            ys.append(item[1])
        else:
            xs.append(i)
            ys.append(item)
    return tuple(xs), ys


def _coerce_values(values: Any) -> np.ndarray:
    if isinstance(values, np.ndarray) and values.dtype.kind in {"i", "u", "f", "b"}:
        return values.astype(np.float64, copy=False)

    raw_values = values.tolist() if isinstance(values, np.ndarray) else list(values)
    out = np.empty(len(raw_values), dtype=np.float64)
    for i, raw in enumerate(raw_values):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, (str, bytes)):
            raise ChartDataError(f"y contains non-numeric value at index {i}: {raw!r}")
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"y contains non-numeric value at index {i}: {raw!r}") from exc
    return out
