from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True)
class DataSeries:
    x: tuple[Any, ...]
    y: np.ndarray
    mask: np.ndarray
    source_name: str | None = None

    def __post_init__(self) -> None:
        if len(self.x) != self.y.shape[0] or self.y.shape != self.mask.shape:
            raise ValueError("x, y and mask must have the same length")

    def __len__(self) -> int:
        return int(self.y.shape[0])

    @property
    def is_empty(self) -> bool:
        return self.y.shape[0] == 0

    @property
    def skipped_points(self) -> int:
        return int(self.y.shape[0] - np.count_nonzero(self.mask))

    def finite_y(self) -> np.ndarray:
        return self.y[self.mask]


def empty_series(source_name: str | None = None) -> DataSeries:
    return DataSeries(
        x=(),
        y=np.zeros(0, dtype=np.float64),
        mask=np.zeros(0, dtype=bool),
        source_name=source_name,
    )
