from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SeriesData:
    values: np.ndarray
    mask: np.ndarray
    label: str | None = None

    @property
    def finite_values(self) -> np.ndarray:
        return self.values[self.mask]


@dataclass(frozen=True)
class DataSet:
    series: tuple[SeriesData, ...]

    @property
    def point_count(self) -> int:
        return sum(int(s.values.size) for s in self.series)

    def flatten(self) -> np.ndarray:
        # Gaps (non-finite points) never take part in aggregation.
        if not self.series:
            return np.empty(0, dtype=np.float64)
        return np.concatenate([s.finite_values for s in self.series])
