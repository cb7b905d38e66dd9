from __future__ import annotations

import numpy as np

from linebar_axes.errors import EmptyDataSetError
from linebar_axes.series import DataSet


def min_value(data: DataSet) -> float:
    return float(np.min(_finite_points(data)))


def max_value(data: DataSet) -> float:
    return float(np.max(_finite_points(data)))


def average(data: DataSet) -> float:
    return float(np.mean(_finite_points(data)))


def _finite_points(data: DataSet) -> np.ndarray:
    points = data.flatten()
    if points.size == 0:
        raise EmptyDataSetError("data set contains no finite points")
    return points
