from __future__ import annotations

from dataclasses import dataclass
import logging

from linebar_axes.aggregate import max_value, min_value
from linebar_axes.series import DataSet
from linebar_axes.style import Baseline, TopLine

LOGGER = logging.getLogger(__name__)

# Keeps the span strictly positive when every point shares one value.
RANGE_EPSILON = 0.001


@dataclass(frozen=True)
class ResolvedRange:
    min_value: float
    max_value: float
    span: float


def resolve_min(data: DataSet, baseline: Baseline) -> float:
    if baseline.kind == "zero":
        return 0.0
    if baseline.kind == "minimum_value":
        return min_value(data)
    if baseline.kind == "minimum_with_floor":
        return min(min_value(data), float(baseline.floor))
    raise ValueError(f"unknown baseline: {baseline.kind!r}")


def resolve_max(data: DataSet, top_line: TopLine) -> float:
    if top_line.kind == "maximum_value":
        return max_value(data)
    if top_line.kind == "maximum_with_ceiling":
        return max(max_value(data), float(top_line.ceiling))
    raise ValueError(f"unknown top line: {top_line.kind!r}")


def resolve_range(data: DataSet, baseline: Baseline, top_line: TopLine) -> ResolvedRange:
    lo = resolve_min(data, baseline)
    hi = resolve_max(data, top_line)
    span = (hi - lo) + RANGE_EPSILON
    if span <= 0:
        LOGGER.warning("baseline %s sits above top line %s; axis range is inverted", lo, hi)
    LOGGER.debug("resolved range min=%s max=%s span=%s", lo, hi, span)
    return ResolvedRange(min_value=lo, max_value=hi, span=span)
