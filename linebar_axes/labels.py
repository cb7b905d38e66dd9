from __future__ import annotations

from collections.abc import Sequence
import logging
import math

import numpy as np

from linebar_axes.errors import InvalidLabelCountError, LabelFormatError
from linebar_axes.scales import ResolvedRange
from linebar_axes.style import CustomLabels, LabelConfig, NumericLabels

LOGGER = logging.getLogger(__name__)


def format_value(value: float, specifier: str) -> str:
    try:
        out = specifier % float(value)
        zero = specifier % 0.0
    except (TypeError, ValueError, KeyError) as exc:
        raise LabelFormatError(f"invalid label specifier {specifier!r}: {exc}") from exc
    except OverflowError as exc:
        raise LabelFormatError(f"cannot format {value!r} with {specifier!r}: {exc}") from exc
    # Values that round to zero print as zero, never "-0".
    if math.copysign(1.0, float(value)) < 0.0 and out.replace("-", "", 1) == zero:
        return zero
    return out


def label_values(resolved: ResolvedRange, count: int) -> np.ndarray:
    if count < 2:
        raise InvalidLabelCountError(f"numeric axis needs at least 2 labels, got {count}")
    step = resolved.span / float(count - 1)
    return resolved.min_value + step * np.arange(count, dtype=np.float64)


def generate_labels(resolved: ResolvedRange, config: LabelConfig) -> list[str]:
    if isinstance(config, NumericLabels):
        values = label_values(resolved, config.count)
        return [format_value(float(v), config.specifier) for v in values]
    if isinstance(config, CustomLabels):
        if config.labels is None:
            LOGGER.warning("custom axis labels requested but none supplied; axis will be blank")
            return []
        return list(config.labels)
    raise TypeError(f"unsupported label config: {type(config)!r}")


def display_order(labels: Sequence[str]) -> list[str]:
    return list(reversed(labels))
