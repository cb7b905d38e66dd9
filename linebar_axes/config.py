from __future__ import annotations

from collections.abc import Mapping
import logging
import math
from pathlib import Path
import tomllib
from typing import Any

from linebar_axes.style import (
    CHART_KINDS,
    ORIENTATIONS,
    Baseline,
    CustomLabels,
    LabelConfig,
    LineBarStyle,
    NumericLabels,
    TopLine,
)

LOGGER = logging.getLogger(__name__)

_SECTION_KEYS: dict[str, frozenset[str]] = {
    "chart": frozenset(
        {"orientation", "kind", "y_axis_label_position", "x_axis_label_position", "x_axis_title", "y_axis_title"}
    ),
    "baseline": frozenset({"kind", "floor"}),
    "top_line": frozenset({"kind", "ceiling"}),
    "y_axis_labels": frozenset({"mode", "count", "specifier", "labels"}),
    "poi": frozenset({"specifier"}),
}


def load_style(path: str | Path) -> LineBarStyle:
    style_path = Path(path)
    if not style_path.exists():
        raise FileNotFoundError(f"chart style not found: {style_path}")
    with style_path.open("rb") as f:
        raw = tomllib.load(f)
    LOGGER.debug("loaded chart style from %s", style_path)
    return style_from_mapping(raw)


def style_from_mapping(raw: Mapping[str, Any]) -> LineBarStyle:
    unknown = sorted(set(raw) - set(_SECTION_KEYS))
    if unknown:
        raise ValueError(f"unknown style section(s): {', '.join(unknown)}")
    chart = _section(raw, "chart")
    poi = _section(raw, "poi")

    orientation = _coerce_choice(chart.get("orientation", "vertical"), ORIENTATIONS, "chart.orientation")
    kind = _coerce_choice(chart.get("kind", "line"), CHART_KINDS, "chart.kind")
    y_position = _coerce_choice(
        chart.get("y_axis_label_position", "leading"), ("leading", "trailing"), "chart.y_axis_label_position"
    )
    x_position = _coerce_choice(
        chart.get("x_axis_label_position", "bottom"), ("bottom", "top"), "chart.x_axis_label_position"
    )
    return LineBarStyle(
        baseline=_parse_baseline(_section(raw, "baseline")),
        top_line=_parse_top_line(_section(raw, "top_line")),
        y_axis_labels=_parse_labels(_section(raw, "y_axis_labels")),
        orientation=orientation,
        kind=kind,
        y_axis_label_position=y_position,
        x_axis_label_position=x_position,
        x_axis_title=_coerce_optional_str(chart.get("x_axis_title"), "chart.x_axis_title"),
        y_axis_title=_coerce_optional_str(chart.get("y_axis_title"), "chart.y_axis_title"),
        poi_specifier=_coerce_str(poi.get("specifier", "%.0f"), "poi.specifier"),
    )


def _parse_baseline(raw: Mapping[str, Any]) -> Baseline:
    kind = _coerce_choice(
        raw.get("kind", "minimum_value"), ("zero", "minimum_value", "minimum_with_floor"), "baseline.kind"
    )
    if kind == "zero":
        return Baseline.zero()
    if kind == "minimum_value":
        return Baseline.minimum_value()
    if "floor" not in raw:
        raise ValueError("baseline.floor is required for minimum_with_floor")
    return Baseline.minimum_with_floor(_coerce_float(raw["floor"], "baseline.floor"))


def _parse_top_line(raw: Mapping[str, Any]) -> TopLine:
    kind = _coerce_choice(
        raw.get("kind", "maximum_value"), ("maximum_value", "maximum_with_ceiling"), "top_line.kind"
    )
    if kind == "maximum_value":
        return TopLine.maximum_value()
    if "ceiling" not in raw:
        raise ValueError("top_line.ceiling is required for maximum_with_ceiling")
    return TopLine.maximum_with_ceiling(_coerce_float(raw["ceiling"], "top_line.ceiling"))


def _parse_labels(raw: Mapping[str, Any]) -> LabelConfig:
    mode = _coerce_choice(raw.get("mode", "numeric"), ("numeric", "custom"), "y_axis_labels.mode")
    if mode == "custom":
        labels = raw.get("labels")
        if labels is None:
            return CustomLabels()
        if not isinstance(labels, list) or not all(isinstance(v, str) for v in labels):
            raise ValueError("y_axis_labels.labels must be a list of strings")
        return CustomLabels(labels=tuple(labels))
    count = raw.get("count", 10)
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError("y_axis_labels.count must be an integer")
    specifier = _coerce_str(raw.get("specifier", "%.0f"), "y_axis_labels.specifier")
    return NumericLabels(count=count, specifier=specifier)


def _section(raw: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = raw.get(name, {})
    if not isinstance(value, Mapping):
        raise ValueError(f"[{name}] must be a table")
    unknown = sorted(f"{name}.{k}" for k in set(value) - _SECTION_KEYS[name])
    if unknown:
        raise ValueError(f"unknown style key(s): {', '.join(unknown)}")
    return value


def _coerce_choice(value: Any, choices: tuple[str, ...], field_name: str) -> Any:
    if value not in choices:
        raise ValueError(f"{field_name} must be one of {', '.join(choices)}; got {value!r}")
    return value


def _coerce_float(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field_name} must be a number")
    out = float(value)
    if not math.isfinite(out):
        raise ValueError(f"{field_name} must be finite")
    return out


def _coerce_str(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    return value


def _coerce_optional_str(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    return _coerce_str(value, field_name)
