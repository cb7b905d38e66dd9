from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any

from linebar_axes.adapters import data_set
from linebar_axes.aggregate import average
from linebar_axes.labels import display_order, format_value, generate_labels
from linebar_axes.layout import AxisMetrics
from linebar_axes.markers import (
    LabelAnchor,
    MarkerLine,
    POIMarker,
    Point,
    RenderFrame,
    label_anchor,
    marker_line,
    position_center,
    position_on_axis,
)
from linebar_axes.scales import ResolvedRange, resolve_max, resolve_min, resolve_range
from linebar_axes.series import DataSet
from linebar_axes.style import LineBarStyle


@dataclass(frozen=True)
class POIPlacement:
    value: float
    text: str
    line: MarkerLine
    axis_label: Point
    center_label: Point
    anchor: LabelAnchor


@dataclass
class LineBarAxes:
    data: DataSet
    style: LineBarStyle = field(default_factory=LineBarStyle)

    @classmethod
    def from_values(cls, *series: Any, style: LineBarStyle | None = None) -> LineBarAxes:
        return cls(data=data_set(*series), style=style or LineBarStyle())

    @property
    def range(self) -> float:
        return self.resolved_range().span

    @property
    def min_value(self) -> float:
        return resolve_min(self.data, self.style.baseline)

    @property
    def max_value(self) -> float:
        return resolve_max(self.data, self.style.top_line)

    @property
    def average(self) -> float:
        return average(self.data)

    def resolved_range(self) -> ResolvedRange:
        return resolve_range(self.data, self.style.baseline, self.style.top_line)

    def y_labels(self) -> list[str]:
        return generate_labels(self.resolved_range(), self.style.y_axis_labels)

    def y_axis_column(self) -> list[str]:
        return display_order(self.y_labels())

    def poi(
        self,
        value: float | POIMarker,
        frame: RenderFrame,
        metrics: AxisMetrics | None = None,
        *,
        specifier: str | None = None,
    ) -> POIPlacement:
        if isinstance(value, POIMarker):
            value = value.value
        if not math.isfinite(float(value)):
            raise ValueError(f"point of interest must be finite, got {value!r}")
        metrics = metrics or AxisMetrics()
        resolved = self.resolved_range()
        orientation = self.style.orientation
        kind = self.style.kind
        args = (frame, value, resolved.min_value, resolved.span, orientation, kind)
        return POIPlacement(
            value=float(value),
            text=format_value(value, specifier or self.style.poi_specifier),
            line=marker_line(*args),
            axis_label=position_on_axis(*args, max_label_width=metrics.max_y_label_width),
            center_label=position_center(*args),
            anchor=label_anchor(
                orientation,
                y_axis_position=self.style.y_axis_label_position,
                x_axis_position=self.style.x_axis_label_position,
            ),
        )
