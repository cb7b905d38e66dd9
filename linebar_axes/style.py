from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Literal


Orientation = Literal["vertical", "horizontal"]
ChartKind = Literal["line", "bar"]
YAxisLabelPosition = Literal["leading", "trailing"]
XAxisLabelPosition = Literal["bottom", "top"]

ORIENTATIONS: tuple[Orientation, ...] = ("vertical", "horizontal")
CHART_KINDS: tuple[ChartKind, ...] = ("line", "bar")


@dataclass(frozen=True)
class NumericLabels:
    count: int = 10
    specifier: str = "%.0f"
    mode: Literal["numeric"] = field(default="numeric", init=False)


@dataclass(frozen=True)
class CustomLabels:
    labels: tuple[str, ...] | None = None
    mode: Literal["custom"] = field(default="custom", init=False)

    def __post_init__(self) -> None:
        if self.labels is not None:
            object.__setattr__(self, "labels", tuple(str(v) for v in self.labels))


LabelConfig = NumericLabels | CustomLabels


@dataclass(frozen=True)
class Baseline:
    kind: Literal["zero", "minimum_value", "minimum_with_floor"]
    floor: float | None = None

    def __post_init__(self) -> None:
        if self.kind == "minimum_with_floor" and self.floor is None:
            raise ValueError("minimum_with_floor baseline requires a floor value")
        if self.kind != "minimum_with_floor" and self.floor is not None:
            raise ValueError(f"{self.kind} baseline does not take a floor value")
        if self.floor is not None and not math.isfinite(self.floor):
            raise ValueError(f"baseline floor must be finite, got {self.floor!r}")

    @classmethod
    def zero(cls) -> Baseline:
        return cls("zero")

    @classmethod
    def minimum_value(cls) -> Baseline:
        return cls("minimum_value")

    @classmethod
    def minimum_with_floor(cls, floor: float) -> Baseline:
        return cls("minimum_with_floor", float(floor))


@dataclass(frozen=True)
class TopLine:
    kind: Literal["maximum_value", "maximum_with_ceiling"]
    ceiling: float | None = None

    def __post_init__(self) -> None:
        if self.kind == "maximum_with_ceiling" and self.ceiling is None:
            raise ValueError("maximum_with_ceiling top line requires a ceiling value")
        if self.kind != "maximum_with_ceiling" and self.ceiling is not None:
            raise ValueError(f"{self.kind} top line does not take a ceiling value")
        if self.ceiling is not None and not math.isfinite(self.ceiling):
            raise ValueError(f"top line ceiling must be finite, got {self.ceiling!r}")

    @classmethod
    def maximum_value(cls) -> TopLine:
        return cls("maximum_value")

    @classmethod
    def maximum_with_ceiling(cls, ceiling: float) -> TopLine:
        return cls("maximum_with_ceiling", float(ceiling))


@dataclass(frozen=True)
class LineBarStyle:
    baseline: Baseline = field(default_factory=Baseline.minimum_value)
    top_line: TopLine = field(default_factory=TopLine.maximum_value)
    y_axis_labels: LabelConfig = field(default_factory=NumericLabels)
    orientation: Orientation = "vertical"
    kind: ChartKind = "line"
    y_axis_label_position: YAxisLabelPosition = "leading"
    x_axis_label_position: XAxisLabelPosition = "bottom"
    x_axis_title: str | None = None
    y_axis_title: str | None = None
    poi_specifier: str = "%.0f"

    def __post_init__(self) -> None:
        if self.orientation not in ORIENTATIONS:
            raise ValueError(f"unknown orientation: {self.orientation!r}")
        if self.kind not in CHART_KINDS:
            raise ValueError(f"unknown chart kind: {self.kind!r}")
        if self.y_axis_label_position not in ("leading", "trailing"):
            raise ValueError(f"unknown y axis label position: {self.y_axis_label_position!r}")
        if self.x_axis_label_position not in ("bottom", "top"):
            raise ValueError(f"unknown x axis label position: {self.x_axis_label_position!r}")
