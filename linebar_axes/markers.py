"""Pixel-space placement of point-of-interest markers.

Each (orientation, kind) pair maps a data value to a point inside the
render frame. Vertical charts map values onto Y with the axis inverted
(layout Y grows downward), horizontal charts map values onto X.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal

from linebar_axes.style import ChartKind, Orientation, XAxisLabelPosition, YAxisLabelPosition

# Gap between the marker label and the y-axis labels on vertical charts.
AXIS_LABEL_PADDING = 4.0

LabelAnchor = Literal["leading", "trailing", "bottom", "top"]


@dataclass(frozen=True)
class RenderFrame:
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("render frame width/height must be >= 0")


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class POIMarker:
    value: float


@dataclass(frozen=True)
class MarkerLine:
    start: Point
    end: Point


@dataclass(frozen=True)
class _Positioner:
    axis: Callable[[RenderFrame, tuple[float, float], float], Point]
    center: Callable[[RenderFrame, tuple[float, float]], Point]


def _vertical_line_y(frame: RenderFrame, offset: float, span: float) -> float:
    return offset * -(frame.height / span) + frame.height


def _vertical_bar_y(frame: RenderFrame, offset: float, span: float) -> float:
    return frame.height - (offset / span) * frame.height


def _horizontal_x(frame: RenderFrame, offset: float, span: float) -> float:
    return (offset / span) * frame.width


def _vertical_axis_x(label_width: float) -> float:
    return -(label_width / 2.0) - AXIS_LABEL_PADDING


def _vertical_line_axis(frame: RenderFrame, delta: tuple[float, float], label_width: float) -> Point:
    return Point(_vertical_axis_x(label_width), _vertical_line_y(frame, *delta))


def _vertical_line_center(frame: RenderFrame, delta: tuple[float, float]) -> Point:
    return Point(frame.width / 2.0, _vertical_line_y(frame, *delta))


def _vertical_bar_axis(frame: RenderFrame, delta: tuple[float, float], label_width: float) -> Point:
    return Point(_vertical_axis_x(label_width), _vertical_bar_y(frame, *delta))


def _vertical_bar_center(frame: RenderFrame, delta: tuple[float, float]) -> Point:
    return Point(frame.width / 2.0, _vertical_bar_y(frame, *delta))


def _horizontal_axis(frame: RenderFrame, delta: tuple[float, float], label_width: float) -> Point:
    return Point(_horizontal_x(frame, *delta), -(label_width / 2.0))


def _horizontal_center(frame: RenderFrame, delta: tuple[float, float]) -> Point:
    return Point(_horizontal_x(frame, *delta), frame.height / 2.0)


_POSITIONERS: dict[tuple[Orientation, ChartKind], _Positioner] = {
    ("vertical", "line"): _Positioner(axis=_vertical_line_axis, center=_vertical_line_center),
    ("vertical", "bar"): _Positioner(axis=_vertical_bar_axis, center=_vertical_bar_center),
    ("horizontal", "line"): _Positioner(axis=_horizontal_axis, center=_horizontal_center),
    ("horizontal", "bar"): _Positioner(axis=_horizontal_axis, center=_horizontal_center),
}


def position_on_axis(
    frame: RenderFrame,
    marker_value: float,
    min_value: float,
    range: float,
    orientation: Orientation,
    kind: ChartKind,
    *,
    max_label_width: float = 0.0,
) -> Point:
    positioner = _resolve(orientation, kind)
    return positioner.axis(frame, _offset(marker_value, min_value, range), float(max_label_width))


def position_center(
    frame: RenderFrame,
    marker_value: float,
    min_value: float,
    range: float,
    orientation: Orientation,
    kind: ChartKind,
) -> Point:
    positioner = _resolve(orientation, kind)
    return positioner.center(frame, _offset(marker_value, min_value, range))


def marker_line(
    frame: RenderFrame,
    marker_value: float,
    min_value: float,
    range: float,
    orientation: Orientation,
    kind: ChartKind,
) -> MarkerLine:
    center = position_center(frame, marker_value, min_value, range, orientation, kind)
    if orientation == "vertical":
        return MarkerLine(start=Point(0.0, center.y), end=Point(frame.width, center.y))
    return MarkerLine(start=Point(center.x, 0.0), end=Point(center.x, frame.height))


def label_anchor(
    orientation: Orientation,
    *,
    y_axis_position: YAxisLabelPosition = "leading",
    x_axis_position: XAxisLabelPosition = "bottom",
) -> LabelAnchor:
    if orientation == "vertical":
        return "leading" if y_axis_position == "leading" else "trailing"
    if orientation == "horizontal":
        return "bottom" if x_axis_position == "bottom" else "top"
    raise ValueError(f"unknown orientation: {orientation!r}")


def _resolve(orientation: Orientation, kind: ChartKind) -> _Positioner:
    try:
        return _POSITIONERS[(orientation, kind)]
    except KeyError:
        raise ValueError(f"unsupported chart layout: orientation={orientation!r} kind={kind!r}") from None


def _offset(marker_value: float, min_value: float, range: float) -> tuple[float, float]:
    if range == 0:
        raise ValueError("range must be non-zero")
    return (float(marker_value) - float(min_value), float(range))
