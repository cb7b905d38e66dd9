from __future__ import annotations

from dataclasses import dataclass, field

# Padding between the plot area and the x-axis labels.
X_AXIS_LABEL_PADDING = 4.0
# Padding added around the rotated y-axis title.
Y_TITLE_PADDING = 10.0


@dataclass(frozen=True)
class AxisMetrics:
    max_y_label_width: float = 0.0
    max_x_label_height: float = 0.0
    x_title_height: float = 0.0
    y_title_width: float = 0.0
    has_x_axis_labels: bool = False

    @property
    def _x_label_padding(self) -> float:
        return X_AXIS_LABEL_PADDING if self.has_x_axis_labels else 0.0

    @property
    def y_axis_bottom_inset(self) -> float:
        return self.max_x_label_height + self.x_title_height + self._x_label_padding

    @property
    def y_title_bottom_inset(self) -> float:
        return self.max_x_label_height + self.y_title_width + self._x_label_padding


def y_title_slot_width(title_height: float) -> float:
    if title_height < 0:
        raise ValueError("title_height must be >= 0")
    return float(title_height) + Y_TITLE_PADDING


@dataclass
class AxisMeasurements:
    """Measurement pass: collects label extents reported by the renderer.

    Call `freeze()` once every label has been measured and hand the
    resulting `AxisMetrics` to marker placement.
    """

    y_label_widths: list[float] = field(default_factory=list)
    x_label_heights: list[float] = field(default_factory=list)
    x_title_height: float = 0.0
    y_title_width: float = 0.0
    has_x_axis_labels: bool = False

    def record_y_label_width(self, width: float) -> None:
        self.y_label_widths.append(_non_negative(width, "y label width"))

    def record_x_label_height(self, height: float) -> None:
        self.x_label_heights.append(_non_negative(height, "x label height"))
        self.has_x_axis_labels = True

    def record_x_title_height(self, height: float) -> None:
        self.x_title_height = _non_negative(height, "x title height")

    def record_y_title_height(self, height: float) -> None:
        # The y title is rotated, so its rendered height becomes the slot width.
        self.y_title_width = y_title_slot_width(_non_negative(height, "y title height"))

    def reset(self) -> None:
        self.y_label_widths.clear()
        self.x_label_heights.clear()
        self.x_title_height = 0.0
        self.y_title_width = 0.0
        self.has_x_axis_labels = False

    def freeze(self) -> AxisMetrics:
        return AxisMetrics(
            max_y_label_width=max(self.y_label_widths, default=0.0),
            max_x_label_height=max(self.x_label_heights, default=0.0),
            x_title_height=self.x_title_height,
            y_title_width=self.y_title_width,
            has_x_axis_labels=self.has_x_axis_labels,
        )


def _non_negative(value: float, label: str) -> float:
    out = float(value)
    if out < 0:
        raise ValueError(f"{label} must be >= 0")
    return out
