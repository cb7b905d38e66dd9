from linebar_axes.adapters import data_set, normalize_series
from linebar_axes.aggregate import average, max_value, min_value
from linebar_axes.chart import LineBarAxes, POIPlacement
from linebar_axes.config import load_style, style_from_mapping
from linebar_axes.errors import ChartDataError, EmptyDataSetError, InvalidLabelCountError, LabelFormatError
from linebar_axes.labels import display_order, format_value, generate_labels, label_values
from linebar_axes.layout import AxisMeasurements, AxisMetrics
from linebar_axes.markers import (
    MarkerLine,
    POIMarker,
    Point,
    RenderFrame,
    label_anchor,
    marker_line,
    position_center,
    position_on_axis,
)
from linebar_axes.scales import RANGE_EPSILON, ResolvedRange, resolve_range
from linebar_axes.series import DataSet, SeriesData
from linebar_axes.style import Baseline, CustomLabels, LineBarStyle, NumericLabels, TopLine

__all__ = [
    "AxisMeasurements",
    "AxisMetrics",
    "Baseline",
    "ChartDataError",
    "CustomLabels",
    "DataSet",
    "EmptyDataSetError",
    "InvalidLabelCountError",
    "LabelFormatError",
    "LineBarAxes",
    "LineBarStyle",
    "MarkerLine",
    "NumericLabels",
    "POIMarker",
    "POIPlacement",
    "Point",
    "RANGE_EPSILON",
    "RenderFrame",
    "ResolvedRange",
    "SeriesData",
    "TopLine",
    "average",
    "data_set",
    "display_order",
    "format_value",
    "generate_labels",
    "label_anchor",
    "label_values",
    "load_style",
    "marker_line",
    "max_value",
    "min_value",
    "normalize_series",
    "position_center",
    "position_on_axis",
    "resolve_range",
    "style_from_mapping",
]
