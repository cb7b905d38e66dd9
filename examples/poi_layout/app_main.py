from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

from linebar_axes import AxisMeasurements, LineBarAxes, RenderFrame, data_set, load_style


def main() -> None:
    parser = argparse.ArgumentParser(prog="poi-layout")
    parser.add_argument("--style", type=Path, default=Path(__file__).with_name("chart.toml"))
    parser.add_argument("--width", type=float, default=320.0)
    parser.add_argument("--height", type=float, default=200.0)
    parser.add_argument("--poi", type=float, action="append", default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    steps = np.asarray([8200, 10400, 6100, 9900, 11250, 7300, 4800], dtype=np.float64)
    axes = LineBarAxes(data=data_set(steps, labels=["week"]), style=load_style(args.style))

    # Stand-in for the renderer's measurement pass: 7px per glyph.
    labels = axes.y_axis_column()
    measurements = AxisMeasurements()
    for label in labels:
        measurements.record_y_label_width(7.0 * len(label))
    metrics = measurements.freeze()

    print(f"range: min={axes.min_value:g} max={axes.max_value:g} span={axes.range:g} avg={axes.average:g}")
    for label in labels:
        print(f"  {label:>8}")

    frame = RenderFrame(width=args.width, height=args.height)
    for value in args.poi or [axes.average, 10000.0]:
        poi = axes.poi(value, frame, metrics)
        print(
            f"poi {poi.text}: axis=({poi.axis_label.x:.1f}, {poi.axis_label.y:.1f}) "
            f"center=({poi.center_label.x:.1f}, {poi.center_label.y:.1f}) anchor={poi.anchor}"
        )


if __name__ == "__main__":
    main()
