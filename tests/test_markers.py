from __future__ import annotations

import unittest

from linebar_axes import Point, RenderFrame, label_anchor, marker_line, position_center, position_on_axis


LAYOUTS = (("vertical", "line"), ("vertical", "bar"), ("horizontal", "line"), ("horizontal", "bar"))


class VerticalMarkerTests(unittest.TestCase):
    def test_line_midpoint_maps_to_half_height(self) -> None:
        frame = RenderFrame(width=100, height=200)
        point = position_on_axis(frame, 50.0, 0.0, 100.0, "vertical", "line")
        self.assertEqual(point, Point(-4.0, 100.0))

    def test_axis_label_clears_widest_y_label(self) -> None:
        frame = RenderFrame(width=100, height=200)
        point = position_on_axis(frame, 50.0, 0.0, 100.0, "vertical", "line", max_label_width=30.0)
        self.assertEqual(point.x, -19.0)
        bar_point = position_on_axis(frame, 50.0, 0.0, 100.0, "vertical", "bar", max_label_width=30.0)
        self.assertEqual(bar_point.x, -19.0)

    def test_line_and_bar_y_mappings(self) -> None:
        frame = RenderFrame(width=100, height=200)
        line = position_center(frame, 25.0, 0.0, 100.0, "vertical", "line")
        bar = position_center(frame, 25.0, 0.0, 100.0, "vertical", "bar")
        self.assertEqual(line, Point(50.0, 150.0))
        self.assertEqual(bar, Point(50.0, 150.0))

    def test_offset_minimum(self) -> None:
        frame = RenderFrame(width=80, height=100)
        line = position_center(frame, 30.0, 10.0, 40.0, "vertical", "line")
        self.assertAlmostEqual(line.y, 50.0, places=12)
        bar = position_on_axis(frame, 20.0, 10.0, 40.0, "vertical", "bar")
        self.assertAlmostEqual(bar.y, 75.0, places=12)

    def test_marker_line_spans_width(self) -> None:
        frame = RenderFrame(width=120, height=60)
        line = marker_line(frame, 5.0, 0.0, 10.0, "vertical", "bar")
        self.assertEqual(line.start, Point(0.0, 30.0))
        self.assertEqual(line.end, Point(120.0, 30.0))


class HorizontalMarkerTests(unittest.TestCase):
    def test_value_maps_to_x(self) -> None:
        frame = RenderFrame(width=300, height=100)
        axis = position_on_axis(frame, 75.0, 0.0, 100.0, "horizontal", "bar", max_label_width=20.0)
        center = position_center(frame, 75.0, 0.0, 100.0, "horizontal", "bar")
        self.assertEqual(axis, Point(225.0, -10.0))
        self.assertEqual(center, Point(225.0, 50.0))

    def test_axis_offset_has_no_padding(self) -> None:
        frame = RenderFrame(width=300, height=100)
        axis = position_on_axis(frame, 0.0, 0.0, 100.0, "horizontal", "bar")
        self.assertEqual(axis.y, 0.0)

    def test_marker_line_spans_height(self) -> None:
        frame = RenderFrame(width=200, height=90)
        line = marker_line(frame, 1.0, 0.0, 4.0, "horizontal", "bar")
        self.assertEqual(line.start, Point(50.0, 0.0))
        self.assertEqual(line.end, Point(50.0, 90.0))


class MarkerMappingPropertyTests(unittest.TestCase):
    def test_minimum_value_lands_on_baseline_edge(self) -> None:
        frame = RenderFrame(width=240, height=160)
        for orientation, kind in LAYOUTS:
            center = position_center(frame, -3.0, -3.0, 12.001, orientation, kind)
            if orientation == "vertical":
                self.assertEqual(center.y, frame.height)
            else:
                self.assertEqual(center.x, 0.0)

    def test_repeated_calls_are_identical(self) -> None:
        frame = RenderFrame(width=333, height=177)
        for orientation, kind in LAYOUTS:
            a = position_on_axis(frame, 0.37, 0.1, 0.901, orientation, kind, max_label_width=13.0)
            b = position_on_axis(frame, 0.37, 0.1, 0.901, orientation, kind, max_label_width=13.0)
            self.assertEqual(a, b)
            self.assertEqual(
                position_center(frame, 0.37, 0.1, 0.901, orientation, kind),
                position_center(frame, 0.37, 0.1, 0.901, orientation, kind),
            )

    def test_zero_range_rejected(self) -> None:
        frame = RenderFrame(width=10, height=10)
        with self.assertRaises(ValueError):
            position_center(frame, 1.0, 1.0, 0.0, "vertical", "line")

    def test_unknown_layout_rejected(self) -> None:
        frame = RenderFrame(width=10, height=10)
        with self.assertRaises(ValueError):
            position_center(frame, 1.0, 0.0, 1.0, "diagonal", "line")  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            position_on_axis(frame, 1.0, 0.0, 1.0, "vertical", "pie")  # type: ignore[arg-type]

    def test_negative_frame_rejected(self) -> None:
        with self.assertRaises(ValueError):
            RenderFrame(width=-1, height=10)


class LabelAnchorTests(unittest.TestCase):
    def test_vertical_uses_y_axis_position(self) -> None:
        self.assertEqual(label_anchor("vertical"), "leading")
        self.assertEqual(label_anchor("vertical", y_axis_position="trailing"), "trailing")

    def test_horizontal_uses_x_axis_position(self) -> None:
        self.assertEqual(label_anchor("horizontal"), "bottom")
        self.assertEqual(label_anchor("horizontal", x_axis_position="top"), "top")


if __name__ == "__main__":
    unittest.main()
