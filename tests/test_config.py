from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from linebar_axes import Baseline, CustomLabels, LineBarStyle, NumericLabels, TopLine, load_style, style_from_mapping


STYLE_TOML = """
[chart]
orientation = "horizontal"
kind = "bar"
x_axis_label_position = "top"
x_axis_title = "Revenue"

[baseline]
kind = "minimum_with_floor"
floor = -5

[top_line]
kind = "maximum_with_ceiling"
ceiling = 120.5

[y_axis_labels]
count = 5
specifier = "%.1f"

[poi]
specifier = "%.2f"
"""


class LoadStyleTests(unittest.TestCase):
    def test_load_style_from_toml(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "chart.toml"
            path.write_text(STYLE_TOML, encoding="utf-8")
            style = load_style(path)

        self.assertEqual(style.orientation, "horizontal")
        self.assertEqual(style.kind, "bar")
        self.assertEqual(style.x_axis_label_position, "top")
        self.assertEqual(style.y_axis_label_position, "leading")
        self.assertEqual(style.x_axis_title, "Revenue")
        self.assertIsNone(style.y_axis_title)
        self.assertEqual(style.baseline, Baseline.minimum_with_floor(-5.0))
        self.assertEqual(style.top_line, TopLine.maximum_with_ceiling(120.5))
        self.assertEqual(style.y_axis_labels, NumericLabels(count=5, specifier="%.1f"))
        self.assertEqual(style.poi_specifier, "%.2f")

    def test_bundled_example_style_loads(self) -> None:
        path = Path(__file__).resolve().parents[1] / "examples" / "poi_layout" / "chart.toml"
        style = load_style(path)
        self.assertEqual(style.kind, "bar")
        self.assertEqual(style.baseline, Baseline.zero())
        self.assertEqual(style.top_line, TopLine.maximum_with_ceiling(12000.0))
        self.assertEqual(style.y_axis_title, "Steps")

    def test_infinite_ceiling_in_toml_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "chart.toml"
            path.write_text("[top_line]\nkind = \"maximum_with_ceiling\"\nceiling = inf\n", encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "top_line.ceiling"):
                load_style(path)

    def test_unknown_section_key_named_in_error(self) -> None:
        with self.assertRaisesRegex(ValueError, "chart.orientaton"):
            style_from_mapping({"chart": {"orientaton": "horizontal"}})

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                load_style(Path(tmp) / "missing.toml")

    def test_empty_mapping_gives_defaults(self) -> None:
        self.assertEqual(style_from_mapping({}), LineBarStyle())

    def test_custom_labels(self) -> None:
        style = style_from_mapping({"y_axis_labels": {"mode": "custom", "labels": ["lo", "hi"]}})
        self.assertEqual(style.y_axis_labels, CustomLabels(labels=("lo", "hi")))
        bare = style_from_mapping({"y_axis_labels": {"mode": "custom"}})
        self.assertEqual(bare.y_axis_labels, CustomLabels())

    def test_invalid_values_rejected(self) -> None:
        bad_inputs = (
            {"chart": {"orientation": "diagonal"}},
            {"chart": {"kind": "pie"}},
            {"chart": "vertical"},
            {"baseline": {"kind": "minimum_with_floor"}},
            {"baseline": {"kind": "minimum_with_floor", "floor": "low"}},
            {"top_line": {"kind": "maximum_with_ceiling"}},
            {"top_line": {"kind": "maximum_with_ceiling", "ceiling": float("inf")}},
            {"baseline": {"kind": "minimum_with_floor", "floor": float("nan")}},
            {"chart": {"orientaton": "horizontal"}},
            {"y_axis_labels": {"count": 4.5}},
            {"y_axis_labels": {"count": True}},
            {"y_axis_labels": {"mode": "custom", "labels": [1, 2]}},
            {"poi": {"specifier": 3}},
            {"theme": {}},
        )
        for raw in bad_inputs:
            with self.subTest(raw=raw):
                with self.assertRaises(ValueError):
                    style_from_mapping(raw)


if __name__ == "__main__":
    unittest.main()
