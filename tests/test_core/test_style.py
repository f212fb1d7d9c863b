"""
Tests for the style context.
"""

import unittest

from vectorsketch.core.style import (
    StyleContext, parse_thickness, THICKNESS_PRESETS,
    DEFAULT_STROKE, DEFAULT_FILL, DEFAULT_STROKE_THICKNESS
)


class TestParseThickness(unittest.TestCase):

    def test_presets_parse(self):
        """Every preset label parses back to its value."""
        for value in THICKNESS_PRESETS:
            with self.subTest(value=value):
                self.assertEqual(parse_thickness(f"{value:g}"), value)

    def test_numbers_and_whitespace(self):
        """Test numeric input and surrounding whitespace."""
        self.assertEqual(parse_thickness(4), 4.0)
        self.assertEqual(parse_thickness(" 6 "), 6.0)

    def test_rejects_bad_values(self):
        """Test values that cannot be used as a thickness."""
        for value in ["", "thick", "-1", "nan", "inf", None]:
            with self.subTest(value=value):
                self.assertIsNone(parse_thickness(value))


class TestStyleContext(unittest.TestCase):

    def setUp(self):
        self.style = StyleContext()

    def test_defaults(self):
        """Test default style values."""
        self.assertEqual(self.style.stroke, DEFAULT_STROKE)
        self.assertEqual(self.style.fill, DEFAULT_FILL)
        self.assertEqual(self.style.stroke_thickness, DEFAULT_STROKE_THICKNESS)

    def test_set_stroke_color(self):
        """Test setting a stroke color."""
        self.assertTrue(self.style.set_stroke_color("#dc143c"))
        self.assertEqual(self.style.stroke, "#DC143C")

    def test_invalid_stroke_color_ignored(self):
        """Test malformed stroke colors are ignored."""
        self.assertFalse(self.style.set_stroke_color("crimson"))
        self.assertFalse(self.style.set_stroke_color("#12345"))
        self.assertEqual(self.style.stroke, DEFAULT_STROKE)

    def test_fill_none(self):
        """None turns the fill off."""
        self.assertTrue(self.style.set_fill_color(None))
        self.assertIsNone(self.style.fill)

    def test_invalid_fill_ignored(self):
        """Test malformed fill colors are ignored."""
        self.assertFalse(self.style.set_fill_color("#GGGGGG"))
        self.assertEqual(self.style.fill, DEFAULT_FILL)

    def test_set_thickness_from_text(self):
        """Test thickness from combo box text."""
        self.assertTrue(self.style.set_stroke_thickness("4"))
        self.assertEqual(self.style.stroke_thickness, 4.0)

    def test_unparsable_thickness_leaves_context_unchanged(self):
        """Unparsable text keeps the previous thickness."""
        self.style.set_stroke_thickness("6")
        self.assertFalse(self.style.set_stroke_thickness("six"))
        self.assertEqual(self.style.stroke_thickness, 6.0)


if __name__ == "__main__":
    unittest.main()
