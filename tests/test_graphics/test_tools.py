"""
Tests for the drawable tools.
"""

import unittest

from vectorsketch.core.layer import Layer
from vectorsketch.core.settings import CanvasSettings
from vectorsketch.core.shapes import Point, Rectangle, Line, RectGeometry
from vectorsketch.core.style import StyleContext
from vectorsketch.graphics.tools import (
    ToolType, RectangleTool, LineTool, create_tool
)


class TestCreateTool(unittest.TestCase):

    def test_drawing_tools(self):
        """Test which tools draw."""
        self.assertIsInstance(create_tool(ToolType.RECTANGLE), RectangleTool)
        self.assertIsInstance(create_tool(ToolType.LINE), LineTool)

    def test_select_is_not_a_drawing_tool(self):
        """Test create_tool() refuses the select tool."""
        self.assertFalse(ToolType.SELECT.is_drawing_tool)
        with self.assertRaises(ValueError):
            create_tool(ToolType.SELECT)


class TestRectangleTool(unittest.TestCase):

    def setUp(self):
        self.layer = Layer()
        self.settings = CanvasSettings()
        self.tool = RectangleTool()

    def test_preview_uses_neutral_style(self):
        """The preview uses the neutral preview style."""
        handle = self.tool.start_drawing(Point(10, 10), self.layer, self.settings)
        preview = self.layer.get_shape_by_id(handle)
        self.assertIsInstance(preview, Rectangle)
        self.assertEqual(preview.geometry(), RectGeometry(10, 10, 0, 0))
        self.assertEqual(preview.stroke, self.settings.preview_stroke)
        self.assertEqual(preview.stroke_thickness, self.settings.preview_thickness)
        self.assertIsNone(preview.fill)

    def test_update_drawing_normalizes(self):
        """Test preview geometry while drawing."""
        handle = self.tool.start_drawing(Point(50, 40), self.layer, self.settings)
        self.tool.update_drawing(Point(10, 10))
        self.assertEqual(self.layer.get_shape_by_id(handle).geometry(),
                         RectGeometry(10, 10, 40, 30))

    def test_finish_drawing_uses_style(self):
        """Test finished shape takes the given style."""
        self.tool.start_drawing(Point(10, 10), self.layer, self.settings)
        style = StyleContext(stroke="#DC143C", fill="#FFEB50", stroke_thickness=6)
        shape = self.tool.finish_drawing(Point(50, 40), style)
        self.assertEqual(shape.geometry(), RectGeometry(10, 10, 40, 30))
        self.assertEqual((shape.stroke, shape.fill, shape.stroke_thickness),
                         ("#DC143C", "#FFEB50", 6))

    def test_finish_without_start(self):
        """Test finishing without a start point."""
        self.assertIsNone(self.tool.finish_drawing(Point(1, 1), StyleContext()))

    def test_cancel_removes_preview(self):
        """Test cancel removes the preview."""
        self.tool.start_drawing(Point(10, 10), self.layer, self.settings)
        self.tool.cancel_drawing()
        self.assertEqual(len(self.layer), 0)
        self.assertIsNone(self.tool.preview_handle)
        self.assertIsNone(self.tool.start_point)

    def test_restart_replaces_preview(self):
        """Starting again replaces the old preview."""
        self.tool.start_drawing(Point(0, 0), self.layer, self.settings)
        self.tool.start_drawing(Point(5, 5), self.layer, self.settings)
        self.assertEqual(len(self.layer), 1)


class TestLineTool(unittest.TestCase):

    def test_line_ignores_fill(self):
        """Lines have no fill."""
        layer = Layer()
        tool = LineTool()
        tool.start_drawing(Point(0, 0), layer, CanvasSettings())
        shape = tool.finish_drawing(Point(100, 50), StyleContext(fill="#FFEB50"))
        self.assertIsInstance(shape, Line)
        self.assertEqual((shape.start, shape.end), (Point(0, 0), Point(100, 50)))
        self.assertFalse(hasattr(shape, "fill"))


if __name__ == "__main__":
    unittest.main()
