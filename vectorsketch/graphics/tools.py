"""
Drawing Tools for VectorSketch

Provides the tool types and the drawable tool implementations.
Each drawable tool knows how to show a neutral preview while a gesture
is in progress and how to build the final styled shape.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from ..core.layer import Handle, ShapeSink
from ..core.settings import CanvasSettings
from ..core.shapes import (
    Point, Shape, Geometry, Rectangle, Line, RectGeometry, LineGeometry
)
from ..core.style import StyleContext


class ToolType(Enum):
    """Types of canvas tools."""
    SELECT = "select"
    RECTANGLE = "rectangle"
    LINE = "line"

    @property
    def is_drawing_tool(self) -> bool:
        return self is not ToolType.SELECT


class DrawingTool(ABC):
    """
    Abstract base class for drawing tools.

    Each tool implements:
    - Geometry between the anchor and the current pointer position
    - Construction of a shape from that geometry and a style

    The base class manages the preview shape in the sink.
    """

    def __init__(self, tool_type: ToolType):
        self.tool_type = tool_type
        self._start_point: Optional[Point] = None
        self._sink: Optional[ShapeSink] = None
        self._preview_handle: Optional[Handle] = None

    @property
    def start_point(self) -> Optional[Point]:
        return self._start_point

    @property
    def preview_handle(self) -> Optional[Handle]:
        return self._preview_handle

    @abstractmethod
    def geometry_between(self, start: Point, end: Point) -> Geometry:
        """Geometry spanned by the anchor and the given point."""
        pass

    @abstractmethod
    def make_shape(self, geometry: Geometry, stroke: str,
                   fill: Optional[str], stroke_thickness: float) -> Shape:
        """Build a shape of this tool's kind."""
        pass

    def start_drawing(self, point: Point, sink: ShapeSink,
                      settings: CanvasSettings) -> Handle:
        """
        Start drawing at the given point.

        Args:
            point: Anchor point in canvas coordinates
            sink: Shape sink to add the preview shape to
            settings: Supplies the neutral preview style

        Returns:
            Handle of the zero-size preview shape
        """
        self.cancel_drawing()
        self._start_point = point
        self._sink = sink
        preview = self.make_shape(
            self.geometry_between(point, point),
            settings.preview_stroke, None, settings.preview_thickness
        )
        self._preview_handle = sink.add(preview)
        return self._preview_handle

    def update_drawing(self, point: Point) -> None:
        """Stretch the preview from the anchor to point."""
        if self._sink is None or self._preview_handle is None:
            return
        self._sink.update_geometry(
            self._preview_handle, self.geometry_between(self._start_point, point)
        )

    def finish_drawing(self, point: Point, style: StyleContext) -> Optional[Shape]:
        """
        Create the final shape from the anchor to point.

        The shape is styled from the style context, not from the preview.
        Returns None if no drawing was started.
        """
        if self._start_point is None:
            return None
        return self.make_shape(
            self.geometry_between(self._start_point, point),
            style.stroke, style.fill, style.stroke_thickness
        )

    def cancel_drawing(self) -> None:
        """Remove the preview, if any, and forget the anchor."""
        if self._sink is not None and self._preview_handle is not None:
            self._sink.remove(self._preview_handle)
        self._preview_handle = None
        self._sink = None
        self._start_point = None


class RectangleTool(DrawingTool):
    """Tool for drawing rectangles."""

    def __init__(self):
        super().__init__(ToolType.RECTANGLE)

    def geometry_between(self, start: Point, end: Point) -> RectGeometry:
        return RectGeometry.from_corners(start, end)

    def make_shape(self, geometry: RectGeometry, stroke: str,
                   fill: Optional[str], stroke_thickness: float) -> Rectangle:
        return Rectangle(geometry.x, geometry.y, geometry.width, geometry.height,
                         stroke=stroke, fill=fill, stroke_thickness=stroke_thickness)


class LineTool(DrawingTool):
    """Tool for drawing straight lines."""

    def __init__(self):
        super().__init__(ToolType.LINE)

    def geometry_between(self, start: Point, end: Point) -> LineGeometry:
        return LineGeometry(start, end)

    def make_shape(self, geometry: LineGeometry, stroke: str,
                   fill: Optional[str], stroke_thickness: float) -> Line:
        # Lines have no interior, so fill is dropped.
        return Line(geometry.start, geometry.end,
                    stroke=stroke, stroke_thickness=stroke_thickness)


def create_tool(tool_type: ToolType) -> DrawingTool:
    """
    Factory function to create a tool instance.

    Args:
        tool_type: Type of tool to create

    Returns:
        DrawingTool instance
    """
    tool_map = {
        ToolType.RECTANGLE: RectangleTool,
        ToolType.LINE: LineTool,
    }

    tool_class = tool_map.get(tool_type)
    if tool_class:
        return tool_class()

    raise ValueError(f"Not a drawing tool: {tool_type}")
