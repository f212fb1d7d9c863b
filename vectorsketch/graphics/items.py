"""
Graphics Items for VectorSketch

QGraphicsItems that mirror Shape objects in a QGraphicsScene.
The items are display only: all interaction goes through the
interaction state machine, which edits the shapes and asks the item
to resync.
"""

from typing import Optional

from PyQt6.QtCore import Qt, QLineF, QRectF
from PyQt6.QtGui import QBrush, QColor, QPen
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsLineItem, QGraphicsRectItem

from ..core.shapes import Shape, Rectangle, Line


def make_pen(color: str, thickness: float) -> QPen:
    """Solid pen; a zero thickness gives no outline at all."""
    if thickness <= 0:
        return QPen(Qt.PenStyle.NoPen)
    pen = QPen(QColor(color))
    pen.setWidthF(thickness)
    return pen


def make_brush(color: Optional[str]) -> QBrush:
    if color is None:
        return QBrush(Qt.BrushStyle.NoBrush)
    return QBrush(QColor(color))


class RectangleGraphicsItem(QGraphicsRectItem):
    """Displays a Rectangle shape."""

    def __init__(self, shape: Rectangle, parent: Optional[QGraphicsItem] = None):
        super().__init__(parent)
        self._shape = shape
        self.setData(0, shape)
        self.sync_from_shape()

    def sync_from_shape(self) -> None:
        """Copy geometry and style from the shape onto the item."""
        shape = self._shape
        self.setRect(QRectF(shape.x, shape.y, shape.width, shape.height))
        self.setPen(make_pen(shape.stroke, shape.stroke_thickness))
        self.setBrush(make_brush(shape.fill))


class LineGraphicsItem(QGraphicsLineItem):
    """Displays a Line shape."""

    def __init__(self, shape: Line, parent: Optional[QGraphicsItem] = None):
        super().__init__(parent)
        self._shape = shape
        self.setData(0, shape)
        self.sync_from_shape()

    def sync_from_shape(self) -> None:
        """Copy geometry and style from the shape onto the item."""
        shape = self._shape
        self.setLine(QLineF(shape.start.x, shape.start.y, shape.end.x, shape.end.y))
        self.setPen(make_pen(shape.stroke, shape.stroke_thickness))


def create_graphics_item(shape: Shape) -> QGraphicsItem:
    """
    Factory function to create the display item for a shape.

    Raises:
        TypeError: for an object that is not a known shape
    """
    if isinstance(shape, Rectangle):
        return RectangleGraphicsItem(shape)
    if isinstance(shape, Line):
        return LineGraphicsItem(shape)
    raise TypeError(f"No graphics item for {type(shape).__name__}")
