"""
VectorSketch Canvas - Main drawing surface.

Uses Qt's Graphics View Framework for rendering. Mouse input is handed
to the interaction state machine in scene coordinates; the canvas only
supplies the shape sink and pointer capture.
"""

from typing import Optional
import logging

from PyQt6.QtCore import Qt, QLineF, QRectF, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QKeyEvent, QMouseEvent, QPainter, QPen
from PyQt6.QtWidgets import QGraphicsScene, QGraphicsView

from ..core.layer import Layer
from ..core.settings import CanvasSettings
from ..core.shapes import Point
from ..core.style import StyleContext
from ..graphics.interaction import GestureState, InteractionStateMachine
from ..graphics.scene_sink import SceneShapeSink
from ..graphics.surface import CanvasSurface
from ..graphics.tools import ToolType

logger = logging.getLogger(__name__)


class SketchCanvas(QGraphicsView):
    """
    Canvas for drawing and moving shapes.

    Features:
    - Two-click and drag drawing of rectangles and lines
    - Moving shapes with the select tool
    - Escape cancels the gesture in progress
    - Background grid
    """

    # Signals
    cursor_position = pyqtSignal(float, float)  # Pointer position in scene units
    gesture_changed = pyqtSignal(object)        # GestureState

    def __init__(self, layer: Optional[Layer] = None,
                 style: Optional[StyleContext] = None,
                 settings: Optional[CanvasSettings] = None,
                 width: float = 1600.0, height: float = 1000.0):
        super().__init__()

        self.settings = settings if settings is not None else CanvasSettings()
        self.scene = QGraphicsScene()
        self.scene.setSceneRect(0, 0, width, height)
        self.setScene(self.scene)

        # View settings
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setViewportUpdateMode(
            QGraphicsView.ViewportUpdateMode.FullViewportUpdate
        )
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        # Needed for the preview to follow the pointer between two clicks.
        self.viewport().setMouseTracking(True)

        self._sink = SceneShapeSink(self.scene, layer)
        self._machine = InteractionStateMachine(
            tool=ToolType.RECTANGLE, style=style, settings=self.settings
        )
        self._last_state = self._machine.state

        # Colors
        self._background_color = QColor(250, 250, 250)
        self._grid_color = QColor(232, 232, 232)
        self._grid_color_major = QColor(212, 212, 212)

        self.setBackgroundBrush(QBrush(self._background_color))
        self._update_cursor()

    # ----- CanvasSurface -----

    @property
    def shapes(self) -> SceneShapeSink:
        return self._sink

    def capture_pointer(self) -> None:
        self.viewport().grabMouse()

    def release_pointer(self) -> None:
        self.viewport().releaseMouse()

    # ----- Public API -----

    @property
    def machine(self) -> InteractionStateMachine:
        return self._machine

    @property
    def layer(self) -> Layer:
        return self._sink.layer

    def set_tool(self, tool_type: ToolType) -> None:
        """Set the current tool, abandoning any gesture in progress."""
        self._machine.set_tool(tool_type)
        self._update_cursor()
        self._emit_state()

    def clear(self) -> None:
        """Drop every shape from the canvas."""
        self._machine.cancel()
        self._sink.clear()
        logger.info("Canvas cleared")
        self._emit_state()

    # ----- Events -----

    def mousePressEvent(self, event: QMouseEvent):
        """Handle mouse press."""
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        self._machine.pointer_pressed(self, self._scene_point(event))
        self._emit_state()

    def mouseDoubleClickEvent(self, event: QMouseEvent):
        """A fast second click is still a press for the gesture."""
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseDoubleClickEvent(event)
            return
        self._machine.pointer_pressed(self, self._scene_point(event))
        self._emit_state()

    def mouseMoveEvent(self, event: QMouseEvent):
        """Handle mouse move."""
        point = self._scene_point(event)
        self.cursor_position.emit(point.x, point.y)
        self._machine.pointer_moved(point)
        self._emit_state()

    def mouseReleaseEvent(self, event: QMouseEvent):
        """Handle mouse release."""
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self._machine.pointer_released(self._scene_point(event))
        self._emit_state()

    def keyPressEvent(self, event: QKeyEvent):
        """Escape cancels the current gesture."""
        if event.key() == Qt.Key.Key_Escape and self._machine.is_active:
            self._machine.cancel()
            self._emit_state()
        else:
            super().keyPressEvent(event)

    def drawBackground(self, painter: QPainter, rect: QRectF):
        """Draw background with grid."""
        painter.fillRect(rect, self._background_color)

        spacing = self.settings.grid_spacing
        if spacing <= 0:
            return

        minor_pen = QPen(self._grid_color, 0)
        major_pen = QPen(self._grid_color_major, 0)

        # Every 5th line is a major line
        index = int(rect.left() // spacing)
        x = index * spacing
        while x <= rect.right():
            painter.setPen(major_pen if index % 5 == 0 else minor_pen)
            painter.drawLine(QLineF(x, rect.top(), x, rect.bottom()))
            x += spacing
            index += 1

        index = int(rect.top() // spacing)
        y = index * spacing
        while y <= rect.bottom():
            painter.setPen(major_pen if index % 5 == 0 else minor_pen)
            painter.drawLine(QLineF(rect.left(), y, rect.right(), y))
            y += spacing
            index += 1

    # ----- Helpers -----

    def _scene_point(self, event: QMouseEvent) -> Point:
        scene_pos = self.mapToScene(event.position().toPoint())
        return Point(scene_pos.x(), scene_pos.y())

    def _update_cursor(self) -> None:
        if self._machine.tool is ToolType.SELECT:
            self.setCursor(Qt.CursorShape.ArrowCursor)
        else:
            self.setCursor(Qt.CursorShape.CrossCursor)

    def _emit_state(self) -> None:
        state = self._machine.state
        if state is not self._last_state:
            self._last_state = state
            self.gesture_changed.emit(state)
            if state is GestureState.MOVING:
                self.setCursor(Qt.CursorShape.ClosedHandCursor)
            elif state is GestureState.IDLE:
                self._update_cursor()


# QGraphicsView has its own metaclass, so register instead of subclassing.
CanvasSurface.register(SketchCanvas)
