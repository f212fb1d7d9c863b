"""
Main Application Window for VectorSketch
"""

from typing import Optional
import logging

from PyQt6.QtCore import Qt, QSettings, QSize
from PyQt6.QtGui import QAction, QActionGroup, QColor, QIcon, QPixmap
from PyQt6.QtWidgets import QComboBox, QLabel, QMainWindow, QToolBar

from ..core.layer import Layer
from ..core.settings import CanvasSettings
from ..core.style import (
    StyleContext, STROKE_PALETTE, FILL_PALETTE, THICKNESS_PRESETS
)
from ..graphics.interaction import GestureState
from ..graphics.tools import ToolType
from .canvas import SketchCanvas

logger = logging.getLogger(__name__)

GESTURE_HINTS = {
    GestureState.IDLE: "Ready",
    GestureState.AWAITING_SECOND_CLICK: "Click to place the second point (Esc to cancel)",
    GestureState.DRAGGING: "Release to finish drawing",
    GestureState.MOVING: "Release to drop the shape (Esc to put it back)",
}


def _color_icon(color: Optional[str]) -> QIcon:
    """Small swatch icon; None draws an empty white swatch."""
    pixmap = QPixmap(16, 16)
    pixmap.fill(QColor(color) if color else QColor(Qt.GlobalColor.white))
    return QIcon(pixmap)


def _format_thickness(value: float) -> str:
    return f"{value:g}"


class MainWindow(QMainWindow):
    """
    Main application window.

    Hosts the canvas, the tool and style toolbars and a status bar
    showing the gesture in progress and the pointer position.
    """

    def __init__(self, settings: Optional[CanvasSettings] = None):
        super().__init__()

        self.style_context = StyleContext()
        self.layer = Layer(name="Drawing")

        self.setWindowTitle("VectorSketch")
        self.setMinimumSize(900, 600)

        # Restore the style before the canvas reads it
        self._load_style()

        self.canvas = SketchCanvas(self.layer, self.style_context, settings)
        self.setCentralWidget(self.canvas)

        self._create_actions()
        self._create_menus()
        self._create_toolbars()
        self._create_status_bar()
        self._connect_signals()

        self._load_settings()

    def _create_actions(self):
        """Create all menu/toolbar actions."""
        self.action_new = QAction("&New", self)
        self.action_new.setShortcut("Ctrl+N")
        self.action_new.triggered.connect(self.canvas.clear)

        self.action_exit = QAction("E&xit", self)
        self.action_exit.setShortcut("Ctrl+Q")
        self.action_exit.triggered.connect(self.close)

        # Tool actions
        self.action_tool_select = QAction("⇱", self)
        self.action_tool_select.setShortcut("V")
        self.action_tool_select.setCheckable(True)
        self.action_tool_select.setToolTip("Select Tool (V)\nMove shapes")
        self.action_tool_select.triggered.connect(
            lambda: self.canvas.set_tool(ToolType.SELECT)
        )

        self.action_tool_rect = QAction("▭", self)
        self.action_tool_rect.setShortcut("R")
        self.action_tool_rect.setCheckable(True)
        self.action_tool_rect.setChecked(True)
        self.action_tool_rect.setToolTip("Rectangle Tool (R)\nTwo clicks or drag")
        self.action_tool_rect.triggered.connect(
            lambda: self.canvas.set_tool(ToolType.RECTANGLE)
        )

        self.action_tool_line = QAction("╱", self)
        self.action_tool_line.setShortcut("L")
        self.action_tool_line.setCheckable(True)
        self.action_tool_line.setToolTip("Line Tool (L)\nTwo clicks or drag")
        self.action_tool_line.triggered.connect(
            lambda: self.canvas.set_tool(ToolType.LINE)
        )

        self.tool_action_group = QActionGroup(self)
        self.tool_action_group.addAction(self.action_tool_select)
        self.tool_action_group.addAction(self.action_tool_rect)
        self.tool_action_group.addAction(self.action_tool_line)

        # Style actions
        self.stroke_actions = []
        for name, color in STROKE_PALETTE.items():
            action = QAction(_color_icon(color), f"Stroke: {name}", self)
            action.triggered.connect(
                lambda checked=False, c=color: self._on_stroke_color(c)
            )
            self.stroke_actions.append(action)

        self.fill_actions = []
        for name, color in FILL_PALETTE.items():
            action = QAction(_color_icon(color), f"Fill: {name}", self)
            action.triggered.connect(
                lambda checked=False, c=color: self._on_fill_color(c)
            )
            self.fill_actions.append(action)

    def _create_menus(self):
        """Create menu bar."""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        file_menu.addAction(self.action_new)
        file_menu.addSeparator()
        file_menu.addAction(self.action_exit)

        tools_menu = menubar.addMenu("&Tools")
        tools_menu.addAction(self.action_tool_select)
        tools_menu.addAction(self.action_tool_rect)
        tools_menu.addAction(self.action_tool_line)

    def _create_toolbars(self):
        """Create toolbars."""
        tools_toolbar = QToolBar("Tools", self)
        tools_toolbar.setObjectName("ToolsToolBar")
        tools_toolbar.setIconSize(QSize(32, 32))
        tools_toolbar.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextOnly)
        tools_toolbar.setOrientation(Qt.Orientation.Vertical)
        tools_toolbar.setMovable(False)
        font = tools_toolbar.font()
        font.setPointSize(18)
        tools_toolbar.setFont(font)
        tools_toolbar.addAction(self.action_tool_select)
        tools_toolbar.addSeparator()
        tools_toolbar.addAction(self.action_tool_rect)
        tools_toolbar.addAction(self.action_tool_line)
        self.addToolBar(Qt.ToolBarArea.LeftToolBarArea, tools_toolbar)

        style_toolbar = QToolBar("Style", self)
        style_toolbar.setObjectName("StyleToolBar")
        style_toolbar.addWidget(QLabel(" Stroke "))
        for action in self.stroke_actions:
            style_toolbar.addAction(action)
        style_toolbar.addSeparator()
        style_toolbar.addWidget(QLabel(" Fill "))
        for action in self.fill_actions:
            style_toolbar.addAction(action)
        style_toolbar.addSeparator()
        style_toolbar.addWidget(QLabel(" Thickness "))

        self.thickness_combo = QComboBox()
        for value in THICKNESS_PRESETS:
            self.thickness_combo.addItem(_format_thickness(value))
        current = _format_thickness(self.style_context.stroke_thickness)
        if self.thickness_combo.findText(current) < 0:
            self.thickness_combo.addItem(current)
        self.thickness_combo.setCurrentText(current)
        style_toolbar.addWidget(self.thickness_combo)
        self.addToolBar(style_toolbar)

    def _create_status_bar(self):
        """Create status bar with gesture hint and pointer position."""
        status = self.statusBar()
        self.gesture_label = QLabel(GESTURE_HINTS[GestureState.IDLE])
        self.position_label = QLabel("")
        status.addWidget(self.gesture_label, 1)
        status.addPermanentWidget(self.position_label)

    def _connect_signals(self):
        self.thickness_combo.currentTextChanged.connect(self._on_thickness_changed)
        self.canvas.gesture_changed.connect(self._on_gesture_changed)
        self.canvas.cursor_position.connect(self._on_cursor_position)

    # ----- Slots -----

    def _on_stroke_color(self, color: str):
        self.canvas.machine.set_stroke_color(color)

    def _on_fill_color(self, color: Optional[str]):
        self.canvas.machine.set_fill_color(color)

    def _on_thickness_changed(self, text: str):
        # Unparsable text leaves the current thickness in place.
        if not self.canvas.machine.set_stroke_thickness(text):
            logger.debug("Thickness %r rejected", text)

    def _on_gesture_changed(self, state: GestureState):
        self.gesture_label.setText(GESTURE_HINTS.get(state, ""))

    def _on_cursor_position(self, x: float, y: float):
        self.position_label.setText(f"X: {x:.0f}  Y: {y:.0f}")

    # ----- Settings -----

    def _load_style(self):
        """Restore the last used style; bad stored values are skipped."""
        settings = QSettings("VectorSketch", "VectorSketch")

        stroke = settings.value("style/stroke")
        if stroke:
            self.style_context.set_stroke_color(stroke)

        if settings.contains("style/fill"):
            fill = settings.value("style/fill")
            self.style_context.set_fill_color(fill or None)

        thickness = settings.value("style/thickness")
        if thickness is not None:
            self.style_context.set_stroke_thickness(thickness)

    def _load_settings(self):
        """Load window settings."""
        settings = QSettings("VectorSketch", "VectorSketch")

        geometry = settings.value("geometry")
        if geometry:
            self.restoreGeometry(geometry)

        state = settings.value("windowState")
        if state:
            self.restoreState(state)

    def _save_settings(self):
        """Save window and style settings."""
        settings = QSettings("VectorSketch", "VectorSketch")
        settings.setValue("geometry", self.saveGeometry())
        settings.setValue("windowState", self.saveState())
        style = self.style_context
        settings.setValue("style/stroke", style.stroke)
        settings.setValue("style/fill", style.fill or "")
        settings.setValue("style/thickness", _format_thickness(style.stroke_thickness))

    def closeEvent(self, event):
        """Handle window close."""
        self.canvas.machine.cancel()
        self._save_settings()
        event.accept()
