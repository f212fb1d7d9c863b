"""
Interaction State Machine for VectorSketch

Turns a stream of pointer events into committed shapes, live previews
and in-place moves, according to the selected tool.

Drawing tools (rectangle, line) support two gestures:
- Two clicks: first click anchors a preview, second click commits.
- Drag: press, move past the drag threshold with the button held,
  release to commit. Pointer capture is held while dragging.

The select tool grabs the top-most shape under the press and moves it
with the pointer until release, holding pointer capture meanwhile.
"""

from enum import Enum
from typing import Optional
import logging

from ..core.hit_test import hit_test
from ..core.layer import Handle
from ..core.settings import CanvasSettings
from ..core.shapes import Point, Shape, Geometry
from ..core.style import StyleContext
from .surface import CanvasSurface, PointerCapture
from .tools import DrawingTool, ToolType, create_tool

logger = logging.getLogger(__name__)


class GestureState(Enum):
    """Which gesture, if any, is in progress."""
    IDLE = "idle"
    AWAITING_SECOND_CLICK = "awaiting_second_click"
    DRAGGING = "dragging"
    MOVING = "moving"


class InteractionStateMachine:
    """
    Interprets pointer events against the current tool.

    The machine owns the tool selection, the style context, the gesture
    state and any preview or grabbed shape. Shapes themselves live in the
    canvas surface passed to pointer_pressed(), which becomes the active
    canvas until the gesture ends. Events that arrive without an active
    canvas or gesture are ignored.
    """

    def __init__(self, tool: ToolType = ToolType.RECTANGLE,
                 style: Optional[StyleContext] = None,
                 settings: Optional[CanvasSettings] = None):
        self._settings = settings if settings is not None else CanvasSettings()
        self._style = style if style is not None else StyleContext()

        self._tool_type = tool
        self._drawing_tool: Optional[DrawingTool] = (
            create_tool(tool) if tool.is_drawing_tool else None
        )

        self._state = GestureState.IDLE
        self._canvas: Optional[CanvasSurface] = None
        self._capture: Optional[PointerCapture] = None
        self._button_down = False

        # Move session
        self._grabbed_handle: Optional[Handle] = None
        self._grabbed_shape: Optional[Shape] = None
        self._move_anchor: Optional[Point] = None
        self._original_geometry: Optional[Geometry] = None

    # ----- Read-only state -----

    @property
    def state(self) -> GestureState:
        return self._state

    @property
    def tool(self) -> ToolType:
        return self._tool_type

    @property
    def style(self) -> StyleContext:
        return self._style

    @property
    def settings(self) -> CanvasSettings:
        return self._settings

    @property
    def is_active(self) -> bool:
        return self._state is not GestureState.IDLE

    @property
    def preview_handle(self) -> Optional[Handle]:
        if self._drawing_tool is None:
            return None
        return self._drawing_tool.preview_handle

    @property
    def grabbed_handle(self) -> Optional[Handle]:
        return self._grabbed_handle

    @property
    def holds_capture(self) -> bool:
        return self._capture is not None and self._capture.held

    # ----- Tool and style selection -----

    def set_tool(self, tool: ToolType) -> None:
        """
        Select a tool.

        Always resets: any preview is discarded, a grabbed shape is let go
        where it currently is, and pointer capture is released.
        """
        self._reset()
        if tool is not self._tool_type:
            logger.debug("Tool changed: %s -> %s", self._tool_type.value, tool.value)
        self._tool_type = tool
        self._drawing_tool = create_tool(tool) if tool.is_drawing_tool else None

    def set_stroke_color(self, color: str) -> bool:
        return self._style.set_stroke_color(color)

    def set_fill_color(self, color: Optional[str]) -> bool:
        return self._style.set_fill_color(color)

    def set_stroke_thickness(self, value) -> bool:
        return self._style.set_stroke_thickness(value)

    # ----- Pointer events -----

    def pointer_pressed(self, canvas: CanvasSurface, position: Point) -> None:
        """Handle a primary-button press at position on canvas."""
        self._button_down = True

        if self._state is GestureState.AWAITING_SECOND_CLICK:
            self._commit(position)
            return

        if self._state is not GestureState.IDLE:
            # Captured sessions end on release only.
            logger.debug("Ignoring press while %s", self._state.value)
            return

        if self._tool_type is ToolType.SELECT:
            self._begin_move(canvas, position)
        else:
            self._begin_drawing(canvas, position)

    def pointer_moved(self, position: Point) -> None:
        """Handle pointer movement, with or without the button held."""
        if self._canvas is None:
            return

        if self._state is GestureState.MOVING:
            self._move_to(position)
        elif self._state is GestureState.AWAITING_SECOND_CLICK:
            if self._button_down and self._exceeds_drag_threshold(position):
                self._capture = PointerCapture(self._canvas)
                self._set_state(GestureState.DRAGGING)
            self._drawing_tool.update_drawing(position)
        elif self._state is GestureState.DRAGGING:
            self._drawing_tool.update_drawing(position)

    def pointer_released(self, position: Point) -> None:
        """Handle release of the primary button."""
        self._button_down = False

        if self._state is GestureState.MOVING:
            logger.info("Moved shape %s to %s", self._grabbed_handle,
                        self._grabbed_shape.geometry())
            self._end_gesture()
        elif self._state is GestureState.DRAGGING:
            self._commit(position)
        # A release after the first click of a two-click gesture, or with
        # no gesture at all, changes nothing.

    def cancel(self) -> None:
        """
        Abort the gesture in progress without changing tools.

        A moved shape is put back where it was grabbed.
        """
        if self._state is GestureState.MOVING and self._canvas is not None:
            self._canvas.shapes.update_geometry(
                self._grabbed_handle, self._original_geometry
            )
            logger.info("Move of shape %s cancelled", self._grabbed_handle)
        self._reset()

    # ----- Drawing -----

    def _begin_drawing(self, canvas: CanvasSurface, position: Point) -> None:
        self._canvas = canvas
        self._drawing_tool.start_drawing(position, canvas.shapes, self._settings)
        self._set_state(GestureState.AWAITING_SECOND_CLICK)

    def _exceeds_drag_threshold(self, position: Point) -> bool:
        anchor = self._drawing_tool.start_point
        delta = position - anchor
        return max(abs(delta.x), abs(delta.y)) > self._settings.drag_threshold

    def _commit(self, position: Point) -> Optional[Handle]:
        """
        Replace the preview with a styled shape from the anchor to position.

        The new shape goes on top of the sink. Gesture state and pointer
        capture are cleared even if the sink fails.
        """
        canvas = self._canvas
        tool = self._drawing_tool
        try:
            shape = tool.finish_drawing(position, self._style)
            tool.cancel_drawing()
            if shape is None:
                return None
            handle = canvas.shapes.add(shape)
        finally:
            self._end_gesture()
        logger.info("Committed %s %s", tool.tool_type.value, shape.geometry())
        return handle

    # ----- Moving -----

    def _begin_move(self, canvas: CanvasSurface, position: Point) -> None:
        ignored = () if self.preview_handle is None else (self.preview_handle,)
        hit = hit_test(canvas.shapes, position,
                       tolerance=self._settings.hit_tolerance, ignore=ignored)
        if hit is None:
            return

        handle, shape = hit
        self._capture = PointerCapture(canvas)
        self._canvas = canvas
        self._grabbed_handle = handle
        self._grabbed_shape = shape
        self._original_geometry = shape.geometry()
        self._move_anchor = position
        self._set_state(GestureState.MOVING)

    def _move_to(self, position: Point) -> None:
        # Always offset the snapshot, never the live geometry, so the
        # shape cannot drift from the pointer.
        delta = position - self._move_anchor
        self._canvas.shapes.update_geometry(
            self._grabbed_handle,
            self._original_geometry.translated(delta.x, delta.y)
        )

    # ----- Teardown -----

    def _end_gesture(self) -> None:
        if self._capture is not None:
            self._capture.release()
            self._capture = None
        if self._drawing_tool is not None:
            self._drawing_tool.cancel_drawing()
        self._canvas = None
        self._grabbed_handle = None
        self._grabbed_shape = None
        self._move_anchor = None
        self._original_geometry = None
        self._set_state(GestureState.IDLE)

    def _reset(self) -> None:
        if self._state is not GestureState.IDLE:
            logger.debug("Resetting %s gesture", self._state.value)
        self._button_down = False
        self._end_gesture()

    def _set_state(self, state: GestureState) -> None:
        if state is not self._state:
            logger.debug("Gesture %s -> %s", self._state.value, state.value)
        self._state = state
