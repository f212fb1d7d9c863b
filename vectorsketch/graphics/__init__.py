"""
VectorSketch Graphics Module

Contains the interaction components:
- Tools: Tool types and drawable tools
- Surface: Canvas surface interface and pointer capture
- Interaction: The pointer-event state machine

The Qt-specific items and scene sink are imported from their own
modules so the rest of this package works without PyQt6.
"""

from .tools import (
    DrawingTool, RectangleTool, LineTool, ToolType, create_tool
)
from .surface import CanvasSurface, PointerCapture, OffscreenSurface
from .interaction import GestureState, InteractionStateMachine

__all__ = [
    # Tools
    'DrawingTool',
    'RectangleTool',
    'LineTool',
    'ToolType',
    'create_tool',
    # Surface
    'CanvasSurface',
    'PointerCapture',
    'OffscreenSurface',
    # Interaction
    'GestureState',
    'InteractionStateMachine',
]
