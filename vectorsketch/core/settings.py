"""
VectorSketch Canvas Settings

Tunable interaction parameters shared by the state machine and the canvas.
"""

from dataclasses import dataclass


@dataclass
class CanvasSettings:
    """Interaction and preview parameters for a drawing canvas."""
    hit_tolerance: float = 5.0       # Max distance for a line to count as hit
    drag_threshold: float = 3.0      # Movement with button held that starts a drag
    preview_stroke: str = "#808080"  # Neutral gray for in-progress shapes
    preview_thickness: float = 1.0
    grid_spacing: float = 20.0       # Background grid, display only
