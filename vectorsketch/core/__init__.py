"""
VectorSketch Core Module

Contains the core data structures:
- Geometry: Rectangle normalization, point/segment distances
- Shapes: Point, Rectangle, Line and their geometry records
- Style: Stroke/fill/thickness selection
- Layer: Shape sink interface and in-memory implementation
- Hit-testing: Top-most shape under a point
"""

# Import order matters - geometry first, then shapes, then layer
from .geometry import distance, normalize_rect, point_segment_distance
from .shapes import (
    Point, BoundingBox, RectGeometry, LineGeometry, Geometry,
    Rectangle, Line, Shape
)
from .style import StyleContext, THICKNESS_PRESETS, STROKE_PALETTE, FILL_PALETTE
from .settings import CanvasSettings
from .layer import Handle, ShapeSink, Layer
from .hit_test import hit_test

__all__ = [
    'distance', 'normalize_rect', 'point_segment_distance',
    'Point', 'BoundingBox', 'RectGeometry', 'LineGeometry', 'Geometry',
    'Rectangle', 'Line', 'Shape',
    'StyleContext', 'THICKNESS_PRESETS', 'STROKE_PALETTE', 'FILL_PALETTE',
    'CanvasSettings',
    'Handle', 'ShapeSink', 'Layer',
    'hit_test',
]
