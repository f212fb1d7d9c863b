"""
VectorSketch

An interactive 2D vector drawing surface: draw rectangles and lines
with two clicks or a drag, then move them with the select tool.
"""

__version__ = "0.1.0"
