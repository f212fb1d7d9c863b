"""
VectorSketch Geometry Utilities

Stateless point math shared by the shape model and hit-testing.
Points are plain (x, y) pairs here so the functions stay usable
without the shape classes.
"""

from typing import Tuple
import math

XY = Tuple[float, float]


def distance(p: XY, q: XY) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p[0] - q[0], p[1] - q[1])


def normalize_rect(p1: XY, p2: XY) -> Tuple[float, float, float, float]:
    """
    Turn two arbitrary corners into (x, y, width, height).

    The result is the same whichever corner comes first, and width and
    height are never negative.
    """
    x = min(p1[0], p2[0])
    y = min(p1[1], p2[1])
    width = abs(p2[0] - p1[0])
    height = abs(p2[1] - p1[1])
    return x, y, width, height


def point_segment_distance(p: XY, a: XY, b: XY) -> float:
    """
    Distance from point p to the segment a-b.

    p is projected onto the line through a and b, with the projection
    parameter clamped to [0, 1] so the nearest point stays on the segment.
    A degenerate segment (a == b) is treated as a single point.
    """
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return distance(p, a)

    t = ((p[0] - a[0]) * dx + (p[1] - a[1]) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return distance(p, (a[0] + t * dx, a[1] + t * dy))
