"""
VectorSketch Core Shapes Module

Defines the fundamental value types (Point, BoundingBox, geometry records)
and the two shape variants that can live on a canvas: Rectangle and Line.
"""

from dataclasses import dataclass, field
from typing import Optional, Union
from uuid import UUID, uuid4

from .geometry import normalize_rect, point_segment_distance


@dataclass(frozen=True)
class Point:
    """A 2D point."""
    x: float
    y: float

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def contains(self, point: Point) -> bool:
        """Check if point is inside bounding box (edges included)."""
        return (self.min_x <= point.x <= self.max_x and
                self.min_y <= point.y <= self.max_y)


@dataclass(frozen=True)
class RectGeometry:
    """Placement of a rectangle: top-left corner plus non-negative size."""
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_corners(cls, p1: Point, p2: Point) -> 'RectGeometry':
        """Build a normalized rectangle from two arbitrary corners."""
        return cls(*normalize_rect((p1.x, p1.y), (p2.x, p2.y)))

    def translated(self, dx: float, dy: float) -> 'RectGeometry':
        return RectGeometry(self.x + dx, self.y + dy, self.width, self.height)


@dataclass(frozen=True)
class LineGeometry:
    """Placement of a line segment."""
    start: Point
    end: Point

    def translated(self, dx: float, dy: float) -> 'LineGeometry':
        delta = Point(dx, dy)
        return LineGeometry(self.start + delta, self.end + delta)


Geometry = Union[RectGeometry, LineGeometry]


@dataclass
class Rectangle:
    """
    An axis-aligned rectangle.

    Width and height are always stored as magnitudes; use
    RectGeometry.from_corners() to build one from a drag in any direction.
    """
    x: float
    y: float
    width: float
    height: float
    stroke: str = "#000000"
    fill: Optional[str] = None
    stroke_thickness: float = 1.0
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rectangle size must be non-negative, got {self.width}x{self.height}"
            )
        if self.stroke_thickness < 0:
            raise ValueError(f"Negative stroke thickness: {self.stroke_thickness}")

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def geometry(self) -> RectGeometry:
        return RectGeometry(self.x, self.y, self.width, self.height)

    def set_geometry(self, geometry: RectGeometry) -> None:
        """Write a new placement onto this rectangle in place."""
        if not isinstance(geometry, RectGeometry):
            raise TypeError(f"Rectangle cannot take {type(geometry).__name__}")
        self.x = geometry.x
        self.y = geometry.y
        self.width = geometry.width
        self.height = geometry.height

    def get_bounding_box(self) -> BoundingBox:
        return BoundingBox(self.x, self.y, self.x + self.width, self.y + self.height)

    def contains_point(self, point: Point, tolerance: float = 0.0) -> bool:
        # Rectangles are hit on their area only; tolerance applies to lines.
        return self.get_bounding_box().contains(point)


@dataclass
class Line:
    """A straight line segment."""
    start: Point
    end: Point
    stroke: str = "#000000"
    stroke_thickness: float = 1.0
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self):
        if self.stroke_thickness < 0:
            raise ValueError(f"Negative stroke thickness: {self.stroke_thickness}")

    def geometry(self) -> LineGeometry:
        return LineGeometry(self.start, self.end)

    def set_geometry(self, geometry: LineGeometry) -> None:
        """Write a new placement onto this line in place."""
        if not isinstance(geometry, LineGeometry):
            raise TypeError(f"Line cannot take {type(geometry).__name__}")
        self.start = geometry.start
        self.end = geometry.end

    def get_bounding_box(self) -> BoundingBox:
        return BoundingBox(
            min(self.start.x, self.end.x), min(self.start.y, self.end.y),
            max(self.start.x, self.end.x), max(self.start.y, self.end.y)
        )

    def contains_point(self, point: Point, tolerance: float = 5.0) -> bool:
        """A line is hit when the point lies within tolerance of the segment."""
        distance = point_segment_distance(
            (point.x, point.y),
            (self.start.x, self.start.y),
            (self.end.x, self.end.y)
        )
        return distance <= tolerance


Shape = Union[Rectangle, Line]
