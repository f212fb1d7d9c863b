"""
VectorSketch Layer System

The shape sink interface and the in-memory ordered collection of
placed shapes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from uuid import UUID

from .shapes import Shape, Geometry

Handle = UUID


class ShapeSink(ABC):
    """
    Ordered collection of shapes owned by a rendering surface.

    Later entries are drawn on top of earlier ones. The interaction
    core only ever adds, removes or repositions entries through this
    interface.
    """

    @abstractmethod
    def add(self, shape: Shape) -> Handle:
        """Append a shape on top and return its handle."""
        pass

    @abstractmethod
    def remove(self, handle: Handle) -> None:
        """Remove a shape. Unknown handles are ignored."""
        pass

    @abstractmethod
    def iterate_top_to_bottom(self) -> List[Tuple[Handle, Shape]]:
        """Return (handle, shape) pairs, most recently added first."""
        pass

    @abstractmethod
    def update_geometry(self, handle: Handle, geometry: Geometry) -> None:
        """Reposition a shape in place. Unknown handles are ignored."""
        pass


@dataclass
class Layer(ShapeSink):
    """
    A named, ordered list of shapes.

    Handles are the shapes' own ids.
    """
    name: str = "Layer"
    shapes: List[Shape] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.shapes)

    def add(self, shape: Shape) -> Handle:
        self.shapes.append(shape)
        return shape.id

    def remove(self, handle: Handle) -> None:
        shape = self.get_shape_by_id(handle)
        if shape is not None:
            self.shapes.remove(shape)

    def iterate_top_to_bottom(self) -> List[Tuple[Handle, Shape]]:
        return [(shape.id, shape) for shape in reversed(self.shapes)]

    def update_geometry(self, handle: Handle, geometry: Geometry) -> None:
        shape = self.get_shape_by_id(handle)
        if shape is not None:
            shape.set_geometry(geometry)

    def get_shape_by_id(self, shape_id: Handle) -> Optional[Shape]:
        """Find a shape by its ID."""
        for shape in self.shapes:
            if shape.id == shape_id:
                return shape
        return None

    def clear(self) -> None:
        self.shapes.clear()
