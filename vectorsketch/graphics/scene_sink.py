"""
Scene-backed Shape Sink for VectorSketch

Keeps a Layer and a QGraphicsScene in step: every shape in the layer
has exactly one graphics item in the scene, stacked in layer order.
"""

from typing import Dict, List, Tuple
import logging

from PyQt6.QtWidgets import QGraphicsItem, QGraphicsScene

from ..core.layer import Handle, Layer, ShapeSink
from ..core.shapes import Shape, Geometry
from .items import create_graphics_item

logger = logging.getLogger(__name__)


class SceneShapeSink(ShapeSink):
    """
    Shape sink that renders into a QGraphicsScene.

    Each added item gets a higher z-value than every earlier one, so the
    stacking on screen matches the order hit-testing walks.
    """

    def __init__(self, scene: QGraphicsScene, layer: Layer = None):
        self.scene = scene
        self.layer = layer if layer is not None else Layer(name="Drawing")
        self._items: Dict[Handle, QGraphicsItem] = {}
        self._next_z = 0.0

        for shape in self.layer.shapes:
            self._add_item(shape.id, shape)

    def __len__(self) -> int:
        return len(self.layer)

    def item_for(self, handle: Handle) -> QGraphicsItem:
        return self._items.get(handle)

    def add(self, shape: Shape) -> Handle:
        handle = self.layer.add(shape)
        self._add_item(handle, shape)
        return handle

    def remove(self, handle: Handle) -> None:
        self.layer.remove(handle)
        item = self._items.pop(handle, None)
        if item is not None:
            self.scene.removeItem(item)

    def iterate_top_to_bottom(self) -> List[Tuple[Handle, Shape]]:
        return self.layer.iterate_top_to_bottom()

    def update_geometry(self, handle: Handle, geometry: Geometry) -> None:
        self.layer.update_geometry(handle, geometry)
        item = self._items.get(handle)
        if item is not None:
            item.sync_from_shape()

    def clear(self) -> None:
        """Remove every shape and its item."""
        for item in self._items.values():
            self.scene.removeItem(item)
        self._items.clear()
        self.layer.clear()
        self._next_z = 0.0

    def _add_item(self, handle: Handle, shape: Shape) -> None:
        item = create_graphics_item(shape)
        item.setZValue(self._next_z)
        self._next_z += 1.0
        self.scene.addItem(item)
        self._items[handle] = item
        logger.debug("Added %s item for %s", type(shape).__name__, handle)
