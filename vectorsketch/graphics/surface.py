"""
Canvas Surfaces for VectorSketch

A canvas surface is what the interaction core draws on: a shape sink
plus the platform's pointer capture. The Qt canvas is one surface;
OffscreenSurface is a headless one.
"""

from abc import ABC, abstractmethod
import logging

from ..core.layer import Layer, ShapeSink

logger = logging.getLogger(__name__)


class CanvasSurface(ABC):
    """Shape sink plus pointer capture for one drawing canvas."""

    @property
    @abstractmethod
    def shapes(self) -> ShapeSink:
        """The ordered collection of shapes on this canvas."""
        pass

    @abstractmethod
    def capture_pointer(self) -> None:
        """Route all pointer events to this canvas until released."""
        pass

    @abstractmethod
    def release_pointer(self) -> None:
        """End a capture started by capture_pointer()."""
        pass


class PointerCapture:
    """
    One held pointer capture on a surface.

    Acquired when constructed; release() gives it back exactly once no
    matter how many times it is called.
    """

    def __init__(self, surface: CanvasSurface):
        self._surface = surface
        self._held = False
        surface.capture_pointer()
        self._held = True

    @property
    def held(self) -> bool:
        return self._held

    def release(self) -> None:
        if not self._held:
            return
        self._held = False
        self._surface.release_pointer()


class OffscreenSurface(CanvasSurface):
    """
    Headless surface backed by a Layer.

    Counts capture calls so callers can check that every capture was
    released.
    """

    def __init__(self, layer: Layer = None):
        self._layer = layer if layer is not None else Layer(name="Offscreen")
        self.captures_acquired = 0
        self.captures_released = 0

    @property
    def shapes(self) -> Layer:
        return self._layer

    @property
    def is_captured(self) -> bool:
        return self.captures_acquired > self.captures_released

    def capture_pointer(self) -> None:
        self.captures_acquired += 1

    def release_pointer(self) -> None:
        if not self.is_captured:
            logger.warning("release_pointer() called without an active capture")
            return
        self.captures_released += 1
