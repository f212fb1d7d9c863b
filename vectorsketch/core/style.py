"""
VectorSketch Style Context

The stroke/fill/thickness selection applied to newly committed shapes.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union
import logging
import math
import re

logger = logging.getLogger(__name__)

THICKNESS_PRESETS: Tuple[float, ...] = (1.0, 2.0, 4.0, 6.0)

STROKE_PALETTE: Dict[str, str] = {
    "blue": "#483D8B",
    "red": "#DC143C",
    "black": "#000000",
}

FILL_PALETTE: Dict[str, Optional[str]] = {
    "none": None,
    "violet": "#8C6EDC",
    "blue": "#78B4FF",
    "yellow": "#FFEB50",
}

DEFAULT_STROKE = STROKE_PALETTE["blue"]
DEFAULT_FILL = "#B4CDFF"
DEFAULT_STROKE_THICKNESS = 2.0

_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


def parse_thickness(value: Union[str, float, int]) -> Optional[float]:
    """
    Parse a stroke thickness from a number or its text form.

    Returns None when the value cannot be used (unparsable, negative,
    NaN or infinite).
    """
    try:
        thickness = float(str(value).strip())
    except ValueError:
        return None
    if not math.isfinite(thickness) or thickness < 0:
        return None
    return thickness


@dataclass
class StyleContext:
    """
    Current drawing style.

    Only read when a shape is committed, so changing it while a gesture
    is in progress never touches the preview or a shape being moved.
    Invalid inputs leave the context unchanged.
    """
    stroke: str = DEFAULT_STROKE
    fill: Optional[str] = DEFAULT_FILL
    stroke_thickness: float = DEFAULT_STROKE_THICKNESS

    def set_stroke_color(self, color: str) -> bool:
        """Set the stroke color. Returns False if the color was rejected."""
        if not isinstance(color, str) or not _COLOR_RE.match(color):
            logger.debug("Ignoring invalid stroke color %r", color)
            return False
        self.stroke = color.upper()
        return True

    def set_fill_color(self, color: Optional[str]) -> bool:
        """Set the fill color; None means no fill."""
        if color is None:
            self.fill = None
            return True
        if not isinstance(color, str) or not _COLOR_RE.match(color):
            logger.debug("Ignoring invalid fill color %r", color)
            return False
        self.fill = color.upper()
        return True

    def set_stroke_thickness(self, value: Union[str, float, int]) -> bool:
        """Set the stroke thickness from a number or preset text such as '4'."""
        thickness = parse_thickness(value)
        if thickness is None:
            logger.debug("Ignoring invalid stroke thickness %r", value)
            return False
        self.stroke_thickness = thickness
        return True
