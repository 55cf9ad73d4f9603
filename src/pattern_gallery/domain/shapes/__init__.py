"""Shape port and the legacy shapes it adapts."""

from pattern_gallery.domain.shapes.legacy import Line, Rectangle
from pattern_gallery.domain.shapes.port import Shape

__all__ = ["Shape", "Rectangle", "Line"]
