"""Adapters that expose legacy shapes through the ``Shape`` port."""

from pattern_gallery.infrastructure.adapters.shape_adapters import LineAdapter, RectangleAdapter

__all__ = ["RectangleAdapter", "LineAdapter"]
