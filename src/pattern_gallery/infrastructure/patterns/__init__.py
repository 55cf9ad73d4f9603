"""Infrastructure patterns package."""

from pattern_gallery.infrastructure.patterns.once import Once
from pattern_gallery.infrastructure.patterns.singleton_access import get_singleton
from pattern_gallery.infrastructure.patterns.singleton_registry import SingletonRegistry

__all__ = ["Once", "SingletonRegistry", "get_singleton"]
