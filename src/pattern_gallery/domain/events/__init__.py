"""Event payload and observer/notifier ports."""

from pattern_gallery.domain.events.events import Event, Notifier, Observer

__all__ = ["Event", "Observer", "Notifier"]
