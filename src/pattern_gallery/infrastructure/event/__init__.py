"""Event broadcast infrastructure."""

from pattern_gallery.infrastructure.event.broadcast_loop import BroadcastLoop
from pattern_gallery.infrastructure.event.event_notifier import EventNotifier

__all__ = ["BroadcastLoop", "EventNotifier"]
