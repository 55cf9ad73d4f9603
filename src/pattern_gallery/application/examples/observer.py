"""Observer example: a ticking notifier broadcasting to three observers."""
from typing import Optional

from pattern_gallery.config.schemas import ObserverConfig
from pattern_gallery.domain.events import Event, Observer
from pattern_gallery.infrastructure.event import BroadcastLoop, EventNotifier


class EventObserver(Observer):
    """Prints every event it receives."""

    def __init__(self, observer_id: int):
        self._id = observer_id

    @property
    def observer_id(self) -> int:
        return self._id

    def on_notify(self, event: Event) -> None:
        print(f"*** Observer {self._id} received: {event.data}")


def run(config: Optional[ObserverConfig] = None) -> int:
    """Broadcast ticks until the configured duration ends. Returns the tick count."""
    config = config or ObserverConfig()

    notifier = EventNotifier()
    for observer_id in config.observer_ids:
        notifier.register(EventObserver(observer_id))

    loop = BroadcastLoop(
        notifier,
        interval=config.interval_seconds,
        duration=config.duration_seconds,
    )
    return loop.run()
