# src/pattern_gallery/infrastructure/event/event_notifier.py
import threading
from typing import Dict, List

from pattern_gallery.domain.events import Event, Notifier, Observer
from pattern_gallery.infrastructure.logging.logger import get_logger


class EventNotifier(Notifier):
    """
    Fans events out to registered observers.

    Membership is keyed by ``observer_id``. ``notify`` delivers to a snapshot
    taken when it starts, so observers added or removed during a delivery
    only see the change on the next event. Delivery order is not part of the
    contract.
    """

    def __init__(self):
        self._observers: Dict[int, Observer] = {}
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)

    def register(self, observer: Observer) -> None:
        """Register an observer; re-registering an id replaces the handle."""
        with self._lock:
            self._observers[observer.observer_id] = observer
        self._logger.debug("Registered observer", observer_id=observer.observer_id)

    def deregister(self, observer: Observer) -> None:
        """Remove an observer. Unknown observers are ignored."""
        with self._lock:
            removed = self._observers.pop(observer.observer_id, None)
        if removed is not None:
            self._logger.debug("Deregistered observer", observer_id=observer.observer_id)

    def notify(self, event: Event) -> None:
        """Deliver ``event`` to every observer registered right now."""
        observers = self.observers()
        self._logger.debug("Notifying observers", count=len(observers), data=event.data)
        for observer in observers:
            observer.on_notify(event)

    def observers(self) -> List[Observer]:
        """Snapshot of current membership."""
        with self._lock:
            return list(self._observers.values())

    def __len__(self) -> int:
        return len(self._observers)

    def __contains__(self, observer: Observer) -> bool:
        return observer.observer_id in self._observers
