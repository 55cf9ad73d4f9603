from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Event:
    """Broadcast payload: the tick timestamp in nanoseconds since the epoch."""
    data: int


class Observer(ABC):
    """Subscriber notified of broadcast events."""

    @property
    @abstractmethod
    def observer_id(self) -> int:
        """Identifier used as the membership key."""

    @abstractmethod
    def on_notify(self, event: Event) -> None:
        pass


class Notifier(ABC):
    """Maintains subscribers and fans events out to them."""

    @abstractmethod
    def register(self, observer: Observer) -> None:
        pass

    @abstractmethod
    def deregister(self, observer: Observer) -> None:
        pass

    @abstractmethod
    def notify(self, event: Event) -> None:
        pass
