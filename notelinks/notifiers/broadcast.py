"""In-process broadcast of change notifications."""

from threading import Lock
from typing import Callable

from loguru import logger

Subscriber = Callable[[str], None]


class BroadcastNotifier:
    """Notifier that fans out every topic to all subscribed callbacks."""

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []
        self._lock = Lock()

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback and return a function that unregisters it."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def notify_changed(self, topic: str) -> None:
        """Call every subscriber with the topic.

        A failing subscriber is logged and does not affect the others.
        """
        with self._lock:
            subscribers = list(self._subscribers)

        for callback in subscribers:
            try:
                callback(topic)
            except Exception:
                logger.exception(f"Subscriber failed for topic '{topic}'")
