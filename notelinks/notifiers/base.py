from typing import Protocol


class Notifier(Protocol):
    """Protocol for broadcasting that indexed data changed."""

    def notify_changed(self, topic: str) -> None:
        """Notify interested parties, fire and forget."""
        ...
