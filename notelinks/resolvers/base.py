from typing import Protocol


class PathResolver(Protocol):
    """Protocol for turning raw link tokens into canonical document identifiers."""

    def resolve(self, token: str) -> str | None:
        """Resolve a link token, returning None if no document matches."""
        ...
