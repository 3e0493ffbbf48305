"""Process-wide index of resolved outbound links."""

from threading import RLock

from loguru import logger

from notelinks.notifiers.base import Notifier
from notelinks.resolvers.base import PathResolver

LINKS_TOPIC = "links"


class LinkIndex:
    """Maps source documents to their resolved outbound links.

    Entries are keyed by source path and, when reported with one, by the
    source's stable ID. If two paths report the same ID, the later report
    overwrites the ID entry while both path entries are kept.

    All methods are serialized through a lock. The notifier is called after
    the lock is released, so subscribers may read the index.
    """

    def __init__(self, *, resolver: PathResolver, notifier: Notifier):
        """Initialize an empty index.

        Args:
            resolver: Resolves raw link tokens to canonical document paths
            notifier: Informed after every mutation
        """
        self.resolver = resolver
        self.notifier = notifier
        self._by_path: dict[str, list[str]] = {}
        self._by_id: dict[str, list[str]] = {}
        self._lock = RLock()

    def report(
        self, source_path: str, outbound_links: list[str], source_id: str | None = None
    ) -> None:
        """Replace the outbound links of a source document.

        Args:
            source_path: The full path to the source file
            outbound_links: Raw link tokens found in the source
            source_id: The ID of the source, if it has one
        """
        resolved = []
        for link in outbound_links:
            target = self.resolver.resolve(link)
            if target is not None:
                resolved.append(target)

        with self._lock:
            self._by_path[source_path] = resolved
            if source_id:
                self._by_id[source_id] = resolved

        logger.debug(
            f"Indexed {len(resolved)} of {len(outbound_links)} links from {source_path}"
        )
        self.notifier.notify_changed(LINKS_TOPIC)

    def remove(self, source_path: str, source_id: str | None = None) -> None:
        """Remove the outbound links of a source document, if indexed."""
        with self._lock:
            self._by_path.pop(source_path, None)
            if source_id:
                self._by_id.pop(source_id, None)

        self.notifier.notify_changed(LINKS_TOPIC)

    def retrieve_outbound(self, source_path: str) -> list[str]:
        """Get the resolved links emanating from the given file."""
        with self._lock:
            return list(self._by_path.get(source_path, []))

    def retrieve_outbound_by_id(self, source_id: str) -> list[str]:
        """Get the resolved links last reported under the given ID."""
        with self._lock:
            return list(self._by_id.get(source_id, []))

    def retrieve_inbound(self, source_path: str) -> list[str]:
        """Get all files linking to the given file, in the order they were indexed.

        This scans every indexed file.
        """
        with self._lock:
            return [
                file for file, outbound in self._by_path.items() if source_path in outbound
            ]

    def snapshot(self) -> dict[str, list[str]]:
        """Get a consistent copy of all outbound links keyed by source path."""
        with self._lock:
            return {file: list(outbound) for file, outbound in self._by_path.items()}

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_path)

    def __contains__(self, source_path: object) -> bool:
        with self._lock:
            return source_path in self._by_path
