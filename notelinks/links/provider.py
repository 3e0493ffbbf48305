"""Request surface of the link index."""

from loguru import logger

from notelinks.domain.graph import LinkGraph
from notelinks.domain.links import FileLinks
from notelinks.graph import build_graph

from .index import LinkIndex


class LinkProvider:
    """Reports, removes and queries links, and builds the link graph on request."""

    def __init__(self, index: LinkIndex):
        self.index = index

    def report(
        self, source_path: str, outbound_links: list[str], source_id: str | None = None
    ) -> None:
        """Add the outbound links of a file, replacing any earlier report."""
        self.index.report(source_path, outbound_links, source_id)

    def remove(self, source_path: str, source_id: str | None = None) -> None:
        """Remove the outbound links of a file."""
        self.index.remove(source_path, source_id)

    def get_links(self, file_path: str) -> FileLinks:
        """Get the files linking to and linked from the given file."""
        return FileLinks(
            inbound=self.index.retrieve_inbound(file_path),
            outbound=self.index.retrieve_outbound(file_path),
        )

    def get_graph(self) -> LinkGraph:
        """Build the link graph from the current state of the index."""
        return build_graph(self.index.snapshot())

    def shutdown(self) -> None:
        logger.info(f"Link provider shutting down with {len(self.index)} indexed files")
