"""Feeding the link index from a folder of markdown notes."""

import logging
from pathlib import Path

from notelinks.links.provider import LinkProvider
from notelinks.resolvers.mapping import MappingPathResolver

from .link_extractor import LinkExtractor

logger = logging.getLogger(__name__)


class FolderIndexer:
    """Reports the links of every note in a folder and removes notes that disappeared."""

    def __init__(
        self,
        *,
        provider: LinkProvider,
        resolver: MappingPathResolver,
        id_pattern: str,
    ):
        """Initialize the indexer.

        Args:
            provider: Link provider receiving the reports
            resolver: Resolver used by the provider's index, refreshed on every run
            id_pattern: Regular expression whose first group extracts a note ID
        """
        self.provider = provider
        self.resolver = resolver
        self.id_pattern = id_pattern
        self.link_extractor = LinkExtractor()
        self._indexed: dict[str, str | None] = {}  # path -> note ID

    def index_folder(self, folder: Path) -> int:
        """Report the links of all markdown files in the folder.

        Args:
            folder: Path to folder containing markdown files

        Returns:
            Number of files reported
        """
        files = sorted(folder.rglob("*.md"))
        logger.info(f"Found {len(files)} markdown files in {folder}")

        contents: dict[Path, str] = {}
        note_ids: dict[Path, str] = {}
        for file in files:
            try:
                contents[file] = file.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Skipping unreadable file {file}: {e}")
                continue

            note_id = self.link_extractor.extract_id(file, contents[file], self.id_pattern)
            if note_id:
                note_ids[file] = note_id

        # All files must be resolvable before the first report
        self.resolver.mapping = MappingPathResolver.build_mapping(files, folder, note_ids)

        current: dict[str, str | None] = {}
        for file, content in contents.items():
            source_path = str(file.resolve())
            source_id = note_ids.get(file)
            links = self.link_extractor.extract_links(content)

            self.provider.report(source_path, links, source_id)
            current[source_path] = source_id

        deleted = {
            path: source_id for path, source_id in self._indexed.items() if path not in current
        }
        if deleted:
            logger.info(f"Removing {len(deleted)} deleted files from the link index...")
            for path, source_id in deleted.items():
                self.provider.remove(path, source_id)

        self._indexed = current
        return len(current)
