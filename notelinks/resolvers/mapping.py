"""Resolution of link tokens to document paths using a lookup mapping."""

from pathlib import Path
from typing import Iterable, Mapping
from urllib.parse import unquote

from loguru import logger


class MappingPathResolver:
    """Resolves link tokens (names, relative paths, IDs) to absolute document paths."""

    def __init__(self, mapping: dict[str, str] | None = None):
        """Initialize resolver with a lookup mapping.

        Args:
            mapping: Dictionary mapping names/paths/IDs to canonical document paths
        """
        self.mapping = mapping or {}

    @staticmethod
    def build_mapping(
        files: Iterable[Path], folder: Path, note_ids: Mapping[Path, str] | None = None
    ) -> dict[str, str]:
        """Build the lookup mapping for a set of note files.

        Every file is reachable by its absolute path, its path relative to the
        folder, its file name, its stem and, if it has one, its note ID.

        Args:
            files: Markdown files to make resolvable
            folder: Root folder of the notes
            note_ids: Note IDs keyed by file

        Returns:
            Dictionary mapping lookup keys to absolute file paths
        """
        root = folder.resolve()
        mapping: dict[str, str] = {}

        for file in files:
            absolute = file.resolve()
            keys = [str(absolute), absolute.relative_to(root).as_posix(), file.name, file.stem]

            if note_ids and file in note_ids:
                keys.append(note_ids[file])

            for key in keys:
                # First file wins for ambiguous names
                mapping.setdefault(key, str(absolute))

        return mapping

    def resolve(self, token: str) -> str | None:
        """Resolve a single link token to a document path.

        Args:
            token: Note name, path or ID as written in the link

        Returns:
            Canonical document path or None if not found
        """
        link = unquote(token).strip()

        # Try exact match first
        if link in self.mapping:
            return self.mapping[link]

        # Try with .md extension
        md_link = f"{link}.md"
        if md_link in self.mapping:
            return self.mapping[md_link]

        # Try as filename stem, e.g. for relative links like ../other/note.md
        if Path(link).suffix in ("", ".md"):
            stem = Path(link).stem
            for key, path in self.mapping.items():
                if Path(key).stem == stem:
                    return path

        logger.debug(f"Could not resolve link: {token}")
        return None
