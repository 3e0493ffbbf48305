"""Link extraction from markdown content."""

import re
from pathlib import Path
from typing import List

# [[target]], [[target|alias]], [[target#heading]], ![[target]] or [text](path.md#heading)
LINK_PATTERN = re.compile(
    r"!?\[\[([^\]|#]+)(?:#[^\]|]*)?(?:\|[^\]]*)?\]\]|"  # wikilinks and embeds
    r"\[[^\]]*\]\(<?([^)\s#>]+\.md)(?:#[^)>]*)?>?\)"  # markdown links to notes
)


class LinkExtractor:
    """Service for extracting outbound link tokens from markdown text."""

    @staticmethod
    def extract_links(content: str) -> List[str]:
        """Extract link targets from wikilinks and markdown links, in order of appearance.

        Heading anchors are stripped and links to web pages are ignored.

        Args:
            content: Markdown content to extract links from

        Returns:
            List of raw link tokens
        """
        links = []
        for match in LINK_PATTERN.finditer(content):
            link = (match.group(1) or match.group(2)).strip()
            if link and not link.startswith(("http://", "https://")):
                links.append(link)
        return links

    @staticmethod
    def extract_id(path: Path, content: str, id_pattern: str) -> str | None:
        """Extract the note ID from the file name, falling back to the content.

        IDs inside links belong to the linked note and are ignored.

        Args:
            path: Path of the note file
            content: Markdown content of the note
            id_pattern: Regular expression whose first group is the ID

        Returns:
            The note ID or None if the note has none
        """
        id_regex = re.compile(id_pattern)
        match = id_regex.search(path.stem) or id_regex.search(LINK_PATTERN.sub("", content))
        return match.group(1) if match else None
