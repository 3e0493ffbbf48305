"""CLI for indexing the links of a folder of markdown notes and writing the link graph as JSON"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from notelinks.config import settings
from notelinks.ingestion.folder_indexer import FolderIndexer
from notelinks.links.index import LinkIndex
from notelinks.links.provider import LinkProvider
from notelinks.notifiers.broadcast import BroadcastNotifier
from notelinks.resolvers.mapping import MappingPathResolver


def main(in_folder: str, outfile_graph: str) -> None:
    folder = Path(in_folder)
    output = Path(outfile_graph)

    resolver = MappingPathResolver()
    provider = LinkProvider(LinkIndex(resolver=resolver, notifier=BroadcastNotifier()))
    indexer = FolderIndexer(provider=provider, resolver=resolver, id_pattern=settings.id_pattern)
    indexer.index_folder(folder)

    graph = provider.get_graph()
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(graph.model_dump_json(indent=2), encoding="utf-8")
    logger.info(f"Wrote link graph to {output}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--in-folder",
        type=str,
        required=False,
        help="Folder containing markdown files",
        default=str(settings.notes_dir),
    )
    parser.add_argument(
        "--outfile-graph",
        type=str,
        required=False,
        help="Output file for the link graph",
        default=settings.graph_output_path,
    )

    args = parser.parse_args()

    logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])
    main(in_folder=args.in_folder, outfile_graph=args.outfile_graph)
