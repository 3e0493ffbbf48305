import sys

from loguru import logger

from notelinks.api import create_app
from notelinks.config import settings
from notelinks.ingestion.folder_indexer import FolderIndexer
from notelinks.links.index import LinkIndex
from notelinks.links.provider import LinkProvider
from notelinks.notifiers.broadcast import BroadcastNotifier
from notelinks.resolvers.mapping import MappingPathResolver

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

resolver = MappingPathResolver()
notifier = BroadcastNotifier()
notifier.subscribe(lambda topic: logger.debug(f"Index changed: {topic}"))
provider = LinkProvider(LinkIndex(resolver=resolver, notifier=notifier))

if settings.notes_dir.exists():
    logger.info(f"Indexing links in {settings.notes_dir}")
    indexer = FolderIndexer(provider=provider, resolver=resolver, id_pattern=settings.id_pattern)
    indexer.index_folder(settings.notes_dir)
else:
    logger.warning(f"Notes folder {settings.notes_dir} not found, starting with an empty index")

app = create_app(provider=provider)
