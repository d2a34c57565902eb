import sys

from loguru import logger

from zettelbranch.api import create_app
from zettelbranch.config import settings
from zettelbranch.hierarchy import ZettelNetworkBuilder
from zettelbranch.note_store import LocalNoteStore

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

logger.info(f"Serving zettel networks for notes in {settings.notes_dir}")
note_store = LocalNoteStore(settings.notes_dir)
app = create_app(note_store=note_store, network_builder=ZettelNetworkBuilder())
