from pathlib import Path

from loguru import logger

from zettelbranch.domain.note import ZettelNote
from zettelbranch.hierarchy.parser import parse_zettel_id
from zettelbranch.note_store.base import NoteStore


class LocalNoteStore(NoteStore):
    """Note store that reads Zettel notes from a folder of markdown files.

    The folder is scanned again on every call, so the snapshot always reflects
    the files on disk.
    """

    def __init__(self, folder: str | Path) -> None:
        """Initialize LocalNoteStore.

        Args:
            folder: Folder containing markdown notes, searched recursively
        """
        self._folder = Path(folder)

    def get_universe(self) -> dict[str, ZettelNote]:
        """Get all notes whose filename starts with a Zettel identifier.

        Files without an identifier are skipped. When two files share an
        identifier the later one in path order wins.
        """
        if not self._folder.is_dir():
            logger.warning(f"Notes folder does not exist: {self._folder}")
            return {}

        universe: dict[str, ZettelNote] = {}
        for file in self._get_markdown_files():
            zettel_id = parse_zettel_id(file.stem)
            if zettel_id is None:
                continue

            if zettel_id in universe:
                logger.warning(
                    f"Duplicate zettel id {zettel_id}: {file} replaces {universe[zettel_id].path}"
                )
            universe[zettel_id] = ZettelNote(id=zettel_id, title=file.stem, path=str(file))

        logger.debug(f"Found {len(universe)} zettel notes in {self._folder}")
        return universe

    def get_note(self, zettel_id: str) -> ZettelNote | None:
        """Get a note by its Zettel identifier."""
        return self.get_universe().get(zettel_id)

    def _get_markdown_files(self) -> list[Path]:
        """Get markdown files in path order, excluding excalidraw drawings."""
        all_files = sorted(self._folder.rglob("*.md"))
        return [f for f in all_files if not f.name.endswith(".excalidraw.md")]
