from typing import Protocol

from zettelbranch.domain.note import ZettelNote


class NoteStore(Protocol):
    """Protocol for sources of Zettelkasten notes."""

    def get_universe(self) -> dict[str, ZettelNote]:
        """Get a fresh snapshot of all notes keyed by Zettel identifier."""
        ...

    def get_note(self, zettel_id: str) -> ZettelNote | None:
        """Get a note by its Zettel identifier."""
        ...
