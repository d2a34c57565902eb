from zettelbranch.domain.note import ZettelNote
from zettelbranch.note_store.base import NoteStore


class FakeNoteStore(NoteStore):
    """Fake note store with predefined notes."""

    def __init__(self, notes: dict[str, ZettelNote]) -> None:
        self._notes = notes

    def get_universe(self) -> dict[str, ZettelNote]:
        return dict(self._notes)

    def get_note(self, zettel_id: str) -> ZettelNote | None:
        return self._notes.get(zettel_id)
