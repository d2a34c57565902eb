from zettelbranch.note_store.base import NoteStore
from zettelbranch.note_store.local import LocalNoteStore

__all__ = ["LocalNoteStore", "NoteStore"]
