from tests.fakes.fake_note_store import FakeNoteStore
from tests.fakes.universe import make_universe

__all__ = ["FakeNoteStore", "make_universe"]
