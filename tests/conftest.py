from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from zettelbranch.api import create_app
from zettelbranch.domain.note import ZettelNote
from zettelbranch.hierarchy import ZettelNetworkBuilder
from zettelbranch.note_store import NoteStore
from tests.fakes import FakeNoteStore, make_universe


@pytest.fixture
def zettel_universe() -> dict[str, ZettelNote]:
    """A small Zettelkasten with every kind of relationship around 5301.1.2."""
    return make_universe(
        "5000",
        "5300",
        "5301",
        "5301a",
        "5301.1",
        "5301.1.1",
        "5301.1.2",
        "5301.1.2a",
        "5301.1.2b",
        "5301.1.2.1",
        "5301.1.2.2",
        "5301.1.2.2.1",
        "5301.1.3",
        "5301.1.4",
        "5301.2",
        "5301.3",
        "5301.3.1",
        "5302",
    )


@pytest.fixture
def network_builder() -> ZettelNetworkBuilder:
    return ZettelNetworkBuilder()


@pytest.fixture
def fake_note_store(zettel_universe: dict[str, ZettelNote]) -> NoteStore:
    return FakeNoteStore(zettel_universe)


@pytest.fixture(autouse=True)
def mock_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Override settings for testing."""
    monkeypatch.setattr("zettelbranch.config.settings.auth_username", None)
    monkeypatch.setattr("zettelbranch.config.settings.auth_password", None)
    monkeypatch.setattr("zettelbranch.config.settings.show_depth", 2)
    monkeypatch.setattr("zettelbranch.config.settings.max_branches", 5)


@pytest.fixture
def test_client(fake_note_store: NoteStore, network_builder: ZettelNetworkBuilder) -> TestClient:
    """Create test client with a fake note store."""
    app = create_app(note_store=fake_note_store, network_builder=network_builder)
    return TestClient(app)


@pytest.fixture
def notes_directory(tmp_path: Path) -> Path:
    """Create a notes folder with zettel notes, plain notes and a drawing."""
    notes_dir = tmp_path / "notes"
    (notes_dir / "Zettelkasten").mkdir(parents=True)
    for name in ["5301 Systems thinking", "5301.1 Feedback loops", "5301a Cybernetics"]:
        (notes_dir / "Zettelkasten" / f"{name}.md").write_text(f"# {name}\n")
    (notes_dir / "Shopping list.md").write_text("- milk\n")
    (notes_dir / "5301.2 Diagram.excalidraw.md").write_text("{}")
    return notes_dir
