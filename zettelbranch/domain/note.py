"""Note domain models."""

from pydantic import BaseModel


class ZettelNote(BaseModel):
    """A note whose filename starts with a Zettelkasten identifier.

    Attributes:
        id: Zettel identifier parsed from the filename (e.g. "5301.1.2a3")
        title: Display title, the filename without its extension
        path: Absolute file path, used by hosts to open the note
    """

    id: str
    title: str
    path: str = ""
