"""Zettel identifier tokenizer and parser.

An identifier follows the grammar::

    identifier := digits ( letters [digits] | "." digits )*

Letters are case-insensitive. A display name carries an identifier when its
first whitespace-delimited word is a complete identifier, e.g.
``"5301.1.2a3 Title"`` -> ``"5301.1.2a3"``.
"""

import re
from typing import Literal, NamedTuple

TokenKind = Literal["digits", "letters", "dot"]

_TOKEN_RE = re.compile(r"(?P<digits>[0-9]+)|(?P<letters>[a-zA-Z]+)|(?P<dot>\.)")
_WHITESPACE_RE = re.compile(r"\s")


class Token(NamedTuple):
    kind: TokenKind
    text: str


def tokenize_zettel_id(text: str) -> list[Token] | None:
    """Split text into digit runs, letter runs and dots.

    Args:
        text: Candidate identifier

    Returns:
        List of tokens, or None if text contains any other character
    """
    tokens = []
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if not match:
            return None
        tokens.append(Token(match.lastgroup, match.group()))  # type: ignore[arg-type]
        pos = match.end()
    return tokens


def is_zettel_id(text: str) -> bool:
    """Check that text is a complete identifier."""
    tokens = tokenize_zettel_id(text)
    if not tokens or tokens[0].kind != "digits":
        return False

    i = 1
    while i < len(tokens):
        kind = tokens[i].kind
        if kind == "letters":
            # Optional digit run after the letters
            i += 2 if i + 1 < len(tokens) and tokens[i + 1].kind == "digits" else 1
        elif kind == "dot":
            if i + 1 >= len(tokens) or tokens[i + 1].kind != "digits":
                return False
            i += 2
        else:
            # Two digit runs can't be adjacent after tokenizing
            return False
    return True


def parse_zettel_id(name: str) -> str | None:
    """Extract the Zettel identifier a display name starts with.

    Args:
        name: Note display name, usually the filename without extension

    Returns:
        The identifier, or None for notes that aren't part of the Zettelkasten
    """
    first_word = _WHITESPACE_RE.split(name, maxsplit=1)[0]
    if is_zettel_id(first_word):
        return first_word
    return None
