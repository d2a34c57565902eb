"""Tests for zettel identifier parsing."""

import pytest

from zettelbranch.hierarchy.parser import is_zettel_id, parse_zettel_id, tokenize_zettel_id


@pytest.mark.parametrize(
    "name, expected",
    [
        ("5301.1.2a3 Title", "5301.1.2a3"),
        ("5301", "5301"),
        ("5301 Systems thinking", "5301"),
        ("5301a Cybernetics", "5301a"),
        ("12ab34cd", "12ab34cd"),
        ("5301A Upper case letters", "5301A"),
        ("5301.1\tTab separated", "5301.1"),
    ],
)
def test_parse_zettel_id(name: str, expected: str) -> None:
    assert parse_zettel_id(name) == expected


@pytest.mark.parametrize(
    "name",
    [
        "no numbers here",
        "",
        " 5301 Leading space",
        "5301-draft",
        "5301.1. Trailing dot",
        "5301..1 Double dot",
        "5301.a Letters after dot",
        "a5301 Starts with a letter",
        "2024-06-28 Daily note",
    ],
)
def test_parse_zettel_id_no_identifier(name: str) -> None:
    assert parse_zettel_id(name) is None


def test_tokenize_zettel_id() -> None:
    tokens = tokenize_zettel_id("5301.1.2b1")

    assert tokens is not None
    assert [token.kind for token in tokens] == [
        "digits",
        "dot",
        "digits",
        "dot",
        "digits",
        "letters",
        "digits",
    ]
    assert "".join(token.text for token in tokens) == "5301.1.2b1"


def test_tokenize_rejects_other_characters() -> None:
    assert tokenize_zettel_id("5301-1") is None
    assert tokenize_zettel_id("5301 1") is None


def test_is_zettel_id() -> None:
    assert is_zettel_id("5301.1.2a3")
    assert is_zettel_id("1a2b3.4")
    assert not is_zettel_id("")
    assert not is_zettel_id(".1")
    assert not is_zettel_id("5301.")
