"""Tests for zettel identifier ordering."""

import random

from zettelbranch.hierarchy.ordering import compare_zettel_ids, sort_zettel_ids


def test_numeric_segments_sort_numerically() -> None:
    assert sort_zettel_ids(["5301.2", "5301.10", "5301.1"]) == ["5301.1", "5301.2", "5301.10"]


def test_letter_runs_sort_alphabetically() -> None:
    assert sort_zettel_ids(["5301c", "5301a", "5301b"]) == ["5301a", "5301b", "5301c"]


def test_digits_after_letters_sort_numerically() -> None:
    assert sort_zettel_ids(["5301a10", "5301a2", "5301a1"]) == ["5301a1", "5301a2", "5301a10"]


def test_shorter_identifier_sorts_first() -> None:
    assert compare_zettel_ids("5301", "5301.1") < 0
    assert compare_zettel_ids("5301.1.2", "5301.1") > 0


def test_dot_children_sort_before_letter_continuations() -> None:
    assert sort_zettel_ids(["5301a", "5301.3", "5301.1"]) == ["5301.1", "5301.3", "5301a"]


def test_equal_identifiers_compare_equal() -> None:
    assert compare_zettel_ids("5301.1.2a3", "5301.1.2a3") == 0


def test_compare_is_antisymmetric() -> None:
    ids = ["5301", "5301.1", "5301.10", "5301.2", "5301a", "5301a1", "5302", "53011"]
    for a in ids:
        for b in ids:
            assert (compare_zettel_ids(a, b) > 0) == (compare_zettel_ids(b, a) < 0)


def test_sort_is_independent_of_input_order() -> None:
    ids = ["5301", "5301.1", "5301.1.2", "5301.10", "5301.2", "5301a", "5301b1", "5302", "53011"]
    expected = sort_zettel_ids(ids)

    shuffled = list(ids)
    random.Random(42).shuffle(shuffled)

    assert sort_zettel_ids(shuffled) == expected
    assert expected == [
        "5301",
        "5301.1",
        "5301.1.2",
        "5301.2",
        "5301.10",
        "5301a",
        "5301b1",
        "5302",
        "53011",
    ]
