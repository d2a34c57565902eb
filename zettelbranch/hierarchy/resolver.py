"""Parent, child and continuation resolution for Zettel identifiers."""

import re
from collections import defaultdict
from typing import Literal, Mapping

from zettelbranch.domain.note import ZettelNote

from .ordering import sort_zettel_ids
from .parser import tokenize_zettel_id

DescendantKind = Literal["child", "continuation"]

_CONTINUATION_SUFFIX_RE = re.compile(r"[a-zA-Z]+|[0-9]+|[a-zA-Z]+[0-9]+")
_CHILD_SUFFIX_RE = re.compile(r"\.[0-9]+")
_LINEAR_SUFFIX_RE = re.compile(r"[0-9]+|[a-zA-Z]")


def find_parent_id(zettel_id: str) -> str | None:
    """Derive the parent identifier.

    Rules in order of precedence:
    1. letters followed by digits at the end: drop the digits (2b1 -> 2b)
    2. letters at the end: drop the letters (2a -> 2)
    3. ".digits" at the end: drop that segment (1.2 -> 1)
    4. otherwise the identifier is a root

    Args:
        zettel_id: Identifier to resolve

    Returns:
        Parent identifier or None for roots
    """
    tokens = tokenize_zettel_id(zettel_id)
    if not tokens or len(tokens) < 2:
        return None

    last, before_last = tokens[-1], tokens[-2]
    if last.kind == "digits" and before_last.kind == "letters":
        return zettel_id[: -len(last.text)]
    if last.kind == "letters":
        return zettel_id[: -len(last.text)]
    if last.kind == "digits" and before_last.kind == "dot":
        return zettel_id[: -(len(last.text) + 1)]
    return None


def find_grandparent_id(zettel_id: str) -> str | None:
    parent_id = find_parent_id(zettel_id)
    if parent_id is None:
        return None
    return find_parent_id(parent_id)


def find_lineage(zettel_id: str) -> list[str]:
    """Get the identifier followed by all of its ancestors, nearest first."""
    lineage = [zettel_id]
    parent_id = find_parent_id(zettel_id)
    while parent_id is not None:
        lineage.append(parent_id)
        parent_id = find_parent_id(parent_id)
    return lineage


def classify_descendant(ancestor_id: str, candidate_id: str) -> DescendantKind | None:
    """Classify a candidate by the suffix it adds to an ancestor.

    Args:
        ancestor_id: Identifier the candidate extends
        candidate_id: Identifier to classify

    Returns:
        "continuation" for a bare letter/digit suffix (5301 -> 5301a, 53011, 5301a1),
        "child" for a dot-prefixed suffix (5301 -> 5301.1),
        None for anything else
    """
    if not candidate_id.startswith(ancestor_id) or candidate_id == ancestor_id:
        return None

    suffix = candidate_id[len(ancestor_id) :]
    if _CONTINUATION_SUFFIX_RE.fullmatch(suffix):
        return "continuation"
    if _CHILD_SUFFIX_RE.match(suffix):
        return "child"
    return None


class HierarchyResolver:
    """Answers hierarchy queries over one snapshot of the Zettelkasten.

    The parent -> children index is built once on construction, so every tier
    of a network build shares a single scan of the notes.
    """

    def __init__(self, universe: Mapping[str, ZettelNote]):
        """Initialize resolver with a snapshot of the notes.

        Args:
            universe: Dictionary mapping Zettel identifiers to notes
        """
        self.universe = universe
        self._children_index = self._build_children_index(universe)

    @staticmethod
    def _build_children_index(universe: Mapping[str, ZettelNote]) -> dict[str, list[str]]:
        children: dict[str, list[str]] = defaultdict(list)
        for zettel_id in universe:
            parent_id = find_parent_id(zettel_id)
            if parent_id is not None:
                children[parent_id].append(zettel_id)
        return {parent_id: sort_zettel_ids(ids) for parent_id, ids in children.items()}

    def __contains__(self, zettel_id: object) -> bool:
        return zettel_id in self.universe

    def children_of(self, zettel_id: str) -> list[str]:
        """Get every identifier whose parent is zettel_id, sorted."""
        return list(self._children_index.get(zettel_id, []))

    def true_children_of(self, zettel_id: str) -> list[str]:
        """Get dot-notation children only, leaving out letter/digit continuations."""
        return [
            child_id
            for child_id in self.children_of(zettel_id)
            if classify_descendant(zettel_id, child_id) == "child"
        ]

    def linear_continuations_of(self, zettel_id: str) -> list[str]:
        """Get identifiers extending zettel_id by digits or a single letter, sorted."""
        continuations = [
            other_id
            for other_id in self.universe
            if other_id != zettel_id
            and other_id.startswith(zettel_id)
            and _LINEAR_SUFFIX_RE.fullmatch(other_id[len(zettel_id) :])
        ]
        return sort_zettel_ids(continuations)

    def previous_in_sequence(self, zettel_id: str) -> str | None:
        """Find a predecessor for a root identifier made only of digits.

        The identifier rounded down to the nearest hundred is tried first, then
        the nearest thousand, e.g. 5301 -> 5300 -> 5000.

        Returns:
            The first candidate present in the notes, or None
        """
        if not (zettel_id.isascii() and zettel_id.isdigit()):
            return None
        if find_parent_id(zettel_id) is not None:
            return None

        number = int(zettel_id)
        for candidate in (number // 100 * 100, number // 1000 * 1000):
            if candidate > 0 and candidate != number and str(candidate) in self.universe:
                return str(candidate)
        return None

    def count_subnotes(self, zettel_id: str) -> int:
        """Count identifiers that have zettel_id as a proper prefix."""
        return sum(
            1
            for other_id in self.universe
            if other_id != zettel_id and other_id.startswith(zettel_id)
        )
