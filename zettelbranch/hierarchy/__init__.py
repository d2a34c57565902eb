"""Zettel identifier hierarchy inference and neighborhood network construction."""

from zettelbranch.hierarchy.network_builder import ZettelNetworkBuilder
from zettelbranch.hierarchy.ordering import compare_zettel_ids, sort_zettel_ids
from zettelbranch.hierarchy.parser import parse_zettel_id
from zettelbranch.hierarchy.proximity import get_closest_siblings
from zettelbranch.hierarchy.resolver import (
    HierarchyResolver,
    classify_descendant,
    find_grandparent_id,
    find_parent_id,
)

__all__ = [
    "HierarchyResolver",
    "ZettelNetworkBuilder",
    "classify_descendant",
    "compare_zettel_ids",
    "find_grandparent_id",
    "find_parent_id",
    "get_closest_siblings",
    "parse_zettel_id",
    "sort_zettel_ids",
]
