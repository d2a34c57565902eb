"""Building the tiered neighborhood network around a focal note."""

from typing import Mapping

from loguru import logger

from zettelbranch.domain.network import Network, Node, Position
from zettelbranch.domain.note import ZettelNote

from .depth import add_depth_scores
from .proximity import get_closest_siblings
from .resolver import HierarchyResolver, find_grandparent_id, find_parent_id

MAX_DEPTH_LIMIT = 3

# Rows, from the great-grandparent down to the children
GREAT_GRANDPARENT_Y = -240
GRANDPARENT_Y = -160
PARENT_Y = -80
SIBLING_Y = -40
CURRENT_Y = 0
CHILD_Y = 80

ROW_SPACING = 120
AUNT_UNCLE_SPACING = 150
CONTINUATION_SPACING = 140


def centered_row(count: int, spacing: float) -> list[float]:
    """Spread count x positions symmetrically around 0."""
    if count == 1:
        return [0.0]
    start = -(count - 1) * spacing / 2
    return [start + index * spacing for index in range(count)]


def centered_row_skipping_zero(count: int, spacing: float) -> list[float]:
    """Spread count x positions around 0 without using 0 itself.

    The first count // 2 positions go left of the center, the rest go right.
    """
    half = count // 2
    slots = [-(half - index) if index < half else index - half + 1 for index in range(count)]
    return [float(slot * spacing) for slot in slots]


class ZettelNetworkBuilder:
    """Builds the network of ancestors, siblings, continuations and children of a note.

    Nodes are placed insert-if-absent, so the order the tiers run in decides
    which tier owns an identifier reachable from two tiers: focal note, parent,
    grandparent, great-grandparent, continuations, then children.
    """

    def build(
        self,
        universe: Mapping[str, ZettelNote],
        current_id: str,
        max_depth: int = 2,
        max_branches: int = 5,
    ) -> Network | None:
        """Build the network around one note.

        Args:
            universe: Dictionary mapping Zettel identifiers to notes
            current_id: Identifier of the focal note
            max_depth: Number of ancestor tiers to show, 1 to 3
            max_branches: Maximum notes per tier

        Returns:
            Network with depth scores, or None if current_id is not a known note

        Raises:
            ValueError: If max_depth or max_branches is out of range
        """
        if not 1 <= max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {max_depth}")
        if max_branches < 1:
            raise ValueError(f"max_branches must be at least 1, got {max_branches}")

        resolver = HierarchyResolver(universe)
        if current_id not in resolver:
            logger.debug(f"No note with zettel id {current_id}")
            return None

        network = Network()
        self._add_current_note(network, resolver, current_id)

        if max_depth >= 1:
            self._add_parent_tier(network, resolver, current_id, max_branches)
        if max_depth >= 2:
            self._add_grandparent_tier(network, resolver, current_id, max_branches)
        if max_depth >= 3:
            self._add_great_grandparent_tier(network, resolver, current_id, max_branches)

        self._add_continuation_tier(network, resolver, current_id, max_branches)
        self._add_children_tier(network, resolver, current_id, max_branches)

        add_depth_scores(network, resolver, current_id)

        logger.debug(
            f"Built network for {current_id}: {len(network.nodes)} nodes, "
            f"{len(network.edges)} edges"
        )
        return network

    def _place(
        self,
        network: Network,
        resolver: HierarchyResolver,
        zettel_id: str,
        level: int,
        x: float,
        y: float,
        is_center: bool = False,
    ) -> None:
        placed = network.add_node(
            Node(
                id=zettel_id,
                title=resolver.universe[zettel_id].title,
                level=level,
                is_center=is_center,
                position=Position(x=x, y=y),
            )
        )
        if not placed:
            existing_level = network.nodes[zettel_id].level
            logger.debug(f"{zettel_id} already placed at level {existing_level}")

    def _add_current_note(
        self, network: Network, resolver: HierarchyResolver, current_id: str
    ) -> None:
        self._place(network, resolver, current_id, level=0, x=0, y=CURRENT_Y, is_center=True)

    def _add_parent_tier(
        self,
        network: Network,
        resolver: HierarchyResolver,
        current_id: str,
        max_branches: int,
    ) -> None:
        """Add the parent and the siblings nearest to the current note.

        A root note made only of digits gets its predecessor in the numbering
        instead (5301 -> 5300 or 5000), linked without siblings.
        """
        parent_id = find_parent_id(current_id)

        if parent_id is None:
            predecessor_id = resolver.previous_in_sequence(current_id)
            if predecessor_id is None:
                return
            self._place(network, resolver, predecessor_id, level=-2, x=0, y=PARENT_Y)
            network.add_edge(predecessor_id, current_id, "sequence-link")
            return

        if parent_id not in resolver:
            logger.debug(f"Parent {parent_id} of {current_id} is not a note, skipping tier")
            return

        self._place(network, resolver, parent_id, level=-2, x=0, y=PARENT_Y)

        siblings = [s for s in resolver.children_of(parent_id) if s != current_id]
        closest = get_closest_siblings(current_id, siblings, max_branches)
        for sibling_id, x in zip(closest, centered_row(len(closest), ROW_SPACING)):
            self._place(network, resolver, sibling_id, level=-1, x=x, y=SIBLING_Y)
            network.add_edge(parent_id, sibling_id, "parent-child")

        network.add_edge(parent_id, current_id, "parent-child")

    def _add_grandparent_tier(
        self,
        network: Network,
        resolver: HierarchyResolver,
        current_id: str,
        max_branches: int,
    ) -> None:
        """Add the grandparent and the aunts/uncles nearest to the parent.

        Only dot-notation children of the grandparent count as aunts/uncles;
        letter or digit continuations of the grandparent are left out. The
        aunts/uncles row leaves x = 0 free for the parent.
        """
        grandparent_id = find_grandparent_id(current_id)
        if grandparent_id is None or grandparent_id not in resolver:
            return

        self._place(network, resolver, grandparent_id, level=-3, x=0, y=GRANDPARENT_Y)

        parent_id = find_parent_id(current_id)
        aunts_uncles = [a for a in resolver.true_children_of(grandparent_id) if a != parent_id]
        closest_aunts_uncles = get_closest_siblings(
            parent_id or current_id, aunts_uncles, max_branches
        )
        for aunt_uncle_id, x in zip(
            closest_aunts_uncles,
            centered_row_skipping_zero(len(closest_aunts_uncles), AUNT_UNCLE_SPACING),
        ):
            self._place(network, resolver, aunt_uncle_id, level=-2, x=x, y=PARENT_Y)
            network.add_edge(grandparent_id, aunt_uncle_id, "parent-child")

        if parent_id is not None and parent_id in network.nodes:
            network.add_edge(grandparent_id, parent_id, "parent-child")

    def _add_great_grandparent_tier(
        self,
        network: Network,
        resolver: HierarchyResolver,
        current_id: str,
        max_branches: int,
    ) -> None:
        grandparent_id = find_grandparent_id(current_id)
        if grandparent_id is None:
            return
        great_grandparent_id = find_parent_id(grandparent_id)
        if great_grandparent_id is None or great_grandparent_id not in resolver:
            return

        self._place(
            network, resolver, great_grandparent_id, level=-4, x=0, y=GREAT_GRANDPARENT_Y
        )

        great_aunts_uncles = [
            a for a in resolver.children_of(great_grandparent_id) if a != grandparent_id
        ]
        closest = get_closest_siblings(grandparent_id, great_aunts_uncles, max_branches)
        for great_aunt_uncle_id, x in zip(closest, centered_row(len(closest), ROW_SPACING)):
            self._place(network, resolver, great_aunt_uncle_id, level=-3, x=x, y=GRANDPARENT_Y)
            network.add_edge(great_grandparent_id, great_aunt_uncle_id, "parent-child")

        if grandparent_id in network.nodes:
            network.add_edge(great_grandparent_id, grandparent_id, "parent-child")

    def _add_continuation_tier(
        self,
        network: Network,
        resolver: HierarchyResolver,
        current_id: str,
        max_branches: int,
    ) -> None:
        """Add linear continuations to the right of the current note.

        The current note takes one of the max_branches slots of its row.
        """
        continuations = resolver.linear_continuations_of(current_id)[: max(0, max_branches - 1)]
        for rank, continuation_id in enumerate(continuations):
            x = (rank + 1) * CONTINUATION_SPACING
            self._place(network, resolver, continuation_id, level=0, x=x, y=CURRENT_Y)
            network.add_edge(current_id, continuation_id, "linear-continuation")

    def _add_children_tier(
        self,
        network: Network,
        resolver: HierarchyResolver,
        current_id: str,
        max_branches: int,
    ) -> None:
        children = resolver.true_children_of(current_id)[:max_branches]
        for child_id, x in zip(children, centered_row(len(children), ROW_SPACING)):
            self._place(network, resolver, child_id, level=1, x=x, y=CHILD_Y)
            network.add_edge(current_id, child_id, "parent-child")
