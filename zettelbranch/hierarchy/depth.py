"""Descendant counts and normalized depth scores for network nodes."""

from zettelbranch.domain.network import Network

from .resolver import HierarchyResolver, find_lineage

# Children, siblings, aunts/uncles and continuations
SCORED_LEVELS = frozenset({1, -1, -2, 0})


def add_depth_scores(network: Network, resolver: HierarchyResolver, current_id: str) -> None:
    """Attach subnote counts and depth scores to the nodes around the focal note.

    The focal note and its ancestors are left out, so the scores compare only
    the branches a reader could navigate to.

    Args:
        network: Finished network, updated in place
        resolver: Resolver over the same notes the network was built from
        current_id: Identifier of the focal note
    """
    lineage = set(find_lineage(current_id))
    scored_nodes = [
        node
        for node_id, node in network.nodes.items()
        if node.level in SCORED_LEVELS and node_id not in lineage
    ]
    if not scored_nodes:
        return

    for node in scored_nodes:
        node.subnotes_count = resolver.count_subnotes(node.id)

    counts = [node.subnotes_count for node in scored_nodes]
    min_count = min(counts)
    max_count = max(counts)

    for node in scored_nodes:
        if max_count == min_count:
            node.depth_score = 0.5
        else:
            node.depth_score = (node.subnotes_count - min_count) / (max_count - min_count)
