"""Network domain models."""

from typing import Literal

from pydantic import BaseModel, Field

EdgeType = Literal["parent-child", "sequence-link", "linear-continuation"]


class Position(BaseModel):
    """Layout coordinates relative to the focal note at (0, 0)."""

    x: float = 0.0
    y: float = 0.0


class Node(BaseModel):
    """A note placed in the neighborhood network.

    Attributes:
        id: Zettel identifier of the note
        title: Display title of the note
        level: Tier of the node, -4 (great-grandparent) through 1 (child)
        is_center: True only for the focal note
        position: Fixed layout coordinates
        subnotes_count: Number of notes whose identifier extends this one
        depth_score: subnotes_count normalized to [0, 1] across scored nodes
    """

    id: str
    title: str
    level: int = Field(ge=-4, le=1)
    is_center: bool = False
    position: Position = Field(default_factory=Position)
    subnotes_count: int | None = None
    depth_score: float | None = Field(default=None, ge=0.0, le=1.0)


class Edge(BaseModel):
    """A directed link from an ancestor or predecessor to a descendant or successor."""

    source: str = Field(serialization_alias="from")
    target: str = Field(serialization_alias="to")
    edge_type: EdgeType = Field(serialization_alias="type")


class Network(BaseModel):
    """The neighborhood graph around one focal note."""

    nodes: dict[str, Node] = {}
    edges: list[Edge] = []

    def add_node(self, node: Node) -> bool:
        """Place a node unless one with the same id is already placed.

        Returns:
            True if the node was inserted, False if an earlier tier owns the id
        """
        if node.id in self.nodes:
            return False
        self.nodes[node.id] = node
        return True

    def add_edge(self, source: str, target: str, edge_type: EdgeType) -> None:
        """Link two placed nodes.

        Raises:
            ValueError: If either endpoint has not been placed
        """
        for endpoint in (source, target):
            if endpoint not in self.nodes:
                raise ValueError(f"Cannot link {source} -> {target}: {endpoint} is not placed")
        self.edges.append(Edge(source=source, target=target, edge_type=edge_type))

    def get_center(self) -> Node | None:
        """Get the focal node."""
        for node in self.nodes.values():
            if node.is_center:
                return node
        return None
