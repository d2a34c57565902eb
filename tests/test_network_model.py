"""Tests for the network domain models."""

import pytest

from zettelbranch.domain.network import Network, Node, Position


def test_add_node_keeps_first_placement() -> None:
    network = Network()

    assert network.add_node(Node(id="5301.11", title="Sibling", level=-1))
    assert not network.add_node(Node(id="5301.11", title="Continuation", level=0))

    assert network.nodes["5301.11"].level == -1
    assert network.nodes["5301.11"].title == "Sibling"


def test_add_edge_requires_placed_nodes() -> None:
    network = Network()
    network.add_node(Node(id="5301", title="5301", level=-2))

    with pytest.raises(ValueError, match="5301.1 is not placed"):
        network.add_edge("5301", "5301.1", "parent-child")

    assert network.edges == []


def test_edges_serialize_with_from_to_type() -> None:
    network = Network()
    network.add_node(Node(id="5300", title="5300", level=-2, position=Position(x=0, y=-80)))
    network.add_node(Node(id="5301", title="5301", level=0, is_center=True))
    network.add_edge("5300", "5301", "sequence-link")

    data = network.model_dump(mode="json", by_alias=True)

    assert data["edges"] == [{"from": "5300", "to": "5301", "type": "sequence-link"}]
    assert data["nodes"]["5300"]["position"] == {"x": 0.0, "y": -80.0}
    assert data["nodes"]["5301"]["is_center"] is True


def test_get_center() -> None:
    network = Network()
    assert network.get_center() is None

    network.add_node(Node(id="5301.1", title="5301.1", level=-1))
    network.add_node(Node(id="5301.2", title="5301.2", level=0, is_center=True))

    assert network.get_center().id == "5301.2"


def test_level_out_of_range() -> None:
    with pytest.raises(ValueError):
        Node(id="5301", title="5301", level=2)
