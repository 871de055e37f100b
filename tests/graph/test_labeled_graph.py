import threading

import pytest

from pathgraph.errors import (
    DuplicateEntityError,
    GraphFrozenError,
    InvalidArgumentError,
    NodeNotFoundError,
)
from pathgraph.graph.labeled_graph import Edge, Graph


def test_graph_init_empty():
    g = Graph()
    assert len(g) == 0
    assert g.nodes() == frozenset()
    assert g.edges() == frozenset()
    assert not g.is_frozen


def test_add_node():
    g = Graph()
    g.add_node("A")
    assert "A" in g
    assert g.contains_node("A")
    assert g.children_of("A") == frozenset()


def test_add_node_duplicate():
    g = Graph()
    g.add_node("A")
    with pytest.raises(DuplicateEntityError):
        g.add_node("A")
    assert len(g) == 1


def test_duplicate_is_an_invalid_argument():
    g = Graph()
    g.add_node("A")
    with pytest.raises(InvalidArgumentError):
        g.add_node("A")
    with pytest.raises(ValueError):
        g.add_node("A")


def test_add_node_none():
    g = Graph()
    with pytest.raises(InvalidArgumentError):
        g.add_node(None)
    assert len(g) == 0


def test_add_node_unhashable():
    g = Graph()
    with pytest.raises(InvalidArgumentError):
        g.add_node(["A"])
    assert len(g) == 0


def test_add_edge_returns_edge():
    g = Graph()
    g.add_node("A")
    g.add_node("B")
    edge = g.add_edge("A", "B", 2.5)
    assert edge == Edge("A", "B", 2.5)
    assert g.contains_edge("A", "B", 2.5)
    assert g.children_of("A") == {edge}
    assert g.children_of("B") == frozenset()


def test_add_edge_missing_nodes():
    g = Graph()
    g.add_node("A")
    with pytest.raises(InvalidArgumentError, match="Destination node 'B'"):
        g.add_edge("A", "B", 1.0)
    with pytest.raises(InvalidArgumentError, match="Source node 'B'"):
        g.add_edge("B", "A", 1.0)
    # No node was created implicitly
    assert g.nodes() == {"A"}
    assert g.number_of_edges() == 0


@pytest.mark.parametrize(
    "source,destination,label",
    [(None, "B", 1.0), ("A", None, 1.0), ("A", "B", None)],
)
def test_add_edge_none(source, destination, label):
    g = Graph()
    g.add_node("A")
    g.add_node("B")
    with pytest.raises(InvalidArgumentError):
        g.add_edge(source, destination, label)
    assert g.number_of_edges() == 0


def test_add_edge_duplicate():
    g = Graph()
    g.add_node("A")
    g.add_node("B")
    g.add_edge("A", "B", 1.0)
    with pytest.raises(DuplicateEntityError):
        g.add_edge("A", "B", 1.0)
    assert g.number_of_edges() == 1


def test_parallel_edges_distinguished_by_label(line1):
    assert {e.label for e in line1.children_of("B") if e.destination == "C"} == {
        1.0,
        2.0,
        3.0,
    }
    assert line1.number_of_edges() == 8


def test_self_loop():
    g = Graph()
    g.add_node("A")
    g.add_edge("A", "A", 1.0)
    assert g.children_of("A") == {Edge("A", "A", 1.0)}


def test_equal_labels_of_different_types_are_one_edge():
    g = Graph()
    g.add_node("A")
    g.add_node("B")
    g.add_edge("A", "B", 1)
    with pytest.raises(DuplicateEntityError):
        g.add_edge("A", "B", 1.0)


def test_non_numeric_labels():
    g = Graph()
    g.add_node("spider-man")
    g.add_node("mary jane")
    g.add_edge("spider-man", "mary jane", "ASM 42")
    g.add_edge("spider-man", "mary jane", "ASM 122")
    assert len(g.children_of("spider-man")) == 2


def test_contains_edge(detour1):
    assert detour1.contains_edge("A", "C", 5.0)
    assert not detour1.contains_edge("A", "C", 1.0)
    assert not detour1.contains_edge("C", "A", 5.0)
    assert not detour1.contains_edge("X", "Y", 1.0)


def test_contains_edge_none_fails_fast(detour1):
    with pytest.raises(InvalidArgumentError):
        detour1.contains_edge("A", None, 1.0)


def test_contains_edge_unhashable_is_false(detour1):
    assert detour1.contains_edge(["A"], "B", 1.0) is False
    assert detour1.contains_edge("A", {"B"}, 1.0) is False
    assert detour1.contains_edge("A", "B", [1.0]) is False


def test_contains_node_never_fails(detour1):
    assert not detour1.contains_node("Z")
    assert not detour1.contains_node(None)
    assert not detour1.contains_node(["A"])


def test_nodes_and_edges_snapshots(detour1):
    nodes = detour1.nodes()
    edges = detour1.edges()
    assert nodes == {"A", "B", "C"}
    assert edges == {
        Edge("A", "B", 1.0),
        Edge("B", "C", 1.0),
        Edge("A", "C", 5.0),
    }

    detour1.add_node("D")
    detour1.add_edge("C", "D", 1.0)
    assert "D" not in nodes
    assert Edge("C", "D", 1.0) not in edges
    assert isinstance(nodes, frozenset)
    assert isinstance(edges, frozenset)


def test_edges_is_union_of_children(line1):
    union = frozenset().union(*(line1.children_of(n) for n in line1.nodes()))
    assert union == line1.edges()


def test_every_edge_endpoint_is_a_node(line1, square1, detour1):
    for g in (line1, square1, detour1):
        nodes = g.nodes()
        for edge in g.edges():
            assert edge.source in nodes
            assert edge.destination in nodes


def test_children_of_unknown_node(detour1):
    with pytest.raises(NodeNotFoundError):
        detour1.children_of("Z")
    with pytest.raises(LookupError):
        detour1.children_of("Z")


def test_children_of_none(detour1):
    with pytest.raises(InvalidArgumentError):
        detour1.children_of(None)


def test_iter_children_keeps_insertion_order(square1):
    assert [e.destination for e in square1.iter_children("A")] == ["B", "D"]


def test_iter_children_interleaved_parallel_edges(graph_factory):
    g = graph_factory(
        "ABC", [("A", "B", 9.0), ("A", "C", 1.0), ("A", "B", 1.0), ("B", "C", 2.0)]
    )
    assert [(e.destination, e.label) for e in g.iter_children("A")] == [
        ("B", 9.0),
        ("C", 1.0),
        ("B", 1.0),
    ]


def test_iter_children_fails_on_call(detour1):
    with pytest.raises(NodeNotFoundError):
        detour1.iter_children("Z")


def test_freeze(detour1):
    assert detour1.freeze() is detour1
    assert detour1.is_frozen
    with pytest.raises(GraphFrozenError):
        detour1.add_node("D")
    with pytest.raises(GraphFrozenError):
        detour1.add_edge("C", "A", 1.0)
    assert detour1.nodes() == {"A", "B", "C"}
    assert detour1.number_of_edges() == 3


def test_frozen_graph_concurrent_reads(line1):
    line1.freeze()
    expected = line1.edges()
    results = []

    def reader():
        results.append(frozenset().union(*(line1.children_of(n) for n in "ABC")))

    threads = [threading.Thread(target=reader) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results == [expected] * 8


def test_repr(detour1):
    assert repr(detour1) == "Graph(nodes=3, edges=3, frozen=False)"
