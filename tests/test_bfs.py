"""Tests for the fewest-edges search with lexicographic tie-break."""

from __future__ import annotations

import random
from typing import Iterator, List

import pytest

from campus_paths.domain.errors import GraphIntegrityError
from campus_paths.graph.bfs import lexicographic_shortest_path
from campus_paths.graph.multigraph import Edge, MultiGraph, Node


def build(labels, edges) -> MultiGraph:
    graph: MultiGraph = MultiGraph()
    graph.add_nodes(Node(label) for label in labels)
    graph.add_edges(Edge(Node(p), Node(c), lab) for p, c, lab in edges)
    return graph


def as_triples(path: List[Edge]) -> List[tuple]:
    return [(e.parent.label, e.child.label, e.label) for e in path]


def order_key(path: List[Edge]) -> List[tuple]:
    return [(e.child.label, e.label) for e in path]


def simple_paths(graph: MultiGraph, start: Node, dest: Node) -> Iterator[List[Edge]]:
    def walk(node: Node, visited: set, path: List[Edge]) -> Iterator[List[Edge]]:
        if node == dest:
            yield list(path)
            return
        for edge in graph.out_edges(node):
            if edge.child not in visited:
                path.append(edge)
                yield from walk(edge.child, visited | {edge.child}, path)
                path.pop()

    yield from walk(start, {start}, [])


def test_prefers_fewer_edges_over_labels():
    graph = build(
        ["a", "b", "c", "z"],
        [("a", "b", "1"), ("b", "c", "1"), ("a", "z", "9"), ("z", "c", "9"), ("a", "c", "9")],
    )

    path = lexicographic_shortest_path(graph, Node("a"), Node("c"))

    assert as_triples(path) == [("a", "c", "9")]


def test_ties_broken_by_child_label_then_edge_label():
    graph = build(
        ["start", "m", "n", "end"],
        [
            ("start", "n", "a"),
            ("start", "m", "z"),
            ("start", "m", "y"),
            ("m", "end", "q"),
            ("n", "end", "a"),
        ],
    )

    path = lexicographic_shortest_path(graph, Node("start"), Node("end"))

    assert as_triples(path) == [("start", "m", "y"), ("m", "end", "q")]


def test_parallel_edges_pick_least_label():
    graph = build(["a", "b"], [("a", "b", "t"), ("a", "b", "c"), ("a", "b", "k")])

    path = lexicographic_shortest_path(graph, Node("a"), Node("b"))

    assert as_triples(path) == [("a", "b", "c")]


def test_start_equals_destination_is_empty_path():
    graph = build(["a", "b"], [("a", "b", "x")])

    assert lexicographic_shortest_path(graph, Node("a"), Node("a")) == []


def test_unreachable_destination_returns_none():
    graph = build(["a", "b", "c"], [("a", "b", "x"), ("c", "a", "x")])

    assert lexicographic_shortest_path(graph, Node("a"), Node("c")) is None


def test_rejects_nodes_outside_graph():
    graph = build(["a"], [])

    with pytest.raises(GraphIntegrityError):
        lexicographic_shortest_path(graph, Node("a"), Node("b"))


@pytest.mark.parametrize("seed", range(40))
def test_matches_brute_force(seed):
    rng = random.Random(seed)
    labels = list(range(rng.randint(2, 6)))
    edges = [
        (rng.choice(labels), rng.choice(labels), rng.choice("abc"))
        for _ in range(rng.randint(0, 16))
    ]
    graph = build(labels, edges)

    for s in labels:
        for d in labels:
            start, dest = Node(s), Node(d)
            path = lexicographic_shortest_path(graph, start, dest)
            candidates = list(simple_paths(graph, start, dest))

            if not candidates:
                assert path is None
                continue

            assert path is not None
            fewest = min(len(p) for p in candidates)
            assert len(path) == fewest
            assert order_key(path) == min(
                order_key(p) for p in candidates if len(p) == fewest
            )
            if path:
                assert path[0].parent == start
                assert path[-1].child == dest
