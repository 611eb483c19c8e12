"""Directed, labeled multigraph.

A graph holds nodes identified by their label value, and directed edges
carrying a label of their own. Any number of edges may join the same
ordered pair of nodes as long as their labels differ: an edge is the
(parent, child, label) triple, so two identical triples are one edge.

The store keeps three invariants at all times:

* every child of an edge is a node of the graph;
* no edge is held twice;
* the edges filed under a node all have that node as their parent.

Adding something already present or removing something absent is not
an error; those operations report what happened through their boolean
result. Adding an edge whose endpoints are not both in the graph is a
caller bug and raises ``GraphIntegrityError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, Hashable, Iterable, Iterator, Set, TypeVar, Union

from ..domain.errors import GraphIntegrityError

L = TypeVar("L", bound=Hashable)
W = TypeVar("W", bound=Hashable)


@dataclass(frozen=True)
class Node(Generic[L]):
    """A graph node. Two nodes with equal labels are the same node."""

    label: L

    def __str__(self) -> str:
        return str(self.label)


@dataclass(frozen=True)
class Edge(Generic[L, W]):
    """A directed edge from ``parent`` to ``child`` carrying ``label``.

    Attributes:
        parent: Node the edge leaves from
        child: Node the edge points to
        label: Edge payload (a weight for weighted searches)
    """

    parent: Node[L]
    child: Node[L]
    label: W

    def __str__(self) -> str:
        return f"({self.parent}, {self.child}, {self.label})"


class MultiGraph(Generic[L, W]):
    """Mutable directed labeled multigraph backed by an adjacency map.

    The adjacency map files every edge under its parent node. Nodes with
    no outgoing edge map to an empty set.

    Example:
        graph: MultiGraph[str, float] = MultiGraph()
        a, b = Node("a"), Node("b")
        graph.add_nodes([a, b])
        graph.add_edge(Edge(a, b, 2.5))
        graph.children(a)  # {Node("b")}

    Not synchronized: concurrent readers are safe only while nobody
    mutates the graph.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[Node[L], Set[Edge[L, W]]] = {}

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_node(self, node: Node[L]) -> bool:
        """Add ``node`` to the graph.

        Returns:
            True if the node was added, False if it was already present.
        """
        if node in self._adjacency:
            return False
        self._adjacency[node] = set()
        return True

    def add_nodes(self, nodes: Iterable[Node[L]]) -> bool:
        """Add every node of ``nodes``.

        Returns:
            True only if every node was newly added.
        """
        all_added = True
        for node in nodes:
            all_added &= self.add_node(node)
        return all_added

    def add_edge(self, edge: Edge[L, W]) -> bool:
        """Add ``edge`` to the graph.

        Returns:
            True if the edge was added, False if an identical edge was
            already present.

        Raises:
            GraphIntegrityError: If the parent or the child of the edge
                is not a node of the graph.
        """
        out = self._adjacency.get(edge.parent)
        if out is None or edge.child not in self._adjacency:
            raise GraphIntegrityError(
                f"Edge {edge} references a node missing from the graph",
                parent=edge.parent.label,
                child=edge.child.label,
            )
        if edge in out:
            return False
        out.add(edge)
        return True

    def add_edges(self, edges: Iterable[Edge[L, W]]) -> bool:
        """Add every edge of ``edges``.

        Edges added before a failing one are kept.

        Returns:
            True only if every edge was newly added.

        Raises:
            GraphIntegrityError: On the first edge with a missing endpoint.
        """
        all_added = True
        for edge in edges:
            all_added &= self.add_edge(edge)
        return all_added

    def remove_node(self, node: Node[L]) -> bool:
        """Remove ``node`` together with every edge leaving or reaching it.

        Returns:
            True if the node was removed, False if it was not in the graph.
        """
        if node not in self._adjacency:
            return False
        del self._adjacency[node]
        for out in self._adjacency.values():
            out.difference_update([e for e in out if e.child == node])
        return True

    def remove_edge(self, edge: Edge[L, W]) -> bool:
        """Remove ``edge``.

        Returns:
            True if the edge was removed, False if it was not in the graph.
        """
        out = self._adjacency.get(edge.parent)
        if out is None or edge not in out:
            return False
        out.remove(edge)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, item: Union[Node[L], Edge[L, W]]) -> bool:
        """Check whether a node or an edge belongs to the graph."""
        if isinstance(item, Edge):
            out = self._adjacency.get(item.parent)
            return out is not None and item in out
        return item in self._adjacency

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, (Node, Edge)):
            return False
        return self.contains(item)

    def children(self, node: Node[L]) -> Set[Node[L]]:
        """Nodes reachable from ``node`` through one outgoing edge."""
        return {e.child for e in self._adjacency.get(node, ())}

    def parents(self, node: Node[L]) -> Set[Node[L]]:
        """Nodes that reach ``node`` through one edge."""
        return {e.parent for e in self._incoming(node)}

    def out_edges(self, node: Node[L]) -> Set[Edge[L, W]]:
        """Copy of the edges leaving ``node`` (empty if it is absent)."""
        return set(self._adjacency.get(node, ()))

    def in_edges(self, node: Node[L]) -> Set[Edge[L, W]]:
        """Copy of the edges reaching ``node`` (empty if it is absent)."""
        return set(self._incoming(node))

    def nodes(self) -> Set[Node[L]]:
        """Snapshot of all nodes."""
        return set(self._adjacency)

    def edges(self) -> Set[Edge[L, W]]:
        """Snapshot of all edges."""
        return {e for out in self._adjacency.values() for e in out}

    def node_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        return sum(len(out) for out in self._adjacency.values())

    def _incoming(self, node: Node[L]) -> Iterator[Edge[L, W]]:
        if node not in self._adjacency:
            return iter(())
        return (e for out in self._adjacency.values() for e in out if e.child == node)

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Node[L]]:
        return iter(list(self._adjacency))

    def __len__(self) -> int:
        return len(self._adjacency)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiGraph):
            return NotImplemented
        return self._adjacency == other._adjacency

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        nodes = "".join(f"({node})" for node in self._adjacency)
        edges = "".join(str(e) for out in self._adjacency.values() for e in out)
        return f"[{nodes}]\n[{edges}]"

    def __repr__(self) -> str:
        return f"MultiGraph(nodes={self.node_count()}, edges={self.edge_count()})"


def check_endpoints(graph: MultiGraph[L, W], start: Node[L], dest: Node[L]) -> None:
    """Ensure both ends of a search are nodes of ``graph``.

    Raises:
        GraphIntegrityError: If ``start`` or ``dest`` is missing.
    """
    if start not in graph or dest not in graph:
        raise GraphIntegrityError(
            f"Search endpoints {start} -> {dest} must both be in the graph",
            parent=start.label,
            child=dest.label,
        )
