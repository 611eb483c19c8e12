"""Fewest-edges path search with a deterministic tie-break.

Every edge costs one hop; labels only serve to order the candidates.
Outgoing edges are explored in ascending ``(child label, edge label)``
order, so the first path recorded for a node is the lexicographically
least among the shortest ones.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, List, Optional, Protocol, TypeVar

from .multigraph import Edge, MultiGraph, Node, check_endpoints


class SupportsLessThan(Protocol):
    """Labels the search can sort on."""

    def __lt__(self, other: Any) -> bool: ...

    def __hash__(self) -> int: ...


O = TypeVar("O", bound=SupportsLessThan)
E = TypeVar("E", bound=SupportsLessThan)


def _edge_order(edge: Edge[Any, Any]) -> tuple[Any, Any]:
    return (edge.child.label, edge.label)


def lexicographic_shortest_path(
    graph: MultiGraph[O, E], start: Node[O], dest: Node[O]
) -> Optional[List[Edge[O, E]]]:
    """Compute the fewest-edges path from ``start`` to ``dest``.

    Among all paths with the fewest edges, the one returned is the least
    when compared edge by edge on ``(child label, edge label)``.

    Parameters
    ----------
    graph:
        Graph whose node labels and edge labels are mutually orderable.
    start:
        Departure node, must be in ``graph``.
    dest:
        Arrival node, must be in ``graph``.

    Returns
    -------
    list[Edge] or None
        The edges from ``start`` to ``dest`` in order (empty when
        ``start == dest``), or ``None`` if ``dest`` cannot be reached.

    Raises
    ------
    GraphIntegrityError
        If ``start`` or ``dest`` is not a node of ``graph``.
    """
    check_endpoints(graph, start, dest)

    paths: Dict[Node[O], List[Edge[O, E]]] = {start: []}
    queue: Deque[Node[O]] = deque([start])

    while queue:
        head = queue.popleft()
        if head == dest:
            return paths[head]

        for edge in sorted(graph.out_edges(head), key=_edge_order):
            if edge.child not in paths:
                paths[edge.child] = paths[head] + [edge]
                queue.append(edge.child)

    return None
