"""Minimum-cost path search using Dijkstra's algorithm.

Edge labels are read as weights and must all be strictly positive.
Each heap entry carries the full edge sequence walked so far rather
than a parent pointer, so the answer is available as soon as the
destination is popped.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Hashable, List, Optional, Sequence, Set, Tuple, TypeVar

from .multigraph import Edge, MultiGraph, Node, check_endpoints

L = TypeVar("L", bound=Hashable)


def dijkstra(
    graph: MultiGraph[L, float], start: Node[L], dest: Node[L]
) -> Optional[List[Edge[L, float]]]:
    """Compute a minimum-cost path from ``start`` to ``dest``.

    Parameters
    ----------
    graph:
        Graph whose edge labels are strictly positive weights.
    start:
        Departure node, must be in ``graph``.
    dest:
        Arrival node, must be in ``graph``.

    Returns
    -------
    list[Edge] or None
        The edges walked from ``start`` to ``dest`` in order. The list is
        empty when ``start == dest``. ``None`` means ``dest`` cannot be
        reached.

    Raises
    ------
    GraphIntegrityError
        If ``start`` or ``dest`` is not a node of ``graph``.

    Notes
    -----
    When several paths share the minimum cost, which one is returned
    depends on the order in which equal-cost heap entries come out and
    is not part of the contract.
    """
    check_endpoints(graph, start, dest)
    if start == dest:
        return []

    # The counter breaks cost ties so edges never get compared.
    counter = itertools.count()
    heap: List[Tuple[float, int, List[Edge[L, float]]]] = [(0.0, next(counter), [])]
    finished: Set[Node[L]] = set()

    while heap:
        distance, _, path = heapq.heappop(heap)
        reached = path[-1].child if path else start

        if reached == dest:
            return path

        if reached in finished:
            continue
        finished.add(reached)

        for edge in graph.out_edges(reached):
            if edge.child not in finished:
                heapq.heappush(
                    heap, (distance + edge.label, next(counter), path + [edge])
                )

    return None


def path_cost(path: Sequence[Edge[L, float]]) -> float:
    """Sum the weights of the edges of ``path``."""
    return sum((edge.label for edge in path), 0.0)
