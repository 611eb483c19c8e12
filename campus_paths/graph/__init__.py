"""Graph primitives and path searches.

This subpackage contains the generic directed labeled multigraph and
the two searches that run on top of it: a weighted minimum-cost search
and an unweighted search with a lexicographic tie-break.
"""

from .bfs import lexicographic_shortest_path
from .dijkstra import dijkstra, path_cost
from .multigraph import Edge, MultiGraph, Node, check_endpoints

__all__ = [
    "Node",
    "Edge",
    "MultiGraph",
    "check_endpoints",
    "dijkstra",
    "path_cost",
    "lexicographic_shortest_path",
]
