"""Graph ports - Abstractions for map loading and path finding.

These protocols define the contracts between the campus map and its
collaborators: where location and segment records come from, and which
search turns two nodes into a path.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Location, Segment
    from ..graph.multigraph import Edge, MultiGraph, Node


class MapRepositoryPort(Protocol):
    """Port for loading map records.

    Implementation: adapters/graph/tsv_repository.py

    The repository parses and validates records before they reach the
    map; a malformed record is reported here, never by the map.
    """

    def load_locations(self) -> Sequence[Location]:
        """Load every location record.

        Returns:
            Locations in file order.

        Raises:
            DataLoadError: If the records cannot be read or parsed.
        """
        ...

    def load_segments(self) -> Sequence[Segment]:
        """Load every segment record.

        Returns:
            Segments in file order.

        Raises:
            DataLoadError: If the records cannot be read or parsed.
        """
        ...


class PathFinderPort(Protocol):
    """Port for path searches over a multigraph.

    Implementations: graph/dijkstra.py (dijkstra),
    graph/bfs.py (lexicographic_shortest_path)
    """

    def __call__(
        self,
        graph: MultiGraph[Any, Any],
        start: Node[Any],
        dest: Node[Any],
    ) -> Optional[List[Edge[Any, Any]]]:
        """Find a path from ``start`` to ``dest``.

        Returns:
            The ordered edges of the path, or None if there is none.
        """
        ...
