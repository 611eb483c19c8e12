"""Campus map - named locations on top of a weighted multigraph.

Graph nodes are labeled with Coordinates and edges with segment lengths.
A segment is walkable both ways, so it becomes two directed edges of the
same length. Locations are kept in a registry keyed by their short
identifier and point at the node of their coordinates.

Caveat: node identity is coordinate equality, so two locations placed at
exactly the same coordinates share one node and cannot be told apart by
a path query.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Set

from ..domain.errors import LocationNotFoundError
from ..domain.models import Coordinates, Location, Route, Segment
from ..graph.dijkstra import dijkstra
from ..graph.multigraph import Edge, MultiGraph, Node
from ..ports.graph import PathFinderPort


@dataclass
class CampusMap:
    """Location-oriented query surface over the campus graph.

    The map is meant to be filled once, then queried. It is not
    synchronized: queries may run concurrently only while nothing is
    being added.

    Attributes:
        path_finder: Search used by shortest_path (Dijkstra by default)
    """

    path_finder: PathFinderPort = field(default=dijkstra)

    _graph: MultiGraph[Coordinates, float] = field(
        default_factory=MultiGraph, repr=False
    )
    _locations: Dict[str, Location] = field(default_factory=dict, repr=False)
    # Last location registered at each coordinate.
    _occupants: Dict[Coordinates, str] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_location(self, location: Location) -> None:
        """Register ``location`` and make sure its coordinates are a node.

        A location registered under an existing identifier replaces it.
        """
        self._graph.add_node(Node(location.coordinates))

        previous = self._locations.get(location.id)
        if (
            previous is not None
            and self._occupants.get(previous.coordinates) == location.id
        ):
            del self._occupants[previous.coordinates]

        occupant = self._occupants.get(location.coordinates)
        if occupant is not None and occupant != location.id:
            self._logger.warning(
                "Location shares its coordinates with another location",
                extra={
                    "location_id": location.id,
                    "other_location_id": occupant,
                    "coordinates": str(location.coordinates),
                },
            )
        self._occupants[location.coordinates] = location.id
        self._locations[location.id] = location

    def add_locations(self, locations: Iterable[Location]) -> None:
        for location in locations:
            self.add_location(location)

    def add_segment(self, segment: Segment) -> None:
        """Add ``segment`` as two opposite edges of the same length."""
        self._graph.add_node(Node(segment.origin))
        self._graph.add_node(Node(segment.destination))
        for way in (segment, segment.reversed()):
            self._graph.add_edge(
                Edge(Node(way.origin), Node(way.destination), way.length)
            )

    def add_segments(self, segments: Iterable[Segment]) -> None:
        for segment in segments:
            self.add_segment(segment)

    def contains(self, location_id: str) -> bool:
        return location_id in self._locations

    def __contains__(self, location_id: object) -> bool:
        return location_id in self._locations

    def get_location(self, location_id: str) -> Optional[Location]:
        """Get a location by identifier, or None if it is unknown."""
        return self._locations.get(location_id)

    def get_location_or_raise(self, location_id: str) -> Location:
        """Get a location by identifier.

        Raises:
            LocationNotFoundError: If the identifier is unknown.
        """
        location = self.get_location(location_id)
        if location is None:
            raise LocationNotFoundError(
                f"Location not found: {location_id}",
                location_id=location_id,
            )
        return location

    def list_locations(self) -> Set[Location]:
        """Return every registered location, in no particular order."""
        return set(self._locations.values())

    def shortest_path(self, start_id: str, dest_id: str) -> Optional[Route]:
        """Find the shortest walk between two locations.

        Args:
            start_id: Identifier of the departure location.
            dest_id: Identifier of the arrival location.

        Returns:
            The route, empty when both locations sit at the same node.
            None if an identifier is unknown or no path joins them.
        """
        start = self._locations.get(start_id)
        dest = self._locations.get(dest_id)
        if start is None or dest is None:
            self._logger.info(
                "Unknown location in path query",
                extra={
                    "start_id": start_id,
                    "dest_id": dest_id,
                    "unknown": [
                        i for i in (start_id, dest_id) if i not in self._locations
                    ],
                },
            )
            return None

        edges = self.path_finder(
            self._graph, Node(start.coordinates), Node(dest.coordinates)
        )
        if edges is None:
            self._logger.info(
                "No path between locations",
                extra={"start_id": start_id, "dest_id": dest_id},
            )
            return None

        route = Route(
            tuple(
                Segment(edge.parent.label, edge.child.label, edge.label)
                for edge in edges
            )
        )
        self._logger.debug(
            "Path found",
            extra={
                "start_id": start_id,
                "dest_id": dest_id,
                "segments": route.num_segments,
                "length": route.total_length,
            },
        )
        return route

    def node_count(self) -> int:
        return self._graph.node_count()

    def edge_count(self) -> int:
        return self._graph.edge_count()
