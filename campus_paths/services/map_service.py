"""Campus map service - Main orchestrator.

Loads the map records from a repository into a CampusMap once, then
serves location listings and path queries from it.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.models import Location, Route
from ..ports.graph import MapRepositoryPort
from .campus_map import CampusMap


@dataclass
class CampusMapService:
    """Main service for campus path queries.

    The first query (or an explicit load()) fills the map from the
    repository; later calls only read it. Parsing errors surface from
    load() before any node is created.

    Attributes:
        repository: Source of location and segment records
        campus_map: Map filled from the repository
    """

    repository: MapRepositoryPort
    campus_map: CampusMap = field(default_factory=CampusMap)

    _loaded: bool = field(default=False, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> None:
        """Fill the map from the repository, once.

        Raises:
            DataLoadError: If the records cannot be read or parsed.
        """
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return

            # Parse everything before touching the map.
            locations = self.repository.load_locations()
            segments = self.repository.load_segments()

            self.campus_map.add_locations(locations)
            self.campus_map.add_segments(segments)
            self._loaded = True

            self._logger.info(
                "Campus map loaded",
                extra={
                    "locations": len(locations),
                    "segments": len(segments),
                    "nodes": self.campus_map.node_count(),
                    "edges": self.campus_map.edge_count(),
                },
            )

    def list_locations(self) -> List[Location]:
        """Return every location, sorted by identifier."""
        self.load()
        return sorted(self.campus_map.list_locations(), key=lambda loc: loc.id)

    def get_location(self, location_id: str) -> Optional[Location]:
        self.load()
        return self.campus_map.get_location(location_id)

    def shortest_path(self, start_id: str, dest_id: str) -> Optional[Route]:
        """Find the shortest route between two location identifiers.

        Returns:
            The route, or None if an identifier is unknown or the two
            locations are not connected.
        """
        self.load()
        return self.campus_map.shortest_path(start_id, dest_id)

    def format_route(self, start_id: str, dest_id: str, route: Optional[Route]) -> str:
        """Format a query result as human-readable text.

        Args:
            start_id: Identifier of the departure location.
            dest_id: Identifier of the arrival location.
            route: Result of shortest_path for these identifiers.

        Returns:
            One line per segment followed by the total, or a no-path line.
        """
        if route is None:
            return f"No path found between {start_id} and {dest_id}"

        lines = [f"Path from {start_id} to {dest_id}:"]
        for segment in route.segments:
            lines.append(
                f"  {segment.origin} -> {segment.destination}: {segment.length:.1f}"
            )
        lines.append(f"Total length: {route.total_length:.1f}")
        return "\n".join(lines)
