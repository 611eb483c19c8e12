"""Top-level package for the campus path finder.

The package turns a campus described as named locations and walkable
segments into a graph, and answers shortest-route queries between two
locations. The generic multigraph and its searches live in ``graph``;
``services`` adds the location layer on top of them.
"""

from .domain.models import Coordinates, Location, Route, Segment
from .services import CampusMap, CampusMapService

__all__ = [
    "Coordinates",
    "Location",
    "Segment",
    "Route",
    "CampusMap",
    "CampusMapService",
]
