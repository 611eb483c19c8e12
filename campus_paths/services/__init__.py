"""Services layer - Application orchestration.

Available services:
- CampusMap: Named locations and path queries over the campus graph
- CampusMapService: Loads a CampusMap from a repository and serves it
"""

from .campus_map import CampusMap
from .map_service import CampusMapService

__all__ = ["CampusMap", "CampusMapService"]
