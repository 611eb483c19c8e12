"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the campus map and the adapters that
feed it. They make the map testable without touching the filesystem.
"""

from .graph import MapRepositoryPort, PathFinderPort

__all__ = [
    "MapRepositoryPort",
    "PathFinderPort",
]
