"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CampusPathsError,
    ConfigurationError,
    DataLoadError,
    GraphIntegrityError,
    LocationNotFoundError,
    MalformedDataError,
)
from .models import Coordinates, Location, Route, Segment

__all__ = [
    # Models
    "Coordinates",
    "Location",
    "Segment",
    "Route",
    # Errors
    "CampusPathsError",
    "ConfigurationError",
    "DataLoadError",
    "GraphIntegrityError",
    "LocationNotFoundError",
    "MalformedDataError",
]
