"""Immutable domain models for the campus path finder.

All models are frozen dataclasses with slots. They compare and hash by
value, which is what lets coordinates act directly as graph node labels
and locations live in sets.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, order=True)
class Coordinates:
    """A point on the map, in map units.

    Points order by x, then y.

    Two coordinates are the same point only when both components are
    exactly equal as floats. Computed values that differ in the last bit
    are different points; callers that derive coordinates arithmetically
    should round them before building locations or segments.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        """Reject values that cannot serve as an identity."""
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"Coordinates must be finite, got ({self.x}, {self.y})")

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class Location:
    """A named point of interest (a building, an entrance...).

    Attributes:
        id: Short unique identifier (e.g., 'CSE')
        display_name: Full human-readable name
        coordinates: Where the location sits on the map
    """

    id: str
    display_name: str
    coordinates: Coordinates


@dataclass(frozen=True, slots=True)
class Segment:
    """A walkable stretch between two points.

    Attributes:
        origin: Start point of the segment
        destination: End point of the segment
        length: Strictly positive length of the segment
    """

    origin: Coordinates
    destination: Coordinates
    length: float

    def __post_init__(self) -> None:
        if not self.length > 0:
            raise ValueError(f"Segment length must be positive, got {self.length}")

    def reversed(self) -> Segment:
        """Return the same segment walked the other way."""
        return Segment(self.destination, self.origin, self.length)


@dataclass(frozen=True, slots=True)
class Route:
    """Result of a path query between two locations.

    Attributes:
        segments: Ordered segments from the start to the destination
    """

    segments: tuple[Segment, ...] = field(default_factory=tuple)

    @property
    def total_length(self) -> float:
        """Return the summed length of all segments."""
        return sum(segment.length for segment in self.segments)

    @property
    def is_empty(self) -> bool:
        """Check if the route has no segment (start equals destination)."""
        return len(self.segments) == 0

    @property
    def num_segments(self) -> int:
        """Return the number of segments in the route."""
        return len(self.segments)
