"""Typed errors for the campus path finder.

Expected outcomes such as an unknown location or two disconnected
locations are not errors: queries report them as ``None``. The types
below are reserved for caller bugs (structural violations of the graph)
and for data that cannot be loaded.

All errors inherit from CampusPathsError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class CampusPathsError(Exception):
    """Base error for the campus path finder.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphIntegrityError(CampusPathsError, ValueError):
    """An operation would break the structure of the graph.

    Raised when an edge references a node that is not in the graph, or
    when a search is started from or towards such a node. The graph is
    left unmodified.

    Attributes:
        parent: Label of the edge's parent (or search start) node
        child: Label of the edge's child (or search destination) node
    """

    parent: Any = None
    child: Any = None


@dataclass
class DataLoadError(CampusPathsError):
    """Map data could not be read.

    Attributes:
        file_path: Path to the data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class MalformedDataError(DataLoadError):
    """A data file was read but one of its records is not well formed.

    Attributes:
        line_number: 1-based line number of the offending record
        line: Raw content of the offending line
    """

    line_number: Optional[int] = None
    line: str = ""


@dataclass
class LocationNotFoundError(CampusPathsError):
    """Location identifier not registered in the map.

    Attributes:
        location_id: The identifier that was not found
    """

    location_id: str = ""


@dataclass
class ConfigurationError(CampusPathsError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
