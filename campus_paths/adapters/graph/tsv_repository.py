"""TSV map repository adapter.

Reads the two tab-separated files describing a campus:

- locations: ``id  display_name  x  y``
- segments: ``x1,y1  x2,y2  length``

In both files the first line is a header, lines starting with ``#`` are
comments and blank lines are ignored. A record that does not follow the
format stops the load with a MalformedDataError pointing at the line,
before anything reaches the map.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import DataLoadError, MalformedDataError
from ...domain.models import Coordinates, Location, Segment


def parse_coordinates(text: str) -> Coordinates:
    """Parse an ``x,y`` pair.

    Raises:
        ValueError: If the text is not two comma-separated finite numbers.
    """
    tokens = text.split(",")
    if len(tokens) != 2:
        raise ValueError(f"Coordinates not in x,y format: {text!r}")
    return Coordinates(float(tokens[0]), float(tokens[1]))


@dataclass
class TSVMapRepository:
    """Map repository that loads from TSV files.

    This adapter implements MapRepositoryPort. Parsed records are cached
    until clear_cache() is called.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _locations: Optional[List[Location]] = field(default=None, repr=False)
    _segments: Optional[List[Segment]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_locations(self) -> Sequence[Location]:
        """Load location records.

        Returns:
            Locations in file order.

        Raises:
            DataLoadError: If the file cannot be read.
            MalformedDataError: If a record is not well formed.
        """
        if self._locations is not None:
            return list(self._locations)

        path = self.config.locations_path
        locations: List[Location] = []
        for line_number, row in self._records(path):
            if len(row) != 4:
                raise MalformedDataError(
                    "Location line should contain exactly four tab-separated fields",
                    file_path=str(path),
                    line_number=line_number,
                    line="\t".join(row),
                )
            location_id, display_name, x, y = row
            try:
                coordinates = Coordinates(float(x), float(y))
            except ValueError as e:
                raise MalformedDataError(
                    "Location coordinates not well formatted",
                    cause=e,
                    file_path=str(path),
                    line_number=line_number,
                    line="\t".join(row),
                )
            locations.append(Location(location_id, display_name, coordinates))

        self._locations = locations
        self._logger.info(
            "Locations loaded",
            extra={"path": str(path), "count": len(locations)},
        )
        return list(locations)

    def load_segments(self) -> Sequence[Segment]:
        """Load segment records.

        Returns:
            Segments in file order.

        Raises:
            DataLoadError: If the file cannot be read.
            MalformedDataError: If a record is not well formed or has a
                non-positive length.
        """
        if self._segments is not None:
            return list(self._segments)

        path = self.config.segments_path
        segments: List[Segment] = []
        for line_number, row in self._records(path):
            if len(row) != 3:
                raise MalformedDataError(
                    "Segment line should contain exactly three tab-separated fields",
                    file_path=str(path),
                    line_number=line_number,
                    line="\t".join(row),
                )
            try:
                origin = parse_coordinates(row[0])
                destination = parse_coordinates(row[1])
                length = float(row[2])
                segments.append(Segment(origin, destination, length))
            except ValueError as e:
                raise MalformedDataError(
                    "Segment not well formatted",
                    cause=e,
                    file_path=str(path),
                    line_number=line_number,
                    line="\t".join(row),
                )

        self._segments = segments
        self._logger.info(
            "Segments loaded",
            extra={"path": str(path), "count": len(segments)},
        )
        return list(segments)

    def _records(self, path: Path) -> Iterator[Tuple[int, List[str]]]:
        """Yield ``(line_number, fields)`` for every data line of ``path``."""
        self._logger.debug("Reading map data", extra={"path": str(path)})
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.reader(f, delimiter="\t", quoting=csv.QUOTE_NONE)
                next(reader, None)  # header
                rows = [(reader.line_num, row) for row in reader]
        except UnicodeDecodeError as e:
            raise MalformedDataError(
                "Map data is not valid UTF-8",
                cause=e,
                file_path=str(path),
            )
        except csv.Error as e:
            raise MalformedDataError(
                "Map data record could not be split into fields",
                cause=e,
                file_path=str(path),
                line_number=reader.line_num,
            )
        except OSError as e:
            raise DataLoadError(
                f"Failed to read map data from {path}",
                cause=e,
                file_path=str(path),
            )

        for line_number, row in rows:
            if not row or (len(row) == 1 and not row[0].strip()):
                continue
            if row[0].startswith("#"):
                continue
            yield line_number, row

    def clear_cache(self) -> None:
        """Clear cached location and segment records."""
        self._locations = None
        self._segments = None
        self._logger.debug("Map data cache cleared")
