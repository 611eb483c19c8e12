"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TSVMapRepository: Loads locations and segments from TSV files
"""

from .tsv_repository import TSVMapRepository, parse_coordinates

__all__ = ["TSVMapRepository", "parse_coordinates"]
