"""Shared fixtures for the campus path finder tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest

from campus_paths.config import reset_config
from campus_paths.container import reset_container
from campus_paths.domain.models import Coordinates, Location, Segment
from campus_paths.graph.multigraph import MultiGraph
from campus_paths.services.campus_map import CampusMap


def assert_graph_invariants(graph: MultiGraph) -> None:
    """Check the representation of ``graph`` is consistent."""
    adjacency = graph._adjacency
    seen = set()
    for node, out in adjacency.items():
        assert node is not None
        assert out is not None
        for edge in out:
            assert edge.parent == node
            assert edge.child in adjacency
            assert edge not in seen
            seen.add(edge)
    assert graph.edge_count() == len(seen)
    assert graph.node_count() == len(adjacency)


@pytest.fixture(autouse=True)
def fresh_config():
    """Never leak cached configuration or containers between tests."""
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def check_rep() -> Callable[[MultiGraph], None]:
    return assert_graph_invariants


@pytest.fixture
def triangle_map() -> CampusMap:
    """A(0,0), B(10,0), C(10,10) with A-B 10, B-C 10 and A-C 30."""
    a, b, c = Coordinates(0, 0), Coordinates(10, 0), Coordinates(10, 10)
    campus = CampusMap()
    campus.add_locations(
        [
            Location("A", "Alpha Hall", a),
            Location("B", "Beta Building", b),
            Location("C", "Gamma Center", c),
        ]
    )
    campus.add_segments([Segment(a, b, 10), Segment(b, c, 10), Segment(a, c, 30)])
    return campus


@pytest.fixture
def write_tsv(tmp_path: Path) -> Callable[[str, Iterable[str]], Path]:
    """Write lines to a TSV file under tmp_path and return its path."""

    def _write(name: str, lines: Iterable[str]) -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
