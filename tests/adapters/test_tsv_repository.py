"""Tests for the TSV map repository adapter."""

import csv
from pathlib import Path

import pytest

from campus_paths.adapters.graph import TSVMapRepository, parse_coordinates
from campus_paths.config import GraphConfig
from campus_paths.domain.errors import DataLoadError, MalformedDataError
from campus_paths.domain.models import Coordinates, Location, Segment


def make_repository(tmp_path: Path) -> TSVMapRepository:
    return TSVMapRepository(
        GraphConfig(
            data_dir=tmp_path,
            locations_file="buildings.tsv",
            segments_file="paths.tsv",
        )
    )


def test_parse_coordinates():
    assert parse_coordinates("1.5,-2") == Coordinates(1.5, -2.0)
    with pytest.raises(ValueError):
        parse_coordinates("1.5")
    with pytest.raises(ValueError):
        parse_coordinates("1,2,3")
    with pytest.raises(ValueError):
        parse_coordinates("a,b")


def test_load_locations_skips_header_comments_and_blank_lines(tmp_path, write_tsv):
    write_tsv(
        "buildings.tsv",
        [
            "shortName\tlongName\tx\ty",
            "# comment line",
            "CSE\tComputer Science, Allen Center\t2259.7\t1715.5",
            "",
            "MGH\tMary Gates Hall\t1914.5\t1709.9",
        ],
    )

    locations = make_repository(tmp_path).load_locations()

    assert locations == [
        Location("CSE", "Computer Science, Allen Center", Coordinates(2259.7, 1715.5)),
        Location("MGH", "Mary Gates Hall", Coordinates(1914.5, 1709.9)),
    ]


def test_load_segments(tmp_path, write_tsv):
    write_tsv(
        "paths.tsv",
        [
            "origin\tdestination\tlength",
            "0,0\t10,0\t10",
            "# closed for works",
            "10,0\t10.5,10\t10.25",
        ],
    )

    segments = make_repository(tmp_path).load_segments()

    assert segments == [
        Segment(Coordinates(0, 0), Coordinates(10, 0), 10.0),
        Segment(Coordinates(10, 0), Coordinates(10.5, 10), 10.25),
    ]


def test_location_with_wrong_field_count_is_malformed(tmp_path, write_tsv):
    write_tsv("buildings.tsv", ["header", "CSE\tAllen Center\t1.0"])

    with pytest.raises(MalformedDataError) as excinfo:
        make_repository(tmp_path).load_locations()

    assert excinfo.value.line_number == 2
    assert excinfo.value.file_path.endswith("buildings.tsv")
    assert "CSE" in excinfo.value.line


def test_location_with_bad_coordinates_is_malformed(tmp_path, write_tsv):
    write_tsv("buildings.tsv", ["header", "CSE\tAllen Center\tnorth\t1.0"])

    with pytest.raises(MalformedDataError) as excinfo:
        make_repository(tmp_path).load_locations()

    assert isinstance(excinfo.value.cause, ValueError)


@pytest.mark.parametrize(
    "line",
    [
        "0,0\t1,0",
        "0,0\t1;0\t1.0",
        "0,0\t1,0\tfar",
        "0,0\t1,0\t0",
        "0,0\t1,0\t-3.5",
        "nan,0\t1,0\t2.0",
    ],
)
def test_malformed_segments(tmp_path, write_tsv, line):
    write_tsv("paths.tsv", ["header", "0,0\t2,0\t2.0", line])

    with pytest.raises(MalformedDataError) as excinfo:
        make_repository(tmp_path).load_segments()

    assert excinfo.value.line_number == 3


def test_missing_file_is_a_load_error(tmp_path):
    with pytest.raises(DataLoadError) as excinfo:
        make_repository(tmp_path).load_locations()

    assert not isinstance(excinfo.value, MalformedDataError)
    assert isinstance(excinfo.value.cause, OSError)


def test_invalid_utf8_is_malformed(tmp_path):
    path = tmp_path / "buildings.tsv"
    path.write_bytes(b"header\nA\tAl\xffpha\t0\t0\n")

    with pytest.raises(MalformedDataError) as excinfo:
        make_repository(tmp_path).load_locations()

    assert excinfo.value.file_path == str(path)
    assert isinstance(excinfo.value.cause, UnicodeDecodeError)


def test_oversized_field_is_malformed(tmp_path, write_tsv):
    path = write_tsv("buildings.tsv", ["header", "A\t" + "x" * 200_000 + "\t0\t0"])

    with pytest.raises(DataLoadError) as excinfo:
        make_repository(tmp_path).load_locations()

    assert isinstance(excinfo.value, MalformedDataError)
    assert excinfo.value.file_path == str(path)
    assert excinfo.value.line_number == 2
    assert isinstance(excinfo.value.cause, csv.Error)


def test_results_are_cached_until_cleared(tmp_path, write_tsv):
    path = write_tsv("buildings.tsv", ["header", "A\tAlpha\t0\t0"])
    repository = make_repository(tmp_path)

    assert len(repository.load_locations()) == 1
    path.write_text("header\nA\tAlpha\t0\t0\nB\tBeta\t1\t1\n", encoding="utf-8")
    assert len(repository.load_locations()) == 1

    repository.clear_cache()
    assert len(repository.load_locations()) == 2


def test_returned_lists_are_copies(tmp_path, write_tsv):
    write_tsv("buildings.tsv", ["header", "A\tAlpha\t0\t0"])
    repository = make_repository(tmp_path)

    repository.load_locations().clear()

    assert len(repository.load_locations()) == 1
