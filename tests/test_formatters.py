"""Tests for output formatters."""

import json

import pytest
from conftest import MOVIE, FakeBackend

from mediashim.extract import extract
from mediashim.formatters import (
    format_default,
    format_json,
    format_json_list,
    format_quiet,
    to_dict,
)
from mediashim.models import ExtractionOptions, ResultTree
from mediashim.schema import load_schema


def _movie_tree(**options) -> ResultTree:
    backend = FakeBackend(files={"movie": MOVIE})
    backend.open("movie")
    return extract(backend, load_schema(backend), ExtractionOptions(**options))


@pytest.fixture
def movie_tree():
    return _movie_tree()


def test_format_json(movie_tree):
    """Test JSON output round-trips to the dict form."""
    data = json.loads(format_json(movie_tree))

    assert data == to_dict(movie_tree)
    assert data["Video"][0]["Width"] == 1920
    assert data["Chapters"]["en:Chapter 1"] == "00:00:00.000"


def test_format_json_without_chapters():
    """Test the Chapters key is left out when there are none."""
    data = json.loads(format_json(ResultTree()))
    assert "Chapters" not in data
    assert data["General"] == []


def test_format_json_list(movie_tree):
    """Test several trees keyed by path."""
    data = json.loads(format_json_list({"a.mkv": movie_tree, "b.mkv": ResultTree()}))
    assert list(data) == ["a.mkv", "b.mkv"]
    assert data["b.mkv"]["Audio"] == []


def test_format_default(movie_tree):
    """Test the sectioned listing."""
    output = format_default(movie_tree, title="movie.mkv")

    assert "File: movie.mkv" in output
    assert "## GENERAL" in output
    assert "## VIDEO" in output
    assert "## AUDIO #1" in output
    assert "## AUDIO #2" in output
    assert "## CHAPTERS" in output
    assert "00:05:00.000" in output
    assert "Duration" in output and "01:23:45.678" in output


def test_format_default_empty():
    """Test an empty tree."""
    assert "(no streams)" in format_default(ResultTree())


def test_format_quiet(movie_tree):
    """Test the one-line summary."""
    assert format_quiet(movie_tree, "movie.mkv") == (
        "movie.mkv | 01:23:45.678 | 5.57 GB | 1920x1080 | 1V 2A 1T"
    )


def test_format_quiet_raw_duration():
    """Test raw millisecond durations are formatted."""
    tree = _movie_tree(raw=True)
    assert format_quiet(tree, "movie.mkv").split(" | ")[1] == "01:23:45.678"


def test_format_quiet_empty():
    """Test the summary of an empty tree."""
    assert format_quiet(ResultTree(), "x") == "x | N/A | N/A | N/A | no streams"
