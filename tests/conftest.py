"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from moviegraph.data.loader import IMDBGraph
from moviegraph.graph import GraphNode, NodeKind


@pytest.fixture(scope="session")
def test_data_dir() -> Path:
    """Return the directory holding the small IMDB-style fixture files."""
    return Path(__file__).parent / "data"


@pytest.fixture(scope="session")
def actors_path(test_data_dir: Path) -> Path:
    return test_data_dir / "testActors.tsv"


@pytest.fixture(scope="session")
def movies_path(test_data_dir: Path) -> Path:
    return test_data_dir / "testMovies.tsv"


@pytest.fixture
def make_graph(actors_path: Path, movies_path: Path):
    """Return a factory building a fresh graph from the fixture files."""

    def _make(cache_path=None) -> IMDBGraph:
        return IMDBGraph(actors_path, movies_path, cache_path=cache_path)

    return _make


@pytest.fixture(scope="module")
def graph(actors_path: Path, movies_path: Path) -> IMDBGraph:
    """Load the fixture graph once for all tests in a module."""
    graph = IMDBGraph(actors_path, movies_path)
    _ = graph.actor_count()
    return graph


@pytest.fixture
def diamond() -> dict[str, GraphNode]:
    """
    Return a small hand-built graph with two equally short routes.

        a -- m1 -- b
        a -- m2 -- b -- m3 -- c

    a lists m1 before m2, so the route through m1 is discovered first.
    """
    nodes = {
        "a": GraphNode("a"),
        "b": GraphNode("b"),
        "c": GraphNode("c"),
        "m1": GraphNode("m1", NodeKind.MOVIE),
        "m2": GraphNode("m2", NodeKind.MOVIE),
        "m3": GraphNode("m3", NodeKind.MOVIE),
    }
    nodes["a"].connect(nodes["m1"])
    nodes["a"].connect(nodes["m2"])
    nodes["b"].connect(nodes["m1"])
    nodes["b"].connect(nodes["m2"])
    nodes["b"].connect(nodes["m3"])
    nodes["c"].connect(nodes["m3"])
    return nodes
