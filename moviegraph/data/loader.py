"""
IMDBGraph: actor/movie collaboration graph built from IMDB TSV dumps.

Usage:
    from moviegraph.data.loader import IMDBGraph

    graph = IMDBGraph("data/name.basics.tsv", "data/title.basics.tsv")

    # First access triggers loading
    graph.get_actor("Kevin Bacon")
    graph.get_movie("Apollo 13")
    graph.stats()
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterator
from functools import lru_cache
from pathlib import Path

import msgpack

from moviegraph import config
from moviegraph.exceptions import DataFilesMissingError, GraphCacheError
from moviegraph.graph.base import Graph
from moviegraph.graph.node import GraphNode, NodeKind

# Bumped whenever the cache layout changes
CACHE_VERSION = 2

# name.basics columns
_ACTOR_ID, _ACTOR_NAME, _PROFESSIONS, _KNOWN_FOR = 0, 1, 4, 5
# title.basics columns
_TITLE_ID, _TITLE_TYPE, _TITLE_NAME = 0, 1, 2

logger = logging.getLogger(__name__)


class IMDBGraph(Graph):
    """
    Lazy-loading actor/movie graph.

    Loads data on first access to any accessor. Only people with an
    actor or actress profession become actor nodes, and only titles of
    type "movie" become movie nodes. An actor is linked to every movie
    among their known-for titles. Names are unique within each kind:
    later duplicates are renamed "Name 2", "Name 3", and so on, in scan
    order.

    Attributes:
        actors_path: IMDB name.basics TSV file
        movies_path: IMDB title.basics TSV file
        cache_path: Optional msgpack cache of the compiled graph
    """

    def __init__(
        self,
        actors_path: str | Path,
        movies_path: str | Path,
        cache_path: str | Path | None = None,
    ) -> None:
        self.actors_path = Path(actors_path)
        self.movies_path = Path(movies_path)
        self.cache_path = Path(cache_path) if cache_path is not None else None
        self._actors: dict[str, GraphNode] = {}
        self._movies: dict[str, GraphNode] = {}
        self._initialized = False

    def _ensure_loaded(self) -> None:
        """Load all data on first access."""
        if self._initialized:
            return

        if self.cache_path is not None and self.cache_path.exists():
            payload = self._read_cache(self.cache_path)
            sources = self._source_signature()
            if sources is None or payload["sources"] == sources:
                self._actors, self._movies = _graph_from_payload(payload, self.cache_path)
                self._mark_loaded()
                return
            logger.warning(
                f"Graph cache {self.cache_path} was built from other data files; rebuilding"
            )

        logger.info("Building actor/movie graph from TSV files...")
        movies, movies_by_id = self._load_movies()
        actors = self._load_actors(movies_by_id)
        self._actors, self._movies = actors, movies

        if self.cache_path is not None:
            try:
                self._write_cache(self.cache_path)
            except OSError as e:
                logger.warning(f"Could not write graph cache {self.cache_path}: {e}")

        self._mark_loaded()

    def _mark_loaded(self) -> None:
        self._initialized = True
        logger.info(
            f"Graph ready: {len(self._actors):,} actors, {len(self._movies):,} movies"
        )

    # =========================================================================
    # TSV Parsing
    # =========================================================================

    def _load_movies(self) -> tuple[dict[str, GraphNode], dict[str, GraphNode]]:
        """Read title.basics rows; return movies by name and by title id."""
        logger.info(f"Loading movies from {self.movies_path}...")
        movies: dict[str, GraphNode] = {}
        movies_by_id: dict[str, GraphNode] = {}
        name_counts: dict[str, int] = {}
        skipped = 0

        for row in _read_tsv(self.movies_path, min_columns=_TITLE_NAME + 1, header="tconst"):
            if row[_TITLE_TYPE] not in config.MOVIE_TITLE_TYPES:
                skipped += 1
                continue
            name = _unique_name(row[_TITLE_NAME], movies, name_counts)
            node = GraphNode(name, NodeKind.MOVIE)
            movies[name] = node
            movies_by_id[row[_TITLE_ID]] = node

        logger.info(f"Loaded {len(movies):,} movies ({skipped:,} other titles skipped)")
        return movies, movies_by_id

    def _load_actors(self, movies_by_id: dict[str, GraphNode]) -> dict[str, GraphNode]:
        """Read name.basics rows, create actor nodes and link them to their movies."""
        logger.info(f"Loading actors from {self.actors_path}...")
        actors: dict[str, GraphNode] = {}
        name_counts: dict[str, int] = {}
        skipped = 0
        edges = 0

        for row in _read_tsv(self.actors_path, min_columns=_KNOWN_FOR + 1, header="nconst"):
            if not _is_actor(row[_PROFESSIONS]):
                skipped += 1
                continue
            name = _unique_name(row[_ACTOR_NAME], actors, name_counts)
            actor = GraphNode(name, NodeKind.ACTOR)
            actors[name] = actor

            for title_id in _split_field(row[_KNOWN_FOR]):
                movie = movies_by_id.get(title_id)
                if movie is not None:
                    actor.connect(movie)
                    edges += 1

        logger.info(
            f"Loaded {len(actors):,} actors with {edges:,} edges "
            f"({skipped:,} non-actors skipped)"
        )
        return actors

    # =========================================================================
    # msgpack Cache
    # =========================================================================

    def _source_signature(self) -> list[list] | None:
        """Resolved path and mtime of both TSV files, or None if either is missing."""
        if not (self.actors_path.exists() and self.movies_path.exists()):
            return None
        return [
            [str(path.resolve()), path.stat().st_mtime_ns]
            for path in (self.actors_path, self.movies_path)
        ]

    def save_cache(self, path: str | Path) -> None:
        """Write the compiled graph to a msgpack file."""
        self._ensure_loaded()
        self._write_cache(Path(path))

    def _write_cache(self, path: Path) -> None:
        logger.info(f"Saving graph cache to {path}...")
        actors = list(self._actors.values())
        movies = list(self._movies.values())
        actor_idx = {node: i for i, node in enumerate(actors)}
        movie_idx = {node: i for i, node in enumerate(movies)}

        payload = {
            "version": CACHE_VERSION,
            "sources": self._source_signature(),
            "actors": [node.name for node in actors],
            "movies": [node.name for node in movies],
            "actor_links": [[movie_idx[m] for m in node.neighbors] for node in actors],
            "movie_links": [[actor_idx[a] for a in node.neighbors] for node in movies],
        }

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            msgpack.dump(payload, f)

    @staticmethod
    def _read_cache(path: Path) -> dict:
        """Read and version-check a msgpack cache."""
        logger.info(f"Loading graph cache from {path}...")
        try:
            with open(path, "rb") as f:
                payload = msgpack.load(f)
            version = payload["version"]
        except (ValueError, TypeError, KeyError) as e:
            raise GraphCacheError(f"Could not decode graph cache {path}: {e}") from e

        if version != CACHE_VERSION:
            raise GraphCacheError(
                f"Cache {path} has version {version}, expected {CACHE_VERSION}"
            )
        if "sources" not in payload:
            raise GraphCacheError(f"Cache {path} does not record its source files")
        return payload

    # =========================================================================
    # Graph Accessors
    # =========================================================================

    def get_actor(self, name: str) -> GraphNode | None:
        """Get actor node by name, or None if not found."""
        self._ensure_loaded()
        return self._actors.get(name)

    def get_movie(self, name: str) -> GraphNode | None:
        """Get movie node by name, or None if not found."""
        self._ensure_loaded()
        return self._movies.get(name)

    def get_node(self, name: str, kind: NodeKind = NodeKind.ACTOR) -> GraphNode | None:
        """Look up a node of the given kind."""
        if kind is NodeKind.MOVIE:
            return self.get_movie(name)
        return self.get_actor(name)

    def get_actors(self) -> list[GraphNode]:
        self._ensure_loaded()
        return list(self._actors.values())

    def get_movies(self) -> list[GraphNode]:
        self._ensure_loaded()
        return list(self._movies.values())

    def actor_count(self) -> int:
        """Number of actor nodes."""
        self._ensure_loaded()
        return len(self._actors)

    def movie_count(self) -> int:
        """Number of movie nodes."""
        self._ensure_loaded()
        return len(self._movies)

    def edge_count(self) -> int:
        """Number of actor-movie edges."""
        self._ensure_loaded()
        return sum(len(node.neighbors) for node in self._actors.values())

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def validate(self) -> dict[str, bool]:
        """Run validation checks on loaded data."""
        self._ensure_loaded()
        actor_edges = {
            (id(actor), id(movie)) for actor in self._actors.values() for movie in actor.neighbors
        }
        movie_edges = {
            (id(actor), id(movie)) for movie in self._movies.values() for actor in movie.neighbors
        }
        return {
            "actors_loaded": len(self._actors) > 0,
            "movies_loaded": len(self._movies) > 0,
            "edges_symmetric": actor_edges == movie_edges,
            "edges_bipartite": all(
                n.is_movie for a in self._actors.values() for n in a.neighbors
            ) and all(n.is_actor for m in self._movies.values() for n in m.neighbors),
            "no_duplicate_edges": len(actor_edges) == self.edge_count(),
        }

    def stats(self) -> dict:
        """Get statistics about the loaded graph."""
        self._ensure_loaded()
        return {
            "actors": len(self._actors),
            "movies": len(self._movies),
            "edges": self.edge_count(),
            "isolated_actors": sum(1 for n in self._actors.values() if not n.neighbors),
            "isolated_movies": sum(1 for n in self._movies.values() if not n.neighbors),
        }


# =============================================================================
# Parsing Helpers
# =============================================================================

def _read_tsv(path: Path, min_columns: int, header: str) -> Iterator[list[str]]:
    """Yield rows of an IMDB TSV file, skipping the header and short rows."""
    with open(path, encoding="utf-8", newline="") as f:
        reader = csv.reader(f, delimiter="\t", quoting=csv.QUOTE_NONE)
        for line_no, row in enumerate(reader, start=1):
            if line_no == 1 and row and row[0] == header:
                continue
            if not row:
                continue
            if len(row) < min_columns:
                logger.warning(
                    f"{path.name}:{line_no}: expected {min_columns} columns, got {len(row)}; skipping"
                )
                continue
            yield row


def _split_field(value: str) -> list[str]:
    """Split a comma list field, dropping IMDB's empty marker and repeats."""
    if value == config.MISSING_VALUE:
        return []
    seen: dict[str, None] = {}
    for item in value.split(","):
        item = item.strip()
        if item and item != config.MISSING_VALUE:
            seen.setdefault(item)
    return list(seen)


def _is_actor(professions: str) -> bool:
    return any(p in config.ACTOR_PROFESSIONS for p in _split_field(professions))


def _unique_name(name: str, taken: dict[str, GraphNode], counts: dict[str, int]) -> str:
    """Return name, or the first free "name N" (N >= 2) if name is already used."""
    if name not in taken:
        return name
    n = counts.get(name, 1)
    while True:
        n += 1
        candidate = f"{name}{config.DUPLICATE_NAME_SEPARATOR}{n}"
        if candidate not in taken:
            counts[name] = n
            return candidate


def _graph_from_payload(
    payload: dict, path: Path
) -> tuple[dict[str, GraphNode], dict[str, GraphNode]]:
    """Rebuild actor and movie nodes with ordered adjacency from a cache payload."""
    try:
        actors = [GraphNode(name, NodeKind.ACTOR) for name in payload["actors"]]
        movies = [GraphNode(name, NodeKind.MOVIE) for name in payload["movies"]]
        actor_links = payload["actor_links"]
        movie_links = payload["movie_links"]
        if len(actor_links) != len(actors) or len(movie_links) != len(movies):
            raise GraphCacheError(f"Cache {path} has mismatched adjacency lists")

        for node, links in zip(actors, actor_links, strict=True):
            node.neighbors = [movies[i] for i in links]
        for node, links in zip(movies, movie_links, strict=True):
            node.neighbors = [actors[i] for i in links]
    except GraphCacheError:
        raise
    except (ValueError, TypeError, KeyError, IndexError) as e:
        raise GraphCacheError(f"Could not decode graph cache {path}: {e}") from e

    return {node.name: node for node in actors}, {node.name: node for node in movies}


@lru_cache(maxsize=1)
def load_default_graph() -> IMDBGraph:
    """
    Process-wide graph built from the configured data files.

    Constructed once and shared by the CLI and web app. Raises
    DataFilesMissingError when neither the TSV files nor a cache exist.
    """
    missing = config.get_missing_data_files()
    if missing and not config.GRAPH_CACHE_PATH.exists():
        raise DataFilesMissingError(missing)
    return IMDBGraph(config.ACTORS_PATH, config.MOVIES_PATH, cache_path=config.GRAPH_CACHE_PATH)
