"""
Movie Graph CLI - find the shortest collaboration chain between two names.

Usage:
    moviegraph "Kevin Bacon" "Tom Hanks"
    moviegraph "Kevin Bacon" "Apollo 13" --target-movie
    moviegraph Kris Logan --actors tests/data/testActors.tsv --movies tests/data/testMovies.tsv
    moviegraph "Kevin Bacon" "Tom Hanks" --max-depth 6 -v

Names are looked up among actors unless --start-movie / --target-movie
is given. Exit status is 0 when a path is found and 1 otherwise.
"""

from __future__ import annotations

import argparse
import logging
import sys

from moviegraph import config
from moviegraph.data.loader import IMDBGraph, load_default_graph
from moviegraph.exceptions import MovieGraphError
from moviegraph.graph import Graph, NodeKind, PathFinder, path_names

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="moviegraph",
        description="Find the shortest actor/movie chain between two names",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("start", help="Name to start from")
    parser.add_argument("target", help="Name to reach")
    parser.add_argument(
        "--start-movie",
        action="store_true",
        help="Look up START among movies instead of actors",
    )
    parser.add_argument(
        "--target-movie",
        action="store_true",
        help="Look up TARGET among movies instead of actors",
    )
    parser.add_argument(
        "--actors",
        type=str,
        default=None,
        help=f"Actors TSV file (default: {config.ACTORS_PATH})",
    )
    parser.add_argument(
        "--movies",
        type=str,
        default=None,
        help=f"Movies TSV file (default: {config.MOVIES_PATH})",
    )
    parser.add_argument(
        "--cache",
        type=str,
        default=None,
        help="msgpack graph cache to read or create (default: the shared graph's cache)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=config.BFS_MAX_DEPTH,
        help="Maximum path length in edges (default: unbounded)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def build_graph(args: argparse.Namespace) -> Graph:
    """Use the configured shared graph unless data files or a cache were given explicitly."""
    if args.actors is None and args.movies is None and args.cache is None:
        return load_default_graph()
    return IMDBGraph(
        args.actors or config.ACTORS_PATH,
        args.movies or config.MOVIES_PATH,
        cache_path=args.cache,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else config.LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )

    try:
        graph = build_graph(args)
        start_kind = NodeKind.MOVIE if args.start_movie else NodeKind.ACTOR
        target_kind = NodeKind.MOVIE if args.target_movie else NodeKind.ACTOR
        start = _lookup(graph, args.start, start_kind)
        target = _lookup(graph, args.target, target_kind)
    except (MovieGraphError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Pre-validate so the user learns which name was unknown
    for name, kind, node in ((args.start, start_kind, start), (args.target, target_kind, target)):
        if node is None:
            print(f"Error: no {kind.value} named '{name}' in the graph", file=sys.stderr)
            return 1

    try:
        finder = PathFinder(max_depth=args.max_depth)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    path = finder.find_shortest_path(start, target)

    if path is None:
        limit = f" within {args.max_depth} steps" if args.max_depth is not None else ""
        print(f"No path from '{args.start}' to '{args.target}'{limit}")
        return 1

    print(" -> ".join(path_names(path)))
    print(f"\n{len(path) - 1} steps, {(len(path) - 1) // 2} degrees of separation")
    return 0


def _lookup(graph: Graph, name: str, kind: NodeKind):
    if kind is NodeKind.MOVIE:
        return graph.get_movie(name)
    return graph.get_actor(name)


if __name__ == "__main__":
    sys.exit(main())
