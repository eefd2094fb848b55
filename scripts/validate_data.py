#!/usr/bin/env python3
"""
Validate IMDB data files and the compiled actor/movie graph.

Usage:
    python scripts/validate_data.py
    python scripts/validate_data.py --rebuild-cache
"""

import argparse
import logging
import sys
import time

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

from moviegraph import config
from moviegraph.data.loader import IMDBGraph
from moviegraph.graph import PathFinder, path_names

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def check_data_files_exist() -> bool:
    """Check that all data files exist."""
    print("\n=== Checking Data Files ===\n")

    files = {
        config.ACTORS_PATH.name: config.ACTORS_PATH,
        config.MOVIES_PATH.name: config.MOVIES_PATH,
    }

    all_exist = True
    for name, path in files.items():
        exists = path.exists()
        size_mb = path.stat().st_size / (1024 * 1024) if exists else 0
        status = f"✓ {name}: {size_mb:,.1f} MB" if exists else f"✗ {name}: NOT FOUND"
        print(status)
        if not exists:
            all_exist = False

    return all_exist


def load_and_validate(rebuild_cache: bool) -> IMDBGraph | None:
    """Build the graph, refresh the cache and run validation checks."""
    print("\n=== Loading Graph ===\n")

    start_time = time.time()

    # Always parse the TSV files here so the checks cover them, not a stale cache
    graph = IMDBGraph(config.ACTORS_PATH, config.MOVIES_PATH)
    _ = graph.actor_count()

    load_time = time.time() - start_time
    print(f"\nLoad time: {load_time:.1f} seconds")

    print("\n=== Graph Statistics ===\n")
    for key, value in graph.stats().items():
        print(f"  {key}: {value:,}")

    print("\n=== Validation Checks ===\n")
    all_valid = True
    for check, passed in graph.validate().items():
        status = "✓" if passed else "✗"
        print(f"  {status} {check}")
        if not passed:
            all_valid = False

    if rebuild_cache or not config.GRAPH_CACHE_PATH.exists():
        graph.save_cache(config.GRAPH_CACHE_PATH)
        print(f"\n✓ Wrote graph cache to {config.GRAPH_CACHE_PATH}")

    return graph if all_valid else None


def sample_search(graph: IMDBGraph) -> None:
    """Search between the first two actors that have neighbors."""
    print("\n=== Sample Search ===\n")

    connected = [actor for actor in graph.get_actors() if actor.get_neighbors()][:2]
    if len(connected) < 2:
        print("  ⚠ Fewer than two connected actors, skipping")
        return

    start, target = connected
    path = PathFinder().find_shortest_path(start, target)
    if path is None:
        print(f"  ⚠ No path from {start.get_name()} to {target.get_name()}")
    else:
        print(f"  ✓ {' -> '.join(path_names(path))}")


def main() -> int:
    """Main validation routine."""
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--rebuild-cache", action="store_true", help="Overwrite an existing graph cache")
    args = parser.parse_args()

    print("=" * 60)
    print("Movie Graph Data Validation")
    print("=" * 60)

    if not check_data_files_exist():
        print("\n✗ Some data files are missing. Cannot continue.")
        return 1

    try:
        graph = load_and_validate(args.rebuild_cache)
    except Exception as e:
        print(f"\n✗ Error loading data: {e}")
        import traceback
        traceback.print_exc()
        return 1

    if graph is None:
        print("\n✗ Validation checks failed.")
        return 1

    sample_search(graph)

    print("\n" + "=" * 60)
    print("✓ All validation checks passed!")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
