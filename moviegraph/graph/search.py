"""
Breadth-first shortest path search over an unweighted node graph.

The finder works on any Node implementation: it only follows
get_neighbors() and compares nodes by identity, so it never depends on
how the graph was built.
"""

from __future__ import annotations

import logging
from collections import deque

from moviegraph.graph.base import Node

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Finds a shortest path between two nodes using BFS.

    Among several equally short paths the one reached through the
    earliest-discovered route wins, so results are deterministic for a
    fixed neighbor ordering. Holds no per-search state; one instance can
    serve any number of searches over a shared, read-only graph.
    """

    def __init__(self, max_depth: int | None = None) -> None:
        """
        Initialize path finder.

        Args:
            max_depth: Maximum path length in edges (None = unbounded)
        """
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self._max_depth = max_depth

    @property
    def max_depth(self) -> int | None:
        return self._max_depth

    def find_shortest_path(self, start: Node | None, target: Node | None) -> list[Node] | None:
        """
        Find a shortest path from start to target.

        Args:
            start: Node to start from (None if a lookup failed upstream)
            target: Node to reach (None if a lookup failed upstream)

        Returns:
            Nodes from start to target inclusive, or None if either
            endpoint is missing or target is unreachable
        """
        if start is None or target is None:
            return None

        # BFS with parent tracking; the parent map doubles as the visited set
        queue = deque([(start, 0)])
        parents: dict[Node, Node | None] = {start: None}

        while queue:
            current, depth = queue.popleft()

            if current is target:
                path = self._reconstruct(parents, current)
                logger.debug(
                    f"Found path of {len(path) - 1} edges after visiting {len(parents):,} nodes"
                )
                return path

            if self._max_depth is not None and depth >= self._max_depth:
                continue

            for neighbor in current.get_neighbors():
                if neighbor in parents:
                    continue
                parents[neighbor] = current
                queue.append((neighbor, depth + 1))

        logger.debug(
            f"No path from '{start.get_name()}' to '{target.get_name()}' "
            f"({len(parents):,} nodes reachable)"
        )
        return None

    def degrees_of_separation(self, start: Node | None, target: Node | None) -> int | None:
        """
        Number of actor-to-actor hops between two nodes.

        In the bipartite actor/movie graph every second edge passes
        through a movie, so this is half the path length in edges.
        Returns None when there is no path.
        """
        path = self.find_shortest_path(start, target)
        if path is None:
            return None
        return (len(path) - 1) // 2

    @staticmethod
    def _reconstruct(parents: dict[Node, Node | None], end: Node) -> list[Node]:
        """Walk parent links back from end and return the path start-first."""
        path = []
        node: Node | None = end
        while node is not None:
            path.append(node)
            node = parents[node]
        return list(reversed(path))


def find_shortest_path(start: Node | None, target: Node | None) -> list[Node] | None:
    """Unbounded shortest path search with a throwaway PathFinder."""
    return PathFinder().find_shortest_path(start, target)


def path_names(path: list[Node] | None) -> list[str]:
    """Display names along a path (empty for no path)."""
    if not path:
        return []
    return [node.get_name() for node in path]
