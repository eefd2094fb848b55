"""
Concrete node record shared by the IMDB graph and the path finder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from moviegraph.graph.base import Node


class NodeKind(str, Enum):
    """Which side of the bipartite graph a node belongs to."""

    ACTOR = "actor"
    MOVIE = "movie"


@dataclass(eq=False)
class GraphNode(Node):
    """
    Named node with an ordered neighbor list.

    Attributes:
        name: Display name (unique within its kind once the graph is built)
        kind: Actor or movie
        neighbors: Adjacent nodes in discovery order
    """

    name: str
    kind: NodeKind = NodeKind.ACTOR
    neighbors: list[GraphNode] = field(default_factory=list, repr=False)

    def get_name(self) -> str:
        return self.name

    def get_neighbors(self) -> list[GraphNode]:
        return self.neighbors

    def add_neighbor(self, other: GraphNode) -> None:
        """Append a one-way edge to other. Callers avoid duplicate edges."""
        self.neighbors.append(other)

    def connect(self, other: GraphNode) -> None:
        """Link this node and other in both directions."""
        self.add_neighbor(other)
        other.add_neighbor(self)

    @property
    def is_actor(self) -> bool:
        return self.kind is NodeKind.ACTOR

    @property
    def is_movie(self) -> bool:
        return self.kind is NodeKind.MOVIE
