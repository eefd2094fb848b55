"""
Node and Graph contracts consumed by the path finder.

The path finder only ever calls Node.get_neighbors() and compares nodes
by identity. Graph is the collaborator that builds nodes and looks them
up by name; the path finder never touches it directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection, Sequence


class Node(ABC):
    """
    A vertex of the collaboration graph (an actor or a movie).

    Equality and hashing are by identity. Two nodes with the same
    display name are still different nodes.
    """

    @abstractmethod
    def get_name(self) -> str:
        """Display name of the node."""
        ...

    @abstractmethod
    def get_neighbors(self) -> Sequence[Node]:
        """
        Nodes directly connected to this one.

        The order is stable for the lifetime of the graph and decides
        which route wins among equally short paths.
        """
        ...


class Graph(ABC):
    """
    Abstract actor/movie graph with lookup by name.

    Implementations build Node objects and their neighbor lists from
    some external data source.
    """

    @abstractmethod
    def get_actor(self, name: str) -> Node | None:
        """Return the actor node with this name, or None if absent."""
        ...

    @abstractmethod
    def get_movie(self, name: str) -> Node | None:
        """Return the movie node with this name, or None if absent."""
        ...

    @abstractmethod
    def get_actors(self) -> Collection[Node]:
        """All actor nodes."""
        ...

    @abstractmethod
    def get_movies(self) -> Collection[Node]:
        """All movie nodes."""
        ...
