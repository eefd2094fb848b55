"""
Graph module.

Provides the node/graph contracts and shortest path search:
- Node, Graph: Abstract contracts for graph collaborators
- GraphNode, NodeKind: Concrete actor/movie node record
- PathFinder: BFS shortest path by edge count
"""

from moviegraph.graph.base import Graph, Node
from moviegraph.graph.node import GraphNode, NodeKind
from moviegraph.graph.search import PathFinder, find_shortest_path, path_names

__all__ = [
    "Graph",
    "Node",
    "GraphNode",
    "NodeKind",
    "PathFinder",
    "find_shortest_path",
    "path_names",
]
