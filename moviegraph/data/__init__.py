"""
Data loading module.

Provides IMDBGraph for building the actor/movie graph from IMDB
TSV dumps, and load_default_graph() for the configured shared graph.

Usage:
    from moviegraph.data import load_default_graph

    graph = load_default_graph()
    graph.get_actor("Kevin Bacon")
    graph.get_movie("Footloose")
"""

from moviegraph.data.loader import IMDBGraph, load_default_graph

__all__ = ["IMDBGraph", "load_default_graph"]
