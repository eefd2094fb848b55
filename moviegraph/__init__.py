"""
Movie Graph Search.

Finds the shortest chain of collaborations connecting two actors (or
movies) in an IMDB-style actor/movie graph, six-degrees style.
"""

__version__ = "0.1.0"
