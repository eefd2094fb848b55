"""
Web UI module.

Provides the Flask interface for Movie Graph:
- Search page: find the chain between two actors or movies
- /api/path: the same search as JSON
"""
