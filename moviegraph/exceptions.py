"""
Exception types raised by the graph collaborator.

The path finder itself never raises; a missing endpoint and an
unreachable target are both reported as ``None``.
"""


class MovieGraphError(Exception):
    """Base class for moviegraph errors."""


class GraphCacheError(MovieGraphError):
    """Raised when a msgpack graph cache cannot be decoded."""


class DataFilesMissingError(MovieGraphError, FileNotFoundError):
    """Raised when the configured IMDB data files do not exist."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing data files: {', '.join(missing)}")
