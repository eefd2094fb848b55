"""
Configuration constants for the Movie Graph project.

All paths, settings, and tunable parameters are defined here.
Values can be overridden from the environment or a project-root .env file.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of moviegraph/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# Data directory (contains the IMDB dumps and the compiled graph cache)
DATA_DIR = Path(os.environ.get("MOVIEGRAPH_DATA_DIR", PROJECT_ROOT / "data"))

# Individual data file paths (IMDB name.basics / title.basics layouts)
ACTORS_PATH = Path(os.environ.get("MOVIEGRAPH_ACTORS_PATH", DATA_DIR / "name.basics.tsv"))
MOVIES_PATH = Path(os.environ.get("MOVIEGRAPH_MOVIES_PATH", DATA_DIR / "title.basics.tsv"))

# Compiled adjacency lists, rebuilt from the TSV files when absent
GRAPH_CACHE_PATH = Path(os.environ.get("MOVIEGRAPH_CACHE_PATH", DATA_DIR / "graph.msgpack"))

# =============================================================================
# Dataset Filtering
# =============================================================================

# Only people with one of these professions become actor nodes
ACTOR_PROFESSIONS = ("actor", "actress")

# Only titles of these types become movie nodes
MOVIE_TITLE_TYPES = ("movie",)

# IMDB marker for an empty field
MISSING_VALUE = "\\N"

# Later duplicates are named "<name><sep><n>", e.g. "Nick 2"
DUPLICATE_NAME_SEPARATOR = " "

# =============================================================================
# Search Configuration
# =============================================================================

def _parse_max_depth(value: str | None) -> int | None:
    """Read MOVIEGRAPH_MAX_DEPTH; unset, non-integer or negative means unbounded."""
    if not value:
        return None
    try:
        depth = int(value)
    except ValueError:
        logger.warning(f"Ignoring MOVIEGRAPH_MAX_DEPTH={value!r}: not an integer")
        return None
    if depth < 0:
        logger.warning(f"Ignoring MOVIEGRAPH_MAX_DEPTH={value!r}: must be non-negative")
        return None
    return depth


# BFS maximum depth in edges (None = unbounded)
BFS_MAX_DEPTH = _parse_max_depth(os.environ.get("MOVIEGRAPH_MAX_DEPTH"))

# =============================================================================
# Web Configuration
# =============================================================================

WEB_HOST = os.environ.get("MOVIEGRAPH_HOST", "127.0.0.1")
WEB_PORT = int(os.environ.get("MOVIEGRAPH_PORT", "5000"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "actors": ACTORS_PATH.exists(),
        "movies": MOVIES_PATH.exists(),
    }


def get_missing_data_files() -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files()
    return [name for name, exists in status.items() if not exists]
