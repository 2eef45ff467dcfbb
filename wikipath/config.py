"""
Configuration constants for the Wikipath project.

All paths, settings, and tunable parameters are defined here.
Values can be overridden from the environment (or a .env file at the
project root).
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is parent of wikipath/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Path Configuration
# =============================================================================

# Data directory (contains article and link lists)
DATA_DIR = Path(os.environ.get("WIKIPATH_DATA_DIR", PROJECT_ROOT / "data"))

# One URL-encoded article name per line
ARTICLES_PATH = DATA_DIR / "articles.tsv"

# One "source target" pair of URL-encoded article names per line
LINKS_PATH = DATA_DIR / "links.tsv"

# msgpack snapshot of the built graph (avoids re-parsing the text files)
GRAPH_CACHE_PATH = DATA_DIR / "graph.msgpack"

# =============================================================================
# Ingestion Configuration
# =============================================================================

# Lines starting with this prefix are comments
COMMENT_PREFIX = "#"

# Encoding of the data files and of percent-escapes inside labels
LABEL_ENCODING = "utf-8"

# =============================================================================
# Graph Configuration
# =============================================================================

# Insert each declared link in both directions.
# The Wikispeedia links are directed, so this is off unless asked for.
SYMMETRIC_EDGES = os.environ.get("WIKIPATH_SYMMETRIC_EDGES", "false").lower() in ("1", "true", "yes")

def parse_max_depth(value: str | None) -> int | None:
    """Parse WIKIPATH_BFS_MAX_DEPTH (empty or unset = unbounded)."""
    if not value:
        return None
    try:
        depth = int(value)
    except ValueError:
        raise ValueError(f"WIKIPATH_BFS_MAX_DEPTH must be an integer, got {value!r}") from None
    if depth < 0:
        raise ValueError(f"WIKIPATH_BFS_MAX_DEPTH must be non-negative, got {depth}")
    return depth


# Maximum BFS depth in edges (None = unbounded)
BFS_MAX_DEPTH = parse_max_depth(os.environ.get("WIKIPATH_BFS_MAX_DEPTH"))

# Snapshot layout version written by wikipath.data.cache
SNAPSHOT_VERSION = 1

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "articles": ARTICLES_PATH.exists(),
        "links": LINKS_PATH.exists(),
    }


def get_missing_data_files() -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files()
    return [name for name, exists in status.items() if not exists]
