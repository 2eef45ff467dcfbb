#!/usr/bin/env python3
"""
Validate the article/link data files and the built graph.

Usage:
    python scripts/validate_data.py
"""

import logging
import sys
import time
from pathlib import Path

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from wikipath.config import ARTICLES_PATH, LINKS_PATH  # noqa: E402 - must be after sys.path modification
from wikipath.errors import GraphError  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)

SAMPLE_QUERIES = 5


def check_data_files_exist() -> bool:
    """Check that all data files exist."""
    print("\n=== Checking Data Files ===\n")

    files = {
        "articles.tsv": ARTICLES_PATH,
        "links.tsv": LINKS_PATH,
    }

    all_exist = True
    for name, path in files.items():
        exists = path.exists()
        size_mb = path.stat().st_size / (1024 * 1024) if exists else 0
        status = f"✓ {name}: {size_mb:,.1f} MB" if exists else f"✗ {name}: NOT FOUND"
        print(status)
        if not exists:
            all_exist = False

    return all_exist


def load_and_validate():
    """Build the graph and run validation checks. Returns the finder or None."""
    print("\n=== Building Graph ===\n")

    from wikipath.data import load_graph

    start_time = time.time()
    finder = load_graph(ARTICLES_PATH, LINKS_PATH)
    print(f"\nLoad time: {time.time() - start_time:.1f} seconds")

    print("\n=== Graph Statistics ===\n")
    for key, value in finder.stats().items():
        print(f"  {key}: {value:,}" if isinstance(value, int) and not isinstance(value, bool) else f"  {key}: {value}")

    print("\n=== Validation Checks ===\n")
    all_valid = True
    for check, passed in finder.validate().items():
        status = "✓" if passed else "✗"
        print(f"  {status} {check}")
        if not passed:
            all_valid = False

    return finder if all_valid else None


def run_sample_queries(finder) -> bool:
    """Run a few random queries and check basic path properties."""
    print("\n=== Sample Queries ===\n")

    import random

    rng = random.Random(0)
    all_passed = True

    for _ in range(SAMPLE_QUERIES):
        origin = finder.any_label(rng)
        destination = finder.any_label(rng)
        path = finder.shortest_path(origin, destination)
        length = finder.shortest_path_length(origin, destination)

        if not path:
            print(f"  ⚠ {origin} -> {destination}: no path")
            continue

        ok = path[0] == origin and path[-1] == destination and length == len(path) - 1
        status = "✓" if ok else "✗"
        print(f"  {status} {origin} -> {destination}: {length} clicks")
        if not ok:
            all_passed = False

    return all_passed


def main() -> int:
    """Main validation routine."""
    print("=" * 60)
    print("Wikipath Data Validation")
    print("=" * 60)

    if not check_data_files_exist():
        print("\n✗ Some data files are missing. Cannot continue.")
        return 1

    try:
        finder = load_and_validate()
    except GraphError as e:
        print(f"\n✗ Error loading data: {e}")
        return 1
    if finder is None:
        print("\n✗ Validation checks failed.")
        return 1

    if not run_sample_queries(finder):
        print("\n✗ Sample query checks failed.")
        return 1

    print("\n" + "=" * 60)
    print("✓ All validation checks passed!")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
