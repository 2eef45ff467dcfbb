"""
Wikipath CLI - find the shortest link path between two articles.

Usage:
    wikipath data/articles.tsv data/links.tsv
    wikipath data/articles.tsv data/links.tsv --start Cat --target Dog
    wikipath data/articles.tsv data/links.tsv --via
    wikipath data/articles.tsv data/links.tsv --start Cat --through Mammal --target Dog
    wikipath --cache data/graph.msgpack --seed 7

Endpoints that are not given (or given as "random") are picked uniformly
at random from the article list. --via picks a random intermediate article
as well; --through names one.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from wikipath.config import (
    ARTICLES_PATH,
    LINKS_PATH,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    SYMMETRIC_EDGES,
)
from wikipath.data import load_graph, load_snapshot, save_snapshot
from wikipath.errors import GraphError
from wikipath.graph import PathFinder, PathResult

logger = logging.getLogger(__name__)

PATH_SEPARATOR = " ---> "


def format_result(result: PathResult) -> list[str]:
    """Render a query result as output lines."""
    if result.via is None:
        header = f"Path from {result.origin} to {result.destination}, length = {result.length}"
    else:
        header = (
            f"Path from {result.origin} to {result.destination} through "
            f"{result.via}, length = {result.length}"
        )

    if result.length > 0:
        body = PATH_SEPARATOR.join(result.path)
    elif result.length == 0:
        body = "The start node and the end node are the same!"
    else:
        body = "The path doesn't exist."

    return [header, body]


def pick_label(finder: PathFinder, requested: str | None, rng: random.Random) -> str:
    """Return the requested label, or a random one for None/'random'."""
    if requested is None or requested.lower() == "random":
        return finder.any_label(rng)
    return requested


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="wikipath",
        description="Find the shortest link path between two articles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "articles",
        type=Path,
        nargs="?",
        default=ARTICLES_PATH,
        help=f"Article file, one URL-encoded name per line (default: {ARTICLES_PATH})",
    )
    parser.add_argument(
        "links",
        type=Path,
        nargs="?",
        default=LINKS_PATH,
        help=f"Link file, one 'source target' pair per line (default: {LINKS_PATH})",
    )
    parser.add_argument(
        "--start",
        type=str,
        default=None,
        help="Starting article (default: random)",
    )
    parser.add_argument(
        "--target",
        type=str,
        default=None,
        help="Target article (default: random)",
    )
    parser.add_argument(
        "--via",
        action="store_true",
        help="Require the path to pass through an intermediate article (random unless --through)",
    )
    parser.add_argument(
        "--through",
        type=str,
        default=None,
        help="Intermediate article the path must pass through (implies --via)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for picking articles",
    )
    parser.add_argument(
        "--symmetric",
        action="store_true",
        default=None,
        help="Treat every link as going both ways",
    )
    parser.add_argument(
        "--cache",
        type=Path,
        default=None,
        help="msgpack graph snapshot: read if present, otherwise written after loading",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def load_finder(args: argparse.Namespace) -> PathFinder:
    """Load the graph from the snapshot cache or the text files."""
    symmetric = SYMMETRIC_EDGES if args.symmetric is None else args.symmetric

    if args.cache is not None and args.cache.exists():
        finder = load_snapshot(args.cache)
        if finder.symmetric == symmetric:
            return finder
        logger.info(
            f"Snapshot {args.cache} has symmetric={finder.symmetric}, "
            f"requested symmetric={symmetric}; rebuilding"
        )

    finder = load_graph(args.articles, args.links, symmetric=symmetric)
    if args.cache is not None:
        save_snapshot(finder, args.cache)
    return finder


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    rng = random.Random(args.seed)

    try:
        finder = load_finder(args)

        start = pick_label(finder, args.start, rng)
        target = pick_label(finder, args.target, rng)
        via = None
        if args.via or args.through is not None:
            via = pick_label(finder, args.through, rng)

        result = finder.query(start, target, via=via)
    except (OSError, GraphError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in format_result(result):
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
