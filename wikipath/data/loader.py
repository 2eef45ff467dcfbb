"""
Text loaders for the article and link files.

Article file: one URL-encoded label per line.
Link file: one whitespace-separated "source target" pair per line.
In both, blank lines and lines starting with '#' are skipped.

Usage:
    from wikipath.data import load_graph

    finder = load_graph("data/articles.tsv", "data/links.tsv")
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from urllib.parse import unquote

from wikipath.config import BFS_MAX_DEPTH, COMMENT_PREFIX, LABEL_ENCODING, SYMMETRIC_EDGES
from wikipath.errors import DataFormatError
from wikipath.graph import PathFinder, build

logger = logging.getLogger(__name__)


def decode_label(raw: str) -> str:
    """Decode a URL-encoded label ('%C3%89cole' -> 'École')."""
    return unquote(raw, encoding=LABEL_ENCODING)


def _data_lines(path: Path) -> Iterator[tuple[int, str]]:
    """Yield (line number, line) for lines that are neither blank nor comments."""
    with open(path, encoding=LABEL_ENCODING) as f:
        for line_no, line in enumerate(f, start=1):
            line = line.rstrip("\r\n")
            if not line.strip() or line.startswith(COMMENT_PREFIX):
                continue
            yield line_no, line


def read_labels(path: Path | str) -> Iterator[str]:
    """Yield decoded labels from an article file, in file order."""
    for _, line in _data_lines(Path(path)):
        yield decode_label(line.strip())


def read_edges(path: Path | str) -> Iterator[tuple[str, str]]:
    """
    Yield decoded (source, target) pairs from a link file, in file order.

    Columns after the second are ignored.

    Raises:
        DataFormatError: If a line has fewer than two fields
    """
    path = Path(path)
    for line_no, line in _data_lines(path):
        fields = line.split()
        if len(fields) < 2:
            raise DataFormatError(path, line_no, line)
        yield decode_label(fields[0]), decode_label(fields[1])


def load_graph(
    articles_path: Path | str,
    links_path: Path | str,
    *,
    symmetric: bool | None = None,
    max_depth: int | None = BFS_MAX_DEPTH,
) -> PathFinder:
    """
    Read both files and build a PathFinder.

    Args:
        articles_path: Article (vertex) file
        links_path: Link (edge) file
        symmetric: Insert links in both directions (None = config default)
        max_depth: BFS depth limit (None = unbounded)

    Raises:
        FileNotFoundError: If either file is missing
        DataFormatError: If a link line is malformed
        DuplicateLabelError: If an article is listed twice
        UnknownLabelInEdgeError: If a link names an unlisted article
    """
    if symmetric is None:
        symmetric = SYMMETRIC_EDGES

    logger.info(f"Loading articles from {articles_path} and links from {links_path}...")
    finder = build(
        read_labels(articles_path),
        read_edges(links_path),
        symmetric=symmetric,
        max_depth=max_depth,
    )
    logger.info(f"Loaded {len(finder):,} articles")
    return finder
