"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import random
from pathlib import Path

import pytest

from wikipath.graph import PathFinder, build


@pytest.fixture
def diamond_labels() -> list[str]:
    """Labels for the diamond graph plus an isolated vertex."""
    return ["A", "B", "C", "D", "E"]


@pytest.fixture
def diamond_edges() -> list[tuple[str, str]]:
    """A->B->C and A->D->C, with A->B inserted before A->D."""
    return [("A", "B"), ("B", "C"), ("A", "D"), ("D", "C")]


@pytest.fixture
def diamond(diamond_labels, diamond_edges) -> PathFinder:
    """Diamond graph with E disconnected."""
    return build(diamond_labels, diamond_edges)


@pytest.fixture
def write_data_files(tmp_path: Path):
    """Return a helper that writes article/link files and returns their paths."""

    def _write(articles: str, links: str) -> tuple[Path, Path]:
        articles_path = tmp_path / "articles.tsv"
        links_path = tmp_path / "links.tsv"
        articles_path.write_text(articles, encoding="utf-8")
        links_path.write_text(links, encoding="utf-8")
        return articles_path, links_path

    return _write


@pytest.fixture
def random_graph():
    """Return a factory for small seeded random directed graphs as (labels, edges)."""

    def _make(seed: int, size: int = 6, edge_prob: float = 0.3):
        rng = random.Random(seed)
        labels = [f"v{i}" for i in range(size)]
        edges = [(a, b) for a in labels for b in labels if rng.random() < edge_prob]
        return labels, edges

    return _make
