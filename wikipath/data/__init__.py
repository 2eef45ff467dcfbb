"""
Data loading module.

Reads article/link text files into a PathFinder, and saves or restores
msgpack snapshots of a built graph.

Usage:
    from wikipath.data import load_graph

    finder = load_graph("data/articles.tsv", "data/links.tsv")
    finder.shortest_path("Cat", "Dog")
"""

from wikipath.data.cache import load_snapshot, save_snapshot
from wikipath.data.loader import decode_label, load_graph, read_edges, read_labels

__all__ = [
    "decode_label",
    "load_graph",
    "load_snapshot",
    "read_edges",
    "read_labels",
    "save_snapshot",
]
