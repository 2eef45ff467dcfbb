"""
Graph module.

Provides the labeled graph model and shortest-path queries:
- NameRegistry: label <-> dense vertex id
- GraphStore: directed adjacency lists
- BFSPathEngine: one shortest path between two labels
- PathComposer: shortest path forced through a required label
- PathFinder / build: query surface over a built graph
"""

from wikipath.graph.bfs import BFSPathEngine, path_length
from wikipath.graph.composer import PathComposer
from wikipath.graph.finder import PathFinder, build
from wikipath.graph.registry import NameRegistry
from wikipath.graph.result import PathResult
from wikipath.graph.store import GraphStore

__all__ = [
    "BFSPathEngine",
    "GraphStore",
    "NameRegistry",
    "PathComposer",
    "PathFinder",
    "PathResult",
    "build",
    "path_length",
]
