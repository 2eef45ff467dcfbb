"""
PathFinder: the query surface over a built graph.

Usage:
    from wikipath.graph import build

    finder = build(["A", "B", "C"], [("A", "B"), ("B", "C")])
    finder.shortest_path("A", "C")          # ["A", "B", "C"]
    finder.shortest_path_via("A", "B", "C")  # ["A", "B", "C"]
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from wikipath.errors import UnknownLabelError, UnknownLabelInEdgeError
from wikipath.graph.bfs import BFSPathEngine
from wikipath.graph.composer import PathComposer
from wikipath.graph.registry import NameRegistry
from wikipath.graph.result import PathResult
from wikipath.graph.store import GraphStore

logger = logging.getLogger(__name__)


def build(
    labels: Iterable[str],
    edges: Iterable[tuple[str, str]],
    *,
    symmetric: bool = False,
    max_depth: int | None = None,
) -> PathFinder:
    """
    Build a PathFinder from label and edge declarations.

    Labels get ids in the order given. Edges must only reference
    declared labels. Nothing is returned unless every declaration
    is valid.

    Args:
        labels: Vertex labels, first declared = id 0
        edges: (source label, target label) pairs, in insertion order
        symmetric: Also insert target -> source for every edge
        max_depth: BFS depth limit passed to the engine (None = unbounded)

    Raises:
        DuplicateLabelError: If a label is declared twice
        UnknownLabelInEdgeError: If an edge references an undeclared label
    """
    registry = NameRegistry()
    store = GraphStore()

    for label in labels:
        registry.register(label)
        store.add_vertex()

    for source, target in edges:
        try:
            source_id = registry.id_of(source)
            target_id = registry.id_of(target)
        except UnknownLabelError as e:
            raise UnknownLabelInEdgeError(e.label, (source, target)) from None

        store.add_edge(source_id, target_id)
        if symmetric:
            store.add_edge(target_id, source_id)

    logger.info(f"Built graph: {store.vertex_count:,} vertices, {store.edge_count:,} edges")
    return PathFinder(registry, store, symmetric=symmetric, max_depth=max_depth)


class PathFinder:
    """
    Read-only shortest-path queries over a labeled graph.

    Construct with build() rather than directly. After construction
    nothing mutates the registry or store, so queries may run from
    several threads at once.
    """

    def __init__(
        self,
        registry: NameRegistry,
        store: GraphStore,
        *,
        symmetric: bool = False,
        max_depth: int | None = None,
    ) -> None:
        self._registry = registry
        self._store = store
        self._symmetric = symmetric
        self._engine = BFSPathEngine(registry, store, max_depth=max_depth)
        self._composer = PathComposer(self._engine)

    # =========================================================================
    # Queries
    # =========================================================================

    def shortest_path(self, origin: str, destination: str) -> list[str]:
        return self._engine.shortest_path(origin, destination)

    def shortest_path_length(self, origin: str, destination: str) -> int:
        return self._engine.shortest_path_length(origin, destination)

    def shortest_path_via(self, origin: str, required: str, destination: str) -> list[str]:
        return self._composer.shortest_path_via(origin, required, destination)

    def shortest_path_via_length(self, origin: str, required: str, destination: str) -> int:
        return self._composer.shortest_path_via_length(origin, required, destination)

    def query(self, origin: str, destination: str, via: str | None = None) -> PathResult:
        """Run a direct or via-query and wrap the answer in a PathResult."""
        if via is None:
            path = self.shortest_path(origin, destination)
        else:
            path = self.shortest_path_via(origin, via, destination)
        return PathResult(origin=origin, destination=destination, path=tuple(path), via=via)

    def any_label(self, rng: random.Random | None = None) -> str:
        """Pick a label uniformly at random (for demos and sampling)."""
        return self._registry.any(rng)

    # =========================================================================
    # Graph Accessors
    # =========================================================================

    def has_label(self, label: str) -> bool:
        return label in self._registry

    def labels(self) -> list[str]:
        """All labels in id order."""
        return list(self._registry.labels)

    def neighbors(self, label: str) -> list[str]:
        """Outgoing neighbors of a label, in edge insertion order."""
        vertex_id = self._registry.id_of(label)
        return [self._registry.label_of(i) for i in self._store.neighbors_of(vertex_id)]

    def adjacency(self) -> list[list[int]]:
        """Neighbor id lists for every vertex, in id order."""
        return [list(self._store.neighbors_of(i)) for i in range(self._store.vertex_count)]

    @property
    def symmetric(self) -> bool:
        return self._symmetric

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def validate(self) -> dict[str, bool]:
        """Run consistency checks on the built graph."""
        registry, store = self._registry, self._store
        return {
            "has_vertices": store.vertex_count > 0,
            "counts_match": len(registry) == store.vertex_count,
            "labels_invertible": all(
                registry.id_of(label) == i for i, label in enumerate(registry.labels)
            ),
            "edges_in_range": all(
                0 <= n < store.vertex_count
                for i in range(store.vertex_count)
                for n in store.neighbors_of(i)
            ),
        }

    def stats(self) -> dict:
        """Get statistics about the built graph."""
        return {
            "vertex_count": self._store.vertex_count,
            "edge_count": self._store.edge_count,
            "symmetric": self._symmetric,
        }

    def __len__(self) -> int:
        return self._store.vertex_count

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(vertices={self._store.vertex_count}, edges={self._store.edge_count})"
