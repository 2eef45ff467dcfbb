"""
Breadth-first shortest path search over a GraphStore.

The engine holds no per-query state, so one instance can serve
concurrent queries once the graph is built.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence

from wikipath.graph.registry import NameRegistry
from wikipath.graph.store import GraphStore

logger = logging.getLogger(__name__)


def path_length(path: Sequence[str]) -> int:
    """Number of edges in a path, or -1 for the empty "no path" result."""
    if not path:
        return -1
    return len(path) - 1


class BFSPathEngine:
    """
    Finds one shortest path (by edge count) between two labels.

    Neighbors are scanned in adjacency order and each vertex keeps the
    first edge it was discovered by, so the returned path is the same
    on every call for a given graph.
    """

    def __init__(
        self,
        registry: NameRegistry,
        store: GraphStore,
        max_depth: int | None = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            registry: Label <-> id mapping for the graph
            store: Adjacency lists for the graph
            max_depth: Stop expanding beyond this many edges (None = unbounded)
        """
        self._registry = registry
        self._store = store
        self._max_depth = max_depth

    def shortest_path(self, origin: str, destination: str) -> list[str]:
        """
        Find a shortest path from origin to destination.

        Returns:
            Labels from origin to destination inclusive, [origin] when both
            are the same, or [] if destination is unreachable.

        Raises:
            UnknownLabelError: If either label is not in the graph
        """
        origin_id = self._registry.id_of(origin)
        destination_id = self._registry.id_of(destination)

        if origin_id == destination_id:
            return [origin]

        # Maps discovered id to the id it was discovered from
        predecessors: dict[int, int | None] = {origin_id: None}
        frontier = deque([(origin_id, 0)])

        while frontier:
            current_id, depth = frontier.popleft()

            if self._max_depth is not None and depth >= self._max_depth:
                continue

            for neighbor_id in self._store.neighbors_of(current_id):
                if neighbor_id in predecessors:
                    continue

                predecessors[neighbor_id] = current_id

                if neighbor_id == destination_id:
                    path = self._reconstruct(predecessors, destination_id)
                    logger.debug(f"Path {origin!r} -> {destination!r}: {len(path) - 1} edges")
                    return path

                frontier.append((neighbor_id, depth + 1))

        logger.debug(
            f"No path {origin!r} -> {destination!r} ({len(predecessors)} vertices visited)"
        )
        return []

    def shortest_path_length(self, origin: str, destination: str) -> int:
        """Edge count of the shortest path, 0 for origin == destination, -1 if none."""
        return path_length(self.shortest_path(origin, destination))

    def _reconstruct(self, predecessors: dict[int, int | None], destination_id: int) -> list[str]:
        ids = []
        vertex_id: int | None = destination_id
        while vertex_id is not None:
            ids.append(vertex_id)
            vertex_id = predecessors[vertex_id]
        return [self._registry.label_of(i) for i in reversed(ids)]
