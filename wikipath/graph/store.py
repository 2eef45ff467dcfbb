"""
Adjacency-list storage for an unweighted directed graph over dense ids.
"""

from __future__ import annotations

from wikipath.errors import UnknownVertexError


class GraphStore:
    """
    Directed adjacency lists keyed by vertex id.

    Neighbors are kept in edge insertion order; parallel edges and
    self-edges are stored as given.
    """

    def __init__(self) -> None:
        self._adjacency: list[list[int]] = []
        self._edge_count = 0

    def add_vertex(self) -> int:
        """Allocate the next vertex id."""
        self._adjacency.append([])
        return len(self._adjacency) - 1

    def add_edge(self, source: int, target: int) -> None:
        """Append a directed edge source -> target."""
        self._check(source)
        self._check(target)
        self._adjacency[source].append(target)
        self._edge_count += 1

    def neighbors_of(self, vertex_id: int) -> tuple[int, ...]:
        """Get outgoing neighbor ids in insertion order."""
        self._check(vertex_id)
        return tuple(self._adjacency[vertex_id])

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def _check(self, vertex_id: int) -> None:
        if not 0 <= vertex_id < len(self._adjacency):
            raise UnknownVertexError(vertex_id, len(self._adjacency))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(vertices={self.vertex_count}, edges={self.edge_count})"
