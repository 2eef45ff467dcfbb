"""
Via-queries: shortest paths forced through a required vertex.
"""

from __future__ import annotations

import logging

from wikipath.graph.bfs import BFSPathEngine, path_length

logger = logging.getLogger(__name__)


class PathComposer:
    """
    Joins two independent shortest paths at a required vertex.

    The result is a shortest origin -> required -> destination walk,
    which is generally longer than the unconstrained shortest path.
    Each half is searched from scratch.
    """

    def __init__(self, engine: BFSPathEngine) -> None:
        self._engine = engine

    def shortest_path_via(self, origin: str, required: str, destination: str) -> list[str]:
        """
        Find a shortest path from origin to destination through required.

        Returns:
            Labels from origin to destination with required appearing once at
            the junction, or [] if either half has no path.
        """
        first_half = self._engine.shortest_path(origin, required)
        second_half = self._engine.shortest_path(required, destination)

        if not first_half or not second_half:
            logger.debug(f"No path {origin!r} -> {destination!r} through {required!r}")
            return []

        # second_half starts with the required vertex
        return first_half[:-1] + second_half

    def shortest_path_via_length(self, origin: str, required: str, destination: str) -> int:
        """Edge count of the via-path, or -1 if none."""
        return path_length(self.shortest_path_via(origin, required, destination))
