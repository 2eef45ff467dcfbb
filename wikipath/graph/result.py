"""
Result dataclass for a single path query.
"""

from __future__ import annotations

from dataclasses import dataclass

from wikipath.graph.bfs import path_length


@dataclass(frozen=True)
class PathResult:
    """
    Record of one answered query.

    Attributes:
        origin: Starting label
        destination: Ending label
        path: Labels from origin to destination, or () if no path exists
        via: Required intermediate label (None for a direct query)
    """

    origin: str
    destination: str
    path: tuple[str, ...] = ()
    via: str | None = None

    @property
    def length(self) -> int:
        """Number of edges (-1 when no path exists)."""
        return path_length(self.path)

    @property
    def found(self) -> bool:
        return bool(self.path)
