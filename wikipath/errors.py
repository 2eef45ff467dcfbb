"""
Exceptions raised by the graph core and its data loaders.

Lookup failures are LookupErrors and construction failures are
ValueErrors, so callers can catch either the builtin family or
GraphError for everything coming out of wikipath.
"""

from __future__ import annotations

from pathlib import Path


class GraphError(Exception):
    """Base class for all wikipath errors."""


class UnknownLabelError(GraphError, LookupError):
    """A query referenced a label that is not registered."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Unknown label: {label!r}")


class UnknownIdError(GraphError, LookupError):
    """An id was not produced by this registry."""

    def __init__(self, vertex_id: int) -> None:
        self.vertex_id = vertex_id
        super().__init__(f"Unknown vertex id: {vertex_id}")


class UnknownVertexError(GraphError, LookupError):
    """An edge or neighbor lookup referenced an unallocated vertex."""

    def __init__(self, vertex_id: int, vertex_count: int) -> None:
        self.vertex_id = vertex_id
        self.vertex_count = vertex_count
        super().__init__(
            f"Unknown vertex {vertex_id} (allocated range [0, {vertex_count}))"
        )


class EmptyRegistryError(GraphError, LookupError):
    """A random label was requested from a graph with no vertices."""

    def __init__(self) -> None:
        super().__init__("Cannot pick a label: no vertices are registered")


class GraphBuildError(GraphError, ValueError):
    """Base class for construction-time failures."""


class DuplicateLabelError(GraphBuildError):
    """The same label was declared twice."""

    def __init__(self, label: str, existing_id: int) -> None:
        self.label = label
        self.existing_id = existing_id
        super().__init__(f"Duplicate label {label!r} (already registered as id {existing_id})")


class UnknownLabelInEdgeError(GraphBuildError):
    """An edge declaration referenced a label that was never declared."""

    def __init__(self, label: str, edge: tuple[str, str]) -> None:
        self.label = label
        self.edge = edge
        super().__init__(
            f"Edge {edge[0]!r} -> {edge[1]!r} references undeclared label {label!r}"
        )


class DataFormatError(GraphError, ValueError):
    """A line in a data file could not be parsed."""

    def __init__(self, path: Path | str, line_no: int, line: str) -> None:
        self.path = Path(path)
        self.line_no = line_no
        self.line = line
        super().__init__(f"{self.path}:{line_no}: malformed edge line {line!r}")


class SnapshotError(GraphError, ValueError):
    """A graph snapshot file is unreadable or has an unsupported layout."""
