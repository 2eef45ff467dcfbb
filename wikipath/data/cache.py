"""
msgpack snapshots of a built graph.

Parsing large link files is the slow part of startup, so the CLI can
keep a snapshot of the labels and adjacency lists next to the data.
Snapshots hold the graph only, never query results.
"""

from __future__ import annotations

import logging
from pathlib import Path

import msgpack

from wikipath.config import BFS_MAX_DEPTH, SNAPSHOT_VERSION
from wikipath.errors import SnapshotError, UnknownVertexError
from wikipath.graph import GraphStore, NameRegistry, PathFinder

logger = logging.getLogger(__name__)


def save_snapshot(finder: PathFinder, path: Path | str) -> None:
    """Write the finder's labels and adjacency lists to a msgpack file."""
    path = Path(path)
    payload = {
        "version": SNAPSHOT_VERSION,
        "symmetric": finder.symmetric,
        "labels": finder.labels(),
        "adjacency": finder.adjacency(),
    }
    logger.info(f"Saving graph snapshot to {path}...")
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        msgpack.pack(payload, f)


def load_snapshot(path: Path | str, *, max_depth: int | None = BFS_MAX_DEPTH) -> PathFinder:
    """
    Rebuild a PathFinder from a msgpack snapshot.

    Labels are re-registered and edges re-inserted through the normal
    registry/store checks, so a corrupted snapshot cannot produce an
    inconsistent graph.

    Raises:
        FileNotFoundError: If the snapshot is missing
        SnapshotError: If the file is not a snapshot this version can read
        DuplicateLabelError: If the snapshot lists a label twice
    """
    path = Path(path)
    logger.info(f"Loading graph snapshot from {path}...")
    with open(path, "rb") as f:
        try:
            payload = msgpack.unpack(f)
        except ValueError as e:
            raise SnapshotError(f"{path}: unreadable snapshot ({e})") from e

    if not isinstance(payload, dict) or payload.get("version") != SNAPSHOT_VERSION:
        found = payload.get("version") if isinstance(payload, dict) else None
        raise SnapshotError(f"{path}: unsupported snapshot version {found!r}")

    labels = payload.get("labels")
    adjacency = payload.get("adjacency")
    if not isinstance(labels, list) or not isinstance(adjacency, list):
        raise SnapshotError(f"{path}: 'labels' and 'adjacency' must both be lists")
    if not all(isinstance(label, str) for label in labels):
        raise SnapshotError(f"{path}: labels must be strings")
    if not all(
        isinstance(targets, list)
        and all(isinstance(t, int) and not isinstance(t, bool) for t in targets)
        for targets in adjacency
    ):
        raise SnapshotError(f"{path}: adjacency entries must be lists of ints")
    symmetric = payload.get("symmetric", False)
    if not isinstance(symmetric, bool):
        raise SnapshotError(f"{path}: 'symmetric' must be a boolean")
    if len(adjacency) != len(labels):
        raise SnapshotError(f"{path}: {len(labels)} labels but {len(adjacency)} adjacency lists")

    # Symmetric links were already mirrored when the snapshot was written
    registry = NameRegistry()
    store = GraphStore()
    for label in labels:
        registry.register(label)
        store.add_vertex()
    for source_id, targets in enumerate(adjacency):
        for target_id in targets:
            try:
                store.add_edge(source_id, target_id)
            except UnknownVertexError as e:
                raise SnapshotError(f"{path}: {e}") from e

    logger.info(f"Loaded snapshot: {store.vertex_count:,} vertices, {store.edge_count:,} edges")
    return PathFinder(
        registry,
        store,
        symmetric=symmetric,
        max_depth=max_depth,
    )
