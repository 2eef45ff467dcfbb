"""
Name registry: bidirectional mapping between labels and dense vertex ids.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from wikipath.errors import (
    DuplicateLabelError,
    EmptyRegistryError,
    UnknownIdError,
    UnknownLabelError,
)


class NameRegistry:
    """
    Maps article labels to vertex ids and back.

    Ids are assigned 0, 1, 2, ... in registration order, so the list of
    labels doubles as the id -> label table.

    Attributes:
        labels: All registered labels, indexed by id
    """

    def __init__(self) -> None:
        self._labels: list[str] = []
        self._label_to_id: dict[str, int] = {}

    def register(self, label: str) -> int:
        """
        Assign the next unused id to a new label.

        Raises:
            DuplicateLabelError: If the label is already registered
        """
        existing = self._label_to_id.get(label)
        if existing is not None:
            raise DuplicateLabelError(label, existing)

        vertex_id = len(self._labels)
        self._labels.append(label)
        self._label_to_id[label] = vertex_id
        return vertex_id

    def id_of(self, label: str) -> int:
        """Get the id for a label."""
        try:
            return self._label_to_id[label]
        except KeyError:
            raise UnknownLabelError(label) from None

    def label_of(self, vertex_id: int) -> str:
        """Get the label for an id."""
        if 0 <= vertex_id < len(self._labels):
            return self._labels[vertex_id]
        raise UnknownIdError(vertex_id)

    def any(self, rng: random.Random | None = None) -> str:
        """
        Pick a registered label uniformly at random.

        Args:
            rng: Random source (defaults to the module-level generator)

        Raises:
            EmptyRegistryError: If nothing is registered
        """
        if not self._labels:
            raise EmptyRegistryError()
        return (rng or random).choice(self._labels)

    @property
    def labels(self) -> Sequence[str]:
        return tuple(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._label_to_id

    def __len__(self) -> int:
        return len(self._labels)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)})"
