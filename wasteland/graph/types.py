"""Graph data structures: directions, the successor arena, and lookup errors."""

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping

import numpy as np


class UnknownNodeError(LookupError):
    """Raised when a successor lookup hits a label that is not in the graph."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Unknown node label: {label!r}")
        self.label = label


class MalformedEntryError(ValueError):
    """Raised when a graph entry cannot be split into (label, left, right)."""


class Direction(enum.IntEnum):
    """One of the two outgoing edges of a node.

    The integer value doubles as the column index into the successor arena.
    """

    LEFT = 0
    RIGHT = 1

    @classmethod
    def from_char(cls, char: str) -> "Direction":
        if char == "L":
            return cls.LEFT
        if char == "R":
            return cls.RIGHT
        raise ValueError(f"Direction must be 'L' or 'R', got {char!r}")


@dataclass(frozen=True)
class Graph:
    """Immutable mapping from node label to its (left, right) successor labels.

    Walkers refer to nodes by label only, so the graph is shared read-only
    across every walker of a run. Successor labels are not required to be
    keys at construction time: a dangling reference is reported as
    UnknownNodeError the first time a walker tries to step out of it.
    """

    nodes: Mapping[str, tuple[str, str]]
    _index: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Frozen dataclass: copy into a read-only view so callers can't mutate
        frozen = MappingProxyType(
            {label: (left, right) for label, (left, right) in self.nodes.items()}
        )
        object.__setattr__(self, "nodes", frozen)
        object.__setattr__(
            self, "_index", MappingProxyType({k: i for i, k in enumerate(frozen)})
        )

    def successor(self, label: str, direction: Direction) -> str:
        """Return the label reached by leaving ``label`` via ``direction``.

        Raises:
            UnknownNodeError: If ``label`` is not a node of this graph.
        """
        try:
            return self.nodes[label][direction]
        except KeyError:
            raise UnknownNodeError(label) from None

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(self.nodes)

    def index_of(self, label: str) -> int:
        try:
            return self._index[label]
        except KeyError:
            raise UnknownNodeError(label) from None

    def to_arena(self) -> np.ndarray:
        """Return successor indices as an int64 array of shape (n, 2).

        Row ``i`` belongs to ``self.labels[i]``; column 0 is the left
        successor and column 1 the right one. Dangling successors are -1.
        """
        arena = np.full((len(self.nodes), 2), -1, dtype=np.int64)
        for i, (left, right) in enumerate(self.nodes.values()):
            arena[i, Direction.LEFT] = self._index.get(left, -1)
            arena[i, Direction.RIGHT] = self._index.get(right, -1)
        return arena

    def __contains__(self, label: object) -> bool:
        return label in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.nodes)
