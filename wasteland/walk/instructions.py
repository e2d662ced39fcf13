"""Cyclic instruction sequence replayed by modular indexing."""

from typing import Iterable

import numpy as np

from wasteland.graph.types import Direction


class EmptyInstructionsError(ValueError):
    """Raised when an instruction cycle is built from zero directions."""


class InstructionCycle:
    """Immutable, non-empty sequence of directions repeated indefinitely.

    Backed by a read-only int8 array holding Direction values, so the
    vectorized engine can index it without conversion.
    """

    __slots__ = ("_directions",)

    def __init__(self, directions: Iterable[Direction]) -> None:
        arr = np.fromiter((int(Direction(d)) for d in directions), dtype=np.int8)
        if arr.size == 0:
            raise EmptyInstructionsError("Instruction sequence must not be empty")
        arr.flags.writeable = False
        self._directions = arr

    @classmethod
    def from_string(cls, text: str) -> "InstructionCycle":
        """Parse a string of ``L``/``R`` characters, ignoring surrounding whitespace."""
        return cls(Direction.from_char(c) for c in text.strip())

    def direction_at(self, step: int) -> Direction:
        """Return the direction used at global ``step`` (0-based)."""
        if step < 0:
            raise ValueError(f"step must be non-negative, got {step}")
        return Direction(int(self._directions[step % self._directions.size]))

    @property
    def directions(self) -> np.ndarray:
        return self._directions

    def __len__(self) -> int:
        return int(self._directions.size)

    def __str__(self) -> str:
        return "".join("L" if d == Direction.LEFT else "R" for d in self._directions)

    def __repr__(self) -> str:
        return f"InstructionCycle({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InstructionCycle):
            return NotImplemented
        return bool(np.array_equal(self._directions, other._directions))

    def __hash__(self) -> int:
        return hash(self._directions.tobytes())
