"""Walker cursors and traversal run-state containers."""

import enum
from dataclasses import dataclass, field
from typing import Callable

from wasteland.graph.types import Direction, Graph


class TraversalStatus(enum.Enum):
    """Lifecycle of a traversal run."""

    RUNNING = "running"
    ALL_ARRIVED = "all_arrived"
    DIVERGED = "diverged"


@dataclass(slots=True)
class Walker:
    """Traversal cursor for one start node.

    Mutated once per round until it arrives; after ``record_arrival`` the
    walker is frozen and refuses to advance.
    """

    start: str
    current: str = ""
    arrival_step: int | None = None

    def __post_init__(self) -> None:
        if not self.current:
            self.current = self.start

    @property
    def has_arrived(self) -> bool:
        return self.arrival_step is not None

    def advance(self, graph: Graph, direction: Direction) -> str:
        """Move to the successor of the current node and return its label."""
        if self.has_arrived:
            raise RuntimeError(
                f"Walker from {self.start!r} already arrived at step "
                f"{self.arrival_step}"
            )
        self.current = graph.successor(self.current, direction)
        return self.current

    def is_terminal(self, predicate: Callable[[str], bool]) -> bool:
        return bool(predicate(self.current))

    def record_arrival(self, step: int) -> None:
        if self.has_arrived:
            raise RuntimeError(
                f"Walker from {self.start!r} already recorded arrival "
                f"at step {self.arrival_step}"
            )
        self.arrival_step = step


@dataclass
class TraversalState:
    """Explicit run state for one traversal call.

    Created by the engine at the start of a run and returned with the
    result; nothing survives outside the call.
    """

    walkers: list[Walker]
    step: int = 0  # global step counter, one increment per round
    arrivals: dict[str, int] = field(default_factory=dict)  # start -> step
    status: TraversalStatus = TraversalStatus.RUNNING

    @property
    def pending(self) -> list[Walker]:
        return [w for w in self.walkers if not w.has_arrived]


@dataclass(frozen=True)
class TraversalResult:
    """Immutable outcome of a completed traversal run."""

    arrivals: dict[str, int]  # start label -> first arrival step
    steps: int  # global rounds executed
    final_positions: dict[str, str]  # start label -> terminal label reached

    @property
    def max_arrival(self) -> int:
        return max(self.arrivals.values())
