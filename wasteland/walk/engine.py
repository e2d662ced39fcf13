"""Lockstep traversal engine for one or many walkers.

Implements two equivalent strategies:
1. Per-walker stepping over Walker cursors (run_traversal)
2. Vectorized stepping over a numpy successor arena (run_traversal_vectorized)

Both advance every pending walker by the same direction each round, record
``step + 1`` the first time a walker lands on a terminal node, and stop
once every walker has arrived. A step bound turns a non-terminating run
into a DivergedError instead of an infinite loop.
"""

import logging
from typing import Callable, Iterable

import numpy as np

from wasteland.graph.types import Direction, Graph, UnknownNodeError
from wasteland.graph.validation import find_dangling
from wasteland.walk.instructions import InstructionCycle
from wasteland.walk.types import (
    TraversalResult,
    TraversalState,
    TraversalStatus,
    Walker,
)

log = logging.getLogger(__name__)

DEFAULT_BOUND_FACTOR = 10


class DivergedError(RuntimeError):
    """Raised when walkers are still pending after the step bound."""

    def __init__(self, state: TraversalState, bound: int) -> None:
        pending = sorted(w.start for w in state.pending)
        super().__init__(
            f"Traversal diverged: {len(pending)} walker(s) still pending "
            f"after {bound} steps: {pending[:10]}"
        )
        self.state = state
        self.bound = bound


def divergence_bound(
    graph: Graph,
    instructions: InstructionCycle,
    factor: int = DEFAULT_BOUND_FACTOR,
) -> int:
    """Step bound after which a run is reported as diverged.

    A walker's full state is (node, instruction offset), which has
    ``len(instructions) * len(graph)`` values; a walker that has not arrived
    within that many steps is in a cycle that never reaches a terminal node.
    Any factor >= 1 is therefore safe for well-formed input.
    """
    if factor < 1:
        raise ValueError(f"factor must be >= 1, got {factor}")
    return factor * len(instructions) * max(1, len(graph))


def _unique_starts(graph: Graph, start_labels: Iterable[str]) -> list[str]:
    starts = list(dict.fromkeys(start_labels))
    if not starts:
        raise ValueError("At least one start label is required")
    for label in starts:
        if label not in graph:
            raise UnknownNodeError(label)
    return starts


def run_traversal(
    graph: Graph,
    instructions: InstructionCycle,
    start_labels: Iterable[str],
    terminal_predicate: Callable[[str], bool],
    *,
    max_steps: int | None = None,
    rng: np.random.Generator | None = None,
) -> TraversalResult:
    """Walk every start label in lockstep until all have reached a terminal.

    Args:
        graph: Shared read-only successor graph.
        instructions: Direction cycle indexed by the global step.
        start_labels: One walker is created per distinct label.
        terminal_predicate: Arrival criterion evaluated after each move.
        max_steps: Explicit step bound; defaults to ``divergence_bound``.
        rng: If given, pending walkers are visited in a fresh random order
            every round. Arrival steps do not depend on this order.

    Returns:
        TraversalResult with the first arrival step of every walker.

    Raises:
        ValueError: If ``start_labels`` is empty.
        UnknownNodeError: If a start label or a visited successor is missing.
        DivergedError: If walkers are still pending after the step bound.
    """
    starts = _unique_starts(graph, start_labels)
    bound = divergence_bound(graph, instructions) if max_steps is None else max_steps
    state = TraversalState(walkers=[Walker(s) for s in starts])

    log.info(
        "Traversal: %d walker(s), %d instructions, %d nodes, bound=%d",
        len(starts), len(instructions), len(graph), bound,
    )

    pending = state.pending
    while pending:
        if state.step >= bound:
            state.status = TraversalStatus.DIVERGED
            raise DivergedError(state, bound)

        direction = instructions.direction_at(state.step)
        if rng is not None:
            pending = [pending[i] for i in rng.permutation(len(pending))]

        for walker in pending:
            walker.advance(graph, direction)
            if walker.is_terminal(terminal_predicate):
                walker.record_arrival(state.step + 1)
                state.arrivals[walker.start] = state.step + 1
                log.debug(
                    "Walker %s arrived at %s after %d steps",
                    walker.start, walker.current, state.step + 1,
                )

        state.step += 1
        pending = state.pending

    state.status = TraversalStatus.ALL_ARRIVED
    log.info("All %d walker(s) arrived after %d steps", len(starts), state.step)

    return TraversalResult(
        arrivals={w.start: state.arrivals[w.start] for w in state.walkers},
        steps=state.step,
        final_positions={w.start: w.current for w in state.walkers},
    )


def run_traversal_single(
    graph: Graph,
    instructions: InstructionCycle,
    start_label: str,
    goal_label: str,
    *,
    max_steps: int | None = None,
) -> int:
    """Number of steps for one walker to go from ``start_label`` to ``goal_label``."""
    result = run_traversal(
        graph,
        instructions,
        [start_label],
        lambda label: label == goal_label,
        max_steps=max_steps,
    )
    return result.arrivals[start_label]


def _extended_arena(graph: Graph) -> tuple[tuple[str, ...], np.ndarray]:
    """Successor arena with extra dead-end rows for dangling labels.

    Walkers may step into a dangling label (and even arrive there); only
    stepping out of one is an error, signalled by a -1 successor.
    """
    labels = graph.labels + tuple(find_dangling(graph))
    index = {label: i for i, label in enumerate(labels)}
    arena = np.full((len(labels), 2), -1, dtype=np.int64)
    for label, (left, right) in graph.nodes.items():
        arena[index[label], Direction.LEFT] = index[left]
        arena[index[label], Direction.RIGHT] = index[right]
    return labels, arena


def run_traversal_vectorized(
    graph: Graph,
    instructions: InstructionCycle,
    start_labels: Iterable[str],
    terminal_predicate: Callable[[str], bool],
    *,
    max_steps: int | None = None,
) -> TraversalResult:
    """Array-based equivalent of ``run_traversal``.

    Processes one round at a time across all pending walkers with a single
    gather into the successor arena. The terminal predicate is evaluated
    once per label up front instead of once per move.

    Args:
        graph: Shared read-only successor graph.
        instructions: Direction cycle indexed by the global step.
        start_labels: One walker is created per distinct label.
        terminal_predicate: Arrival criterion.
        max_steps: Explicit step bound; defaults to ``divergence_bound``.

    Returns:
        TraversalResult identical to what ``run_traversal`` produces.
    """
    starts = _unique_starts(graph, start_labels)
    bound = divergence_bound(graph, instructions) if max_steps is None else max_steps

    labels, arena = _extended_arena(graph)
    terminal_mask = np.fromiter(
        (bool(terminal_predicate(label)) for label in labels),
        dtype=bool,
        count=len(labels),
    )
    directions = instructions.directions
    n_dirs = directions.size

    positions = np.array([graph.index_of(s) for s in starts], dtype=np.int64)
    arrivals = np.zeros(len(starts), dtype=np.int64)  # 0 = not yet arrived

    step = 0
    pending = np.arange(len(starts))
    while pending.size > 0:
        if step >= bound:
            state = TraversalState(
                walkers=[
                    Walker(
                        start=s,
                        current=labels[positions[i]],
                        arrival_step=int(arrivals[i]) or None,
                    )
                    for i, s in enumerate(starts)
                ],
                step=step,
                arrivals={s: int(arrivals[i]) for i, s in enumerate(starts) if arrivals[i]},
                status=TraversalStatus.DIVERGED,
            )
            raise DivergedError(state, bound)

        nxt = arena[positions[pending], directions[step % n_dirs]]
        if (nxt < 0).any():
            stuck = pending[np.flatnonzero(nxt < 0)[0]]
            raise UnknownNodeError(labels[positions[stuck]])

        positions[pending] = nxt
        arrivals[pending[terminal_mask[nxt]]] = step + 1
        step += 1
        pending = np.flatnonzero(arrivals == 0)

    log.info("All %d walker(s) arrived after %d steps (vectorized)", len(starts), step)

    return TraversalResult(
        arrivals={s: int(arrivals[i]) for i, s in enumerate(starts)},
        steps=step,
        final_positions={s: labels[positions[i]] for i, s in enumerate(starts)},
    )
