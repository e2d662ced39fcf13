"""Walkers, the instruction cycle, and the lockstep traversal engine."""

from wasteland.walk.engine import (
    DivergedError,
    divergence_bound,
    run_traversal,
    run_traversal_single,
    run_traversal_vectorized,
)
from wasteland.walk.instructions import EmptyInstructionsError, InstructionCycle
from wasteland.walk.periodicity import check_cycle_alignment, position_after
from wasteland.walk.types import (
    TraversalResult,
    TraversalState,
    TraversalStatus,
    Walker,
)

__all__ = [
    "DivergedError",
    "EmptyInstructionsError",
    "InstructionCycle",
    "TraversalResult",
    "TraversalState",
    "TraversalStatus",
    "Walker",
    "check_cycle_alignment",
    "divergence_bound",
    "position_after",
    "run_traversal",
    "run_traversal_single",
    "run_traversal_vectorized",
]
