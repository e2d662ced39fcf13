"""Check that first-arrival steps combine by least common multiple.

The LCM of first arrivals is the minimum synchronised step when each walker
stands on a terminal node at exactly the multiples of its first arrival
``a`` and at no other step. For walker ``w`` this holds when:
1. ``a`` is a multiple of the instruction length, so the instruction offset
   at step ``a`` equals the offset at step ``2a``
2. The walker stands on the same node at step ``2a`` as at step ``a``
3. No step in ``1 .. 2a - 1`` other than ``a`` lands on a terminal node

Conditions 1 and 2 make the (node, offset) state at ``a`` recur at ``2a``,
so the trajectory from ``a`` onwards is periodic with period ``a``.
Condition 3 then rules out terminal visits between multiples, so the
walker's terminal steps are exactly ``a, 2a, 3a, ...``.
"""

import logging
from typing import Callable, Mapping

from wasteland.graph.types import Graph
from wasteland.walk.instructions import InstructionCycle

log = logging.getLogger(__name__)


def position_after(
    graph: Graph, instructions: InstructionCycle, start: str, steps: int
) -> str:
    """Label a single walker occupies after ``steps`` moves from ``start``."""
    current = start
    for step in range(steps):
        current = graph.successor(current, instructions.direction_at(step))
    return current


def _trace(
    graph: Graph,
    instructions: InstructionCycle,
    start: str,
    steps: int,
    terminal_predicate: Callable[[str], bool],
) -> tuple[list[str], list[int]]:
    """Positions after 0..steps moves, plus the steps that land on a terminal."""
    path = [start]
    terminal_steps: list[int] = []
    for step in range(steps):
        path.append(graph.successor(path[-1], instructions.direction_at(step)))
        if terminal_predicate(path[-1]):
            terminal_steps.append(step + 1)
    return path, terminal_steps


def check_cycle_alignment(
    graph: Graph,
    instructions: InstructionCycle,
    arrivals: Mapping[str, int],
    terminal_predicate: Callable[[str], bool],
) -> list[str]:
    """Report walkers whose terminal steps are not exactly ``a, 2a, 3a, ...``.

    An empty result means the LCM of ``arrivals`` is the minimum step at
    which every walker stands on a terminal node.

    Args:
        graph: Successor graph used for the run.
        instructions: Instruction cycle used for the run.
        arrivals: Start label -> first arrival step, from a traversal result.
        terminal_predicate: Arrival criterion used for the run.

    Returns:
        List of warning strings (empty = every walker is aligned).
    """
    warnings: list[str] = []
    n_instr = len(instructions)

    for start, first in sorted(arrivals.items()):
        if first % n_instr != 0:
            warnings.append(
                f"Walker {start}: first arrival {first} is not a multiple of "
                f"the instruction length {n_instr}"
            )
            continue

        path, terminal_steps = _trace(
            graph, instructions, start, 2 * first, terminal_predicate
        )
        at_first, at_second = path[first], path[2 * first]
        if at_first != at_second:
            warnings.append(
                f"Walker {start}: at {at_first} after {first} steps but at "
                f"{at_second} after {2 * first} steps"
            )
            continue
        if not terminal_predicate(at_first):
            warnings.append(
                f"Walker {start}: {at_first} at steps {first} and "
                f"{2 * first} is not terminal"
            )
            continue

        extra = [s for s in terminal_steps if s not in (first, 2 * first)]
        if extra:
            warnings.append(
                f"Walker {start}: also on a terminal node at step(s) "
                f"{extra[:10]}, not only at multiples of {first}"
            )
        else:
            log.debug("Walker %s cycles through %s every %d steps", start, at_first, first)

    return warnings
