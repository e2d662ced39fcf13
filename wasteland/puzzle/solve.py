"""Puzzle-level entry points: pick walkers, run the engine, combine cycles."""

import logging
from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from wasteland.config.experiment import PuzzleConfig
from wasteland.cycles.combine import combine
from wasteland.graph.network import select_labels
from wasteland.graph.types import Graph
from wasteland.graph.validation import validate_graph
from wasteland.puzzle.parsing import parse_puzzle
from wasteland.walk.engine import (
    divergence_bound,
    run_traversal,
    run_traversal_vectorized,
)
from wasteland.walk.instructions import InstructionCycle
from wasteland.walk.periodicity import check_cycle_alignment
from wasteland.walk.types import TraversalResult

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PuzzleResult:
    """Answer for one puzzle part plus the per-walker evidence behind it."""

    part: int
    answer: int
    arrivals: dict[str, int]  # start label -> first arrival step
    final_positions: dict[str, str]  # start label -> terminal label
    warnings: list[str] = field(default_factory=list)


def suffix_predicate(suffix: str) -> Callable[[str], bool]:
    """Terminal predicate: label ends with ``suffix``."""
    return lambda label: label.endswith(suffix)


def _traverse(
    graph: Graph,
    instructions: InstructionCycle,
    starts: list[str],
    predicate: Callable[[str], bool],
    config: PuzzleConfig,
) -> tuple[TraversalResult, list[str]]:
    """Validate, run the configured engine, and collect warnings."""
    warnings: list[str] = []
    tcfg = config.traversal

    if tcfg.validate_graph:
        warnings.extend(validate_graph(graph, starts, predicate))
        for message in warnings:
            log.warning("Graph validation: %s", message)

    max_steps = tcfg.max_steps
    if max_steps is None:
        max_steps = divergence_bound(graph, instructions, tcfg.bound_factor)

    if tcfg.vectorized:
        result = run_traversal_vectorized(
            graph, instructions, starts, predicate, max_steps=max_steps
        )
    else:
        rng = np.random.default_rng(config.seed) if tcfg.shuffle_walkers else None
        result = run_traversal(
            graph, instructions, starts, predicate, max_steps=max_steps, rng=rng
        )

    if tcfg.verify_periodicity:
        alignment = check_cycle_alignment(
            graph, instructions, result.arrivals, predicate
        )
        for message in alignment:
            log.warning("Cycle alignment: %s", message)
        warnings.extend(alignment)

    return result, warnings


def solve_part_one(
    graph: Graph, instructions: InstructionCycle, config: PuzzleConfig
) -> PuzzleResult:
    """Steps for a single walker from ``single_start`` to ``single_goal``."""
    start = config.graph.single_start
    goal = config.graph.single_goal
    result, warnings = _traverse(
        graph, instructions, [start], lambda label: label == goal, config
    )
    return PuzzleResult(
        part=1,
        answer=result.arrivals[start],
        arrivals=result.arrivals,
        final_positions=result.final_positions,
        warnings=warnings,
    )


def solve_part_two(
    graph: Graph, instructions: InstructionCycle, config: PuzzleConfig
) -> PuzzleResult:
    """Synchronised steps for every ``start_suffix`` walker, combined by LCM."""
    starts = select_labels(graph, config.graph.start_suffix)
    if not starts:
        raise ValueError(
            f"No node labels end with start suffix {config.graph.start_suffix!r}"
        )
    log.info("Part 2 walkers: %s", ", ".join(starts))

    result, warnings = _traverse(
        graph,
        instructions,
        starts,
        suffix_predicate(config.graph.terminal_suffix),
        config,
    )
    answer = combine(result.arrivals.values())
    log.info("Combined %d arrival step(s) into %d", len(result.arrivals), answer)

    return PuzzleResult(
        part=2,
        answer=answer,
        arrivals=result.arrivals,
        final_positions=result.final_positions,
        warnings=warnings,
    )


def solve(text: str, config: PuzzleConfig) -> PuzzleResult:
    """Parse ``text`` and solve the part selected by ``config.part``."""
    instructions, graph = parse_puzzle(text)
    if config.part == 1:
        return solve_part_one(graph, instructions, config)
    return solve_part_two(graph, instructions, config)
