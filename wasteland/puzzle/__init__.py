"""Puzzle assembly: text parsing and the part-one / part-two solvers."""

from wasteland.puzzle.parsing import parse_puzzle
from wasteland.puzzle.solve import (
    PuzzleResult,
    solve,
    solve_part_one,
    solve_part_two,
    suffix_predicate,
)

__all__ = [
    "PuzzleResult",
    "parse_puzzle",
    "solve",
    "solve_part_one",
    "solve_part_two",
    "suffix_predicate",
]
