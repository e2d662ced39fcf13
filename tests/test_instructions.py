"""Tests for the cyclic instruction sequence."""

import numpy as np
import pytest

from wasteland.graph.types import Direction
from wasteland.walk.instructions import EmptyInstructionsError, InstructionCycle


class TestConstruction:
    def test_from_string(self) -> None:
        cycle = InstructionCycle.from_string("LRR\n")
        assert len(cycle) == 3
        assert str(cycle) == "LRR"

    def test_from_directions(self) -> None:
        cycle = InstructionCycle([Direction.RIGHT, Direction.LEFT])
        assert str(cycle) == "RL"

    def test_empty_raises(self) -> None:
        with pytest.raises(EmptyInstructionsError):
            InstructionCycle([])
        with pytest.raises(EmptyInstructionsError):
            InstructionCycle.from_string("  \n")

    def test_empty_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            InstructionCycle.from_string("")

    def test_invalid_character(self) -> None:
        with pytest.raises(ValueError, match="'L' or 'R'"):
            InstructionCycle.from_string("LRX")


class TestDirectionAt:
    def test_modular_indexing(self) -> None:
        cycle = InstructionCycle.from_string("LRR")
        got = [cycle.direction_at(s) for s in range(7)]
        assert got == [
            Direction.LEFT, Direction.RIGHT, Direction.RIGHT,
            Direction.LEFT, Direction.RIGHT, Direction.RIGHT,
            Direction.LEFT,
        ]

    def test_large_step(self) -> None:
        cycle = InstructionCycle.from_string("LR")
        assert cycle.direction_at(10**15 + 1) is Direction.RIGHT

    def test_single_instruction(self) -> None:
        cycle = InstructionCycle.from_string("R")
        assert all(cycle.direction_at(s) is Direction.RIGHT for s in range(5))

    def test_negative_step_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            InstructionCycle.from_string("L").direction_at(-1)


class TestImmutability:
    def test_backing_array_read_only(self) -> None:
        cycle = InstructionCycle.from_string("LR")
        assert cycle.directions.dtype == np.int8
        with pytest.raises(ValueError):
            cycle.directions[0] = 1

    def test_equality_and_hash(self) -> None:
        a = InstructionCycle.from_string("LRL")
        b = InstructionCycle([Direction.LEFT, Direction.RIGHT, Direction.LEFT])
        assert a == b
        assert hash(a) == hash(b)
        assert a != InstructionCycle.from_string("LRR")
