"""Split raw puzzle text into an instruction cycle and a successor graph."""

import logging

from wasteland.graph.network import build_graph
from wasteland.graph.types import Graph, MalformedEntryError
from wasteland.walk.instructions import InstructionCycle

log = logging.getLogger(__name__)


def parse_puzzle(text: str) -> tuple[InstructionCycle, Graph]:
    """Parse puzzle text of the form::

        LLR

        AAA = (BBB, BBB)
        BBB = (AAA, ZZZ)

    The first paragraph is the instruction string; every remaining
    non-blank line is a graph entry.

    Raises:
        MalformedEntryError: If the entry block is missing or ill-formed.
        EmptyInstructionsError: If the instruction line is empty.
        ValueError: If the instruction line contains a non-L/R character.
    """
    head, sep, body = text.strip("\n").partition("\n\n")
    if not sep or not body.strip():
        raise MalformedEntryError(
            "Expected an instruction line, a blank line, then graph entries"
        )

    instructions = InstructionCycle.from_string(head)
    graph = build_graph(body.splitlines())

    log.info(
        "Parsed puzzle: %d instructions, %d nodes", len(instructions), len(graph)
    )
    return instructions, graph
