"""Graph construction from ``LABEL = (LEFT, RIGHT)`` entry lines.

Entries are validated one line at a time; a line that does not split into
exactly one label and two successor labels aborts construction. Successor
labels are not cross-checked against the node set here; use
``validation.find_dangling`` for an eager check.
"""

import logging
import re
from typing import Iterable

from wasteland.graph.types import Graph, MalformedEntryError

log = logging.getLogger(__name__)

_ENTRY_RE = re.compile(
    r"^\s*(?P<label>\w+)\s*=\s*\(\s*(?P<left>\w+)\s*,\s*(?P<right>\w+)\s*\)\s*$"
)


def parse_entry(line: str, line_no: int | None = None) -> tuple[str, str, str]:
    """Split one entry line into (label, left, right).

    Args:
        line: Raw entry text, e.g. ``"AAA = (BBB, CCC)"``.
        line_no: Optional 1-based line number used in the error message.

    Returns:
        Tuple of (label, left successor, right successor).

    Raises:
        MalformedEntryError: If the line is not of the expected form.
    """
    match = _ENTRY_RE.match(line)
    if match is None:
        where = f"line {line_no}: " if line_no is not None else ""
        raise MalformedEntryError(
            f"{where}expected 'LABEL = (LEFT, RIGHT)', got {line.strip()!r}"
        )
    return match.group("label"), match.group("left"), match.group("right")


def build_graph(lines: Iterable[str]) -> Graph:
    """Build a Graph from entry lines, skipping blank lines.

    Args:
        lines: Entry lines in ``LABEL = (LEFT, RIGHT)`` form.

    Returns:
        Immutable Graph keyed by label in input order.

    Raises:
        MalformedEntryError: If a line is ill-formed or a label repeats.
    """
    nodes: dict[str, tuple[str, str]] = {}
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        label, left, right = parse_entry(line, line_no)
        if label in nodes:
            raise MalformedEntryError(
                f"line {line_no}: duplicate node label {label!r}"
            )
        nodes[label] = (left, right)

    log.debug("Built graph with %d nodes", len(nodes))
    return Graph(nodes)


def select_labels(graph: Graph, suffix: str) -> list[str]:
    """Return the sorted labels of ``graph`` that end with ``suffix``."""
    return sorted(label for label in graph if label.endswith(suffix))
