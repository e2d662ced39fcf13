"""Successor graph: data model, construction from entry lines, and validation."""

from wasteland.graph.network import build_graph, parse_entry, select_labels
from wasteland.graph.types import (
    Direction,
    Graph,
    MalformedEntryError,
    UnknownNodeError,
)
from wasteland.graph.validation import (
    find_dangling,
    reachable_terminals,
    to_adjacency,
    validate_graph,
)

__all__ = [
    "Direction",
    "Graph",
    "MalformedEntryError",
    "UnknownNodeError",
    "build_graph",
    "find_dangling",
    "parse_entry",
    "reachable_terminals",
    "select_labels",
    "to_adjacency",
    "validate_graph",
]
