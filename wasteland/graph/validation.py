"""Structural checks on a successor graph before a traversal run.

The traversal engine only discovers dangling references and unreachable
goals by walking into them. These checks surface the same problems up
front from the sparse adjacency matrix:
1. Dangling successor labels (would raise UnknownNodeError mid-run)
2. Start nodes that cannot reach any terminal node (would diverge)
"""

import logging
from typing import Callable, Iterable

import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import breadth_first_order

from wasteland.graph.types import Graph

log = logging.getLogger(__name__)


def to_adjacency(graph: Graph) -> scipy.sparse.csr_matrix:
    """Build the directed adjacency matrix of ``graph``.

    Row/column ``i`` corresponds to ``graph.labels[i]``. Dangling successors
    are dropped and a node whose two successors coincide gets a single edge.

    Returns:
        Sparse (n x n) CSR matrix with 1.0 at every edge.
    """
    n = len(graph)
    arena = graph.to_arena()
    rows = np.repeat(np.arange(n, dtype=np.int64), 2)
    cols = arena.reshape(-1)
    keep = cols >= 0
    adj = scipy.sparse.csr_matrix(
        (np.ones(int(keep.sum())), (rows[keep], cols[keep])), shape=(n, n)
    )
    # Duplicate (i, j) pairs are summed on construction; clip to binary
    if adj.nnz > 0:
        adj.data[:] = np.minimum(adj.data, 1.0)
    return adj


def find_dangling(graph: Graph) -> list[str]:
    """Return sorted successor labels that are not nodes of the graph."""
    missing = {
        succ
        for left, right in graph.nodes.values()
        for succ in (left, right)
        if succ not in graph
    }
    return sorted(missing)


def reachable_terminals(
    graph: Graph,
    start: str,
    terminal_predicate: Callable[[str], bool],
    adjacency: scipy.sparse.csr_matrix | None = None,
) -> set[str]:
    """Compute the terminal labels reachable from ``start`` in one or more steps.

    Ignores the instruction sequence: this is an upper bound on what a
    walker can reach, so an empty result proves the walker never arrives.

    Args:
        graph: Successor graph.
        start: Start label (must be a node).
        terminal_predicate: Arrival criterion.
        adjacency: Precomputed ``to_adjacency(graph)``, reused across starts.

    Returns:
        Set of terminal labels reachable after at least one move.
    """
    adj = to_adjacency(graph) if adjacency is None else adjacency
    labels = graph.labels
    source = graph.index_of(start)

    # BFS from each successor so that the start itself only counts if a
    # cycle leads back to it
    reached: set[int] = set()
    for succ in adj.indices[adj.indptr[source]:adj.indptr[source + 1]]:
        order = breadth_first_order(
            adj, int(succ), directed=True, return_predecessors=False
        )
        reached.update(int(v) for v in order)

    return {labels[v] for v in reached if terminal_predicate(labels[v])}


def validate_graph(
    graph: Graph,
    start_labels: Iterable[str],
    terminal_predicate: Callable[[str], bool],
) -> list[str]:
    """Validate a graph against a planned traversal.

    Checks (cheapest first):
    1. Graph is non-empty
    2. Every start label is a node
    3. No dangling successor references
    4. Every start can reach at least one terminal node

    Args:
        graph: Successor graph.
        start_labels: Planned walker start labels.
        terminal_predicate: Arrival criterion.

    Returns:
        List of error strings (empty = no problems found).
    """
    errors: list[str] = []

    if len(graph) == 0:
        errors.append("Graph has no nodes")
        return errors

    starts = list(start_labels)
    unknown = [s for s in starts if s not in graph]
    if unknown:
        errors.append(f"Start labels not in graph: {sorted(unknown)}")

    dangling = find_dangling(graph)
    if dangling:
        errors.append(
            f"{len(dangling)} dangling successor label(s): {dangling[:10]}"
        )

    adj = to_adjacency(graph)
    for start in starts:
        if start not in graph:
            continue
        terminals = reachable_terminals(graph, start, terminal_predicate, adj)
        log.debug(
            "Start %s reaches %d terminal node(s)", start, len(terminals)
        )
        if not terminals:
            errors.append(f"Start {start!r} cannot reach any terminal node")

    return errors
