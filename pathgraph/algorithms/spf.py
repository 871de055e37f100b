"""Shortest-path-first (SPF) search.

Implements Dijkstra's algorithm over a `Graph` whose edge labels are
non-negative numeric costs. The frontier is a binary heap of candidate
`Path` values keyed by ``(cost, sequence)``, where ``sequence`` is a running
insertion counter. Equal-cost candidates therefore leave the heap in the order
they entered it, and since children are expanded in the order their edges
were added, results are deterministic for a given graph build order.

Notes:
    The search stops as soon as the destination is popped from the frontier.
    With non-negative costs that first pop carries the minimal cost. A
    negative label met during expansion raises `NegativeWeightError`.
"""

from heapq import heappop, heappush
from itertools import count
from typing import Hashable, List, Optional, Set, Tuple, TypeVar

from pathgraph.errors import NegativeWeightError, NodeNotFoundError
from pathgraph.graph.labeled_graph import Graph
from pathgraph.logging import get_logger
from pathgraph.model.path import Cost, Path

N = TypeVar("N", bound=Hashable)

logger = get_logger(__name__)


def shortest_path(graph: Graph[N, float], start: N, end: N) -> Optional[Path[N]]:
    """Return a minimum-cost path from ``start`` to ``end``.

    The graph is only read, never modified, and every call keeps its own
    frontier and settled set. Concurrent searches on one graph are safe as
    long as nothing mutates it meanwhile.

    Args:
        graph: Graph with non-negative numeric edge labels.
        start: Source node.
        end: Destination node.

    Returns:
        The cheapest path, a zero-segment path when ``start == end``, or
        None when ``end`` is unreachable from ``start``.

    Raises:
        NodeNotFoundError: If ``start`` or ``end`` is not in the graph.
        NegativeWeightError: If a negative edge label is encountered.
    """
    for node in (start, end):
        if not graph.contains_node(node):
            raise NodeNotFoundError(f"Node '{node}' is not in the graph.")

    start_path: Path[N] = Path(start)
    if start == end:
        return start_path

    sequence = count()
    frontier: List[Tuple[Cost, int, Path[N]]] = [(0.0, next(sequence), start_path)]
    settled: Set[N] = set()

    while frontier:
        _, _, min_path = heappop(frontier)
        node = min_path.end
        if node == end:
            logger.debug(
                "Shortest path %s -> %s: cost %s, %d segment(s), %d node(s) settled",
                start,
                end,
                min_path.cost,
                len(min_path),
                len(settled),
            )
            return min_path
        if node in settled:
            continue
        settled.add(node)

        for edge in graph.iter_children(node):
            if edge.destination in settled:
                continue
            if edge.label < 0:
                raise NegativeWeightError(
                    f"Edge {edge} has a negative cost; SPF requires costs >= 0."
                )
            new_path = min_path.extend(edge.destination, edge.label)
            heappush(frontier, (new_path.cost, next(sequence), new_path))

    logger.debug(
        "No path from %s to %s; %d node(s) reachable", start, end, len(settled)
    )
    return None
