"""Shortest-path computation using Dijkstra's algorithm.

This module computes minimum-weight paths between two nodes of a
:class:`~subway_router.graph.graph.Graph` by forward relaxation: nodes
are finalized in order of increasing distance from the start, and each
finalized node relaxes its outgoing edges into the frontier.

Every call owns its frontier and its ``best`` map, so a single graph can
serve any number of concurrent queries.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .distance import D, sum_distances
from .graph import Edge, Graph
from .priority_queue import IndexedPriorityQueue

# node slot -> (distance from start, edge used to reach it)
Best = Dict[int, Tuple[D, Optional[Edge[D]]]]


def shortest_path(
    graph: Graph[object, D], start: int, goal: int
) -> Optional[List[Edge[D]]]:
    """Compute a minimum-weight path between two nodes.

    Parameters
    ----------
    graph:
        Graph with non-negative edge weights.
    start:
        Slot index of the departure node.
    goal:
        Slot index of the arrival node.

    Returns
    -------
    list[Edge] or None
        The edges of the path from ``start`` to ``goal`` in travel
        order; an empty list when ``start == goal``; None when ``goal``
        cannot be reached from ``start``.

    Raises
    ------
    IndexError
        If ``start`` or ``goal`` is not a node of ``graph``.
    """
    graph.node(start)
    graph.node(goal)
    if start == goal:
        return []

    best = _run(graph, start, goal)
    if goal not in best:
        return None
    return _reconstruct(best, goal)


def shortest_distances(graph: Graph[object, D], start: int) -> Dict[int, D]:
    """Return the distance from ``start`` to every reachable node.

    Unreachable nodes are absent from the result; ``start`` maps to the
    graph's zero distance.
    """
    graph.node(start)
    return {node: distance for node, (distance, _) in _run(graph, start, None).items()}


def path_distance(graph: Graph[object, D], path: Sequence[Edge[D]]) -> D:
    """Sum the weights along ``path``; zero for an empty path."""
    return sum_distances((edge.distance for edge in path), graph.distance_type)


def _run(graph: Graph[object, D], start: int, goal: Optional[int]) -> Best:
    best: Best = {start: (graph.zero(), None)}
    frontier: IndexedPriorityQueue[int, D, Edge[D]] = IndexedPriorityQueue()
    _relax(graph, start, graph.zero(), best, frontier)

    while frontier:
        popped = frontier.pop_min()
        assert popped is not None
        node, distance, edge = popped

        known = best.get(node)
        if known is not None and known[0] <= distance:
            continue  # stale

        best[node] = (distance, edge)
        if node == goal:
            break
        _relax(graph, node, distance, best, frontier)

    return best


def _relax(
    graph: Graph[object, D],
    node: int,
    distance: D,
    best: Best,
    frontier: IndexedPriorityQueue[int, D, Edge[D]],
) -> None:
    for edge in graph.adjacent(node):
        if edge.target in best:
            continue
        candidate = distance + edge.distance
        queued = frontier.peek_by_key(edge.target)
        if queued is None or candidate < queued:
            frontier.push(edge.target, candidate, edge)


def _reconstruct(best: Best, goal: int) -> List[Edge[D]]:
    path: List[Edge[D]] = []
    edge = best[goal][1]
    while edge is not None:
        path.append(edge)
        edge = best[edge.source][1]
    path.reverse()
    return path
