"""Graph core: distances, the indexed priority queue, the graph arena
and the Dijkstra shortest-path engine.

Nothing in this subpackage performs I/O or logging.
"""

from .dijkstra import path_distance, shortest_distances, shortest_path
from .distance import (
    Distance,
    FloatDistance,
    IntDistance,
    coerce_distance,
    is_distance_type,
    sum_distances,
)
from .graph import Edge, Graph, Node
from .priority_queue import IndexedPriorityQueue

__all__ = [
    "Distance",
    "FloatDistance",
    "IntDistance",
    "coerce_distance",
    "is_distance_type",
    "sum_distances",
    "Edge",
    "Graph",
    "Node",
    "IndexedPriorityQueue",
    "shortest_path",
    "shortest_distances",
    "path_distance",
]
