"""Graph adapters - Implementations of routing ports.

Available implementations:
- DijkstraRouteSolver: Finds shortest routes using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["DijkstraRouteSolver"]
