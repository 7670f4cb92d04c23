"""Top-level package for the Subway Router project.

The package builds a directed, weighted station graph from a subway
dataset and answers shortest-route queries on it:

- ``graph``: distances, indexed priority queue, graph arena, Dijkstra
- ``adapters``: dataset loading, station lookup, routing, map rendering
- ``services``: the route planner wiring them together
- ``cli``: the ``subway-router`` command
"""

__version__ = "0.1.0"
